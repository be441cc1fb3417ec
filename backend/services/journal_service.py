"""
journal_service.py - Daily amalan journal
Normalizes submitted entries, recomputes their EXP, stores them through
whichever record store is wired in, and builds the leaderboard.
"""

import logging
from datetime import date, datetime, timezone

from services.leaderboard import rank_students
from services.ramadhan_calendar import day_index_for
from services.record_store import RecordStore, full_record
from services.roster import Roster
from services.scoring import compute_score

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """The record store refused a write."""


class JournalService:
    def __init__(self, store: RecordStore, roster: Roster, anchor: date | None = None):
        self.store = store
        self.roster = roster
        self.anchor = anchor

    @staticmethod
    def normalize(data: dict) -> dict:
        record = full_record(data)
        record["student_name"] = (record["student_name"] or "").strip()
        record["total_exp"] = compute_score(record)
        return record

    def save_record(self, data: dict) -> dict:
        """Upsert one day's entry. Client-supplied total_exp is ignored."""
        record = self.normalize(data)
        record["updated_at"] = datetime.now(timezone.utc).isoformat()
        if not self.store.upsert(record):
            raise RecordStoreError(
                f"Failed to save record for {record['student_name']} day {record['day']}"
            )
        logger.info(
            f"Saved {record['student_name']} day {record['day']}: {record['total_exp']} EXP ({self.store.name})"
        )
        return record

    def get_records(self, student_name: str = None, day: int = None) -> list[dict]:
        filters = {}
        if student_name:
            filters["student_name"] = student_name
            if day is not None:
                filters["day"] = day
        return self.store.get_all(filters or None)

    def get_record(self, student_name: str, day: int) -> dict | None:
        rows = self.get_records(student_name, day)
        return rows[0] if rows else None

    def get_total_exp(self, student_name: str) -> int:
        return sum(compute_score(r) for r in self.get_records(student_name))

    def get_leaderboard(self) -> list[dict]:
        try:
            records = self.store.get_all()
        except Exception as e:
            logger.error(f"Leaderboard unavailable, record store failed: {e}")
            return []
        return [{"name": name, "exp": exp} for name, exp in rank_students(records, self.roster)]

    def current_day(self) -> int:
        return day_index_for(anchor=self.anchor)


# Global journal instance, built on first use
_journal: JournalService = None


def get_journal() -> JournalService:
    """FastAPI dependency - the journal wired to the configured store and roster."""
    global _journal

    if _journal is None:
        from config import RAMADHAN_START
        from services.record_store import build_record_store
        from services.roster import load_roster

        store = build_record_store()
        _journal = JournalService(store, load_roster(), RAMADHAN_START)
        logger.info(f"Journal using {store.name} record store")

    return _journal
