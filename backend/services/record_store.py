"""
record_store.py - Storage backends for daily records
One interface (get_all / upsert) over a local JSON cache, a SQL database and a
hosted Supabase table. (student_name, day) is the key; a write replaces the
whole row, it never merges with what was there.
"""

import json
import logging
import os
from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError

import config
import supabase_rest
from models.amalan_record import AmalanRecord

logger = logging.getLogger(__name__)

RECORD_FIELDS = (
    "student_name", "day",
    "sholat_subuh", "sholat_dzuhur", "sholat_ashar",
    "sholat_maghrib", "sholat_isya", "sholat_tarawih",
    "sholat_dhuha", "infaq", "dzikir", "itikaf",
    "tausiyah_ustadz", "tausiyah_tema", "tausiyah_intisari",
    "quran_pages", "total_exp", "updated_at",
)

RECORD_DEFAULTS = {
    "sholat_subuh": None,
    "sholat_dzuhur": None,
    "sholat_ashar": None,
    "sholat_maghrib": None,
    "sholat_isya": None,
    "sholat_tarawih": None,
    "sholat_dhuha": False,
    "infaq": False,
    "dzikir": False,
    "itikaf": False,
    "tausiyah_ustadz": "",
    "tausiyah_tema": "",
    "tausiyah_intisari": "",
    "quran_pages": 0,
    "total_exp": 0,
    "updated_at": None,
}


def full_record(data: dict) -> dict:
    """Every column present; anything missing goes back to its zero state."""
    return {name: data.get(name, RECORD_DEFAULTS.get(name)) for name in RECORD_FIELDS}


def _key(record: dict) -> tuple:
    return (record.get("student_name"), str(record.get("day")))


def _matches(record: dict, filters: dict | None) -> bool:
    if not filters:
        return True
    return all(str(record.get(k)) == str(v) for k, v in filters.items())


class RecordStore(ABC):
    """Abstract base class for record storage backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def get_all(self, filters: dict | None = None) -> list[dict]:
        """Records matching the equality filters (student_name, day)."""
        ...

    @abstractmethod
    def upsert(self, record: dict) -> bool:
        """Insert or replace the record for (student_name, day). True on success."""
        ...


class LocalRecordStore(RecordStore):
    """In-process cache, optionally persisted to a JSON file."""

    def __init__(self, path: str | None = None):
        self.path = path
        self._records: dict[tuple[str, int], dict] = {}
        self._load()

    @property
    def name(self) -> str:
        return "local"

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, encoding="utf-8") as f:
                rows = json.load(f)
            for row in rows:
                self._records[(row["student_name"], int(row["day"]))] = full_record(row)
        except (OSError, ValueError, KeyError, TypeError) as e:
            # Move the unreadable file aside so the next save cannot overwrite it
            corrupt_path = f"{self.path}.corrupt"
            logger.error(f"Failed to load local records from {self.path}, moved to {corrupt_path}: {e}")
            self._records = {}
            try:
                os.replace(self.path, corrupt_path)
            except OSError as move_error:
                # Could not move it aside: stay in memory rather than overwrite it
                logger.error(f"Local records kept in memory only: {move_error}")
                self.path = None

    def _save(self):
        if not self.path:
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(list(self._records.values()), f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def get_all(self, filters: dict | None = None) -> list[dict]:
        return [dict(r) for r in self._records.values() if _matches(r, filters)]

    def upsert(self, record: dict) -> bool:
        row = full_record(record)
        self._records[(row["student_name"], int(row["day"]))] = row
        try:
            self._save()
        except OSError as e:
            logger.error(f"Failed to persist local records to {self.path}: {e}")
            return False
        return True


class SqlRecordStore(RecordStore):
    """Relational store through SQLAlchemy sessions."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    @property
    def name(self) -> str:
        return "sql"

    def get_all(self, filters: dict | None = None) -> list[dict]:
        db = self.session_factory()
        try:
            query = db.query(AmalanRecord)
            if filters:
                query = query.filter_by(**filters)
            return [row.to_dict() for row in query.order_by(AmalanRecord.id.asc()).all()]
        finally:
            db.close()

    def upsert(self, record: dict) -> bool:
        row_data = full_record(record)
        db = self.session_factory()
        try:
            row = db.query(AmalanRecord).filter_by(
                student_name=row_data["student_name"], day=row_data["day"]
            ).first()
            if not row:
                row = AmalanRecord()
                db.add(row)
            for k, v in row_data.items():
                setattr(row, k, v)
            db.commit()
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to save record: {e}")
            return False
        finally:
            db.close()


class SupabaseRecordStore(RecordStore):
    """Hosted table through the PostgREST API."""

    def __init__(self, table: str = None):
        self.table = table or config.RECORDS_TABLE

    @property
    def name(self) -> str:
        return "supabase"

    def get_all(self, filters: dict | None = None) -> list[dict]:
        rows = supabase_rest.sb_select(self.table, filters=filters)
        return [full_record(r) for r in rows]

    def upsert(self, record: dict) -> bool:
        try:
            supabase_rest.sb_upsert(self.table, full_record(record), on_conflict="student_name,day")
            return True
        except Exception as e:
            logger.error(f"Failed to save record to Supabase: {e}")
            return False


class FallbackRecordStore(RecordStore):
    """
    Hosted first, local fallback. Writes always land in the fallback too.
    Keys the primary rejected stay pending and are read from the fallback
    until the primary accepts a newer write for them.
    """

    def __init__(self, primary: RecordStore, fallback: RecordStore):
        self.primary = primary
        self.fallback = fallback
        self._pending: set[tuple] = set()

    @property
    def name(self) -> str:
        return f"{self.primary.name}+{self.fallback.name}"

    def get_all(self, filters: dict | None = None) -> list[dict]:
        try:
            rows = self.primary.get_all(filters)
        except Exception as e:
            logger.warning(f"{self.primary.name} store unavailable, reading from {self.fallback.name}: {e}")
            return self.fallback.get_all(filters)

        if not self._pending:
            return rows
        rows = [r for r in rows if _key(r) not in self._pending]
        rows.extend(r for r in self.fallback.get_all(filters) if _key(r) in self._pending)
        return rows

    def upsert(self, record: dict) -> bool:
        key = _key(record)
        saved_locally = self.fallback.upsert(record)
        saved_remotely = self.primary.upsert(record)
        if saved_remotely:
            self._pending.discard(key)
        elif saved_locally:
            logger.warning(f"{self.primary.name} store rejected the write, kept in {self.fallback.name}")
            self._pending.add(key)
        return saved_remotely or saved_locally


def build_record_store(backend: str = None) -> RecordStore:
    """Pick the store named by STORAGE_BACKEND (auto / supabase / sql / local)."""
    from database import SessionLocal

    backend = backend or config.STORAGE_BACKEND
    if backend == "local":
        return LocalRecordStore(config.LOCAL_STORE_PATH)
    if backend == "sql":
        return SqlRecordStore(SessionLocal)
    if backend == "supabase":
        return FallbackRecordStore(SupabaseRecordStore(), LocalRecordStore(config.LOCAL_STORE_PATH))
    if backend != "auto":
        raise ValueError(f"Unsupported storage backend: {backend}")

    if supabase_rest.is_configured():
        return FallbackRecordStore(SupabaseRecordStore(), SqlRecordStore(SessionLocal))
    return SqlRecordStore(SessionLocal)
