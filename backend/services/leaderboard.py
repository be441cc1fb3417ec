"""
leaderboard.py - Per-student EXP totals ranked for display
Scores are always recomputed from raw fields; the stored total_exp is a cache.
"""

from collections.abc import Iterable, Mapping

from services.scoring import compute_score


def _student_of(record):
    if isinstance(record, Mapping):
        return record.get("student_name")
    return getattr(record, "student_name", None)


def rank_students(records: Iterable | None, roster: Iterable[str]) -> list[tuple[str, int]]:
    """
    Every roster member appears, starting at 0. Records for names outside
    the roster are ignored. Sorted by EXP descending; ties keep roster order.
    """
    totals: dict[str, int] = {}
    for name in roster:
        totals.setdefault(name, 0)

    for record in records or []:
        name = _student_of(record)
        if isinstance(name, str) and name in totals:
            totals[name] += compute_score(record)

    return sorted(totals.items(), key=lambda item: item[1], reverse=True)
