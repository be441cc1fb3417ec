"""
scoring.py - EXP scoring for a single daily record
Pure and additive: every field is scored on its own and missing or malformed
fields are worth zero, so a partial record never raises.
"""

from collections.abc import Mapping

OBLIGATORY_PRAYERS = (
    "sholat_subuh",
    "sholat_dzuhur",
    "sholat_ashar",
    "sholat_maghrib",
    "sholat_isya",
)
NIGHT_PRAYER = "sholat_tarawih"
PRAYER_FIELDS = OBLIGATORY_PRAYERS + (NIGHT_PRAYER,)

PRAYER_POINTS = {"jamaah": 15, "munfarid": 10}

FLAG_POINTS = {
    "sholat_dhuha": 10,
    "infaq": 15,
    "dzikir": 15,
    "itikaf": 15,
}

SUMMARY_POINTS = 20
POINTS_PER_PAGE = 10


def _field(record, name: str):
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def prayer_points(value) -> int:
    if not isinstance(value, str):
        return 0
    return PRAYER_POINTS.get(value.strip().lower(), 0)


def is_flag_set(value) -> bool:
    """Bools, 0/1 (SQLite) and "true"/"false" strings (form posts)."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(value, (bool, int, float)):
        return bool(value)
    return False


def page_count(value) -> int:
    if isinstance(value, bool):
        return 0
    try:
        pages = int(value)
    except (TypeError, ValueError):
        return 0
    return max(pages, 0)


def has_summary(value) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def score_breakdown(record) -> dict:
    """Points per category for a (possibly partial) record."""
    breakdown = {name: prayer_points(_field(record, name)) for name in PRAYER_FIELDS}
    for name, points in FLAG_POINTS.items():
        breakdown[name] = points if is_flag_set(_field(record, name)) else 0

    breakdown["tausiyah_intisari"] = SUMMARY_POINTS if has_summary(_field(record, "tausiyah_intisari")) else 0
    breakdown["quran_pages"] = page_count(_field(record, "quran_pages")) * POINTS_PER_PAGE
    return breakdown


def compute_score(record) -> int:
    """Total EXP for one day's record. Always a non-negative int."""
    return sum(score_breakdown(record).values())
