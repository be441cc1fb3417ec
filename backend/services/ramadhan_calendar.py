"""
ramadhan_calendar.py - Day index <-> calendar date for the observance period
Day 1 is the anchor date. Outside the 30-day window labels fall back to the
tabular (arithmetical) Islamic calendar, which is an approximation only.
"""

from datetime import date, datetime, timedelta

from config import RAMADHAN_START, PERIOD_NAME, HIJRI_YEAR_LABEL, PERIOD_DAYS

HIJRI_MONTHS = [
    "Muh", "Saf", "R.Aw", "R.Akh", "Jum.Aw", "Jum.Akh",
    "Raj", "Sha", "Ram", "Syaw", "Dhu.Q", "Dhu.H",
]

# Julian Day Number of 0001-01-01 minus its proleptic ordinal (1)
_JDN_OFFSET = 1721425
# JDN of 1 Muharram 1 AH minus one day (civil epoch)
_HIJRI_EPOCH = 1948440


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _offset(day: date, anchor: date) -> int:
    return (_as_date(day) - _as_date(anchor)).days + 1


def day_index_for(day: date | datetime | None = None, anchor: date | None = None) -> int:
    """
    Day number within the period for `day` (default today).
    Before the anchor this is always 1; there is no upper cap.
    """
    current = _as_date(day) if day is not None else date.today()
    index = _offset(current, anchor if anchor is not None else RAMADHAN_START)
    return index if index >= 1 else 1


def date_for(day_index: int, anchor: date | None = None) -> date:
    return _as_date(anchor if anchor is not None else RAMADHAN_START) + timedelta(days=day_index - 1)


def to_hijri(day: date | datetime) -> tuple[int, int, int]:
    """(year, month, day) in the tabular Islamic calendar."""
    jdn = _as_date(day).toordinal() + _JDN_OFFSET

    l = jdn - _HIJRI_EPOCH + 10632
    n = (l - 1) // 10631
    l = l - 10631 * n + 354
    j = ((10985 - l) // 5316) * ((50 * l) // 17719) + (l // 5670) * ((43 * l) // 15238)
    l = l - ((30 - j) // 15) * ((17719 * j) // 50) - (j // 16) * ((15238 * j) // 43) + 29
    month = (24 * l) // 709
    hijri_day = l - (709 * month) // 24
    year = 30 * n + j - 30
    return year, month, hijri_day


def calendar_label(
    day: date | datetime,
    anchor: date | None = None,
    period_name: str | None = None,
    year_label: str | None = None,
    period_days: int | None = None,
) -> str:
    if anchor is None:
        anchor = RAMADHAN_START
    if period_name is None:
        period_name = PERIOD_NAME
    if year_label is None:
        year_label = HIJRI_YEAR_LABEL
    if period_days is None:
        period_days = PERIOD_DAYS

    index = _offset(day, anchor)
    if 1 <= index <= period_days:
        return f"{index} {period_name} {year_label} H"

    year, month, hijri_day = to_hijri(day)
    month_name = HIJRI_MONTHS[month - 1] if 1 <= month <= 12 else ""
    return f"{hijri_day} {month_name} {year} H"
