# test_ramadhan_calendar.py - day index, dates and Hijri labels

import re
from datetime import date, datetime, timedelta

from services.ramadhan_calendar import calendar_label, date_for, day_index_for, to_hijri

ANCHOR = date(2026, 2, 19)


def test_anchor_is_day_one():
    assert day_index_for(ANCHOR, ANCHOR) == 1


def test_before_anchor_clamps_to_day_one():
    assert day_index_for(ANCHOR - timedelta(days=1), ANCHOR) == 1
    assert day_index_for(date(2025, 6, 1), ANCHOR) == 1


def test_no_upper_clamp():
    assert day_index_for(ANCHOR + timedelta(days=29), ANCHOR) == 30
    assert day_index_for(ANCHOR + timedelta(days=44), ANCHOR) == 45


def test_time_of_day_is_ignored():
    assert day_index_for(datetime(2026, 2, 20, 23, 59), ANCHOR) == 2
    assert day_index_for(datetime(2026, 2, 20, 0, 1), ANCHOR) == 2


def test_date_round_trip():
    for offset in (0, 1, 15, 29, 30, 400):
        d = ANCHOR + timedelta(days=offset)
        assert date_for(day_index_for(d, ANCHOR), ANCHOR) == d


def test_date_for_day_one_is_anchor():
    assert date_for(1, ANCHOR) == ANCHOR
    assert date_for(30, ANCHOR) == date(2026, 3, 20)


def test_label_inside_window():
    assert calendar_label(ANCHOR, ANCHOR) == "1 Ramadhan 1447 H"
    assert calendar_label(ANCHOR + timedelta(days=29), ANCHOR) == "30 Ramadhan 1447 H"


def test_label_outside_window_uses_approximation():
    label = calendar_label(ANCHOR + timedelta(days=40), ANCHOR)
    assert label == "12 Syaw 1447 H"
    assert calendar_label(date(2000, 1, 1), ANCHOR) == "24 Ram 1420 H"


def test_label_custom_period():
    label = calendar_label(date(2027, 2, 9), date(2027, 2, 8), period_name="Ramadan", year_label="1448")
    assert label == "2 Ramadan 1448 H"


def test_far_dates_do_not_fail():
    for d in (date(1926, 3, 1), date(2126, 11, 30)):
        assert re.fullmatch(r"\d+ \S+ \d+ H", calendar_label(d, ANCHOR))


def test_hijri_known_dates():
    assert to_hijri(date(2000, 1, 1)) == (1420, 9, 24)
    assert to_hijri(ANCHOR) == (1447, 9, 2)


def test_label_keeps_empty_overrides():
    assert calendar_label(ANCHOR, ANCHOR, period_days=0) == "2 Ram 1447 H"
    assert calendar_label(ANCHOR, ANCHOR, year_label="") == "1 Ramadhan  H"
    assert calendar_label(ANCHOR, ANCHOR, period_name="") == "1  1447 H"
