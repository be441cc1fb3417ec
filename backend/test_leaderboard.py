# test_leaderboard.py - ranking per-student EXP

from services.leaderboard import rank_students
from services.roster import Roster

ROSTER = ["Aisyah", "Bilal", "Fatimah"]


def test_roster_members_without_records_rank_at_zero():
    records = [{"student_name": "Bilal", "day": 1, "quran_pages": 3}]
    ranking = rank_students(records, ROSTER)
    assert ranking == [("Bilal", 30), ("Aisyah", 0), ("Fatimah", 0)]


def test_ranking_is_idempotent():
    records = [
        {"student_name": "Fatimah", "day": 1, "infaq": True},
        {"student_name": "Aisyah", "day": 1, "infaq": True},
        {"student_name": "Bilal", "day": 2, "quran_pages": 1},
    ]
    first = rank_students(records, ROSTER)
    assert first == rank_students(records, ROSTER)
    # Ties keep roster order
    assert first == [("Aisyah", 15), ("Fatimah", 15), ("Bilal", 10)]


def test_scores_are_recomputed_not_read_from_cache():
    records = [
        {"student_name": "Aisyah", "day": 1, "total_exp": 9999},
        {"student_name": "Bilal", "day": 1, "sholat_subuh": "jamaah", "total_exp": 0},
    ]
    assert rank_students(records, ROSTER)[0] == ("Bilal", 15)


def test_sums_across_days():
    records = [
        {"student_name": "Aisyah", "day": 1, "quran_pages": 2},
        {"student_name": "Aisyah", "day": 2, "quran_pages": 3},
    ]
    assert rank_students(records, ROSTER)[0] == ("Aisyah", 50)


def test_unknown_students_are_ignored():
    records = [{"student_name": "Stranger", "day": 1, "quran_pages": 100}]
    assert [name for name, _ in rank_students(records, ROSTER)] == ROSTER


def test_empty_or_missing_records():
    assert rank_students([], ROSTER) == [(n, 0) for n in ROSTER]
    assert rank_students(None, ROSTER) == [(n, 0) for n in ROSTER]
    assert rank_students(None, []) == []


def test_accepts_roster_object():
    roster = Roster(["Bilal", "Aisyah", "Bilal"])
    assert rank_students([], roster) == [("Bilal", 0), ("Aisyah", 0)]
