# /tests/test_belt_rules.py

from datetime import date
from types import SimpleNamespace

import pytest

from jiujitsu_hub.services.graduation_helpers import belt_rules


def belt(id, name, rank, type="adult", minTimeInMonths=0, minAge=None):
    return SimpleNamespace(id=id, name=name, rank=rank, type=type, minTimeInMonths=minTimeInMonths, minAge=minAge)


def student(**overrides):
    fields = {
        "beltId": None, "stripes": 0, "birthDate": "1990-01-01",
        "firstGraduationDate": None, "lastPromotionDate": None,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def attendance(present: int, absent: int, on: str = "2024-05-01"):
    return (
        [SimpleNamespace(date=on, status="present") for _ in range(present)]
        + [SimpleNamespace(date=on, status="absent") for _ in range(absent)]
    )


@pytest.fixture
def adult_ladder():
    return [
        belt("b1", "Branca", 1),
        belt("b2", "Azul", 2, minTimeInMonths=24),
        belt("b3", "Roxa", 3, minTimeInMonths=18),
        belt("b5", "Preta", 5, minTimeInMonths=36),
        belt("b6", "Coral", 6),
    ]


@pytest.fixture
def kids_ladder():
    return [
        belt("k1", "Cinza", 1, type="kids"),
        belt("k2", "Amarela", 2, type="kids", minAge=7),
        belt("k3", "Verde", 3, type="kids", minAge=13),
        belt("a4", "Azul", 4),
    ]


# --- Class Eligibility ---

@pytest.mark.parametrize("student_rank, required_rank, expected", [
    (2, 2, True),
    (3, 2, True),
    (1, 2, False),
])
def test_class_eligibility_compares_ranks(student_rank, required_rank, expected):
    assert belt_rules.is_eligible_for_class(belt("s", "S", student_rank), belt("r", "R", required_rank)) is expected


def test_missing_belts_rank_as_zero():
    assert belt_rules.is_eligible_for_class(None, None) is True
    assert belt_rules.is_eligible_for_class(None, belt("r", "Branca", 1)) is False
    assert belt_rules.is_eligible_for_class(belt("s", "Branca", 1), None) is True


# --- Belt Progress ---

def test_belt_progress_counts_months_in_belt_and_training_time(adult_ladder):
    s = student(beltId="b2", lastPromotionDate="2024-01-15", firstGraduationDate="2020-03-10")

    progress = belt_rules.belt_progress(s, adult_ladder, today=date(2025, 1, 15))

    assert progress["currentBeltName"] == "Azul"
    assert progress["nextBeltName"] == "Roxa"
    assert progress["monthsInBelt"] == 12
    assert progress["requiredMonths"] == 24
    assert progress["progressPercent"] == 50
    assert progress["trainingYears"] == 4
    assert progress["trainingMonths"] == 10


def test_belt_progress_is_capped_at_100(adult_ladder):
    s = student(beltId="b2", lastPromotionDate="2015-01-01", firstGraduationDate="2015-01-01")
    progress = belt_rules.belt_progress(s, adult_ladder, today=date(2025, 1, 1))
    assert progress["progressPercent"] == 100


# --- Promotion Eligibility ---

def test_adult_student_with_time_stripes_and_attendance_is_eligible(adult_ladder):
    s = student(beltId="b2", stripes=4, lastPromotionDate="2022-01-01")
    result = belt_rules.promotion_eligibility(s, adult_ladder, attendance(8, 2), today=date(2025, 1, 1))
    assert result["eligible"] is True
    assert result["nextBeltName"] == "Roxa"


def test_attendance_must_be_strictly_above_seventy_percent(adult_ladder):
    s = student(beltId="b2", stripes=4, lastPromotionDate="2022-01-01")
    result = belt_rules.promotion_eligibility(s, adult_ladder, attendance(7, 3), today=date(2025, 1, 1))
    assert result["eligible"] is False
    assert "70%" in result["reason"]


def test_attendance_before_last_promotion_is_ignored(adult_ladder):
    s = student(beltId="b2", stripes=4, lastPromotionDate="2022-01-01")
    old_records = attendance(10, 0, on="2021-06-01")
    result = belt_rules.promotion_eligibility(s, adult_ladder, old_records, today=date(2025, 1, 1))
    assert result["eligible"] is False


def test_adult_belt_needs_four_stripes(adult_ladder):
    s = student(beltId="b2", stripes=3, lastPromotionDate="2022-01-01")
    result = belt_rules.promotion_eligibility(s, adult_ladder, attendance(10, 0), today=date(2025, 1, 1))
    assert result["eligible"] is False
    assert "4 graus" in result["reason"]


def test_adult_belt_needs_minimum_time(adult_ladder):
    s = student(beltId="b2", stripes=4, lastPromotionDate="2024-01-01")
    result = belt_rules.promotion_eligibility(s, adult_ladder, attendance(10, 0, on="2024-06-01"), today=date(2025, 1, 1))
    assert result["eligible"] is False


def test_black_belt_needs_six_stripes_and_seven_years(adult_ladder):
    records = attendance(10, 0, on="2020-01-01")
    ready = student(beltId="b5", stripes=6, lastPromotionDate="2015-01-01")
    too_few_stripes = student(beltId="b5", stripes=5, lastPromotionDate="2015-01-01")
    too_recent = student(beltId="b5", stripes=6, lastPromotionDate="2020-01-01")
    today = date(2025, 1, 1)

    assert belt_rules.promotion_eligibility(ready, adult_ladder, records, today)["eligible"] is True
    assert belt_rules.promotion_eligibility(too_few_stripes, adult_ladder, records, today)["eligible"] is False
    assert belt_rules.promotion_eligibility(too_recent, adult_ladder, attendance(10, 0, on="2021-01-01"), today)["eligible"] is False


def test_top_belt_cannot_be_promoted(adult_ladder):
    s = student(beltId="b6", stripes=8, lastPromotionDate="2000-01-01")
    result = belt_rules.promotion_eligibility(s, adult_ladder, attendance(10, 0), today=date(2025, 1, 1))
    assert result["eligible"] is False
    assert result["nextBeltId"] is None


def test_missing_belt_or_promotion_date_is_not_eligible(adult_ladder):
    no_belt = student(beltId=None)
    no_date = student(beltId="b2", stripes=4)
    today = date(2025, 1, 1)
    assert belt_rules.promotion_eligibility(no_belt, adult_ladder, [], today)["eligible"] is False
    assert belt_rules.promotion_eligibility(no_date, adult_ladder, [], today)["eligible"] is False


def test_kids_belt_progresses_by_minimum_age(kids_ladder):
    s = student(beltId="k1", birthDate="2016-03-01", lastPromotionDate="2023-01-01")
    result = belt_rules.promotion_eligibility(s, kids_ladder, [], today=date(2024, 6, 1))
    assert result["eligible"] is True
    assert result["nextBeltName"] == "Amarela"


def test_green_belt_kid_turning_sixteen_moves_to_adult_blue(kids_ladder):
    s = student(beltId="k3", birthDate="2008-06-01", lastPromotionDate="2022-01-01")
    result = belt_rules.promotion_eligibility(s, kids_ladder, [], today=date(2024, 6, 1))
    assert result["eligible"] is True
    assert result["nextBeltId"] == "a4"


def test_green_belt_kid_under_sixteen_waits(kids_ladder):
    s = student(beltId="k3", birthDate="2010-06-01", lastPromotionDate="2022-01-01")
    result = belt_rules.promotion_eligibility(s, kids_ladder, [], today=date(2024, 6, 1))
    assert result["eligible"] is False


def test_calculate_age_before_and_after_birthday():
    assert belt_rules.calculate_age("2000-06-15", date(2024, 6, 14)) == 23
    assert belt_rules.calculate_age("2000-06-15", date(2024, 6, 15)) == 24
