# /jiujitsu_hub/services/graduation_helpers/belt_rules.py

"""
Pure functions for everything that depends on belt rank and elapsed time:
class eligibility, belt progress and promotion eligibility.

Nothing in this module touches the database. Callers pass in ORM objects (or
anything with the same attributes) and a reference date, which keeps the rules
deterministic and easy to test.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

BLACK_BELT_NAME = "Preta"
CORAL_BELT_NAME = "Coral"
KIDS_GREEN_BELT_NAME = "Verde"
ADULT_BLUE_BELT_NAME = "Azul"

ADULT_AGE = 16
MIN_ATTENDANCE_FREQUENCY = 70.0
STANDARD_STRIPES_REQUIRED = 4
BLACK_BELT_STRIPES_REQUIRED = 6
BLACK_BELT_MONTHS_REQUIRED = 84
CORAL_BELT_STRIPES_REQUIRED = 8
CORAL_BELT_MONTHS_REQUIRED = 120


# --- Date Helpers ---

def parse_date(value) -> Optional[date]:
    """Accepts a `date` or a 'YYYY-MM-DD' string (extra time parts are ignored)."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def months_between(start: date, end: date) -> int:
    """Calendar months from `start` to `end`, ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def calculate_age(birth_date, today: date) -> int:
    born = parse_date(birth_date)
    if born is None:
        return 0
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)


def training_time(start_date, today: date) -> Dict[str, int]:
    """Whole years and remaining months trained since `start_date`."""
    start = parse_date(start_date)
    if start is None or start > today:
        return {"years": 0, "months": 0, "totalMonths": 0}
    total = months_between(start, today)
    if today.day < start.day:
        total -= 1
    total = max(total, 0)
    return {"years": total // 12, "months": total % 12, "totalMonths": total}


# --- Rank Helpers ---

def rank_of(graduation) -> int:
    """A missing belt ranks as 0."""
    return graduation.rank if graduation is not None and graduation.rank is not None else 0


def is_eligible_for_class(student_belt, required_belt) -> bool:
    """A student may attend a class iff their belt ranks at least as high as the requirement."""
    return rank_of(student_belt) >= rank_of(required_belt)


def sort_by_rank(graduations: Iterable) -> List:
    return sorted(graduations, key=rank_of)


def find_next_belt(current_belt, graduations: Sequence):
    """The lowest-ranked belt strictly above `current_belt`, or None at the top."""
    current_rank = rank_of(current_belt)
    for graduation in sort_by_rank(graduations):
        if rank_of(graduation) > current_rank:
            return graduation
    return None


# --- Progress & Promotion ---

def belt_progress(student, graduations: Sequence, today: date) -> Dict:
    """
    How far the student is through their current belt's minimum time, plus
    total training time since their first graduation.
    """
    by_id = {g.id: g for g in graduations}
    current = by_id.get(student.beltId)
    next_belt = find_next_belt(current, graduations)

    promotion_date = parse_date(student.lastPromotionDate) or parse_date(student.firstGraduationDate)
    months_in_belt = max(months_between(promotion_date, today), 0) if promotion_date else 0
    required = current.minTimeInMonths if current is not None and current.minTimeInMonths else 0
    if required > 0:
        percent = min(int(months_in_belt * 100 / required), 100)
    else:
        percent = 100 if current is not None else 0

    trained = training_time(student.firstGraduationDate, today)
    return {
        "currentBeltId": current.id if current else None,
        "currentBeltName": current.name if current else None,
        "nextBeltId": next_belt.id if next_belt else None,
        "nextBeltName": next_belt.name if next_belt else None,
        "monthsInBelt": months_in_belt,
        "requiredMonths": required,
        "progressPercent": percent,
        "trainingYears": trained["years"],
        "trainingMonths": trained["months"],
    }


def attendance_frequency(records: Iterable, since: date) -> float:
    """Percentage of 'present' records dated on or after `since`."""
    relevant = [r for r in records if (parse_date(r.date) or date.min) >= since]
    if not relevant:
        return 0.0
    present = sum(1 for r in relevant if r.status == "present")
    return present * 100.0 / len(relevant)


def _result(eligible: bool, next_belt, reason: str) -> Dict:
    return {
        "eligible": eligible,
        "nextBeltId": next_belt.id if next_belt is not None else None,
        "nextBeltName": next_belt.name if next_belt is not None else None,
        "reason": reason,
    }


def promotion_eligibility(student, graduations: Sequence, attendance_records: Iterable, today: date) -> Dict:
    """
    Decides whether a student can be promoted to the next belt.

    Kids belts progress by age. Adult belts need more than 70% attendance
    since the last promotion, a stripe count and a minimum time in the belt;
    black and coral belts have their own stripe and time thresholds.
    """
    ordered = sort_by_rank(graduations)
    current = next((g for g in ordered if g.id == student.beltId), None)
    if current is None:
        return _result(False, None, "Faixa atual não encontrada.")

    next_belt = find_next_belt(current, ordered)
    if next_belt is None:
        return _result(False, None, "Graduação máxima atingida.")

    promotion_date = parse_date(student.lastPromotionDate) or parse_date(student.firstGraduationDate)
    if promotion_date is None:
        return _result(False, next_belt, "Data de promoção não encontrada.")

    months = months_between(promotion_date, today)
    age = calculate_age(student.birthDate, today)
    stripes = student.stripes or 0

    if current.type == "kids":
        adult_blue = next(
            (g for g in ordered if g.name == ADULT_BLUE_BELT_NAME and g.type == "adult"), None
        )
        if current.name == KIDS_GREEN_BELT_NAME and age >= ADULT_AGE and adult_blue is not None:
            return _result(True, adult_blue, f"Atingiu {ADULT_AGE} anos na faixa verde.")
        if next_belt.type == "kids" and next_belt.minAge and age >= next_belt.minAge:
            return _result(True, next_belt, f"Atingiu a idade mínima de {next_belt.minAge} anos.")
        return _result(False, next_belt, f"Idade insuficiente ({age} anos).")

    frequency = attendance_frequency(attendance_records, promotion_date)
    if frequency <= MIN_ATTENDANCE_FREQUENCY:
        return _result(
            False, next_belt,
            f"Requer >{int(MIN_ATTENDANCE_FREQUENCY)}% de frequência (atualmente {round(frequency)}%).",
        )

    if current.name == BLACK_BELT_NAME:
        if stripes < BLACK_BELT_STRIPES_REQUIRED:
            return _result(False, next_belt, f"Requer {BLACK_BELT_STRIPES_REQUIRED} graus na faixa preta (atualmente {stripes}).")
        if months >= BLACK_BELT_MONTHS_REQUIRED:
            return _result(True, next_belt, "Cumpriu 7 anos como 6º grau.")
        return _result(False, next_belt, f"Requer 7 anos ({BLACK_BELT_MONTHS_REQUIRED} meses) como 6º grau (atualmente {months} meses).")

    if current.name == CORAL_BELT_NAME:
        if stripes < CORAL_BELT_STRIPES_REQUIRED:
            return _result(False, next_belt, f"Requer {CORAL_BELT_STRIPES_REQUIRED} graus na faixa coral (atualmente {stripes}).")
        if months >= CORAL_BELT_MONTHS_REQUIRED:
            return _result(True, next_belt, "Cumpriu 10 anos como 8º grau.")
        return _result(False, next_belt, f"Requer 10 anos ({CORAL_BELT_MONTHS_REQUIRED} meses) como 8º grau (atualmente {months} meses).")

    if stripes < STANDARD_STRIPES_REQUIRED:
        return _result(False, next_belt, f"Requer {STANDARD_STRIPES_REQUIRED} graus (atualmente {stripes}).")
    if months >= (current.minTimeInMonths or 0):
        return _result(True, next_belt, "Cumpriu o tempo mínimo na faixa.")
    return _result(False, next_belt, f"Requer {current.minTimeInMonths} meses na faixa (atualmente {months} meses).")
