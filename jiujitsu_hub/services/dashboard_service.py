# /jiujitsu_hub/services/dashboard_service.py

# --- Core Imports ---
import logging
from datetime import date
from typing import Dict, List, Optional

import pandas as pd

# Import the Pydantic models to ensure our output matches the data contract.
from ..models.dashboard_model import DashboardSummary, BirthdayEntry
from ..models.schedule_model import DayOfWeek
from ..models.user_model import Role, TokenPayload
# Import the DatabaseService to interact with our data layer.
from .database_service import DatabaseService
from .access_helpers import scope_academy_id
from .graduation_helpers.belt_rules import parse_date
from . import academy_service

logger = logging.getLogger(__name__)

# date.weekday() index -> Portuguese weekday label used by the schedules.
WEEKDAY_NAMES = [day.value for day in DayOfWeek]


def _is_birthday(birth_date, today: date) -> bool:
    born = parse_date(birth_date)
    return born is not None and (born.month, born.day) == (today.month, today.day)


def _birthdays_today(students: List, users: List, today: date) -> List[BirthdayEntry]:
    entries = [BirthdayEntry(name=s.name, type="Aluno") for s in students if _is_birthday(s.birthDate, today)]
    entries += [
        BirthdayEntry(name=u.name, type="Professor")
        for u in users
        if u.role != Role.STUDENT.value and _is_birthday(u.birthDate, today)
    ]
    return entries


def _attendance_rate_by_day(records: List) -> Dict[str, float]:
    """Percentage of 'present' records per weekday, over every recorded date."""
    frame = pd.DataFrame([{"date": r.date, "status": r.status} for r in records])
    if frame.empty:
        return {}
    frame["date"] = pd.to_datetime(frame["date"], errors="coerce")
    frame = frame.dropna(subset=["date"])
    if frame.empty:
        return {}
    frame["weekday"] = frame["date"].dt.weekday.map(lambda i: WEEKDAY_NAMES[i])
    frame["present"] = frame["status"] == "present"
    rates = frame.groupby("weekday")["present"].mean().mul(100).round(1)
    return {day: float(rates[day]) for day in WEEKDAY_NAMES if day in rates.index}


# --- Core Public Function ---

def get_summary_data(db: DatabaseService, current_user: TokenPayload, today: Optional[date] = None) -> DashboardSummary:
    """
    Calculates the dashboard statistics for everything visible to the caller.
    General admins see the whole network, academy admins their own academy.
    """
    today = today or date.today()
    academy_id = scope_academy_id(current_user)

    students = db.get_all_students(academy_id=academy_id)
    academies = academy_service.get_all_academies(db, current_user)
    professors = db.get_all_professors(academy_id=academy_id)
    schedules = db.get_all_schedules(academy_id=academy_id)
    users = db.get_all_users(academy_id=academy_id)
    student_ids = None if academy_id is None else [s.id for s in students]
    attendance = db.get_attendance_records(student_ids=student_ids)

    paid_count = sum(1 for s in students if s.paymentStatus == "paid")

    return DashboardSummary(
        studentCount=len(students),
        academyCount=len(academies),
        professorCount=len(professors),
        scheduleCount=len(schedules),
        paidCount=paid_count,
        unpaidCount=len(students) - paid_count,
        birthdaysToday=_birthdays_today(students, users, today),
        attendanceRateByDay=_attendance_rate_by_day(attendance),
    )
