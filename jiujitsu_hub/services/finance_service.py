# /jiujitsu_hub/services/finance_service.py

"""
Billing-window logic for the Finance view.

For every unpaid student with a monthly due day, we work out the most recent
due date that has already passed and the next one still to come, and from
those decide whether the student should get a payment reminder, an overdue
notice, or both.
"""

import calendar
from datetime import date
from typing import Dict, Iterable, Optional, Tuple

from ..models.finance_model import FinanceReminders, PaymentWindow
from ..models.user_model import TokenPayload
from .database_service import DatabaseService
from . import settings_service
from .access_helpers import scope_academy_id

DEFAULT_REMINDER_DAYS = 5
DEFAULT_OVERDUE_DAYS = 5


def _due_date_in_month(year: int, month: int, due_day: int) -> date:
    """The due date in a given month. Days past the month's end clamp to its last day."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(due_day, last_day))


def _shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def compute_due_dates(due_day: int, today: date) -> Tuple[date, date]:
    """
    Returns `(last_due_date, next_due_date)`.

    `next_due_date` is the first occurrence on or after `today`;
    `last_due_date` is the latest occurrence strictly before `today`.
    """
    this_month = _due_date_in_month(today.year, today.month, due_day)
    if this_month >= today:
        prev_year, prev_month = _shift_month(today.year, today.month, -1)
        return _due_date_in_month(prev_year, prev_month, due_day), this_month
    next_year, next_month = _shift_month(today.year, today.month, 1)
    return this_month, _due_date_in_month(next_year, next_month, due_day)


def payment_window(student, today: date) -> Optional[PaymentWindow]:
    """The billing window for one student, or None if they have no due day."""
    due_day = student.paymentDueDateDay
    if not due_day:
        return None
    last_due, next_due = compute_due_dates(due_day, today)
    return PaymentWindow(
        studentId=student.id,
        name=student.name,
        phone=student.phone,
        paymentDueDateDay=due_day,
        lastDueDate=last_due,
        nextDueDate=next_due,
        daysUntilNextDue=(next_due - today).days,
        daysSinceLastDue=(today - last_due).days,
    )


def classify_students(
    students: Iterable,
    today: date,
    reminder_days: int = DEFAULT_REMINDER_DAYS,
    overdue_days: int = DEFAULT_OVERDUE_DAYS,
) -> FinanceReminders:
    """
    Splits unpaid students into the reminder and overdue lists.

    A student is in the reminder list when the next due date is 0 to
    `reminder_days` days away, and in the overdue list when the last due date
    passed 1 to `overdue_days` days ago. Both can hold at once.
    """
    result = FinanceReminders()
    for student in students:
        if student.paymentStatus != "unpaid":
            continue
        window = payment_window(student, today)
        if window is None:
            continue
        if 0 <= window.daysUntilNextDue <= reminder_days:
            result.reminders.append(window)
        if 0 < window.daysSinceLastDue <= overdue_days:
            result.overdue.append(window)
    return result


def get_reminders(db: DatabaseService, current_user: TokenPayload, today: Optional[date] = None) -> FinanceReminders:
    """Classifies the students visible to the caller using the configured thresholds."""
    settings = settings_service.get_settings_dict(db)
    students = db.get_all_students(academy_id=scope_academy_id(current_user))
    return classify_students(
        students,
        today or date.today(),
        reminder_days=_as_int(settings.get("reminderDaysBeforeDue"), DEFAULT_REMINDER_DAYS),
        overdue_days=_as_int(settings.get("overdueDaysAfterDue"), DEFAULT_OVERDUE_DAYS),
    )


def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
