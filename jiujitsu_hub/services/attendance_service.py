# /jiujitsu_hub/services/attendance_service.py

"""
Business logic for attendance taking.

Attendance is keyed on (student, schedule, date): saving the same triple
twice keeps a single record with the latest status. A student can only be
marked present in a class their belt qualifies them for.
"""

import logging
from typing import List, Optional

from ..models import attendance_model
from ..models.user_model import TokenPayload, Role
from .database_service import DatabaseService
from .access_helpers import scope_academy_id, can_access_student
from .graduation_helpers import belt_rules
from . import schedule_service

logger = logging.getLogger(__name__)


def get_attendance(
    db: DatabaseService,
    current_user: TokenPayload,
    schedule_id: Optional[str] = None,
    date: Optional[str] = None,
    student_id: Optional[str] = None,
) -> List:
    """Lists attendance visible to the caller, optionally filtered."""
    if current_user.role == Role.STUDENT:
        visible_ids = [current_user.studentId] if current_user.studentId else []
    elif current_user.role == Role.GENERAL_ADMIN:
        visible_ids = None
    else:
        visible_ids = [s.id for s in db.get_all_students(academy_id=scope_academy_id(current_user))]

    if student_id is not None:
        if visible_ids is not None and student_id not in visible_ids:
            return []
        visible_ids = [student_id]
    return db.get_attendance_records(student_ids=visible_ids, schedule_id=schedule_id, date=date)


def save_attendance(db: DatabaseService, attendance_in: attendance_model.AttendanceSave, current_user: TokenPayload):
    """
    Creates or overwrites the attendance for one student in one class on one
    date. Returns None when the student or the schedule is not visible.
    """
    student = db.get_student_by_id(attendance_in.studentId)
    if not can_access_student(current_user, student):
        return None
    schedule = schedule_service.get_schedule(db, attendance_in.scheduleId, current_user)
    if schedule is None:
        return None

    if attendance_in.status == attendance_model.AttendanceStatus.PRESENT:
        student_belt = db.get_graduation_by_id(student.beltId) if student.beltId else None
        required_belt = db.get_graduation_by_id(schedule.requiredGraduationId) if schedule.requiredGraduationId else None
        if not belt_rules.is_eligible_for_class(student_belt, required_belt):
            raise ValueError("A graduação do aluno não é suficiente para esta aula.")

    return db.upsert_attendance(
        student_id=student.id,
        schedule_id=schedule.id,
        date=attendance_in.date.isoformat(),
        status=attendance_in.status.value,
    )


def delete_attendance(db: DatabaseService, record_id: str, current_user: TokenPayload) -> bool:
    record = db.get_attendance_by_id(record_id)
    if record is None:
        return False
    if not can_access_student(current_user, db.get_student_by_id(record.studentId)):
        return False
    return db.delete_attendance(record_id)
