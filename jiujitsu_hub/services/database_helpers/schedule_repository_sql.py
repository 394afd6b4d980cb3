# /jiujitsu_hub/services/database_helpers/schedule_repository_sql.py

"""
Raw SQLAlchemy queries for class schedules and attendance records.
"""

import uuid
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ...db.models.schedule_models import ClassSchedule, AttendanceRecord
from ...db.models.academy_models import Professor


class ScheduleRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _professors(self, professor_ids: List[str]) -> List[Professor]:
        if not professor_ids:
            return []
        return self.db.query(Professor).filter(Professor.id.in_(professor_ids)).all()

    # --- Schedule Methods ---

    def get_all_schedules(self, academy_id: Optional[str] = None) -> List[ClassSchedule]:
        query = self.db.query(ClassSchedule)
        if academy_id is not None:
            query = query.filter(ClassSchedule.academyId == academy_id)
        return query.order_by(ClassSchedule.dayOfWeek, ClassSchedule.startTime).all()

    def get_schedule_by_id(self, schedule_id: str) -> Optional[ClassSchedule]:
        return self.db.query(ClassSchedule).filter(ClassSchedule.id == schedule_id).first()

    def add_schedule(self, record: Dict, assistant_ids: Optional[List[str]] = None) -> ClassSchedule:
        new_schedule = ClassSchedule(**record)
        new_schedule.assistants = self._professors(assistant_ids or [])
        self.db.add(new_schedule)
        self.db.commit()
        self.db.refresh(new_schedule)
        return new_schedule

    def update_schedule(self, schedule_id: str, data: Dict, assistant_ids: Optional[List[str]] = None) -> Optional[ClassSchedule]:
        db_schedule = self.get_schedule_by_id(schedule_id)
        if db_schedule:
            for key, value in data.items():
                setattr(db_schedule, key, value)
            if assistant_ids is not None:
                db_schedule.assistants = self._professors(assistant_ids)
            self.db.commit()
            self.db.refresh(db_schedule)
        return db_schedule

    def delete_schedule(self, schedule_id: str) -> bool:
        db_schedule = self.get_schedule_by_id(schedule_id)
        if not db_schedule:
            return False
        self.db.delete(db_schedule)
        self.db.commit()
        return True

    def delete_schedules_by_academy_id(self, academy_id: str, commit: bool = True) -> int:
        schedules = self.get_all_schedules(academy_id=academy_id)
        for schedule in schedules:
            self.db.delete(schedule)
        if commit:
            self.db.commit()
        return len(schedules)

    # --- Attendance Methods ---

    def get_attendance_records(
        self,
        student_ids: Optional[List[str]] = None,
        schedule_id: Optional[str] = None,
        date: Optional[str] = None,
    ) -> List[AttendanceRecord]:
        """
        Lists attendance, optionally narrowed. `student_ids=[]` means "no
        students visible" and yields an empty list.
        """
        query = self.db.query(AttendanceRecord)
        if student_ids is not None:
            if not student_ids:
                return []
            query = query.filter(AttendanceRecord.studentId.in_(student_ids))
        if schedule_id is not None:
            query = query.filter(AttendanceRecord.scheduleId == schedule_id)
        if date is not None:
            query = query.filter(AttendanceRecord.date == date)
        return query.order_by(AttendanceRecord.date.desc()).all()

    def get_attendance_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self.db.query(AttendanceRecord).filter(AttendanceRecord.id == record_id).first()

    def get_attendance_record(self, student_id: str, schedule_id: str, date: str) -> Optional[AttendanceRecord]:
        return (
            self.db.query(AttendanceRecord)
            .filter(
                AttendanceRecord.studentId == student_id,
                AttendanceRecord.scheduleId == schedule_id,
                AttendanceRecord.date == date,
            )
            .first()
        )

    def upsert_attendance(self, student_id: str, schedule_id: str, date: str, status: str) -> AttendanceRecord:
        """
        Saves attendance keyed on (student, schedule, date). An existing
        record has its status overwritten instead of being duplicated.
        """
        record = self.get_attendance_record(student_id, schedule_id, date)
        if record is None:
            record = AttendanceRecord(
                id=f"att_{uuid.uuid4().hex[:12]}",
                studentId=student_id,
                scheduleId=schedule_id,
                date=date,
            )
            self.db.add(record)
        record.status = status
        self.db.commit()
        self.db.refresh(record)
        return record

    def delete_attendance(self, record_id: str) -> bool:
        record = self.get_attendance_by_id(record_id)
        if not record:
            return False
        self.db.delete(record)
        self.db.commit()
        return True
