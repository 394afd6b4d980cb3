# /jiujitsu_hub/services/database_service.py

from datetime import datetime
from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from ..db.database import get_db

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.student_repository_sql import StudentRepositorySQL
from .database_helpers.academy_repository_sql import AcademyRepositorySQL
from .database_helpers.graduation_repository_sql import GraduationRepositorySQL
from .database_helpers.schedule_repository_sql import ScheduleRepositorySQL
from .database_helpers.settings_repository_sql import SettingsRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        A single facade over every SQL repository, bound to one request-scoped
        session. Services only ever talk to this class.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.session = db_session
        self.user_repo = UserRepositorySQL(db_session)
        self.student_repo = StudentRepositorySQL(db_session)
        self.academy_repo = AcademyRepositorySQL(db_session)
        self.graduation_repo = GraduationRepositorySQL(db_session)
        self.schedule_repo = ScheduleRepositorySQL(db_session)
        self.settings_repo = SettingsRepositorySQL(db_session)

    # --- TRANSACTION CONTROL ---
    # Used by multi-statement flows that pass `commit=False` to the repositories.
    def commit(self): self.session.commit()
    def rollback(self): self.session.rollback()

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: str): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_email(self, email: str): return self.user_repo.get_user_by_email(email)
    def get_user_by_login(self, username: str): return self.user_repo.get_user_by_login(username)
    def get_user_by_student_id(self, student_id: str): return self.user_repo.get_user_by_student_id(student_id)
    def get_user_by_refresh_token(self, token: str): return self.user_repo.get_user_by_refresh_token(token)
    def get_all_users(self, academy_id: Optional[str] = None) -> List: return self.user_repo.get_all_users(academy_id)
    def add_user(self, record: Dict, commit: bool = True): return self.user_repo.add_user(record, commit=commit)
    def update_user(self, user_id: str, data: Dict, commit: bool = True): return self.user_repo.update_user(user_id, data, commit=commit)
    def set_refresh_token(self, user_id: str, token: Optional[str], expires_at: Optional[datetime]) -> bool: return self.user_repo.set_refresh_token(user_id, token, expires_at)
    def delete_users_by_academy_id(self, academy_id: str, commit: bool = True) -> int: return self.user_repo.delete_users_by_academy_id(academy_id, commit=commit)

    # --- STUDENT & PAYMENT METHODS (DELEGATED) ---
    def get_all_students(self, academy_id: Optional[str] = None) -> List: return self.student_repo.get_all_students(academy_id)
    def get_student_by_id(self, student_id: str): return self.student_repo.get_student_by_id(student_id)
    def get_student_by_cpf(self, cpf: str): return self.student_repo.get_student_by_cpf(cpf)
    def add_student(self, record: Dict, commit: bool = True): return self.student_repo.add_student(record, commit=commit)
    def update_student(self, student_id: str, data: Dict, commit: bool = True): return self.student_repo.update_student(student_id, data, commit=commit)
    def delete_student(self, student_id: str, commit: bool = True) -> bool: return self.student_repo.delete_student(student_id, commit=commit)
    def delete_students_by_academy_id(self, academy_id: str, commit: bool = True) -> int: return self.student_repo.delete_students_by_academy_id(academy_id, commit=commit)
    def add_payment(self, record: Dict, commit: bool = True): return self.student_repo.add_payment(record, commit=commit)

    # --- ACADEMY & PROFESSOR METHODS (DELEGATED) ---
    def get_all_academies(self, exclude_id: Optional[str] = None) -> List: return self.academy_repo.get_all_academies(exclude_id)
    def get_academy_by_id(self, academy_id: str): return self.academy_repo.get_academy_by_id(academy_id)
    def get_academy_by_email(self, email: str): return self.academy_repo.get_academy_by_email(email)
    def add_academy(self, record: Dict, assistant_ids: Optional[List[str]] = None, commit: bool = True): return self.academy_repo.add_academy(record, assistant_ids, commit=commit)
    def update_academy(self, academy_id: str, data: Dict, assistant_ids: Optional[List[str]] = None): return self.academy_repo.update_academy(academy_id, data, assistant_ids)
    def delete_academy(self, academy_id: str, commit: bool = True) -> bool: return self.academy_repo.delete_academy(academy_id, commit=commit)
    def get_all_professors(self, academy_id: Optional[str] = None) -> List: return self.academy_repo.get_all_professors(academy_id)
    def get_professor_by_id(self, professor_id: str): return self.academy_repo.get_professor_by_id(professor_id)
    def get_professor_by_cpf(self, cpf: str): return self.academy_repo.get_professor_by_cpf(cpf)
    def add_professor(self, record: Dict, commit: bool = True): return self.academy_repo.add_professor(record, commit=commit)
    def update_professor(self, professor_id: str, data: Dict): return self.academy_repo.update_professor(professor_id, data)
    def delete_professor(self, professor_id: str) -> bool: return self.academy_repo.delete_professor(professor_id)

    # --- GRADUATION METHODS (DELEGATED) ---
    def get_all_graduations(self) -> List: return self.graduation_repo.get_all_graduations()
    def get_graduation_by_id(self, graduation_id: str): return self.graduation_repo.get_graduation_by_id(graduation_id)
    def add_graduation(self, record: Dict): return self.graduation_repo.add_graduation(record)
    def update_graduation(self, graduation_id: str, data: Dict): return self.graduation_repo.update_graduation(graduation_id, data)
    def update_graduation_ranks(self, ranks: List[Dict]) -> int: return self.graduation_repo.update_ranks(ranks)
    def delete_graduation(self, graduation_id: str) -> bool: return self.graduation_repo.delete_graduation(graduation_id)

    # --- SCHEDULE & ATTENDANCE METHODS (DELEGATED) ---
    def get_all_schedules(self, academy_id: Optional[str] = None) -> List: return self.schedule_repo.get_all_schedules(academy_id)
    def get_schedule_by_id(self, schedule_id: str): return self.schedule_repo.get_schedule_by_id(schedule_id)
    def add_schedule(self, record: Dict, assistant_ids: Optional[List[str]] = None): return self.schedule_repo.add_schedule(record, assistant_ids)
    def update_schedule(self, schedule_id: str, data: Dict, assistant_ids: Optional[List[str]] = None): return self.schedule_repo.update_schedule(schedule_id, data, assistant_ids)
    def delete_schedule(self, schedule_id: str) -> bool: return self.schedule_repo.delete_schedule(schedule_id)
    def delete_schedules_by_academy_id(self, academy_id: str, commit: bool = True) -> int: return self.schedule_repo.delete_schedules_by_academy_id(academy_id, commit=commit)
    def get_attendance_records(self, student_ids: Optional[List[str]] = None, schedule_id: Optional[str] = None, date: Optional[str] = None) -> List: return self.schedule_repo.get_attendance_records(student_ids, schedule_id, date)
    def get_attendance_by_id(self, record_id: str): return self.schedule_repo.get_attendance_by_id(record_id)
    def upsert_attendance(self, student_id: str, schedule_id: str, date: str, status: str): return self.schedule_repo.upsert_attendance(student_id, schedule_id, date, status)
    def delete_attendance(self, record_id: str) -> bool: return self.schedule_repo.delete_attendance(record_id)

    # --- SETTINGS, ACTIVITY LOG & NEWS METHODS (DELEGATED) ---
    def get_settings(self): return self.settings_repo.get_settings()
    def create_settings(self, record: Dict): return self.settings_repo.create_settings(record)
    def update_settings(self, data: Dict): return self.settings_repo.update_settings(data)
    def add_activity_log(self, record: Dict): return self.settings_repo.add_activity_log(record)
    def get_recent_activity_logs(self, limit: int = 100) -> List: return self.settings_repo.get_recent_activity_logs(limit)
    def get_all_news(self) -> List: return self.settings_repo.get_all_news()


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request's session.
    """
    yield DatabaseService(db_session=db)
