# /jiujitsu_hub/services/database_helpers/user_repository_sql.py

"""
Raw SQLAlchemy queries for the `users` table, including the lookups the
login and refresh flows depend on.
"""

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ...db.models.user_models import User
from ...db.models.student_models import Student


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_user_by_login(self, username: str) -> Optional[User]:
        """
        Finds the login identity for either an email address or a student's
        CPF. The CPF lives on the linked `students` row, hence the outer join.
        """
        return (
            self.db.query(User)
            .outerjoin(Student, User.studentId == Student.id)
            .filter(or_(User.email == username, Student.cpf == username))
            .first()
        )

    def get_user_by_student_id(self, student_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.studentId == student_id).first()

    def get_user_by_refresh_token(self, token: str) -> Optional[User]:
        return self.db.query(User).filter(User.refreshToken == token).first()

    def get_all_users(self, academy_id: Optional[str] = None) -> List[User]:
        query = self.db.query(User)
        if academy_id is not None:
            query = query.filter(User.academyId == academy_id)
        return query.order_by(User.name).all()

    def add_user(self, record: Dict, commit: bool = True) -> User:
        """Creates a new User. With `commit=False` the row is only flushed."""
        new_user = User(**record)
        self.db.add(new_user)
        if commit:
            self.db.commit()
            self.db.refresh(new_user)
        else:
            self.db.flush()
        return new_user

    def update_user(self, user_id: str, data: Dict, commit: bool = True) -> Optional[User]:
        db_user = self.get_user_by_id(user_id)
        if db_user:
            for key, value in data.items():
                setattr(db_user, key, value)
            if commit:
                self.db.commit()
                self.db.refresh(db_user)
            else:
                self.db.flush()
        return db_user

    def set_refresh_token(self, user_id: str, token: Optional[str], expires_at: Optional[datetime]) -> bool:
        db_user = self.get_user_by_id(user_id)
        if not db_user:
            return False
        db_user.refreshToken = token
        db_user.refreshTokenExpiresAt = expires_at
        self.db.commit()
        return True

    def delete_users_by_academy_id(self, academy_id: str, commit: bool = True) -> int:
        """Deletes admin users of an academy. Student users go with their Student."""
        users = (
            self.db.query(User)
            .filter(User.academyId == academy_id, User.studentId.is_(None))
            .all()
        )
        for user in users:
            self.db.delete(user)
        if commit:
            self.db.commit()
        return len(users)
