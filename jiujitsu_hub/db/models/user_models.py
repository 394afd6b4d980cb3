# /jiujitsu_hub/db/models/user_models.py

"""
This module defines the SQLAlchemy ORM model for `User`, the login identity.

A User never stores a password itself. Students keep their hash on the
`students` row and admins on the `academies` row, so the login flow has to
join across tables depending on the role.
"""

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    role = Column(String(32), nullable=False)  # general_admin | academy_admin | student
    academyId = Column(String(64), index=True, nullable=True)
    studentId = Column(String(64), ForeignKey("students.id", ondelete="CASCADE"), unique=True, nullable=True)
    birthDate = Column(String(10), nullable=True)

    refreshToken = Column(String(255), index=True, nullable=True)
    refreshTokenExpiresAt = Column(DateTime(timezone=True), nullable=True)

    student = relationship("Student", back_populates="user")
