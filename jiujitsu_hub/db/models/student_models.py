# /jiujitsu_hub/db/models/student_models.py

"""
ORM models for `Student` and its append-only `Payment` history.

A Student always owns exactly one User row (role `student`). The relationship
below cascades deletes so that removing a Student never leaves an orphaned
login behind.
"""

from sqlalchemy import Column, String, Integer, Float, Boolean, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    email = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)
    birthDate = Column(String(10), nullable=True)  # YYYY-MM-DD
    cpf = Column(String(14), unique=True, index=True, nullable=False)
    registration = Column(String(64), nullable=True)
    phone = Column(String(32), nullable=True)
    address = Column(String(500), nullable=True)

    beltId = Column(String(64), nullable=True)
    academyId = Column(String(64), index=True, nullable=True)
    firstGraduationDate = Column(String(10), nullable=True)
    lastPromotionDate = Column(String(10), nullable=True)
    stripes = Column(Integer, nullable=False, default=0)

    paymentStatus = Column(String(16), nullable=False, default="unpaid")
    paymentDueDateDay = Column(Integer, nullable=True)

    isCompetitor = Column(Boolean, nullable=False, default=False)
    lastCompetition = Column(String(255), nullable=True)
    medals = Column(JSON, nullable=True)
    imageUrl = Column(String, nullable=True)

    user = relationship("User", back_populates="student", uselist=False, cascade="all, delete-orphan")
    paymentHistory = relationship(
        "Payment", back_populates="student", cascade="all, delete-orphan",
        order_by="Payment.date", lazy="selectin",
    )


class Payment(Base):
    __tablename__ = "payment_history"

    id = Column(String(64), primary_key=True, index=True)
    studentId = Column(String(64), ForeignKey("students.id", ondelete="CASCADE"), index=True, nullable=False)
    date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    amount = Column(Float, nullable=False, default=0.0)

    student = relationship("Student", back_populates="paymentHistory")
