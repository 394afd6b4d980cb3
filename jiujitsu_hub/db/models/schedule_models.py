# /jiujitsu_hub/db/models/schedule_models.py

from sqlalchemy import Column, String, Table, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base

schedule_assistants = Table(
    "schedule_assistants",
    Base.metadata,
    Column("scheduleId", String(64), ForeignKey("class_schedules.id", ondelete="CASCADE"), primary_key=True),
    Column("professorId", String(64), ForeignKey("professors.id", ondelete="CASCADE"), primary_key=True),
)


class ClassSchedule(Base):
    """A recurring weekly class slot with a minimum belt requirement."""
    __tablename__ = "class_schedules"

    id = Column(String(64), primary_key=True, index=True)
    className = Column(String(255), nullable=False)
    dayOfWeek = Column(String(32), nullable=False)
    startTime = Column(String(5), nullable=False)  # HH:MM
    endTime = Column(String(5), nullable=False)
    professorId = Column(String(64), nullable=True)
    academyId = Column(String(64), index=True, nullable=True)
    requiredGraduationId = Column(String(64), nullable=True)

    assistants = relationship("Professor", secondary=schedule_assistants, lazy="selectin")
    attendance = relationship("AttendanceRecord", back_populates="schedule", cascade="all, delete-orphan")

    @property
    def assistantIds(self):
        return [p.id for p in self.assistants]


class AttendanceRecord(Base):
    """
    One student's presence in one class on one date. The
    (studentId, scheduleId, date) triple is the natural key.
    """
    __tablename__ = "attendance_records"
    __table_args__ = (
        UniqueConstraint("studentId", "scheduleId", "date", name="uq_attendance_student_schedule_date"),
    )

    id = Column(String(64), primary_key=True, index=True)
    studentId = Column(String(64), ForeignKey("students.id", ondelete="CASCADE"), index=True, nullable=False)
    scheduleId = Column(String(64), ForeignKey("class_schedules.id", ondelete="CASCADE"), index=True, nullable=False)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD
    status = Column(String(16), nullable=False)  # present | absent

    schedule = relationship("ClassSchedule", back_populates="attendance")
