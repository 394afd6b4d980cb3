# /jiujitsu_hub/models/attendance_model.py

from datetime import date
from enum import Enum
from pydantic import BaseModel, ConfigDict


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class AttendanceSave(BaseModel):
    """
    The payload for saving attendance. Saving the same
    (studentId, scheduleId, date) again overwrites the status.
    """
    studentId: str
    scheduleId: str
    date: date
    status: AttendanceStatus


class AttendanceRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    studentId: str
    scheduleId: str
    date: str
    status: AttendanceStatus
