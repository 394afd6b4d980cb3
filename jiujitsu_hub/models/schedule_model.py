# /jiujitsu_hub/models/schedule_model.py

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class DayOfWeek(str, Enum):
    MONDAY = "Segunda-feira"
    TUESDAY = "Terça-feira"
    WEDNESDAY = "Quarta-feira"
    THURSDAY = "Quinta-feira"
    FRIDAY = "Sexta-feira"
    SATURDAY = "Sábado"
    SUNDAY = "Domingo"


class ScheduleBase(BaseModel):
    className: str = Field(..., min_length=1)
    dayOfWeek: DayOfWeek
    startTime: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    endTime: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    professorId: Optional[str] = None
    assistantIds: List[str] = Field(default_factory=list)
    academyId: Optional[str] = None
    requiredGraduationId: Optional[str] = Field(default=None, description="Minimum belt needed to attend.")


class ScheduleCreate(ScheduleBase):
    pass


class ScheduleUpdate(BaseModel):
    className: Optional[str] = Field(default=None, min_length=1)
    dayOfWeek: Optional[DayOfWeek] = None
    startTime: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    endTime: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    professorId: Optional[str] = None
    assistantIds: Optional[List[str]] = None
    academyId: Optional[str] = None
    requiredGraduationId: Optional[str] = None


class Schedule(ScheduleBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
