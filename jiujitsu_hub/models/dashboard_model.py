# /jiujitsu_hub/models/dashboard_model.py

# --- Core Imports ---
from typing import Dict, List
from pydantic import BaseModel, Field

# --- Model Definition ---


class BirthdayEntry(BaseModel):
    name: str
    type: str = Field(..., description="'Aluno' for students, 'Professor' for staff users.")


class DashboardSummary(BaseModel):
    """
    Defines the data contract for the response of the dashboard summary endpoint.
    It feeds the admin home page cards and charts.
    """

    studentCount: int = Field(..., description="Students visible to the caller.", examples=[112])
    academyCount: int = Field(..., description="Academies visible to the caller.", examples=[4])
    professorCount: int = Field(..., examples=[9])
    scheduleCount: int = Field(..., examples=[21])
    paidCount: int = Field(..., description="Students whose monthly fee is paid.")
    unpaidCount: int = Field(..., description="Students whose monthly fee is unpaid.")
    birthdaysToday: List[BirthdayEntry] = Field(default_factory=list)
    attendanceRateByDay: Dict[str, float] = Field(
        default_factory=dict,
        description="Share of 'present' records per weekday name, from 0 to 100.",
    )
