# /jiujitsu_hub/models/finance_model.py

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field


class PaymentWindow(BaseModel):
    """Where a student stands relative to their monthly due date."""
    studentId: str
    name: str
    phone: Optional[str] = None
    paymentDueDateDay: int
    lastDueDate: date
    nextDueDate: date
    daysUntilNextDue: int
    daysSinceLastDue: int


class FinanceReminders(BaseModel):
    reminders: List[PaymentWindow] = Field(default_factory=list)
    overdue: List[PaymentWindow] = Field(default_factory=list)
