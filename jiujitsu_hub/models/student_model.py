# /jiujitsu_hub/models/student_model.py

# --- Core Imports ---
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

# --- Model Definitions ---


class PaymentStatus(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"


class Medals(BaseModel):
    gold: int = Field(default=0, ge=0)
    silver: int = Field(default=0, ge=0)
    bronze: int = Field(default=0, ge=0)


class Payment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: datetime
    amount: float


class StudentBase(BaseModel):
    """
    The fields an admin edits on the student form. Contains fields common to
    create and update operations.
    """
    name: str = Field(..., min_length=2, description="The full name of the student.")
    email: str = Field(..., description="Contact email, also used as the student's login.")
    birthDate: Optional[str] = Field(default=None, description="Birth date as YYYY-MM-DD.")
    cpf: str = Field(..., description="Brazilian tax id. Stored with punctuation removed.")
    registration: Optional[str] = Field(default=None, description="Federation registration number.")
    phone: Optional[str] = None
    address: Optional[str] = None
    beltId: Optional[str] = None
    academyId: Optional[str] = None
    firstGraduationDate: Optional[str] = None
    lastPromotionDate: Optional[str] = None
    paymentDueDateDay: Optional[int] = Field(default=None, ge=1, le=31)
    stripes: int = Field(default=0, ge=0, le=10)
    isCompetitor: bool = False
    lastCompetition: Optional[str] = None
    medals: Medals = Field(default_factory=Medals)
    imageUrl: Optional[str] = None


class StudentCreate(StudentBase):
    """New students get a default password when none is provided."""
    password: Optional[str] = Field(default=None, description="Plain-text password, hashed before storage.")


class StudentUpdate(BaseModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates.
    """
    name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[str] = None
    password: Optional[str] = None
    birthDate: Optional[str] = None
    cpf: Optional[str] = None
    registration: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    beltId: Optional[str] = None
    academyId: Optional[str] = None
    firstGraduationDate: Optional[str] = None
    lastPromotionDate: Optional[str] = None
    paymentDueDateDay: Optional[int] = Field(default=None, ge=1, le=31)
    stripes: Optional[int] = Field(default=None, ge=0, le=10)
    isCompetitor: Optional[bool] = None
    lastCompetition: Optional[str] = None
    medals: Optional[Medals] = None
    imageUrl: Optional[str] = None


class Student(StudentBase):
    """
    The full representation of a Student resource, as it is returned by the
    API. The password hash is never exposed.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    paymentStatus: PaymentStatus = PaymentStatus.UNPAID
    paymentHistory: List[Payment] = Field(default_factory=list)
    medals: Optional[Medals] = None


class PaymentUpdate(BaseModel):
    status: PaymentStatus
    amount: Optional[float] = Field(default=None, ge=0, description="Defaults to the configured monthly fee.")


class BeltProgress(BaseModel):
    currentBeltId: Optional[str] = None
    currentBeltName: Optional[str] = None
    nextBeltId: Optional[str] = None
    nextBeltName: Optional[str] = None
    monthsInBelt: int = 0
    requiredMonths: int = 0
    progressPercent: int = 0
    trainingYears: int = 0
    trainingMonths: int = 0


class PromotionEligibility(BaseModel):
    eligible: bool
    nextBeltId: Optional[str] = None
    nextBeltName: Optional[str] = None
    reason: str
