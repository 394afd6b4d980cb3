# /jiujitsu_hub/models/academy_model.py

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class AcademyBase(BaseModel):
    name: str = Field(..., min_length=2)
    address: Optional[str] = None
    responsible: Optional[str] = None
    responsibleRegistration: Optional[str] = None
    professorId: Optional[str] = None
    assistantIds: List[str] = Field(default_factory=list)
    imageUrl: Optional[str] = None
    email: str = Field(..., description="Login email of the academy admin.")


class AcademyCreate(AcademyBase):
    password: str = Field(..., min_length=1)


class AcademyUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2)
    address: Optional[str] = None
    responsible: Optional[str] = None
    responsibleRegistration: Optional[str] = None
    professorId: Optional[str] = None
    assistantIds: Optional[List[str]] = None
    imageUrl: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class Academy(AcademyBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
