# /jiujitsu_hub/models/professor_model.py

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class ProfessorBase(BaseModel):
    name: str = Field(..., min_length=2)
    registration: Optional[str] = None
    cpf: Optional[str] = None
    academyId: Optional[str] = None
    graduationId: Optional[str] = None
    imageUrl: Optional[str] = None
    blackBeltDate: Optional[str] = None


class ProfessorCreate(ProfessorBase):
    pass


class ProfessorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2)
    registration: Optional[str] = None
    cpf: Optional[str] = None
    academyId: Optional[str] = None
    graduationId: Optional[str] = None
    imageUrl: Optional[str] = None
    blackBeltDate: Optional[str] = None


class Professor(ProfessorBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
