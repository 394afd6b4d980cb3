# /jiujitsu_hub/models/graduation_model.py

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class GraduationType(str, Enum):
    ADULT = "adult"
    KIDS = "kids"


class GraduationBase(BaseModel):
    name: str = Field(..., min_length=1, description="Belt name, e.g. 'Branca', 'Azul', 'Preta'.")
    color: Optional[str] = Field(default=None, description="CSS color used to draw the belt.")
    minTimeInMonths: int = Field(default=0, ge=0)
    rank: int = Field(default=0, description="Ordering key. Higher means more advanced.")
    type: GraduationType = GraduationType.ADULT
    minAge: Optional[int] = Field(default=None, ge=0)
    maxAge: Optional[int] = Field(default=None, ge=0)


class GraduationCreate(GraduationBase):
    pass


class GraduationUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    color: Optional[str] = None
    minTimeInMonths: Optional[int] = Field(default=None, ge=0)
    rank: Optional[int] = None
    type: Optional[GraduationType] = None
    minAge: Optional[int] = Field(default=None, ge=0)
    maxAge: Optional[int] = Field(default=None, ge=0)


class Graduation(GraduationBase):
    model_config = ConfigDict(from_attributes=True)

    id: str


class RankUpdate(BaseModel):
    id: str
    rank: int
