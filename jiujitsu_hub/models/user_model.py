# /jiujitsu_hub/models/user_model.py

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    GENERAL_ADMIN = "general_admin"
    ACADEMY_ADMIN = "academy_admin"
    STUDENT = "student"


class User(BaseModel):
    """The public shape of a login identity. Never carries credentials."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: Role
    academyId: Optional[str] = None
    studentId: Optional[str] = None
    birthDate: Optional[str] = None


class TokenPayload(BaseModel):
    """The decoded claims of an access token."""
    id: str
    email: str
    role: Role
    academyId: Optional[str] = None
    studentId: Optional[str] = None
    name: Optional[str] = None
