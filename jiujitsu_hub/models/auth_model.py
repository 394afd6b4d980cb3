# /jiujitsu_hub/models/auth_model.py

from typing import Optional
from pydantic import BaseModel, Field

from .user_model import User


class LoginRequest(BaseModel):
    username: str = Field(default="", description="An email address or a CPF (punctuation is ignored).")
    password: str = Field(default="")


class RefreshRequest(BaseModel):
    refreshToken: Optional[str] = None


class RegisterRequest(BaseModel):
    """Self-service sign up of a new academy together with its admin login."""
    name: str = Field(default="", description="The academy name.")
    address: Optional[str] = None
    responsible: Optional[str] = Field(default=None, description="The name of the person responsible for the academy.")
    responsibleRegistration: Optional[str] = None
    email: str = Field(default="")
    password: str = Field(default="")
    professorId: Optional[str] = None
    imageUrl: Optional[str] = None


class AuthResponse(BaseModel):
    user: User
    token: str
    refreshToken: str


class RefreshResponse(BaseModel):
    token: str


class SessionResponse(BaseModel):
    user: Optional[User] = None


class MessageResponse(BaseModel):
    message: str
