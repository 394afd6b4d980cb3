# /jiujitsu_hub/services/auth_service.py

"""
Business logic for the authentication flow: login, token refresh, academy
self-registration, logout and the master admin bootstrap.

Credentials are spread over two tables. A User row is the login identity,
but the bcrypt hash lives on the linked Student (role `student`) or on the
Academy whose email matches (admin roles). This module is the only place
that knows how to find the right hash.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import jwt
from sqlalchemy.exc import IntegrityError

from ..core import security
from ..core.config import ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME, MASTER_ACADEMY_ID
from ..db.models.user_models import User as UserModel
from ..models.auth_model import AuthResponse, RegisterRequest
from ..models.user_model import Role, User
from .database_service import DatabaseService
from .access_helpers import normalize_cpf
from . import academy_service, activity_service

logger = logging.getLogger(__name__)


# --- Helpers ---

def normalize_username(username: str) -> str:
    """Emails are used as typed; anything else is treated as a CPF and reduced to digits."""
    username = (username or "").strip()
    if "@" in username:
        return username
    return normalize_cpf(username)


def build_claims(user: UserModel) -> Dict:
    return {
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "academyId": user.academyId,
        "studentId": user.studentId,
        "name": user.name,
    }


def _password_hash_for(db: DatabaseService, user: UserModel) -> Optional[str]:
    if user.role == Role.STUDENT.value:
        if not user.studentId:
            return None
        student = db.get_student_by_id(user.studentId)
        return student.password if student else None
    if user.role in (Role.ACADEMY_ADMIN.value, Role.GENERAL_ADMIN.value):
        academy = db.get_academy_by_email(user.email)
        return academy.password if academy else None
    return None


def _issue_tokens(db: DatabaseService, user: UserModel) -> AuthResponse:
    access_token = security.create_access_token(build_claims(user))
    refresh_token, expires_at = security.create_refresh_token()
    db.set_refresh_token(user.id, refresh_token, expires_at)
    return AuthResponse(user=User.model_validate(user), token=access_token, refreshToken=refresh_token)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timezone-aware columns back as naive datetimes.
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


# --- Public Service Functions ---

def authenticate_user(db: DatabaseService, username: str, password: str) -> Optional[UserModel]:
    """Returns the User when the credentials are valid, otherwise None."""
    login_name = normalize_username(username)
    if not login_name:
        return None
    user = db.get_user_by_login(login_name)
    if not user:
        logger.info("Login failed: no user for '%s'.", login_name)
        return None
    if not security.verify_password(password, _password_hash_for(db, user)):
        logger.info("Login failed: wrong password for user %s.", user.id)
        return None
    return user


def login(db: DatabaseService, username: str, password: str) -> Optional[AuthResponse]:
    """
    Authenticates and issues a token pair. Raises ValueError when a field is
    missing; returns None for bad credentials.
    """
    if not username or not password:
        raise ValueError("Credenciais faltando.")
    user = authenticate_user(db, username, password)
    if user is None:
        return None
    logger.info("User %s (%s) logged in.", user.id, user.role)
    return _issue_tokens(db, user)


def refresh_access_token(db: DatabaseService, refresh_token: str) -> Optional[str]:
    """
    Exchanges a stored, unexpired refresh token for a new access token. The
    refresh token itself is not rotated. Returns None when the token is
    unknown or expired.
    """
    user = db.get_user_by_refresh_token(refresh_token)
    if user is None:
        logger.info("Refresh rejected: unknown token.")
        return None
    expires_at = user.refreshTokenExpiresAt
    if expires_at is None or _as_utc(expires_at) <= datetime.now(timezone.utc):
        logger.info("Refresh rejected: token expired for user %s.", user.id)
        return None
    return security.create_access_token(build_claims(user))


def register_academy(db: DatabaseService, payload: RegisterRequest) -> AuthResponse:
    """
    Creates an academy and its admin user in one transaction, then logs the
    new admin in. Raises ValueError on missing fields or a duplicate email.
    """
    if not payload.email or not payload.password or not payload.name:
        raise ValueError("Campos obrigatórios faltando.")
    if db.get_user_by_email(payload.email) or db.get_academy_by_email(payload.email):
        raise ValueError("Email já existe.")

    try:
        academy, user = academy_service.create_academy_with_admin(
            db,
            academy_data={
                "name": payload.name,
                "address": payload.address,
                "responsible": payload.responsible,
                "responsibleRegistration": payload.responsibleRegistration,
                "professorId": payload.professorId,
                "imageUrl": payload.imageUrl,
                "email": payload.email,
            },
            password=payload.password,
            admin_name=payload.responsible or payload.name,
        )
    except IntegrityError:
        db.rollback()
        raise ValueError("Email já existe.")

    activity_service.log_action(db, user.id, "Academia cadastrada", f"Nova academia '{academy.name}' ({payload.email}).")
    return _issue_tokens(db, user)


def logout(db: DatabaseService, access_token: Optional[str]) -> None:
    """
    Clears the caller's stored refresh token. Works with an expired access
    token; an unreadable or missing token is simply ignored.
    """
    if not access_token:
        return
    try:
        claims = security.decode_access_token_unverified_expiry(access_token)
    except jwt.InvalidTokenError:
        logger.info("Logout with unreadable token ignored.")
        return
    user_id = claims.get("id")
    if user_id:
        db.set_refresh_token(user_id, None, None)
        logger.info("User %s logged out.", user_id)


def get_session_user(db: DatabaseService, user_id: str) -> Optional[UserModel]:
    return db.get_user_by_id(user_id)


def ensure_master_admin(db: DatabaseService) -> None:
    """
    Guarantees a general admin exists when ADMIN_EMAIL/ADMIN_PASSWORD are
    configured. The admin's hash lives on a hidden master academy row.
    """
    if not ADMIN_EMAIL or not ADMIN_PASSWORD:
        return
    if db.get_user_by_email(ADMIN_EMAIL):
        return
    logger.info("Creating master admin account for %s.", ADMIN_EMAIL)
    academy_service.create_academy_with_admin(
        db,
        academy_data={"id": MASTER_ACADEMY_ID, "name": "Administração Geral", "email": ADMIN_EMAIL},
        password=ADMIN_PASSWORD,
        admin_name=ADMIN_NAME,
        role=Role.GENERAL_ADMIN,
    )
