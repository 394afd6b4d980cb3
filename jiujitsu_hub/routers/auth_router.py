# /jiujitsu_hub/routers/auth_router.py

"""
This module defines the public-facing API for all authentication-related actions.

It includes endpoints for:
- Logging in with an email or CPF (`/login`)
- Exchanging a refresh token for a new access token (`/refresh`)
- Self-service academy registration (`/register`)
- Logging out (`/logout`)
- Checking the current session (`/session`)

The router only translates between HTTP and the `auth_service`; it does not
know where password hashes live or how tokens are built.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

# --- Application-specific Imports ---
from ..core.deps import bearer_scheme, get_current_user
from ..models.auth_model import (
    AuthResponse, LoginRequest, MessageResponse, RefreshRequest, RefreshResponse,
    RegisterRequest, SessionResponse,
)
from ..models.user_model import TokenPayload, User
from ..services import auth_service
from ..services.database_service import DatabaseService, get_db_service

# --- Router Initialization ---
router = APIRouter()


@router.post("/login", response_model=AuthResponse, summary="Log In With Email or CPF")
def login(payload: LoginRequest, db: DatabaseService = Depends(get_db_service)):
    try:
        result = auth_service.login(db, username=payload.username, password=payload.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciais inválidas.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result


@router.post("/refresh", response_model=RefreshResponse, summary="Get a New Access Token")
def refresh(payload: RefreshRequest, db: DatabaseService = Depends(get_db_service)):
    if not payload.refreshToken:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Refresh token ausente.")
    token = auth_service.refresh_access_token(db, payload.refreshToken)
    if token is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Refresh token inválido ou expirado.")
    return RefreshResponse(token=token)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED, summary="Register a New Academy")
def register(payload: RegisterRequest, db: DatabaseService = Depends(get_db_service)):
    """
    Creates an academy with its admin login and returns a token pair for it.
    A duplicate email or a missing required field is a 400.
    """
    try:
        return auth_service.register_academy(db, payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/logout", response_model=MessageResponse, summary="Log Out")
def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: DatabaseService = Depends(get_db_service),
):
    auth_service.logout(db, credentials.credentials if credentials else None)
    return MessageResponse(message="Logout realizado com sucesso.")


@router.get("/session", response_model=SessionResponse, summary="Get the Current Session")
def read_session(
    current_user: TokenPayload = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    user = auth_service.get_session_user(db, current_user.id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Sessão inválida.")
    return SessionResponse(user=User.model_validate(user))
