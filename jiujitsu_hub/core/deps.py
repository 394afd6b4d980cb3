# /jiujitsu_hub/core/deps.py

"""
FastAPI dependencies that turn the `Authorization: Bearer <token>` header into
the caller's identity and enforce role requirements.

A missing token is a 401; a token that fails verification (bad signature,
expired, malformed claims) is a 403.
"""

import logging
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError

from . import security
from ..models.user_model import Role, TokenPayload

logger = logging.getLogger(__name__)

# auto_error=False so that we decide the status code for a missing header.
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenPayload:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Não autenticado (Token ausente).",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = security.decode_access_token(credentials.credentials)
        return TokenPayload(**claims)
    except (jwt.InvalidTokenError, ValidationError) as e:
        logger.info("Rejected access token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token inválido ou expirado.",
        )


def require_roles(*roles: Role):
    """
    Builds a dependency that only lets through callers whose role is one of
    `roles`. The dependency returns the caller's claims.
    """
    def _checker(current_user: TokenPayload = Depends(get_current_user)) -> TokenPayload:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Você não tem permissão para executar esta ação.",
            )
        return current_user
    return _checker


require_admin = require_roles(Role.GENERAL_ADMIN, Role.ACADEMY_ADMIN)
require_general_admin = require_roles(Role.GENERAL_ADMIN)
