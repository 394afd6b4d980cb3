# /jiujitsu_hub/services/access_helpers.py

"""
Role scoping and identifier normalization shared by every service.

General admins see everything; academy admins and students only see rows of
their own academy; students additionally only see their own student record.
"""

import re
from typing import Optional

from ..models.user_model import Role, TokenPayload


def normalize_cpf(cpf: Optional[str]) -> str:
    """CPFs are stored and compared as digits only."""
    return re.sub(r"\D", "", cpf or "")


def scope_academy_id(current_user: TokenPayload) -> Optional[str]:
    """
    The academy filter to apply for this caller. `None` means unrestricted.
    A non-general user without an academy gets an id that matches nothing.
    """
    if current_user.role == Role.GENERAL_ADMIN:
        return None
    return current_user.academyId or ""


def can_access_academy(current_user: TokenPayload, academy_id: Optional[str]) -> bool:
    if current_user.role == Role.GENERAL_ADMIN:
        return True
    return bool(current_user.academyId) and academy_id == current_user.academyId


def can_access_student(current_user: TokenPayload, student) -> bool:
    if student is None:
        return False
    if current_user.role == Role.STUDENT:
        return student.id == current_user.studentId
    return can_access_academy(current_user, student.academyId)
