# /jiujitsu_hub/services/academy_service.py

"""
Business logic for academies (tenants) and the admin logins attached to them.
"""

import logging
import uuid
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from ..core import security
from ..core.config import MASTER_ACADEMY_ID
from ..models import academy_model
from ..models.user_model import Role, TokenPayload
from .database_service import DatabaseService
from .access_helpers import can_access_academy
from . import activity_service

logger = logging.getLogger(__name__)


def create_academy_with_admin(
    db: DatabaseService,
    academy_data: dict,
    password: str,
    admin_name: Optional[str] = None,
    role: Role = Role.ACADEMY_ADMIN,
    assistant_ids: Optional[List[str]] = None,
) -> Tuple:
    """
    Inserts an academy and its admin user as one unit of work. Nothing is
    committed until both rows are flushed, and any failure rolls both back.
    """
    record = dict(academy_data)
    record.setdefault("id", f"acd_{uuid.uuid4().hex[:12]}")
    record["password"] = security.hash_password(password)
    try:
        academy = db.add_academy(record, assistant_ids=assistant_ids, commit=False)
        user = db.add_user(
            {
                "id": f"usr_{uuid.uuid4().hex[:12]}",
                "name": admin_name or academy.name,
                "email": academy.email,
                "role": role.value,
                "academyId": academy.id,
            },
            commit=False,
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    return academy, user


def get_all_academies(db: DatabaseService, current_user: TokenPayload) -> List:
    """General admins see every academy except the hidden master one; everyone else sees their own."""
    if current_user.role == Role.GENERAL_ADMIN:
        return db.get_all_academies(exclude_id=MASTER_ACADEMY_ID)
    academy = db.get_academy_by_id(current_user.academyId) if current_user.academyId else None
    return [academy] if academy else []


def get_academy(db: DatabaseService, academy_id: str, current_user: TokenPayload):
    if not can_access_academy(current_user, academy_id):
        return None
    return db.get_academy_by_id(academy_id)


def create_academy(db: DatabaseService, academy_in: academy_model.AcademyCreate, current_user: TokenPayload):
    if db.get_user_by_email(academy_in.email) or db.get_academy_by_email(academy_in.email):
        raise ValueError("Email já existe.")
    data = academy_in.model_dump(exclude={"password", "assistantIds"})
    try:
        academy, _ = create_academy_with_admin(
            db,
            academy_data=data,
            password=academy_in.password,
            admin_name=academy_in.responsible,
            assistant_ids=academy_in.assistantIds,
        )
    except IntegrityError:
        raise ValueError("Email já existe.")
    activity_service.log_action(db, current_user.id, "Academia criada", f"Academia '{academy.name}' criada.")
    return academy


def update_academy(
    db: DatabaseService,
    academy_id: str,
    academy_update: academy_model.AcademyUpdate,
    current_user: TokenPayload,
):
    """
    Updates an academy. Changing the email also moves the admin's login
    email, since the admin's password hash is found through it.
    """
    academy = get_academy(db, academy_id, current_user)
    if academy is None:
        return None

    update_data = academy_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    assistant_ids = update_data.pop("assistantIds", None)

    new_password = update_data.pop("password", None)
    if new_password:
        update_data["password"] = security.hash_password(new_password)

    new_email = update_data.get("email")
    if new_email and new_email != academy.email:
        existing = db.get_user_by_email(new_email)
        if existing or db.get_academy_by_email(new_email):
            raise ValueError("Email já existe.")
        admin_user = db.get_user_by_email(academy.email)
        if admin_user and admin_user.academyId == academy.id:
            db.update_user(admin_user.id, {"email": new_email}, commit=False)

    updated = db.update_academy(academy_id, update_data, assistant_ids=assistant_ids)
    activity_service.log_action(db, current_user.id, "Academia atualizada", f"Academia '{updated.name}' atualizada.")
    return updated


def delete_academy(db: DatabaseService, academy_id: str, current_user: TokenPayload) -> bool:
    """
    Deletes an academy together with its students (and their logins), its
    class schedules and its admin users.
    """
    if academy_id == MASTER_ACADEMY_ID:
        raise ValueError("A academia de administração geral não pode ser excluída.")
    academy = db.get_academy_by_id(academy_id)
    if academy is None:
        return False
    name = academy.name
    try:
        db.delete_students_by_academy_id(academy_id, commit=False)
        db.delete_schedules_by_academy_id(academy_id, commit=False)
        db.delete_users_by_academy_id(academy_id, commit=False)
        db.delete_academy(academy_id, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.warning("Academy %s deleted by %s.", academy_id, current_user.id)
    activity_service.log_action(db, current_user.id, "Academia excluída", f"Academia '{name}' excluída.")
    return True
