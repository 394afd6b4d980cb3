# /jiujitsu_hub/services/professor_service.py

import logging
import uuid
from typing import List

from ..models import professor_model
from ..models.user_model import TokenPayload, Role
from .database_service import DatabaseService
from .access_helpers import scope_academy_id, can_access_academy, normalize_cpf
from . import activity_service

logger = logging.getLogger(__name__)


def get_all_professors(db: DatabaseService, current_user: TokenPayload) -> List:
    return db.get_all_professors(academy_id=scope_academy_id(current_user))


def get_professor(db: DatabaseService, professor_id: str, current_user: TokenPayload):
    professor = db.get_professor_by_id(professor_id)
    if professor is None or not can_access_academy(current_user, professor.academyId):
        return None
    return professor


def create_professor(db: DatabaseService, professor_in: professor_model.ProfessorCreate, current_user: TokenPayload):
    """Academy admins always create professors inside their own academy."""
    record = professor_in.model_dump()
    record["cpf"] = normalize_cpf(record.get("cpf")) or None
    if current_user.role == Role.ACADEMY_ADMIN:
        record["academyId"] = current_user.academyId
    record["id"] = f"prof_{uuid.uuid4().hex[:12]}"
    professor = db.add_professor(record)
    activity_service.log_action(db, current_user.id, "Professor criado", f"Professor '{professor.name}' criado.")
    return professor


def update_professor(
    db: DatabaseService,
    professor_id: str,
    professor_update: professor_model.ProfessorUpdate,
    current_user: TokenPayload,
):
    if get_professor(db, professor_id, current_user) is None:
        return None
    update_data = professor_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    if current_user.role == Role.ACADEMY_ADMIN:
        update_data.pop("academyId", None)
    if "cpf" in update_data:
        update_data["cpf"] = normalize_cpf(update_data["cpf"]) or None
    updated = db.update_professor(professor_id, update_data)
    activity_service.log_action(db, current_user.id, "Professor atualizado", f"Professor '{updated.name}' atualizado.")
    return updated


def delete_professor(db: DatabaseService, professor_id: str, current_user: TokenPayload) -> bool:
    professor = get_professor(db, professor_id, current_user)
    if professor is None:
        return False
    name = professor.name
    db.delete_professor(professor_id)
    logger.warning("Professor %s deleted by %s.", professor_id, current_user.id)
    activity_service.log_action(db, current_user.id, "Professor excluído", f"Professor '{name}' excluído.")
    return True
