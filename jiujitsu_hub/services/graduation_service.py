# /jiujitsu_hub/services/graduation_service.py

"""
Business logic for the belt catalogue. Graduations are global: every role
can read them, only the general admin can change them.
"""

import uuid
from typing import List

from ..models import graduation_model
from ..models.user_model import TokenPayload
from .database_service import DatabaseService
from . import activity_service


def get_all_graduations(db: DatabaseService) -> List:
    return db.get_all_graduations()


def create_graduation(db: DatabaseService, graduation_in: graduation_model.GraduationCreate, current_user: TokenPayload):
    record = {"id": f"grad_{uuid.uuid4().hex[:12]}", **graduation_in.model_dump(mode="json")}
    graduation = db.add_graduation(record)
    activity_service.log_action(db, current_user.id, "Graduação criada", f"Graduação '{graduation.name}' criada.")
    return graduation


def update_graduation(
    db: DatabaseService,
    graduation_id: str,
    graduation_update: graduation_model.GraduationUpdate,
    current_user: TokenPayload,
):
    update_data = graduation_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    updated = db.update_graduation(graduation_id, update_data)
    if updated is not None:
        activity_service.log_action(db, current_user.id, "Graduação atualizada", f"Graduação '{updated.name}' atualizada.")
    return updated


def update_ranks(db: DatabaseService, ranks: List[graduation_model.RankUpdate], current_user: TokenPayload) -> List:
    """
    Applies a client-side reordering. Ids that no longer exist are ignored.
    Returns the catalogue in its new order.
    """
    count = db.update_graduation_ranks([r.model_dump() for r in ranks])
    activity_service.log_action(db, current_user.id, "Graduações reordenadas", f"{count} graduações reordenadas.")
    return db.get_all_graduations()


def delete_graduation(db: DatabaseService, graduation_id: str, current_user: TokenPayload) -> bool:
    graduation = db.get_graduation_by_id(graduation_id)
    if graduation is None:
        return False
    name = graduation.name
    db.delete_graduation(graduation_id)
    activity_service.log_action(db, current_user.id, "Graduação excluída", f"Graduação '{name}' excluída.")
    return True
