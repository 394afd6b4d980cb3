# /jiujitsu_hub/services/schedule_service.py

import logging
import uuid
from typing import List

from ..models import schedule_model
from ..models.user_model import TokenPayload, Role
from .database_service import DatabaseService
from .access_helpers import scope_academy_id, can_access_academy
from .graduation_helpers import belt_rules
from . import activity_service

logger = logging.getLogger(__name__)


def get_all_schedules(db: DatabaseService, current_user: TokenPayload) -> List:
    return db.get_all_schedules(academy_id=scope_academy_id(current_user))


def get_schedule(db: DatabaseService, schedule_id: str, current_user: TokenPayload):
    schedule = db.get_schedule_by_id(schedule_id)
    if schedule is None or not can_access_academy(current_user, schedule.academyId):
        return None
    return schedule


def create_schedule(db: DatabaseService, schedule_in: schedule_model.ScheduleCreate, current_user: TokenPayload):
    record = schedule_in.model_dump(mode="json", exclude={"assistantIds"})
    if current_user.role == Role.ACADEMY_ADMIN:
        record["academyId"] = current_user.academyId
    record["id"] = f"sch_{uuid.uuid4().hex[:12]}"
    schedule = db.add_schedule(record, assistant_ids=schedule_in.assistantIds)
    activity_service.log_action(db, current_user.id, "Horário criado", f"Aula '{schedule.className}' criada.")
    return schedule


def update_schedule(
    db: DatabaseService,
    schedule_id: str,
    schedule_update: schedule_model.ScheduleUpdate,
    current_user: TokenPayload,
):
    if get_schedule(db, schedule_id, current_user) is None:
        return None
    update_data = schedule_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    assistant_ids = update_data.pop("assistantIds", None)
    if current_user.role == Role.ACADEMY_ADMIN:
        update_data.pop("academyId", None)
    updated = db.update_schedule(schedule_id, update_data, assistant_ids=assistant_ids)
    activity_service.log_action(db, current_user.id, "Horário atualizado", f"Aula '{updated.className}' atualizada.")
    return updated


def delete_schedule(db: DatabaseService, schedule_id: str, current_user: TokenPayload) -> bool:
    """Deleting a schedule also removes its attendance records."""
    schedule = get_schedule(db, schedule_id, current_user)
    if schedule is None:
        return False
    name = schedule.className
    db.delete_schedule(schedule_id)
    logger.warning("Schedule %s deleted by %s.", schedule_id, current_user.id)
    activity_service.log_action(db, current_user.id, "Horário excluído", f"Aula '{name}' excluída.")
    return True


def get_eligible_students(db: DatabaseService, schedule_id: str, current_user: TokenPayload):
    """
    Students of the schedule's academy whose belt ranks at least as high as
    the class requirement. Returns None when the schedule is not visible.
    """
    schedule = get_schedule(db, schedule_id, current_user)
    if schedule is None:
        return None
    graduations = {g.id: g for g in db.get_all_graduations()}
    required = graduations.get(schedule.requiredGraduationId)
    return [
        student for student in db.get_all_students(academy_id=schedule.academyId)
        if belt_rules.is_eligible_for_class(graduations.get(student.beltId), required)
    ]
