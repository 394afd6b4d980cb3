# /jiujitsu_hub/routers/schedules_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_current_user, require_admin
from ..models import schedule_model, student_model
from ..models.user_model import TokenPayload
from ..services import schedule_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _not_found(schedule_id: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Horário {schedule_id} não encontrado.")


@router.get("", response_model=List[schedule_model.Schedule], summary="Get All Visible Schedules")
def get_all_schedules(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    return schedule_service.get_all_schedules(db, current_user)


@router.post("", response_model=schedule_model.Schedule, status_code=status.HTTP_201_CREATED, summary="Create a Schedule")
def create_schedule(
    schedule_create: schedule_model.ScheduleCreate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    return schedule_service.create_schedule(db, schedule_create, current_user)


@router.put("/{schedule_id}", response_model=schedule_model.Schedule, summary="Update a Schedule")
def update_schedule(
    schedule_id: str,
    schedule_update: schedule_model.ScheduleUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    try:
        updated = schedule_service.update_schedule(db, schedule_id, schedule_update, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise _not_found(schedule_id)
    return updated


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Schedule")
def delete_schedule(
    schedule_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    if not schedule_service.delete_schedule(db, schedule_id, current_user):
        raise _not_found(schedule_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{schedule_id}/eligible-students", response_model=List[student_model.Student], summary="Get Students Eligible for a Class")
def get_eligible_students(
    schedule_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    students = schedule_service.get_eligible_students(db, schedule_id, current_user)
    if students is None:
        raise _not_found(schedule_id)
    return students
