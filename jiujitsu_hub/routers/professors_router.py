# /jiujitsu_hub/routers/professors_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_current_user, require_admin
from ..models import professor_model
from ..models.user_model import TokenPayload
from ..services import professor_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[professor_model.Professor], summary="Get All Visible Professors")
def get_all_professors(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    return professor_service.get_all_professors(db, current_user)


@router.post("", response_model=professor_model.Professor, status_code=status.HTTP_201_CREATED, summary="Create a Professor")
def create_professor(
    professor_create: professor_model.ProfessorCreate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    return professor_service.create_professor(db, professor_create, current_user)


@router.put("/{professor_id}", response_model=professor_model.Professor, summary="Update a Professor")
def update_professor(
    professor_id: str,
    professor_update: professor_model.ProfessorUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    try:
        updated = professor_service.update_professor(db, professor_id, professor_update, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Professor {professor_id} não encontrado.")
    return updated


@router.delete("/{professor_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Professor")
def delete_professor(
    professor_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    if not professor_service.delete_professor(db, professor_id, current_user):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Professor {professor_id} não encontrado.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
