# /jiujitsu_hub/routers/academies_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import require_admin, require_general_admin
from ..models import academy_model
from ..models.user_model import TokenPayload
from ..services import academy_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[academy_model.Academy], summary="Get All Visible Academies")
def get_all_academies(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    return academy_service.get_all_academies(db, current_user)


@router.post("", response_model=academy_model.Academy, status_code=status.HTTP_201_CREATED, summary="Create an Academy")
def create_academy(
    academy_create: academy_model.AcademyCreate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_general_admin),
):
    try:
        return academy_service.create_academy(db, academy_create, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{academy_id}", response_model=academy_model.Academy, summary="Update an Academy")
def update_academy(
    academy_id: str,
    academy_update: academy_model.AcademyUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    """Academy admins can only update their own academy."""
    try:
        updated = academy_service.update_academy(db, academy_id, academy_update, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Academia {academy_id} não encontrada.")
    return updated


@router.delete("/{academy_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Academy")
def delete_academy(
    academy_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_general_admin),
):
    try:
        was_deleted = academy_service.delete_academy(db, academy_id, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Academia {academy_id} não encontrada.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
