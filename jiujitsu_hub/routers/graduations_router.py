# /jiujitsu_hub/routers/graduations_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Response

from ..core.deps import get_current_user, require_general_admin
from ..models import graduation_model
from ..models.user_model import TokenPayload
from ..services import graduation_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[graduation_model.Graduation], summary="Get All Graduations by Rank")
def get_all_graduations(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    return graduation_service.get_all_graduations(db)


@router.post("", response_model=graduation_model.Graduation, status_code=status.HTTP_201_CREATED, summary="Create a Graduation")
def create_graduation(
    graduation_create: graduation_model.GraduationCreate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_general_admin),
):
    return graduation_service.create_graduation(db, graduation_create, current_user)


# Declared before /{graduation_id} so "ranks" is not captured as an id.
@router.put("/ranks", response_model=List[graduation_model.Graduation], summary="Reorder Graduations")
def update_ranks(
    ranks: List[graduation_model.RankUpdate],
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_general_admin),
):
    return graduation_service.update_ranks(db, ranks, current_user)


@router.put("/{graduation_id}", response_model=graduation_model.Graduation, summary="Update a Graduation")
def update_graduation(
    graduation_id: str,
    graduation_update: graduation_model.GraduationUpdate,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_general_admin),
):
    try:
        updated = graduation_service.update_graduation(db, graduation_id, graduation_update, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Graduação {graduation_id} não encontrada.")
    return updated


@router.delete("/{graduation_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Graduation")
def delete_graduation(
    graduation_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_general_admin),
):
    if not graduation_service.delete_graduation(db, graduation_id, current_user):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Graduação {graduation_id} não encontrada.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
