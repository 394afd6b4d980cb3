# /jiujitsu_hub/routers/settings_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import require_admin, require_general_admin
from ..models.settings_model import ThemeSettings
from ..models.user_model import TokenPayload
from ..services import settings_service, activity_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=ThemeSettings, summary="Get Public Theme Settings")
def get_public_settings(db: DatabaseService = Depends(get_db_service)):
    """Unauthenticated; used by the login and public pages. Never fails."""
    return settings_service.get_public_settings(db)


@router.get("/all", response_model=ThemeSettings, summary="Get All Settings")
def get_all_settings(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    return settings_service.get_all_settings(db)


@router.put("", response_model=ThemeSettings, summary="Update Settings")
def update_settings(
    settings_update: ThemeSettings,
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_general_admin),
):
    try:
        updated = settings_service.update_settings(db, settings_update)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    activity_service.log_action(db, current_user.id, "Configurações atualizadas", "Configurações do sistema alteradas.")
    return updated
