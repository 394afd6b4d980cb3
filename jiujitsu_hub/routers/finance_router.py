# /jiujitsu_hub/routers/finance_router.py

from fastapi import APIRouter, Depends

from ..core.deps import require_admin
from ..models.finance_model import FinanceReminders
from ..models.user_model import TokenPayload
from ..services import finance_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/reminders",
    response_model=FinanceReminders,
    summary="Get Payment Reminders and Overdue Students",
    description="Classifies unpaid students by their monthly due day, using the thresholds from the settings.",
)
def get_reminders(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    return finance_service.get_reminders(db, current_user)
