# /jiujitsu_hub/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import require_admin
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.dashboard_model import DashboardSummary
from ..models.user_model import TokenPayload

# --- APIRouter Instance ---
router = APIRouter()


# --- Endpoint Definition ---
@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Retrieves the counts, payment split, birthdays and attendance rates for the admin home page."
)
def get_dashboard_summary(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    """
    A thin router: it only resolves the caller and delegates the
    aggregation to the dashboard service.
    """
    return dashboard_service.get_summary_data(db=db, current_user=current_user)
