# /jiujitsu_hub/routers/directory_router.py

"""
Read-only listings mounted directly under /api: login identities, the audit
trail and news articles.
"""

from typing import List

from fastapi import APIRouter, Depends

from ..core.deps import get_current_user, require_admin
from ..models.activity_model import ActivityLog, NewsArticle
from ..models.user_model import TokenPayload, User
from ..services import activity_service, user_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("/users", response_model=List[User], summary="Get All Visible Users")
def get_all_users(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    return user_service.get_all_users(db, current_user)


@router.get("/logs", response_model=List[ActivityLog], summary="Get the Latest Activity Logs")
def get_logs(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(require_admin),
):
    return activity_service.get_recent_logs(db)


@router.get("/news", response_model=List[NewsArticle], summary="Get News Articles")
def get_news(
    db: DatabaseService = Depends(get_db_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    return user_service.get_all_news(db)
