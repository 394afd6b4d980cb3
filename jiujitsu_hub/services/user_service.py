# /jiujitsu_hub/services/user_service.py

"""
Read-only directory listings: login identities and news articles.
"""

from typing import List

from ..models.user_model import TokenPayload
from .database_service import DatabaseService
from .access_helpers import scope_academy_id


def get_all_users(db: DatabaseService, current_user: TokenPayload) -> List:
    """General admins see every login; academy admins only their own academy's."""
    return db.get_all_users(academy_id=scope_academy_id(current_user))


def get_all_news(db: DatabaseService) -> List:
    return db.get_all_news()
