# /jiujitsu_hub/services/activity_service.py

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from .database_service import DatabaseService

logger = logging.getLogger(__name__)

RECENT_LOG_LIMIT = 100


def log_action(db: DatabaseService, actor_id: Optional[str], action: str, details: str = ""):
    """Appends an entry to the audit trail."""
    logger.info("Activity [%s] by %s: %s", action, actor_id or "system", details)
    return db.add_activity_log(
        {
            "id": f"log_{uuid.uuid4().hex[:12]}",
            "actorId": actor_id,
            "action": action,
            "timestamp": datetime.now(timezone.utc),
            "details": details,
        }
    )


def get_recent_logs(db: DatabaseService) -> List:
    return db.get_recent_activity_logs(limit=RECENT_LOG_LIMIT)
