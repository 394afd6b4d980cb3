# /jiujitsu_hub/models/activity_model.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ActivityLog(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    actorId: Optional[str] = None
    action: str
    timestamp: datetime
    details: Optional[str] = None


class NewsArticle(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    content: Optional[str] = None
    imageUrl: Optional[str] = None
    date: Optional[str] = None
