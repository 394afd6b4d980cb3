# /jiujitsu_hub/services/database_helpers/settings_repository_sql.py

"""
Raw SQLAlchemy queries for the global tables: the singleton theme settings
row, the activity log and the news feed.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ...db.models.settings_models import ThemeSettings, ActivityLog, NewsArticle

SETTINGS_ROW_ID = 1


class SettingsRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Theme Settings ---

    def get_settings(self) -> Optional[ThemeSettings]:
        return self.db.query(ThemeSettings).filter(ThemeSettings.id == SETTINGS_ROW_ID).first()

    def create_settings(self, record: Dict) -> ThemeSettings:
        settings = ThemeSettings(id=SETTINGS_ROW_ID, **record)
        self.db.add(settings)
        self.db.commit()
        self.db.refresh(settings)
        return settings

    def update_settings(self, data: Dict) -> Optional[ThemeSettings]:
        settings = self.get_settings()
        if settings:
            for key, value in data.items():
                setattr(settings, key, value)
            self.db.commit()
            self.db.refresh(settings)
        return settings

    # --- Activity Log ---

    def add_activity_log(self, record: Dict) -> ActivityLog:
        entry = ActivityLog(**record)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def get_recent_activity_logs(self, limit: int = 100) -> List[ActivityLog]:
        return self.db.query(ActivityLog).order_by(ActivityLog.timestamp.desc()).limit(limit).all()

    # --- News ---

    def get_all_news(self) -> List[NewsArticle]:
        return self.db.query(NewsArticle).order_by(NewsArticle.date.desc()).all()
