# /jiujitsu_hub/db/models/settings_models.py

"""
ORM models for global, non-tenant data: the singleton `ThemeSettings` row,
the append-only `ActivityLog` audit trail and the read-only `NewsArticle`
feed.
"""

from sqlalchemy import Column, String, Integer, Float, Boolean, Text, DateTime
from sqlalchemy.sql import func

from ..base_class import Base


class ThemeSettings(Base):
    __tablename__ = "theme_settings"

    id = Column(Integer, primary_key=True, default=1)

    # Branding
    logoUrl = Column(String, nullable=True)
    systemName = Column(String(255), nullable=False, default="Jiu-Jitsu Hub")
    primaryColor = Column(String(16), nullable=True)
    secondaryColor = Column(String(16), nullable=True)
    backgroundColor = Column(String(16), nullable=True)
    cardBackgroundColor = Column(String(16), nullable=True)
    buttonColor = Column(String(16), nullable=True)
    buttonTextColor = Column(String(16), nullable=True)
    iconColor = Column(String(16), nullable=True)
    chartColor1 = Column(String(16), nullable=True)
    chartColor2 = Column(String(16), nullable=True)
    useGradient = Column(Boolean, nullable=False, default=True)
    theme = Column(String(16), nullable=False, default="light")

    # Billing
    reminderDaysBeforeDue = Column(Integer, nullable=False, default=5)
    overdueDaysAfterDue = Column(Integer, nullable=False, default=5)
    monthlyFeeAmount = Column(Float, nullable=False, default=150.0)
    pixKey = Column(String(255), nullable=True)
    pixHolderName = Column(String(255), nullable=True)

    # Public page
    publicPageEnabled = Column(Boolean, nullable=False, default=True)
    heroHtml = Column(Text, nullable=True)
    aboutHtml = Column(Text, nullable=True)
    branchesHtml = Column(Text, nullable=True)
    footerHtml = Column(Text, nullable=True)
    customCss = Column(Text, nullable=True)
    customJs = Column(Text, nullable=True)

    # Social login
    socialLoginEnabled = Column(Boolean, nullable=False, default=False)
    googleClientId = Column(String(255), nullable=True)
    facebookAppId = Column(String(255), nullable=True)

    copyrightText = Column(String(255), nullable=True)
    systemVersion = Column(String(32), nullable=True)


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(String(64), primary_key=True, index=True)
    actorId = Column(String(64), index=True, nullable=True)
    action = Column(String(255), nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), index=True, nullable=False)
    details = Column(Text, nullable=True)


class NewsArticle(Base):
    __tablename__ = "news_articles"

    id = Column(String(64), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    imageUrl = Column(String, nullable=True)
    date = Column(String(10), nullable=True)
