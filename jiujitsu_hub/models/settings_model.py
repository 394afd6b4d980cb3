# /jiujitsu_hub/models/settings_model.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ThemeSettings(BaseModel):
    """
    Branding, billing thresholds and public-page content. There is exactly
    one settings row; every field is optional on update so the admin screen
    can send partial forms.
    """
    model_config = ConfigDict(from_attributes=True)

    logoUrl: Optional[str] = None
    systemName: Optional[str] = None
    primaryColor: Optional[str] = None
    secondaryColor: Optional[str] = None
    backgroundColor: Optional[str] = None
    cardBackgroundColor: Optional[str] = None
    buttonColor: Optional[str] = None
    buttonTextColor: Optional[str] = None
    iconColor: Optional[str] = None
    chartColor1: Optional[str] = None
    chartColor2: Optional[str] = None
    useGradient: Optional[bool] = None
    theme: Optional[str] = None

    reminderDaysBeforeDue: Optional[int] = Field(default=None, ge=0)
    overdueDaysAfterDue: Optional[int] = Field(default=None, ge=0)
    monthlyFeeAmount: Optional[float] = Field(default=None, ge=0)
    pixKey: Optional[str] = None
    pixHolderName: Optional[str] = None

    publicPageEnabled: Optional[bool] = None
    heroHtml: Optional[str] = None
    aboutHtml: Optional[str] = None
    branchesHtml: Optional[str] = None
    footerHtml: Optional[str] = None
    customCss: Optional[str] = None
    customJs: Optional[str] = None

    socialLoginEnabled: Optional[bool] = None
    googleClientId: Optional[str] = None
    facebookAppId: Optional[str] = None

    copyrightText: Optional[str] = None
    systemVersion: Optional[str] = None
