# /jiujitsu_hub/services/settings_service.py

"""
Business logic for the singleton theme settings row.

The public endpoint must never fail, because the login page and the public
marketing page both render from it: when the row is missing or the database
is unreachable, built-in defaults are returned instead.
"""

import logging
from typing import Dict

from sqlalchemy.exc import SQLAlchemyError

from ..models.settings_model import ThemeSettings
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict = {
    "logoUrl": "https://tailwindui.com/img/logos/mark.svg?color=amber&shade=500",
    "systemName": "Jiu-Jitsu Hub",
    "primaryColor": "#f59e0b",
    "secondaryColor": "#111827",
    "backgroundColor": "#f8fafc",
    "cardBackgroundColor": "#ffffff",
    "buttonColor": "#f59e0b",
    "buttonTextColor": "#ffffff",
    "iconColor": "#64748b",
    "chartColor1": "#f9a825",
    "chartColor2": "#475569",
    "useGradient": True,
    "theme": "light",
    "reminderDaysBeforeDue": 5,
    "overdueDaysAfterDue": 5,
    "monthlyFeeAmount": 150.0,
    "pixKey": "",
    "pixHolderName": "",
    "publicPageEnabled": True,
    "heroHtml": (
        '<div class="relative bg-white text-slate-800 text-center py-20 px-4">'
        '<h1 class="text-5xl font-bold mb-4">Jiu-Jitsu: Arte, Disciplina, Respeito</h1>'
        '<p class="text-xl text-slate-600">Transforme sua vida dentro e fora do tatame. Junte-se à nossa família.</p>'
        '<a href="#filiais" class="mt-8 inline-block bg-amber-500 text-white font-bold py-3 px-8 rounded-lg">Encontre uma Academia</a>'
        "</div>"
    ),
    "aboutHtml": (
        '<div id="quem-somos" class="py-16 bg-slate-50 px-4"><div class="container mx-auto text-center">'
        '<h2 class="text-4xl font-bold text-amber-600 mb-6">Quem Somos</h2>'
        '<p class="text-lg text-slate-600 max-w-3xl mx-auto">Somos mais do que uma academia, somos uma comunidade '
        "unida pela paixão pelo Jiu-Jitsu.</p></div></div>"
    ),
    "branchesHtml": (
        '<div id="filiais" class="py-16 bg-white px-4"><div class="container mx-auto text-center">'
        '<h2 class="text-4xl font-bold text-amber-600 mb-10">Nossas Filiais</h2>'
        '<p class="text-slate-600">Aqui você pode listar suas academias.</p></div></div>'
    ),
    "footerHtml": (
        '<div class="py-8 bg-slate-100 text-center text-slate-500"><p>{{{copyright_line}}}</p>'
        "<p>Desenvolvido com a Arte Suave em mente.</p></div>"
    ),
    "customCss": "html { scroll-behavior: smooth; }",
    "customJs": "",
    "socialLoginEnabled": False,
    "googleClientId": "",
    "facebookAppId": "",
    "copyrightText": "ABILDEVELOPER",
    "systemVersion": "1.2.0",
}

# Columns of the settings row that cannot be cleared.
REQUIRED_FIELDS = (
    "systemName", "useGradient", "theme", "reminderDaysBeforeDue", "overdueDaysAfterDue",
    "monthlyFeeAmount", "publicPageEnabled", "socialLoginEnabled",
)


def ensure_default_settings(db: DatabaseService) -> None:
    """Seeds the settings row on first start. A no-op when it already exists."""
    if db.get_settings() is None:
        logger.info("Seeding default theme settings.")
        db.create_settings(dict(DEFAULT_SETTINGS))


def get_public_settings(db: DatabaseService) -> ThemeSettings:
    try:
        settings = db.get_settings()
    except SQLAlchemyError as e:
        logger.error("Error fetching settings (returning defaults): %s", e)
        db.rollback()
        settings = None
    if settings is None:
        return ThemeSettings(**DEFAULT_SETTINGS)
    return ThemeSettings.model_validate(settings)


def get_all_settings(db: DatabaseService) -> ThemeSettings:
    settings = db.get_settings()
    if settings is None:
        settings = db.create_settings(dict(DEFAULT_SETTINGS))
    return ThemeSettings.model_validate(settings)


def get_settings_dict(db: DatabaseService) -> Dict:
    """Settings as a plain dict, falling back to defaults for missing keys."""
    settings = db.get_settings()
    if settings is None:
        return dict(DEFAULT_SETTINGS)
    stored = ThemeSettings.model_validate(settings).model_dump(exclude_none=True)
    return {**DEFAULT_SETTINGS, **stored}


def update_settings(db: DatabaseService, settings_update: ThemeSettings) -> ThemeSettings:
    update_data = settings_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    missing = [field for field in REQUIRED_FIELDS if field in update_data and update_data[field] is None]
    if missing:
        raise ValueError(f"Campo obrigatório não pode ser vazio: {', '.join(missing)}.")
    if db.get_settings() is None:
        db.create_settings(dict(DEFAULT_SETTINGS))
    updated = db.update_settings(update_data)
    return ThemeSettings.model_validate(updated)
