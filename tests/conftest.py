# /tests/conftest.py

"""
Shared fixtures.

Every test gets a brand-new in-memory SQLite database. The FastAPI app is
wired to the same session through a `get_db` override, so data seeded through
the service layer is immediately visible to HTTP calls and vice versa.
"""

import os

# Configuration is read at import time, so it must be in place before the
# application modules are imported.
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-enough-length-for-hs256")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jiujitsu_hub.core import security
from jiujitsu_hub.db.base import Base
from jiujitsu_hub.db.database import get_db
from jiujitsu_hub.main import app
from jiujitsu_hub.models.user_model import Role, TokenPayload
from jiujitsu_hub.services.database_service import DatabaseService
from jiujitsu_hub.services import academy_service, auth_service

TEST_PASSWORD = "senha123"


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(db_session):
    return DatabaseService(db_session)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# --- Seed Data ---

@pytest.fixture
def graduations(db):
    """The adult belt ladder, keyed by name."""
    belts = [
        {"id": "grad_branca", "name": "Branca", "color": "#ffffff", "minTimeInMonths": 0, "rank": 1, "type": "adult"},
        {"id": "grad_azul", "name": "Azul", "color": "#2563eb", "minTimeInMonths": 24, "rank": 2, "type": "adult"},
        {"id": "grad_roxa", "name": "Roxa", "color": "#7e22ce", "minTimeInMonths": 18, "rank": 3, "type": "adult"},
        {"id": "grad_marrom", "name": "Marrom", "color": "#78350f", "minTimeInMonths": 12, "rank": 4, "type": "adult"},
        {"id": "grad_preta", "name": "Preta", "color": "#000000", "minTimeInMonths": 36, "rank": 5, "type": "adult"},
    ]
    return {belt["name"]: db.add_graduation(belt) for belt in belts}


@pytest.fixture
def academy(db):
    academy, admin = academy_service.create_academy_with_admin(
        db,
        academy_data={"id": "acd_centro", "name": "Academia Centro", "email": "centro@academia.com"},
        password=TEST_PASSWORD,
        admin_name="Admin Centro",
    )
    return academy


@pytest.fixture
def other_academy(db):
    academy, _ = academy_service.create_academy_with_admin(
        db,
        academy_data={"id": "acd_norte", "name": "Academia Norte", "email": "norte@academia.com"},
        password=TEST_PASSWORD,
        admin_name="Admin Norte",
    )
    return academy


@pytest.fixture
def general_admin(db):
    _, user = academy_service.create_academy_with_admin(
        db,
        academy_data={"id": "master_admin_academy_01", "name": "Administração Geral", "email": "root@hub.com"},
        password=TEST_PASSWORD,
        admin_name="Root",
        role=Role.GENERAL_ADMIN,
    )
    return user


def token_for(user) -> str:
    return security.create_access_token(auth_service.build_claims(user))


def auth_header(user) -> dict:
    return {"Authorization": f"Bearer {token_for(user)}"}


@pytest.fixture
def academy_admin_headers(db, academy):
    return auth_header(db.get_user_by_email(academy.email))


@pytest.fixture
def other_admin_headers(db, other_academy):
    return auth_header(db.get_user_by_email(other_academy.email))


@pytest.fixture
def general_admin_headers(general_admin):
    return auth_header(general_admin)


@pytest.fixture
def headers_for():
    """Builds bearer headers for any User row."""
    return auth_header


def claims_for(user) -> TokenPayload:
    return TokenPayload(**auth_service.build_claims(user))


@pytest.fixture
def academy_admin_claims(db, academy):
    return claims_for(db.get_user_by_email(academy.email))


@pytest.fixture
def general_admin_claims(general_admin):
    return claims_for(general_admin)
