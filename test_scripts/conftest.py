# Shared fixtures: in-memory SQLite schema and seeded organizations/briefs
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure project root on sys.path for `app` imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Never touch a real database from tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

from app.db.base import Base
from app.db.models import Organization, ProjectBrief

logger = logging.getLogger(__name__)

TEST_SECRET = "test-secret"


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db):
    """Two orgs: one with its own prioritization settings, one relying on app defaults."""
    org = Organization(
        name="Acme",
        document_settings={
            "prioritization_framework": "ice",
            "enabled_prioritization_frameworks": ["simple", "ice", "rice", "moscow", "value_effort"],
        },
    )
    plain_org = Organization(name="Plain", document_settings=None)
    db.add_all([org, plain_org])
    db.flush()

    brief = ProjectBrief(org_id=org.id, title="Checkout redesign")
    plain_brief = ProjectBrief(org_id=plain_org.id, title="Help center search")
    db.add_all([brief, plain_brief])
    db.commit()

    logger.info("test-bootstrap: seeded orgs and briefs")
    return {
        "org_id": org.id,
        "brief_id": brief.id,
        "plain_org_id": plain_org.id,
        "plain_brief_id": plain_brief.id,
    }


@pytest.fixture
def shared_secret(monkeypatch):
    monkeypatch.setenv("BRIEF_REVIEW_SECRET", TEST_SECRET)
    return TEST_SECRET


def _detach_json_logging():
    app_logger = logging.getLogger("app")
    app_logger.handlers = []
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """setup_json_logging() detaches the `app` logger from root (importing app.main does it too)."""
    _detach_json_logging()
    yield
    _detach_json_logging()
