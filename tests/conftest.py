"""Shared fixtures: an isolated in-memory database per test."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from uuid import uuid4

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_TIMEZONE", "UTC")


@pytest.fixture()
def engine():
    from app.infrastructure import models  # noqa: F401
    from app.infrastructure.database import Base

    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_listing(session):
    """Insert a listing owned by ``owner_id`` and return its identifier."""

    from app.infrastructure.models import ListingModel

    def _make(owner_id: str = "owner-1", *, is_available: bool = True) -> str:
        listing_id = str(uuid4())
        session.add(
            ListingModel(
                id=listing_id,
                owner_id=owner_id,
                name="Mini excavator",
                is_available=is_available,
            )
        )
        session.commit()
        return listing_id

    return _make
