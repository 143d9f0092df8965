"""
Shared fixtures: an in-memory store, a TestClient bound to it, user/item/
report factories and a helper to act as a given user.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from app.db.db import Database, get_session
from app.main import app
from app.models.item import Item, ItemStatus
from app.models.loss_report import LossReport
from app.models.user import User
from app.utils.auth_helper import get_current_user_required, hash_password


@pytest.fixture
def db():
    database = Database("sqlite://", poolclass=StaticPool)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def session(db):
    with Session(db.engine) as session:
        yield session


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def auth_as(client):
    """Authenticate every following request as the given user."""

    def _set_user(user: User):
        app.dependency_overrides[get_current_user_required] = lambda: {"sub": str(user.id)}

    return _set_user


@pytest.fixture
def make_user(session):
    counter = {"n": 0}

    def _make(name: str = None, email: str = None, password: str = "secret123") -> User:
        counter["n"] += 1
        user = User(
            name=name or f"User {counter['n']}",
            email=email or f"user{counter['n']}@example.com",
            password_hash=hash_password(password),
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_item(session):
    def _make(owner: User, title: str = "Blue Backpack", location: str = "Central Park",
              status: ItemStatus = ItemStatus.found, **fields) -> Item:
        item = Item(
            owner_id=owner.id,
            title=title,
            description=fields.pop("description", "Found near the fountain"),
            category=fields.pop("category", "bags"),
            location=location,
            status=status,
            **fields,
        )
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    return _make


@pytest.fixture
def make_report(session):
    def _make(owner: User, description: str = "I lost my blue backpack near central park yesterday",
              **fields) -> LossReport:
        report = LossReport(
            owner_id=owner.id,
            report_type=fields.pop("report_type", "Lost"),
            incident_date=fields.pop("incident_date", datetime(2024, 5, 1, tzinfo=timezone.utc)),
            description=description,
            **fields,
        )
        session.add(report)
        session.commit()
        session.refresh(report)
        return report

    return _make
