from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEMO_MODE"] = "false"

from datetime import date, timedelta
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from db.base import Base
from db.deps import get_db
from routers.timeline import router as timeline_router
from schemas.goal import GoalIn

TODAY = date(2026, 1, 1)


def make_goal(goal_id: str, target_date: date, **overrides) -> GoalIn:
    fields = {
        "id": goal_id,
        "title": f"Goal {goal_id}",
        "amount": 1000.0,
        "currency": "USD",
        "bucket": "growth",
        "target_date": target_date,
    }
    fields.update(overrides)
    return GoalIn(**fields)


def goal_in_days(goal_id: str, days: int, **overrides) -> GoalIn:
    return make_goal(goal_id, TODAY + timedelta(days=days), **overrides)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def db_session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session: Session) -> Iterator[TestClient]:
    app = FastAPI()
    app.include_router(timeline_router, prefix="/timeline")

    def _get_db() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def goal_on():
    """Factory: goal with an explicit target date."""
    return make_goal


@pytest.fixture
def goal_in():
    """Factory: goal dated a number of days after TODAY."""
    return goal_in_days
