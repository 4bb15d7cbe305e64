"""
pytest shared fixtures

Every test gets a fresh in-memory SQLite database. API tests talk to the
real FastAPI app through TestClient with ``get_db`` pointed at that
database.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from growth_tracker.db import models, session
from growth_tracker.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(bind=engine)
    yield engine
    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[session.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Insert a user directly; returns the ORM row."""
    counter = {"n": 0}

    def _make_user(role="Employee", manager_id=None, department=None, email=None):
        counter["n"] += 1
        user = models.User(
            email=email or f"user{counter['n']}@example.com",
            first_name="Test",
            last_name=f"User{counter['n']}",
            role=role,
            department=department,
            manager_id=manager_id,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_goal(db):
    def _make_goal(employee_id, manager_id=None, status="Draft", priority="Medium", title="Ship the thing", **extra):
        goal = models.Goal(
            title=title,
            description="Described",
            priority=priority,
            employee_id=employee_id,
            manager_id=manager_id,
            status=status,
            **extra,
        )
        db.add(goal)
        db.commit()
        db.refresh(goal)
        return goal

    return _make_goal
