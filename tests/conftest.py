# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from worklog.database import Base, get_db
from worklog.schemas.work_log import WorkLogCreate, WorkLogOut
from worklog.services.work_log_service import WorkLogService


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """
    In-memory SQLite store shared by every session of a test.

    Plain CRUD, listing and counters run here for real; the Postgres-only
    statements (ranked search, bucket series) are checked by compiling them.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def service(db: Session) -> WorkLogService:
    return WorkLogService(db)


@pytest.fixture()
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def make_log(service: WorkLogService):
    """Create a log through the service with sensible defaults"""

    def _make(task_name: str, **fields) -> WorkLogOut:
        payload = {"taskName": task_name, "taskType": "task", "taskStatus": "backlog", **fields}
        return service.create_log(WorkLogCreate(**payload))

    return _make
