"""Pytest fixtures: an in-memory database per test and the app wired to it."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from todo_api.db import models  # noqa: F401
from todo_api.db.session import get_session
from todo_api.main import app
from todo_ui.rpc import RpcClient

API = "http://testserver/api/v1"


@pytest.fixture
def engine():
    """Fresh in-memory SQLite shared across connections via StaticPool."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Session:
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine) -> TestClient:
    """Test client whose requests hit the per-test database."""

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def rpc(client: TestClient) -> RpcClient:
    """RpcClient talking to the app in-process."""
    return RpcClient(API, session=client)
