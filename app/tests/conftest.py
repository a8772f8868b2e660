from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.config.database import Base, build_session_factory
from app.main import create_app

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine() -> Iterator[Engine]:
    """A fresh in-memory store with the users table in place."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Iterator[Session]:
    """Create a fresh database session for each test."""
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(engine: Engine) -> FastAPI:
    return create_app(engine=engine)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a test client bound to the in-memory store."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unavailable_client(tmp_path) -> Iterator[TestClient]:
    """A client whose store cannot be opened at all."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
    with TestClient(create_app(engine=engine)) as test_client:
        yield test_client
    engine.dispose()
