import importlib

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from blogapi.db import init_db
from blogapi.store import SessionStore


@pytest.fixture()
def engine():
    # one shared in-memory connection so every session sees the same data
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def schema(engine):
    init_db(engine)
    return engine


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def store(session, engine):
    return SessionStore(session, engine)


@pytest.fixture()
def app_modules(tmp_path, monkeypatch):
    # point the app at a throwaway SQLite file before reloading it
    test_db_path = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{test_db_path}")
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("SEED_ON_STARTUP", "true")
    monkeypatch.delenv("SEED_DEMO_PASSWORD", raising=False)

    import blogapi.config as config
    import blogapi.db as db
    import blogapi.main as main

    importlib.reload(config)
    importlib.reload(db)
    importlib.reload(main)
    assert str(test_db_path) in str(db.engine.url)
    yield config, db, main
    db.engine.dispose()
    monkeypatch.undo()
    importlib.reload(config)
    importlib.reload(db)
    importlib.reload(main)


@pytest.fixture()
def client(app_modules):
    _, _, main = app_modules
    with TestClient(main.app) as client:
        yield client

