from fastapi.testclient import TestClient
from sqlmodel import Session, select

from blogapi.models import Comment, Post, User


def _counts(engine):
    with Session(engine) as session:
        return (
            len(session.exec(select(User)).all()),
            len(session.exec(select(Post)).all()),
            len(session.exec(select(Comment)).all()),
        )


def test_root_reports_service(client: TestClient):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "service": "Blog API"}


def test_startup_seeds_demo_data(client: TestClient, app_modules):
    _, db, _ = app_modules
    assert _counts(db.engine) == (4, 4, 1)


def test_restart_does_not_duplicate_rows(app_modules):
    _, db, main = app_modules
    with TestClient(main.app):
        pass
    with TestClient(main.app):
        pass
    assert _counts(db.engine) == (4, 4, 1)


def test_startup_without_seeding_only_creates_schema(app_modules, monkeypatch):
    _, db, main = app_modules
    monkeypatch.setattr(main.settings, "seed_on_startup", False)
    with TestClient(main.app) as client:
        assert client.get("/").status_code == 200
    assert _counts(db.engine) == (0, 0, 0)
