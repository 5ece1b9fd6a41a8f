from typing import Generator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from .config import settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    # SQLite needs cross-thread access for the TestClient and uvicorn workers
    if database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(database_url, echo=echo)


engine = build_engine(settings.database_url, echo=settings.debug)


def init_db(target: Optional[Engine] = None) -> None:
    # models must be imported so their tables are registered on the metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(target or engine)


def get_session() -> Generator[Session, None, None]:
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()
