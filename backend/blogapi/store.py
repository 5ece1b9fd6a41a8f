"""Persistence collaborator used by the seeder.

``SeedStore`` names the handful of operations seeding needs so that any
backend can drive it; ``SessionStore`` is the SQLModel implementation used by
the application.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, Type, TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlmodel import Session, SQLModel, select

from .db import init_db
from .errors import LookupFailure

ModelT = TypeVar("ModelT", bound=SQLModel)


class SeedStore(Protocol):
    def ensure_schema(self) -> None:
        ...

    def any(self, model: Type[SQLModel], *conditions: Any) -> bool:
        ...

    def single(self, model: Type[ModelT], **criteria: Any) -> ModelT:
        ...

    def first(self, model: Type[ModelT]) -> Optional[ModelT]:
        ...

    def add_all(self, rows: Iterable[SQLModel]) -> None:
        ...

    def save(self) -> None:
        ...


class SessionStore:
    """``SeedStore`` backed by a SQLModel session.

    Errors raised by SQLAlchemy while flushing or committing are not caught
    here; they reach the caller unchanged.
    """

    def __init__(self, session: Session, engine: Optional[Engine] = None) -> None:
        self.session = session
        self.engine = engine

    def ensure_schema(self) -> None:
        init_db(self.engine or self.session.get_bind())

    def any(self, model: Type[SQLModel], *conditions: Any) -> bool:
        statement = select(model)
        if conditions:
            statement = statement.where(*conditions)
        return self.session.exec(statement.limit(1)).first() is not None

    def single(self, model: Type[ModelT], **criteria: Any) -> ModelT:
        statement = select(model)
        for key, value in criteria.items():
            statement = statement.where(getattr(model, key) == value)
        try:
            return self.session.exec(statement).one()
        except NoResultFound:
            raise LookupFailure(model.__name__, criteria, "none") from None
        except MultipleResultsFound:
            raise LookupFailure(model.__name__, criteria, "more than one") from None

    def first(self, model: Type[ModelT]) -> Optional[ModelT]:
        # primary key order is the default ordering
        order = list(model.__table__.primary_key.columns)
        return self.session.exec(select(model).order_by(*order).limit(1)).first()

    def add_all(self, rows: Iterable[SQLModel]) -> None:
        self.session.add_all(list(rows))

    def save(self) -> None:
        self.session.commit()
