"""Utility script to populate demo data for local environments."""

from __future__ import annotations

from typing import Optional

import typer
from sqlalchemy.exc import SQLAlchemyError

from blogapi import db
from blogapi.config import settings
from blogapi.errors import LookupFailure
from blogapi.logging_config import configure_logging
from blogapi.security import HashedCredentials, NoCredentials, PlaceholderCredentials
from blogapi.seed import seed_demo_data

APP = typer.Typer(add_completion=False, help="Create the blog schema and load the demo users, posts and comment.")


@APP.command()
def main(
    database_url: Optional[str] = typer.Option(None, "--database-url", help="Override DATABASE_URL."),
    demo_password: Optional[str] = typer.Option(
        None, "--demo-password", help="Hash this password onto every demo account."
    ),
    placeholder_password: bool = typer.Option(
        False, "--placeholder-password", help="Store an unusable password marker instead of leaving it empty."
    ),
    log_level: str = typer.Option(settings.log_level, "--log-level"),
) -> None:
    """Initialise the database schema and load deterministic demo data."""
    configure_logging(log_level)
    if demo_password and placeholder_password:
        raise typer.BadParameter("--demo-password and --placeholder-password are mutually exclusive")

    password = demo_password or settings.demo_password
    if placeholder_password:
        credentials = PlaceholderCredentials()
    elif password:
        credentials = HashedCredentials(password)
    else:
        credentials = NoCredentials()

    engine = db.build_engine(database_url, echo=settings.debug) if database_url else db.engine
    try:
        db.init_db(engine)
        report = seed_demo_data(engine, credentials=credentials)
    except LookupFailure as exc:
        typer.secho(f"Seeding aborted: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except SQLAlchemyError as exc:
        typer.secho(f"Database error while seeding: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    finally:
        if database_url:
            engine.dispose()

    typer.echo(f"users={report.users} posts={report.posts} comments={report.comments}")


if __name__ == "__main__":
    APP()
