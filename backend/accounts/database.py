import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL, Engine
from sqlmodel import Session, SQLModel, create_engine

logger = logging.getLogger(__name__)


def create_db_engine(url: str | URL) -> Engine:
    connect_args = {}
    if str(url).startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=False, pool_pre_ping=True, connect_args=connect_args)


def check_connection(engine: Engine) -> None:
    """Round-trip once to the database; raises if it is unreachable."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def init_db(engine: Engine) -> None:
    import accounts.models  # noqa: F401 - register all models with SQLModel metadata

    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Generator[Session, None, None]:
    with Session(request.app.state.engine) as session:
        yield session
