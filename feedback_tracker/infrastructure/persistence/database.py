"""
Database Configuration

SQL engine and session helpers for the feedback table. Any SQLAlchemy URL
works; SQLite gets check_same_thread=False so FastAPI's threadpool can share
the engine, and in-memory SQLite is pinned to a single connection.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine


logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine appropriate for the database backend."""
    if url.startswith("sqlite"):
        if _is_memory_sqlite(url):
            engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            # Ensure parent directory exists
            db_path = url.replace("sqlite:///", "", 1)
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
            )
    else:
        engine = create_engine(url, echo=echo, pool_pre_ping=True)

    logger.info("Database engine created: %s", url.split("@")[-1] if "@" in url else url)
    return engine


def init_db(engine: Engine) -> None:
    """Create all registered tables. Safe to call repeatedly."""
    SQLModel.metadata.create_all(engine)


@contextmanager
def session_scope(engine: Engine) -> Generator[Session, None, None]:
    """Session bound to one transaction: commit on success, rollback on error."""
    session = Session(engine)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
