"""Database connection and session management."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from gradetrack.core.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    pass


def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine, allowing SQLite connections to cross worker threads."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=False, **kwargs)


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to ``bind``."""
    return sessionmaker(
        bind=bind,
        class_=Session,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


# Note: echo=False to disable SQL logging
engine = build_engine(settings.DATABASE_URL)

SessionLocal = build_session_factory(engine)


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Import models so they register on Base.metadata
    import gradetrack.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
