"""Durable key-value storage backed by a single SQLAlchemy table."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from gradetrack.core.exceptions import PersistenceError
from gradetrack.models.storage import StorageEntry

logger = logging.getLogger(__name__)


class KeyValueStorage:
    """String values stored under string keys.

    Every write commits on its own; a failed write is rolled back and
    reported as ``PersistenceError``.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        try:
            with self.session_factory() as session:
                result = session.execute(
                    select(StorageEntry.value).where(StorageEntry.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"[STORAGE] Read failed - key={key}: {str(e)}")
            raise PersistenceError(f"Failed to read '{key}'") from e

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        try:
            with self.session_factory() as session, session.begin():
                entry = session.get(StorageEntry, key)
                if entry:
                    entry.value = value
                else:
                    session.add(StorageEntry(key=key, value=value))
        except SQLAlchemyError as e:
            logger.error(f"[STORAGE] Write failed - key={key}, size={len(value)}: {str(e)}")
            raise PersistenceError(f"Failed to write '{key}'") from e

    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""
        try:
            with self.session_factory() as session, session.begin():
                session.execute(delete(StorageEntry).where(StorageEntry.key == key))
        except SQLAlchemyError as e:
            logger.error(f"[STORAGE] Delete failed - key={key}: {str(e)}")
            raise PersistenceError(f"Failed to delete '{key}'") from e
