"""Key-value storage model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gradetrack.core.database import Base
from gradetrack.models.base import TimestampMixin


class StorageEntry(Base, TimestampMixin):
    """A single string value stored under a unique key."""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<StorageEntry(key={self.key}, size={len(self.value or '')})>"
