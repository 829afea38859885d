"""Database models package."""

from gradetrack.models.storage import StorageEntry

__all__ = [
    # Key-value storage
    "StorageEntry",
]
