"""Exam collection persistence.

The whole collection lives under one storage key as a JSON array. Reads and
writes fail soft: a missing or malformed payload loads as an empty
collection, and a failed write leaves the in-memory collection authoritative.
"""

import json
import logging
from collections.abc import Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from gradetrack.core.exceptions import PersistenceError
from gradetrack.schemas.exam import Exam
from gradetrack.services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

exam_list_adapter = TypeAdapter(list[Exam])


class ExamPersistence:
    """Reads and writes full snapshots of the exam collection."""

    def __init__(self, storage: KeyValueStorage, key: str):
        self.storage = storage
        self.key = key
        self.read_failed = False

    def load(self) -> list[Exam]:
        """Load the stored collection, or an empty list if none is usable.

        ``read_failed`` records whether storage itself could not be read, as
        opposed to holding nothing usable.
        """
        self.read_failed = False
        try:
            raw = self.storage.get_item(self.key)
        except PersistenceError:
            logger.warning(f"[PERSISTENCE] Storage unavailable, starting empty - key={self.key}")
            self.read_failed = True
            return []

        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"[PERSISTENCE] Stored value is not valid JSON - key={self.key}")
            return []

        if not isinstance(parsed, list):
            logger.warning(
                f"[PERSISTENCE] Stored value is {type(parsed).__name__}, expected list - key={self.key}"
            )
            return []

        try:
            return exam_list_adapter.validate_python(parsed)
        except SchemaValidationError as e:
            logger.warning(
                f"[PERSISTENCE] Stored exams are malformed ({e.error_count()} errors) - key={self.key}"
            )
            return []

    def save(self, exams: Sequence[Exam]) -> None:
        """Overwrite the stored collection with ``exams``."""
        payload = serialize_exams(exams)
        try:
            self.storage.set_item(self.key, payload)
        except PersistenceError:
            logger.warning(
                f"[PERSISTENCE] Save failed, keeping {len(exams)} exams in memory only - key={self.key}"
            )


def serialize_exams(exams: Sequence[Exam], indent: int | None = None) -> str:
    """Encode exams as a JSON array using their wire field names."""
    return json.dumps(
        [exam.model_dump(mode="json", by_alias=True) for exam in exams],
        indent=indent,
        ensure_ascii=False,
    )
