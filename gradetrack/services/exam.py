"""Exam record store: the authoritative collection and its mutations."""

import logging
import secrets
import string
import threading
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from gradetrack.schemas.exam import Exam, ExamDraft, ExamFilter, ExamFilterUpdate, GradeResult
from gradetrack.services.filtering import distinct_subjects, filter_exams
from gradetrack.services.grading import evaluate_grade
from gradetrack.services.persistence import ExamPersistence
from gradetrack.services.seed import SEED_EXAMS

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 8


def generate_id(prefix: str = "exam") -> str:
    """Random ``<prefix>_xxxxxxxx`` token."""
    token = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
    return f"{prefix}_{token}"


def format_long_date(moment: datetime) -> str:
    """Render as "Month DD, YYYY"."""
    return f"{moment:%B} {moment:%d}, {moment:%Y}"


class ExamStore:
    """Exam collection management service.

    Holds the collection newest-first and saves a full snapshot after every
    mutation. Each mutation builds a new list and swaps it in under a lock,
    so readers always see a complete collection.
    """

    def __init__(
        self,
        persistence: ExamPersistence,
        seed: Sequence[Exam] = SEED_EXAMS,
        id_prefix: str = "exam",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.persistence = persistence
        self.seed = tuple(seed)
        self.id_prefix = id_prefix
        self.clock = clock
        self._exams: list[Exam] = []
        self._filters = ExamFilter()
        self._lock = threading.RLock()

    # ==========================================
    # Lifecycle
    # ==========================================

    def initialize(self) -> list[Exam]:
        """Load the stored collection, falling back to the seed when empty.

        The seed is only written back when storage was readable; after a
        failed read whatever is stored is left in place.
        """
        with self._lock:
            exams = self.persistence.load()
            if exams:
                logger.info(f"[EXAM STORE] Loaded {len(exams)} exams from storage")
            elif self.seed:
                exams = list(self.seed)
                if self.persistence.read_failed:
                    logger.warning(
                        f"[EXAM STORE] Storage unreadable, using {len(exams)} seed exams in memory only"
                    )
                else:
                    logger.info(f"[EXAM STORE] No stored exams, using {len(exams)} seed exams")
                    self.persistence.save(exams)
            self._exams = exams
            return list(exams)

    # ==========================================
    # Queries
    # ==========================================

    def get_exams(self) -> list[Exam]:
        """Current full collection."""
        return list(self._exams)

    def get_exam(self, exam_id: str) -> Exam | None:
        return next((e for e in self._exams if e.id == exam_id), None)

    def get_filters(self) -> ExamFilter:
        return self._filters

    def set_filters(self, update: ExamFilterUpdate | dict[str, Any]) -> ExamFilter:
        """Merge the fields present in ``update`` into the current criteria."""
        if isinstance(update, dict):
            update = ExamFilterUpdate.model_validate(update)
        with self._lock:
            merged = self._filters.model_dump()
            merged.update(update.model_dump(exclude_unset=True))
            self._filters = ExamFilter.model_validate(merged)
            return self._filters

    def get_filtered(self, limit: int | None = None) -> list[Exam]:
        """Current collection narrowed by the current criteria."""
        filtered = filter_exams(self._exams, self._filters)
        return filtered[:limit] if limit is not None else filtered

    def get_subjects(self) -> list[str]:
        """Distinct courses, sorted, for the subject selector."""
        return distinct_subjects(self._exams)

    def evaluate_grade(self, score: Any, exam: Exam) -> GradeResult:
        """Grade a score; the stored exam is left untouched."""
        return evaluate_grade(score, exam)

    # ==========================================
    # Mutations
    # ==========================================

    def create(self, draft: ExamDraft) -> Exam:
        """Add a new exam at the front of the collection."""
        with self._lock:
            exam = Exam(
                id=self._new_id(),
                date_created=format_long_date(self.clock()),
                **draft.editable_fields(),
            )
            self._exams = [exam, *self._exams]
            self.persistence.save(self._exams)

        logger.info(f"[EXAM STORE] Created exam {exam.id} - {exam.title}")
        return exam

    def update(self, exam_id: str, draft: ExamDraft) -> None:
        """Replace all editable fields of ``exam_id``; no-op if it is absent."""
        with self._lock:
            if self.get_exam(exam_id) is None:
                logger.debug(f"[EXAM STORE] Update ignored, no exam {exam_id}")
                return

            self._exams = [
                Exam(id=e.id, date_created=e.date_created, **draft.editable_fields())
                if e.id == exam_id
                else e
                for e in self._exams
            ]
            self.persistence.save(self._exams)

        logger.info(f"[EXAM STORE] Updated exam {exam_id}")

    def delete(self, exam_id: str) -> None:
        """Remove ``exam_id``; no-op if it is absent."""
        with self._lock:
            if self.get_exam(exam_id) is None:
                logger.debug(f"[EXAM STORE] Delete ignored, no exam {exam_id}")
                return

            self._exams = [e for e in self._exams if e.id != exam_id]
            self.persistence.save(self._exams)

        logger.info(f"[EXAM STORE] Deleted exam {exam_id}")

    def _new_id(self) -> str:
        existing = {e.id for e in self._exams}
        while True:
            candidate = generate_id(self.id_prefix)
            if candidate not in existing:
                return candidate
