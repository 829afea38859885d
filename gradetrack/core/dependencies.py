"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, Request

from gradetrack.core.exceptions import NotFoundError
from gradetrack.schemas.exam import Exam
from gradetrack.services.exam import ExamStore


def get_store(request: Request) -> ExamStore:
    """The exam store owned by the running application."""
    return request.app.state.store


def get_exam_or_404(
    exam_id: str,
    store: Annotated[ExamStore, Depends(get_store)],
) -> Exam:
    """Look up an exam by path id."""
    exam = store.get_exam(exam_id)
    if not exam:
        raise NotFoundError("Exam", exam_id)
    return exam


# Type aliases for dependency injection
StoreDep = Annotated[ExamStore, Depends(get_store)]
ExamDep = Annotated[Exam, Depends(get_exam_or_404)]
