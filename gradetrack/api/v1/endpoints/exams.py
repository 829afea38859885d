"""Exam management endpoints."""

import logging
from io import BytesIO
from typing import Annotated, Any

from fastapi import APIRouter, Body, Query
from fastapi.responses import StreamingResponse

from gradetrack.core.config import settings
from gradetrack.core.dependencies import ExamDep, StoreDep
from gradetrack.core.exceptions import ValidationError
from gradetrack.schemas.common import MessageResponse
from gradetrack.schemas.exam import (
    Exam,
    ExamDraft,
    ExamFilter,
    ExamFilterUpdate,
    ExportFormat,
    GradeRequest,
    GradeResult,
)
from gradetrack.services.export import MEDIA_TYPES, export_exams
from gradetrack.services.validation import validate_draft

logger = logging.getLogger(__name__)

router = APIRouter()


def _validated(data: dict[str, Any]) -> ExamDraft:
    result = validate_draft(data)
    if not result.ok:
        raise ValidationError("Exam validation failed", details=result.errors)
    return result.draft


@router.get("", response_model=list[Exam])
def list_exams(store: StoreDep):
    """
    Get the full exam collection, newest first.
    """
    return store.get_exams()


@router.post("", response_model=Exam)
def create_exam(
    store: StoreDep,
    data: Annotated[dict[str, Any], Body()],
):
    """
    Create an exam.
    Assigns the id and creation date; any supplied values for them are ignored.
    """
    return store.create(_validated(data))


@router.get("/filtered", response_model=list[Exam])
def list_filtered_exams(
    store: StoreDep,
    limit: int | None = Query(None, ge=1, description="Return only the first N matches"),
):
    """
    Get the exams matching the current filter criteria.
    """
    return store.get_filtered(limit=limit)


@router.get("/suggestions", response_model=list[Exam])
def list_suggestions(store: StoreDep):
    """
    Get a short preview of the current matches for the search dropdown.
    """
    return store.get_filtered(limit=settings.SUGGESTION_LIMIT)


@router.get("/filters", response_model=ExamFilter)
def get_filters(store: StoreDep):
    """
    Get the current filter criteria.
    """
    return store.get_filters()


@router.patch("/filters", response_model=ExamFilter)
def update_filters(store: StoreDep, request: ExamFilterUpdate):
    """
    Merge the supplied fields into the current filter criteria.
    Send `"subject": null` to show all subjects.
    """
    return store.set_filters(request)


@router.get("/subjects", response_model=list[str])
def get_subjects(store: StoreDep):
    """
    Get distinct course names for the subject selector.
    """
    return store.get_subjects()


@router.get("/export")
def export_exam_collection(
    store: StoreDep,
    fmt: ExportFormat = Query(ExportFormat.JSON, alias="format"),
):
    """
    Download the full exam collection as JSON or Excel.
    """
    exams = store.get_exams()
    content = export_exams(exams, fmt)
    filename = f"{settings.EXPORT_FILENAME}.{fmt.value}"
    logger.info(f"[EXAM EXPORT] {len(exams)} exams as {filename}")

    return StreamingResponse(
        BytesIO(content),
        media_type=MEDIA_TYPES[fmt],
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/{exam_id}", response_model=Exam)
def get_exam(exam: ExamDep):
    """
    Get exam by ID.
    """
    return exam


@router.put("/{exam_id}", response_model=MessageResponse)
def update_exam(
    exam_id: str,
    store: StoreDep,
    data: Annotated[dict[str, Any], Body()],
):
    """
    Replace every editable field of an exam.
    The id and creation date are kept. Unknown ids are ignored.
    """
    store.update(exam_id, _validated(data))
    return MessageResponse(message="Exam updated successfully")


@router.delete("/{exam_id}", response_model=MessageResponse)
def delete_exam(exam_id: str, store: StoreDep):
    """
    Delete an exam. Unknown ids are ignored.
    """
    store.delete(exam_id)
    return MessageResponse(message="Exam deleted successfully")


@router.post("/{exam_id}/grade", response_model=GradeResult)
def grade_exam(exam: ExamDep, store: StoreDep, request: GradeRequest):
    """
    Evaluate a student's score against the exam.
    The result is `graded`, `out_of_range` or `invalid_score`;
    the exam itself is not modified.
    """
    return store.evaluate_grade(request.score, exam)
