"""Draft validation.

``validate_draft`` never raises for bad input; it returns a result that either
carries the normalized draft or a field-keyed mapping of messages.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as SchemaValidationError

from gradetrack.schemas.common import BaseSchema
from gradetrack.schemas.exam import ExamDraft

# Messages shown next to each form field
FIELD_MESSAGES = {
    "title": "Title is required",
    "dateDue": "Date is required",
    "course": "Course is required",
    "maxPoints": "Enter a positive number",
    "weight": "Enter percent like 35%",
    "passingThreshold": "Enter a number between 0 and 100",
    "visible": "Must be true or false",
}

# Accept either the Python or the wire name of a field
_WIRE_NAMES = {
    name: (info.alias or name) for name, info in ExamDraft.model_fields.items()
}
_WIRE_NAMES.update({alias: alias for alias in _WIRE_NAMES.values()})


class DraftValidation(BaseSchema):
    """Outcome of validating a draft."""

    draft: ExamDraft | None = None
    errors: dict[str, str] = {}

    @property
    def ok(self) -> bool:
        return self.draft is not None and not self.errors


def validate_draft(data: Mapping[str, Any] | ExamDraft) -> DraftValidation:
    """Validate a candidate exam draft."""
    if isinstance(data, ExamDraft):
        data = data.model_dump(by_alias=True)
    if not isinstance(data, Mapping):
        return DraftValidation(errors={"__root__": "Exam data must be an object"})

    try:
        draft = ExamDraft.model_validate(dict(data))
    except SchemaValidationError as e:
        return DraftValidation(errors=_collect_errors(e))
    return DraftValidation(draft=draft)


def _collect_errors(exc: SchemaValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        wire_name = _WIRE_NAMES.get(str(loc[0]), str(loc[0]))
        # First message per field wins
        errors.setdefault(wire_name, FIELD_MESSAGES.get(wire_name, error["msg"]))
    return errors
