"""Exam schemas."""

import enum
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Field, StrictBool, computed_field, field_validator

from gradetrack.schemas.common import BaseSchema


# ==========================================
# Constants
# ==========================================

WEIGHT_PATTERN = r"^\d+%$"

# Defaults applied to drafts that omit a field
DEFAULT_YEAR = "YR 2"
DEFAULT_STATUS = "Not Attempted"
DEFAULT_WEIGHT = "35%"
DEFAULT_MAX_POINTS = 100
DEFAULT_PASSING_THRESHOLD = 50


# ==========================================
# Exam Schemas
# ==========================================

class ExamDraft(BaseSchema):
    """Candidate exam supplied for create/update.

    ``id`` and ``date_created`` are accepted but ignored by the store.
    """

    id: str | None = None
    date_created: str | None = None
    title: str = Field(..., min_length=1)
    year: str = DEFAULT_YEAR
    date_due: str = Field(..., min_length=1)
    weight: str = Field(DEFAULT_WEIGHT, pattern=WEIGHT_PATTERN)
    max_points: float = Field(DEFAULT_MAX_POINTS, gt=0, allow_inf_nan=False)
    passing_threshold: float = Field(DEFAULT_PASSING_THRESHOLD, ge=0, le=100, allow_inf_nan=False)
    status: str = DEFAULT_STATUS
    course: str = Field(..., min_length=1)
    description: str = ""
    visible: StrictBool = True

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("max_points", "passing_threshold", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("must be a number, not a boolean")
        return v

    def editable_fields(self) -> dict[str, Any]:
        """Fields an update may replace."""
        return self.model_dump(exclude={"id", "date_created"})


class Exam(ExamDraft):
    """Stored exam record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    date_created: str = Field(..., min_length=1)


# ==========================================
# Filtering
# ==========================================

class ExamFilter(BaseSchema):
    """Criteria controlling the filtered view.

    ``date_range`` is carried for collaborators but not applied.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    query: str = ""
    subject: str | None = None
    date_range: str | None = None

    @field_validator("query", mode="before")
    @classmethod
    def default_query(cls, v: Any) -> Any:
        return "" if v is None else v


class ExamFilterUpdate(BaseSchema):
    """Partial filter update; only fields that are sent are applied."""

    model_config = ConfigDict(str_strip_whitespace=False)

    query: str | None = None
    subject: str | None = None
    date_range: str | None = None


# ==========================================
# Grading
# ==========================================

class GradeRequest(BaseSchema):
    """Raw score submitted for grading."""

    score: Any = None


class InvalidScore(BaseSchema):
    """Score was not a finite number."""

    kind: Literal["invalid_score"] = "invalid_score"
    message: str = "Please enter a valid number"


class OutOfRange(BaseSchema):
    """Score fell outside ``[minimum, maximum]``."""

    kind: Literal["out_of_range"] = "out_of_range"
    minimum: float = 0
    maximum: float
    message: str


class Graded(BaseSchema):
    """Successfully graded score."""

    kind: Literal["graded"] = "graded"
    percentage: float
    passed: bool

    @computed_field
    @property
    def percentage_display(self) -> str:
        return f"{self.percentage:.1f}"

    @computed_field
    @property
    def status_label(self) -> str:
        return "Pass" if self.passed else "Fail"


GradeResult = Annotated[Union[InvalidScore, OutOfRange, Graded], Field(discriminator="kind")]


# ==========================================
# Export
# ==========================================

class ExportFormat(str, enum.Enum):
    """Supported export formats."""

    JSON = "json"
    XLSX = "xlsx"
