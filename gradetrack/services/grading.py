"""Score evaluation against an exam's maximum points and passing threshold."""

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from gradetrack.schemas.exam import Exam, Graded, GradeResult, InvalidScore, OutOfRange


def parse_score(score: Any) -> float | None:
    """Coerce ``score`` to a float, or None if it is not a finite number.

    Numeric strings are accepted; booleans are not. Finite values too large
    for a float come back as a signed infinity so they grade as out of range.
    """
    if isinstance(score, bool):
        return None
    if isinstance(score, str):
        try:
            score = Decimal(score.strip())
        except (InvalidOperation, ValueError):
            return None
    if isinstance(score, Decimal):
        if not score.is_finite():
            return None
    elif isinstance(score, float):
        if not math.isfinite(score):
            return None
    elif not isinstance(score, int):
        return None

    try:
        return float(score)
    except OverflowError:
        return math.inf if score > 0 else -math.inf


def format_points(value: float) -> str:
    return f"{value:g}"


def evaluate_grade(score: Any, exam: Exam) -> GradeResult:
    """Grade ``score`` out of ``exam.max_points``.

    Returns InvalidScore for non-numeric input, OutOfRange outside
    ``[0, max_points]``, otherwise Graded. Passing is inclusive of the
    threshold. The exam is never modified.
    """
    value = parse_score(score)
    if value is None:
        return InvalidScore()

    if value < 0 or value > exam.max_points:
        return OutOfRange(
            minimum=0,
            maximum=exam.max_points,
            message=f"Score must be between 0 and {format_points(exam.max_points)}",
        )

    percentage = (value / exam.max_points) * 100
    return Graded(
        percentage=percentage,
        passed=percentage >= exam.passing_threshold,
    )
