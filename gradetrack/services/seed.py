"""Demo exams used when no stored collection exists."""

from gradetrack.schemas.exam import Exam

_DESCRIPTION = "Lorem ipsum dolor sit amet consectetur..."


def _seed(
    id: str,
    title: str,
    year: str,
    date_created: str,
    date_due: str,
    weight: str,
    passing_threshold: float,
    course: str,
) -> Exam:
    return Exam(
        id=id,
        title=title,
        year=year,
        date_created=date_created,
        date_due=date_due,
        weight=weight,
        max_points=100,
        passing_threshold=passing_threshold,
        status="Not Attempted",
        course=course,
        description=_DESCRIPTION,
        visible=True,
    )


SEED_EXAMS: tuple[Exam, ...] = (
    _seed("1", "Mat 202 | Actuarial Vector Analysis", "YR 2", "November 21, 2025", "November 25, 2025", "35%", 50, "Mathematics"),
    _seed("2", "Mat 202 | Actuarial Vector Analysis", "YR 2", "November 21, 2025", "November 24, 2025", "35%", 50, "Mathematics"),
    _seed("3", "THE 301 | Contemporary Performance", "YR 3", "November 20, 2025", "November 23, 2025", "40%", 60, "Theatre Art"),
    _seed("4", "Mat 301 | Advanced Calculus", "YR 3", "November 19, 2025", "November 22, 2025", "45%", 50, "Mathematics"),
    _seed("5", "THE 201 | Stage Design & Production", "YR 2", "November 18, 2025", "November 23, 2025", "35%", 55, "Theatre Art"),
    _seed("6", "Mat 101 | Linear Algebra", "YR 1", "November 17, 2025", "November 21, 2025", "30%", 50, "Mathematics"),
    _seed("7", "THE 401 | Theatre History", "YR 4", "November 21, 2025", "November 24, 2025", "35%", 60, "Theatre Art"),
    _seed("8", "Mat 202 | Differential Equations", "YR 2", "November 22, 2025", "November 25, 2025", "40%", 50, "Mathematics"),
    _seed("9", "THE 101 | Introduction to Drama", "YR 1", "November 23, 2025", "November 24, 2025", "30%", 55, "Theatre Art"),
)
