"""Derived views over the exam collection."""

from collections.abc import Iterable, Sequence

from gradetrack.schemas.exam import Exam, ExamFilter


def matches_query(exam: Exam, query: str) -> bool:
    """Case-insensitive substring match on title, course and year."""
    if not query:
        return True
    haystack = f"{exam.title} {exam.course} {exam.year}".lower()
    return query.lower() in haystack


def matches_subject(exam: Exam, subject: str | None) -> bool:
    """Exact, case-sensitive course match; empty subject matches all."""
    return not subject or exam.course == subject


def filter_exams(exams: Sequence[Exam], criteria: ExamFilter) -> list[Exam]:
    """Return exams matching both query and subject, in input order.

    ``criteria.date_range`` is not applied.
    """
    return [
        exam
        for exam in exams
        if matches_query(exam, criteria.query) and matches_subject(exam, criteria.subject)
    ]


def distinct_subjects(exams: Iterable[Exam]) -> list[str]:
    """Sorted distinct course names."""
    return sorted({exam.course for exam in exams})
