"""Grade evaluator tests."""

import math
from decimal import Decimal

import pytest

from gradetrack.schemas.exam import Graded, InvalidScore, OutOfRange
from gradetrack.services.grading import evaluate_grade, parse_score

from .conftest import make_exam

EXAM = make_exam(max_points=100, passing_threshold=50)


class TestEvaluateGrade:
    def test_below_threshold_fails(self):
        assert evaluate_grade(49, EXAM) == Graded(percentage=49.0, passed=False)

    def test_threshold_is_inclusive(self):
        assert evaluate_grade(50, EXAM) == Graded(percentage=50.0, passed=True)

    def test_above_max_is_out_of_range(self):
        result = evaluate_grade(150, EXAM)
        assert isinstance(result, OutOfRange)
        assert result.minimum == 0
        assert result.maximum == 100
        assert result.message == "Score must be between 0 and 100"

    def test_negative_is_out_of_range(self):
        assert isinstance(evaluate_grade(-0.5, EXAM), OutOfRange)

    @pytest.mark.parametrize("score", [float("nan"), math.inf, -math.inf, None, "abc", "", True, [], {}])
    def test_not_a_finite_number_is_invalid(self, score):
        result = evaluate_grade(score, EXAM)
        assert isinstance(result, InvalidScore)
        assert result.message == "Please enter a valid number"

    def test_bounds_are_gradeable(self):
        assert evaluate_grade(0, EXAM) == Graded(percentage=0.0, passed=False)
        assert evaluate_grade(100, EXAM) == Graded(percentage=100.0, passed=True)

    def test_percentage_is_full_precision(self):
        exam = make_exam(max_points=30, passing_threshold=50)
        result = evaluate_grade(10, exam)
        assert result.percentage == pytest.approx(100 / 3)
        assert result.percentage_display == "33.3"

    def test_numeric_strings_are_accepted(self):
        assert evaluate_grade(" 75.5 ", EXAM) == Graded(percentage=75.5, passed=True)

    def test_status_label(self):
        assert evaluate_grade(80, EXAM).status_label == "Pass"
        assert evaluate_grade(20, EXAM).status_label == "Fail"

    def test_zero_threshold_passes_zero_score(self):
        exam = make_exam(max_points=10, passing_threshold=0)
        assert evaluate_grade(0, exam).passed is True

    def test_exam_is_not_modified(self):
        exam = make_exam(status="Not Attempted")
        evaluate_grade(40, exam)
        assert exam.status == "Not Attempted"


class TestParseScore:
    def test_decimal(self):
        assert parse_score(Decimal("12.5")) == 12.5

    def test_decimal_nan(self):
        assert parse_score(Decimal("NaN")) is None

    def test_int(self):
        assert parse_score(7) == 7.0

    def test_decimal_signaling_nan(self):
        assert parse_score(Decimal("sNaN")) is None

    def test_int_beyond_float_range_keeps_sign(self):
        assert parse_score(10**400) == math.inf
        assert parse_score(-(10**400)) == -math.inf

    def test_infinity_strings_are_rejected(self):
        assert parse_score("inf") is None
        assert parse_score("-Infinity") is None


class TestHugeScores:
    @pytest.mark.parametrize("score", [10**400, -(10**400), "1" + "0" * 400, Decimal("1e400")])
    def test_finite_score_beyond_float_range_is_out_of_range(self, score):
        result = evaluate_grade(score, EXAM)
        assert isinstance(result, OutOfRange)
        assert result.message == "Score must be between 0 and 100"
