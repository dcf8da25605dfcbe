import logging

import pytest

from registrar.core.entities import Student, grade_points
from registrar.core.enums import GradeStatus
from registrar.core.exceptions import ValidationError


def test_average_status_and_highest_for_two_grades(student: Student) -> None:
    assert student.add_grade("CS101", 90)
    assert student.add_grade("CS101", 85)
    assert student.average_grade("CS101") == 87.5
    assert student.status("CS101") == "Pass"
    assert student.status("CS101") is GradeStatus.PASS
    assert student.highest_grade("CS101") == 90


def test_grades_keep_submission_order(student: Student) -> None:
    for grade in (70, 100, 0, 55):
        student.add_grade("MATH201", grade)
    assert student.grades("MATH201") == [70, 100, 0, 55]
    assert student.average_grade("MATH201") == pytest.approx(56.25)


@pytest.mark.parametrize("bad", [-1, 101, 1000, 85.5, "90", None, True])
def test_invalid_grades_are_rejected_without_mutation(student: Student, bad, caplog) -> None:
    student.add_grade("CS101", 40)
    version = student.version
    with caplog.at_level(logging.WARNING):
        assert student.add_grade("CS101", bad) is False
    assert student.grades("CS101") == [40]
    assert student.average_grade("CS101") == 40
    assert student.highest_grade("CS101") == 40
    assert student.version == version
    assert any("Rejected grade" in record.getMessage() for record in caplog.records)


def test_boundary_grades_are_accepted(student: Student) -> None:
    assert student.add_grade("CS101", 0)
    assert student.add_grade("CS101", 100)
    assert student.grades("CS101") == [0, 100]


def test_blank_course_code_is_a_validation_error(student: Student) -> None:
    with pytest.raises(ValidationError):
        student.add_grade("  ", 80)


def test_no_grades_returns_zero_sentinel(student: Student) -> None:
    assert student.average_grade("PHYS100") == 0
    assert student.highest_grade("PHYS100") == 0
    assert student.find_average_grade("PHYS100") is None
    assert student.find_highest_grade("PHYS100") is None
    assert not student.has_grades("PHYS100")
    assert student.status("PHYS100") is GradeStatus.FAIL


def test_true_zero_average_is_distinguishable(student: Student) -> None:
    student.add_grade("PHYS100", 0)
    assert student.average_grade("PHYS100") == 0
    assert student.find_average_grade("PHYS100") == 0.0
    assert student.has_grades("PHYS100")


@pytest.mark.parametrize("grades,expected", [
    ([60], GradeStatus.PASS),
    ([59, 61], GradeStatus.PASS),
    ([59], GradeStatus.FAIL),
    ([100, 19], GradeStatus.FAIL),
])
def test_status_follows_pass_mark(student: Student, grades, expected) -> None:
    for grade in grades:
        student.add_grade("CS101", grade)
    assert student.status("CS101") is expected
    assert (student.average_grade("CS101") >= 60) == (expected is GradeStatus.PASS)


@pytest.mark.parametrize("average,points", [
    (100, 4.0), (90, 4.0), (89.9, 3.0), (80, 3.0), (79.5, 2.0),
    (70, 2.0), (69.99, 1.0), (60, 1.0), (59.9, 0.0), (0, 0.0),
])
def test_grade_points_breakpoints(average, points) -> None:
    assert grade_points(average) == points


def test_gpa_is_unweighted_mean_of_course_points(student: Student) -> None:
    student.add_grade("CS101", 92)
    student.add_grade("HIST110", 55)
    assert student.gpa() == 2.0


def test_gpa_ignores_grade_counts(student: Student) -> None:
    for _ in range(5):
        student.add_grade("CS101", 95)
    student.add_grade("MATH201", 75)
    assert student.gpa() == pytest.approx(3.0)


def test_gpa_is_zero_without_grades(student: Student) -> None:
    assert student.gpa() == 0.0
    student.add_grade("CS101", 250)
    assert student.gpa() == 0.0


def test_graded_courses_lists_only_courses_with_grades(student: Student) -> None:
    student.add_grade("CS101", 80)
    student.add_grade("MATH201", -5)
    student.add_grade("ART100", 70)
    assert student.graded_courses() == ["CS101", "ART100"]


def test_grades_returns_a_copy(student: Student) -> None:
    student.add_grade("CS101", 80)
    student.grades("CS101").append(10)
    assert student.grades("CS101") == [80]
