"""
Core entities for the Registrar package.

Students and teachers share identity fields through a composed ``Person``
value rather than a class hierarchy; ``person_type`` tells them apart wherever
either kind of member is accepted.
"""

import logging
import uuid
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from .enums import (
    PersonType, GradeStatus, EnrollmentStatus,
    MIN_GRADE, MAX_GRADE, PASS_MARK, GPA_BREAKPOINTS
)
from .exceptions import ValidationError


logger = logging.getLogger(__name__)

MAX_AGE = 150


def _require_text(value: Any, field_name: str) -> str:
    """Return ``value`` stripped, or raise if it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} is required",
            error_code="missing_field",
            details={'field': field_name}
        )
    return value.strip()


def grade_points(average: float) -> float:
    """Map a course average onto the GPA breakpoint table."""
    for threshold, points in GPA_BREAKPOINTS:
        if average >= threshold:
            return points
    return 0.0


def is_valid_grade(grade: Any) -> bool:
    """Check that ``grade`` is an integer score in the accepted range."""
    if isinstance(grade, bool) or not isinstance(grade, int):
        return False
    return MIN_GRADE <= grade <= MAX_GRADE


class AbstractEntity(ABC):
    """Base abstract entity with universal ID, timestamps, and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class Person:
    """Identity fields shared by students and teachers."""

    __slots__ = ('_name', '_age', '_gender')

    def __init__(self, name: str, age: int, gender: str):
        self._name = _require_text(name, "name")
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValidationError("age must be an integer", details={'field': 'age'})
        if not 0 <= age <= MAX_AGE:
            raise ValidationError(f"age must be between 0 and {MAX_AGE}", details={'field': 'age'})
        self._age = age
        self._gender = _require_text(gender, "gender")

    @property
    def name(self) -> str:
        """Get the full name."""
        return self._name

    @property
    def age(self) -> int:
        """Get the age in years."""
        return self._age

    @property
    def gender(self) -> str:
        """Get the gender."""
        return self._gender

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (self._name, self._age, self._gender) == (other._name, other._age, other._gender)

    def __hash__(self) -> int:
        return hash((self._name, self._age, self._gender))

    def __repr__(self) -> str:
        return f"Person(name={self._name!r}, age={self._age}, gender={self._gender!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self._name, 'age': self._age, 'gender': self._gender}


class _Member(AbstractEntity):
    """Entity that carries a ``Person``."""

    person_type: PersonType

    def __init__(self, person: Person, **kwargs):
        super().__init__(**kwargs)
        self._person = person

    @property
    def person(self) -> Person:
        """Get the shared identity fields."""
        return self._person

    @property
    def name(self) -> str:
        """Get the full name."""
        return self._person.name

    @property
    def age(self) -> int:
        """Get the age in years."""
        return self._person.age

    @property
    def gender(self) -> str:
        """Get the gender."""
        return self._person.gender

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update(self._person.to_dict())
        base_dict['person_type'] = self.person_type.value
        return base_dict


class Teacher(_Member):
    """Teacher entity. Never mutated after creation."""

    person_type = PersonType.TEACHER

    def __init__(self, name: str, age: int, gender: str, subject: str, teacher_id: str, **kwargs):
        person = Person(name, age, gender)
        self._subject = _require_text(subject, "subject")
        self._teacher_id = _require_text(teacher_id, "teacher_id")
        super().__init__(person, **kwargs)

    @property
    def subject(self) -> str:
        """Get the subject taught."""
        return self._subject

    @property
    def teacher_id(self) -> str:
        """Get the teacher ID."""
        return self._teacher_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert teacher to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'teacher_id': self._teacher_id,
            'subject': self._subject,
        })
        return base_dict


class Student(_Member):
    """Student entity with a per-course grade ledger."""

    person_type = PersonType.STUDENT

    def __init__(self, name: str, age: int, gender: str, student_id: str, major: str, **kwargs):
        person = Person(name, age, gender)
        self._student_id = _require_text(student_id, "student_id")
        self._major = _require_text(major, "major")
        super().__init__(person, **kwargs)
        self._course_grades: Dict[str, List[int]] = {}

    @property
    def student_id(self) -> str:
        """Get the student ID."""
        return self._student_id

    @property
    def major(self) -> str:
        """Get the major."""
        return self._major

    def add_grade(self, course_code: str, grade: int) -> bool:
        """Record a grade for a course.

        Returns False, leaving the ledger untouched, if the grade is not an
        integer between 0 and 100.
        """
        course_code = _require_text(course_code, "course_code")
        if not is_valid_grade(grade):
            logger.warning(
                "Rejected grade %r for %s in %s: must be an integer between %d and %d",
                grade, self._student_id, course_code, MIN_GRADE, MAX_GRADE
            )
            return False

        self._course_grades.setdefault(course_code, []).append(grade)
        self.touch()
        logger.debug("Grade %d added for %s in course %s", grade, self._student_id, course_code)
        return True

    def grades(self, course_code: str) -> List[int]:
        """Get grades for a course in submission order."""
        return list(self._course_grades.get(course_code, []))

    def graded_courses(self) -> List[str]:
        """Get course codes with at least one grade, in first-graded order."""
        return list(self._course_grades)

    def has_grades(self, course_code: str) -> bool:
        return bool(self._course_grades.get(course_code))

    def find_average_grade(self, course_code: str) -> Optional[float]:
        """Get the mean grade for a course, or None if nothing was recorded."""
        grades = self._course_grades.get(course_code)
        if not grades:
            return None
        return sum(grades) / len(grades)

    def find_highest_grade(self, course_code: str) -> Optional[int]:
        """Get the highest grade for a course, or None if nothing was recorded."""
        grades = self._course_grades.get(course_code)
        if not grades:
            return None
        return max(grades)

    def average_grade(self, course_code: str) -> float:
        """Get the mean grade for a course.

        Returns 0.0 when the course has no grades; use ``has_grades`` or
        ``find_average_grade`` to tell that apart from a real zero average.
        """
        average = self.find_average_grade(course_code)
        if average is None:
            logger.info("No grades available for %s in %s", self._student_id, course_code)
            return 0.0
        return average

    def highest_grade(self, course_code: str) -> int:
        """Get the highest grade for a course, 0 when it has no grades."""
        highest = self.find_highest_grade(course_code)
        if highest is None:
            logger.info("No grades available for %s in %s", self._student_id, course_code)
            return 0
        return highest

    def status(self, course_code: str) -> GradeStatus:
        """Pass when the course average reaches the pass mark."""
        if self.average_grade(course_code) >= PASS_MARK:
            return GradeStatus.PASS
        return GradeStatus.FAIL

    def gpa(self) -> float:
        """Unweighted mean of grade points over every graded course."""
        graded = [grades for grades in self._course_grades.values() if grades]
        if not graded:
            return 0.0
        total_points = sum(grade_points(sum(grades) / len(grades)) for grades in graded)
        return total_points / len(graded)

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'student_id': self._student_id,
            'major': self._major,
            'course_grades': {code: list(grades) for code, grades in self._course_grades.items()},
        })
        return base_dict


Member = Union[Student, Teacher]


class Course(AbstractEntity):
    """Course taught by one teacher, holding enrolled students by student ID."""

    def __init__(self, course_code: str, course_name: str, instructor: Teacher, **kwargs):
        self._course_code = _require_text(course_code, "course_code")
        self._course_name = _require_text(course_name, "course_name")
        if not isinstance(instructor, Teacher):
            raise ValidationError("instructor is required", details={'field': 'instructor'})
        super().__init__(**kwargs)
        self._instructor_id = instructor.teacher_id
        self._enrolled: List[str] = []

    @property
    def course_code(self) -> str:
        """Get the course code."""
        return self._course_code

    @property
    def course_name(self) -> str:
        """Get the course name."""
        return self._course_name

    @property
    def instructor_id(self) -> str:
        """Get the instructor's teacher ID."""
        return self._instructor_id

    @property
    def enrolled_student_ids(self) -> List[str]:
        """Get enrolled student IDs in enrollment order."""
        return list(self._enrolled)

    @property
    def enrolled_count(self) -> int:
        """Get the number of enrolled students."""
        return len(self._enrolled)

    def is_taught_by(self, teacher: Teacher) -> bool:
        return self._instructor_id == teacher.teacher_id

    def is_enrolled(self, student: Student) -> bool:
        return student.student_id in self._enrolled

    def enroll(self, student: Student) -> EnrollmentStatus:
        """Enroll a student. Enrolling the same student again is a no-op."""
        if self.is_enrolled(student):
            logger.info("%s is already enrolled in %s", student.name, self._course_name)
            return EnrollmentStatus.ALREADY_ENROLLED

        self._enrolled.append(student.student_id)
        self.touch()
        logger.info("%s enrolled in %s", student.name, self._course_name)
        return EnrollmentStatus.ENROLLED

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'course_code': self._course_code,
            'course_name': self._course_name,
            'instructor_id': self._instructor_id,
            'enrolled': list(self._enrolled),
        })
        return base_dict
