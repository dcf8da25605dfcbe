"""
Enumerations and constants for the Registrar package.
"""

from enum import Enum


class PersonType(Enum):
    """Types of persons in the registry."""
    STUDENT = "student"
    TEACHER = "teacher"


class GradeStatus(str, Enum):
    """Pass/fail outcome of a course."""
    PASS = "Pass"
    FAIL = "Fail"


class EnrollmentStatus(Enum):
    """Outcome of an enrollment request."""
    ENROLLED = "enrolled"
    ALREADY_ENROLLED = "already_enrolled"


class ReportFormat(Enum):
    """Supported report formats."""
    TEXT = "text"
    JSON = "json"


MIN_GRADE = 0
MAX_GRADE = 100
PASS_MARK = 60

# (minimum average, grade points), checked top-down
GPA_BREAKPOINTS = (
    (90, 4.0),
    (80, 3.0),
    (70, 2.0),
    (60, 1.0),
)
