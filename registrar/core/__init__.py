"""
Core module containing the record model, repositories and input schemas.
"""

from .entities import *
from .exceptions import *
from .enums import *
from .repositories import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Person",
    "Student",
    "Teacher",
    "Course",
    "Member",
    "grade_points",
    "is_valid_grade",

    # Repositories
    "BaseRepository",
    "StudentRepository",
    "TeacherRepository",
    "CourseRepository",
    "parse_choice",

    # Enums
    "PersonType",
    "GradeStatus",
    "EnrollmentStatus",
    "ReportFormat",

    # Exceptions
    "RegistrarError",
    "ValidationError",
    "SelectionError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "ConfigurationError",
]
