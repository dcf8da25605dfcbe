"""
Pydantic models validating raw input before records are constructed.
"""

from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from .exceptions import ValidationError


class PersonCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=150)
    gender: str = Field(..., min_length=1, max_length=30)


class StudentCreate(PersonCreate):
    student_id: str = Field(..., min_length=1, max_length=20)
    major: str = Field(..., min_length=1, max_length=100)


class TeacherCreate(PersonCreate):
    subject: str = Field(..., min_length=1, max_length=100)
    teacher_id: str = Field(..., min_length=1, max_length=20)


class CourseCreate(BaseModel):
    course_code: str = Field(..., min_length=1, max_length=20)
    course_name: str = Field(..., min_length=1, max_length=200)
    teacher_id: str = Field(..., min_length=1, max_length=20)


class GradeEntry(BaseModel):
    student_id: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)
    grade: int


S = TypeVar('S', bound=BaseModel)


def parse_input(schema: Type[S], data: Dict[str, Any]) -> S:
    """Validate ``data`` against ``schema``, raising the package's ValidationError."""
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        problems = [
            {'field': ".".join(str(part) for part in error['loc']), 'message': error['msg']}
            for error in e.errors()
        ]
        fields = ", ".join(problem['field'] for problem in problems)
        raise ValidationError(
            f"Invalid {schema.__name__} input: {fields}",
            error_code="invalid_input",
            details={'errors': problems}
        ) from e
