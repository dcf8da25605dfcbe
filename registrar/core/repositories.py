"""
In-memory repositories keyed by each record's business identifier.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .entities import AbstractEntity, Course, Student, Teacher
from .exceptions import DuplicateEntityError, SelectionError
from .interfaces import Repository

T = TypeVar('T', bound=AbstractEntity)

logger = logging.getLogger(__name__)


def parse_choice(choice: Any, upper: int) -> int:
    """Turn a 1-based menu choice into an index, rejecting bad input."""
    if isinstance(choice, bool):
        raise SelectionError("Invalid selection.", error_code="not_a_number", details={'choice': choice})
    if isinstance(choice, str):
        try:
            choice = int(choice.strip())
        except ValueError:
            raise SelectionError(
                "Invalid selection.", error_code="not_a_number", details={'choice': choice}
            ) from None
    if not isinstance(choice, int):
        raise SelectionError("Invalid selection.", error_code="not_a_number", details={'choice': choice})
    if choice < 1 or choice > upper:
        raise SelectionError(
            "Invalid selection.",
            error_code="out_of_range",
            details={'choice': choice, 'upper': upper}
        )
    return choice - 1


class BaseRepository(Repository[T], Generic[T]):
    """Ordered in-memory repository with unique keys."""

    def __init__(self, entity_type: str, key_of: Callable[[T], str]):
        self._entity_type = entity_type
        self._key_of = key_of
        self._entities: Dict[str, T] = {}

    def add(self, entity: T) -> T:
        """Add an entity. Keys must be unique."""
        key = self._key_of(entity)
        if key in self._entities:
            raise DuplicateEntityError(
                f"{self._entity_type} {key} already exists",
                error_code="duplicate_key",
                details={'key': key, 'entity_type': self._entity_type}
            )
        self._entities[key] = entity
        logger.debug("Added %s %s", self._entity_type, key)
        return entity

    def find_by_key(self, key: str) -> Optional[T]:
        return self._entities.get(key)

    def find_all(self) -> List[T]:
        return list(self._entities.values())

    def count(self) -> int:
        return len(self._entities)

    def is_empty(self) -> bool:
        return not self._entities

    def contains(self, entity: T) -> bool:
        return self._entities.get(self._key_of(entity)) is entity

    def select(self, choice: Any) -> T:
        index = parse_choice(choice, len(self._entities))
        return self.find_all()[index]


class StudentRepository(BaseRepository[Student]):
    def __init__(self):
        super().__init__("student", lambda student: student.student_id)


class TeacherRepository(BaseRepository[Teacher]):
    def __init__(self):
        super().__init__("teacher", lambda teacher: teacher.teacher_id)


class CourseRepository(BaseRepository[Course]):
    def __init__(self):
        super().__init__("course", lambda course: course.course_code)
