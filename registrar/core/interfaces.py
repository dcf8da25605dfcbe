"""
Core interfaces and abstract base classes for the Registrar package.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar



T = TypeVar('T')


class Reportable(ABC):
    """Interface for report objects that can be rendered."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Get the report data as plain values."""
        pass

    @abstractmethod
    def render_text(self, width: int) -> str:
        """Render the report as console text."""
        pass


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Add an entity."""
        pass

    @abstractmethod
    def find_by_key(self, key: str) -> Optional[T]:
        """Find entity by its business key."""
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """Get all entities in insertion order."""
        pass

    @abstractmethod
    def select(self, choice: Any) -> T:
        """Get the entity at a 1-based position."""
        pass
