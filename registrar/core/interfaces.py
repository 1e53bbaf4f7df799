"""
Core interfaces and abstract base classes for the Registrar record store.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TypeVar, Generic


T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Save an entity."""
        pass

    @abstractmethod
    def find_by_id(self, entity_id: Any) -> Optional[T]:
        """Find entity by ID."""
        pass

    @abstractmethod
    def find_all(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        """Find all entities matching a predicate, in storage order."""
        pass

    @abstractmethod
    def delete(self, entity_id: Any) -> bool:
        """Delete an entity by ID."""
        pass
