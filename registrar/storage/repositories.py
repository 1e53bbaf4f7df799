"""
In-memory repository implementations.

Entities are kept in insertion order in plain lists. Lookups are linear scans
that return the first match, and removals keep the relative order of the
remaining entities.
"""

import logging
import threading
from typing import Any, Callable, List, Optional, Tuple, TypeVar, Generic

from ..core.entities import Student, Exam, Grade, AbstractEntity
from ..core.interfaces import Repository

T = TypeVar('T', bound=AbstractEntity)

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[T], Generic[T]):
    """Base repository over an ordered list."""

    def __init__(self, entity_type: str):
        self._entity_type = entity_type
        self._entities: List[T] = []
        self._lock = threading.RLock()

    def save(self, entity: T) -> T:
        """Append an entity."""
        with self._lock:
            self._entities.append(entity)
            logger.debug("Saved %s %r", self._entity_type, entity)
            return entity

    def find_by_id(self, entity_id: Any) -> Optional[T]:
        """Find the first entity whose key equals ``entity_id``."""
        with self._lock:
            for entity in self._entities:
                if self._key_of(entity) == entity_id:
                    return entity
            return None

    def find_all(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        """Find all entities matching a predicate, in storage order."""
        with self._lock:
            if predicate is None:
                return list(self._entities)
            return [entity for entity in self._entities if predicate(entity)]

    def delete(self, entity_id: Any) -> bool:
        """Delete the first entity whose key equals ``entity_id``."""
        with self._lock:
            for index, entity in enumerate(self._entities):
                if self._key_of(entity) == entity_id:
                    del self._entities[index]
                    return True
            return False

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        """Delete every entity matching a predicate. Returns the number removed."""
        with self._lock:
            kept = [entity for entity in self._entities if not predicate(entity)]
            removed = len(self._entities) - len(kept)
            self._entities = kept
            return removed

    def exists(self, entity_id: Any) -> bool:
        return self.find_by_id(entity_id) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._entities)

    def _key_of(self, entity: T) -> Any:
        return entity.id


class StudentRepository(InMemoryRepository[Student]):
    """Repository for Student entities."""

    def __init__(self):
        super().__init__("student")


class ExamRepository(InMemoryRepository[Exam]):
    """Repository for Exam entities."""

    def __init__(self):
        super().__init__("exam")


class GradeRepository(InMemoryRepository[Grade]):
    """Repository for Grade entities, keyed by (exam_id, student_id)."""

    def __init__(self):
        super().__init__("grade")

    def _key_of(self, entity: Grade) -> Tuple[int, int]:
        return entity.key

    def find_by_pair(self, exam_id: int, student_id: int) -> Optional[Grade]:
        """Find the first grade for an exam and student."""
        return self.find_by_id((exam_id, student_id))

    def find_by_student(self, student_id: int) -> List[Grade]:
        """Find grades by student."""
        return self.find_all(lambda g: g.student_id == student_id)

    def delete_by_student(self, student_id: int) -> int:
        """Delete all grades of a student."""
        return self.delete_where(lambda g: g.student_id == student_id)
