"""
Core entities for the Registrar record store.
"""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from .enums import ExamType, Faculty, MIN_GRADE, MAX_GRADE
from .exceptions import (
    InvalidExamTypeError, InvalidFacultyError, InvalidGradeError, InvalidNameError
)


def validate_grade_value(value: int) -> int:
    """Return the value if it is a valid grade, raise otherwise."""
    if not MIN_GRADE <= value <= MAX_GRADE:
        raise InvalidGradeError(value)
    return value


def validate_faculty(faculty: str) -> str:
    if faculty not in Faculty.values():
        raise InvalidFacultyError(faculty)
    return faculty


def validate_name(name: str) -> str:
    # ASCII letters only, matching isalpha() in the C locale
    if not (name.isascii() and name.isalpha()):
        raise InvalidNameError(name)
    return name


def validate_exam_type(exam_type: str) -> str:
    if exam_type not in ExamType.values():
        raise InvalidExamTypeError(exam_type)
    return exam_type


class AbstractEntity(ABC):
    """Base abstract entity with lifecycle timestamps and versioning."""

    def __init__(self):
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

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

    def update(self, **kwargs) -> None:
        """Update entity with new data."""
        for key, value in kwargs.items():
            if hasattr(self, f"_{key}"):
                setattr(self, f"_{key}", value)
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }


class Student(AbstractEntity):
    """Student identified by a numeric id."""

    def __init__(self, student_id: int, name: str, faculty: str):
        super().__init__()
        self._id = student_id
        self._name = name
        self._faculty = faculty

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def faculty(self) -> str:
        return self._faculty

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'id': self._id,
            'name': self._name,
            'faculty': self._faculty,
        })
        return base_dict

    def __str__(self) -> str:
        return f"ID: {self._id}, Name: {self._name}, Faculty: {self._faculty}"

    def __repr__(self) -> str:
        return f"Student(id={self._id}, name={self._name!r}, faculty={self._faculty!r})"


class Exam(AbstractEntity):
    """Exam identified by a numeric id."""

    def __init__(self, exam_id: int, exam_type: str, info: str):
        super().__init__()
        self._id = exam_id
        self._type = exam_type
        self._info = info

    @property
    def id(self) -> int:
        return self._id

    @property
    def type(self) -> str:
        return self._type

    @property
    def info(self) -> str:
        return self._info

    def update_details(self, exam_type: str, info: str) -> None:
        """Overwrite type and info; the type must be WRITTEN or DIGITAL."""
        validate_exam_type(exam_type)
        self.update(type=exam_type, info=info)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exam to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'id': self._id,
            'type': self._type,
            'info': self._info,
        })
        return base_dict

    def __repr__(self) -> str:
        return f"Exam(id={self._id}, type={self._type!r}, info={self._info!r})"


class Grade(AbstractEntity):
    """Grade a student received on an exam."""

    def __init__(self, exam_id: int, student_id: int, value: int):
        super().__init__()
        self._exam_id = exam_id
        self._student_id = student_id
        self._value = validate_grade_value(value)

    @property
    def exam_id(self) -> int:
        return self._exam_id

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def value(self) -> int:
        return self._value

    @property
    def key(self) -> Tuple[int, int]:
        """The (exam_id, student_id) pair used to look grades up."""
        return (self._exam_id, self._student_id)

    def set_value(self, value: int) -> None:
        """Set a new grade value."""
        self.update(value=validate_grade_value(value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert grade to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'exam_id': self._exam_id,
            'student_id': self._student_id,
            'value': self._value,
        })
        return base_dict

    def __repr__(self) -> str:
        return f"Grade(exam_id={self._exam_id}, student_id={self._student_id}, value={self._value})"


@dataclass(frozen=True)
class GradeReport:
    """Joined view of a grade with its student and exam."""
    exam_id: int
    student_id: int
    name: str
    grade: int
    exam_type: str
    info: str

    def __str__(self) -> str:
        return (f"Exam: {self.exam_id}, Student: {self.student_id}, Name: {self.name}, "
                f"Grade: {self.grade}, Type: {self.exam_type}, Info: {self.info}")
