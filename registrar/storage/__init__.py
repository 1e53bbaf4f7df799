"""
Storage module with the in-memory repositories.
"""

from .repositories import InMemoryRepository, StudentRepository, ExamRepository, GradeRepository

__all__ = [
    "InMemoryRepository",
    "StudentRepository",
    "ExamRepository",
    "GradeRepository",
]
