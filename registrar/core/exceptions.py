"""
Custom exceptions for the Registrar record store.

Every exception carries the exact line the command interpreter writes to the
output stream when the corresponding command is rejected.
"""

from typing import Optional, Any, Dict


class RegistrarException(Exception):
    """Base exception for all Registrar-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RegistrarException):
    """Raised when data validation fails."""
    pass


class InvalidLengthError(ValidationError):
    """Raised when a text field reaches its length limit."""
    pass


class InvalidNameError(ValidationError):
    """Raised when a student name contains non-alphabetic characters."""

    def __init__(self, name: str):
        super().__init__("Invalid name", error_code="invalid_name", details={"name": name})


class InvalidFacultyError(ValidationError):
    """Raised when a faculty is not one of the known faculties."""

    def __init__(self, faculty: str):
        super().__init__("Invalid faculty", error_code="invalid_faculty", details={"faculty": faculty})


class InvalidExamTypeError(ValidationError):
    """Raised when an exam type is neither WRITTEN nor DIGITAL."""

    def __init__(self, exam_type: str):
        super().__init__("Invalid exam type", error_code="invalid_exam_type", details={"type": exam_type})


class InvalidGradeError(ValidationError):
    """Raised when a grade value falls outside [0, 100]."""

    def __init__(self, value: int):
        super().__init__("Invalid grade", error_code="invalid_grade", details={"value": value})


class ResourceNotFoundError(RegistrarException):
    """Raised when a requested resource is not found."""
    pass


class StudentNotFoundError(ResourceNotFoundError):
    """Raised when a student (or, on grade update, a matching grade) is absent."""

    def __init__(self, student_id: int):
        super().__init__("Student not found", error_code="student_not_found",
                         details={"student_id": student_id})


class ExamNotFoundError(ResourceNotFoundError):
    """Raised when an exam is absent."""

    def __init__(self, exam_id: int):
        super().__init__("Exam not found", error_code="exam_not_found", details={"exam_id": exam_id})


class GradeNotFoundError(ResourceNotFoundError):
    """Raised when no grade matches an (exam, student) pair."""

    def __init__(self, exam_id: int, student_id: int):
        super().__init__("Grade not found", error_code="grade_not_found",
                         details={"exam_id": exam_id, "student_id": student_id})


class DuplicateEntityError(RegistrarException):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_name: str, entity_id: int):
        super().__init__(f"{entity_name}: {entity_id} already exists", error_code="already_exists",
                         details={"entity": entity_name, "id": entity_id})


class CommandFormatError(RegistrarException):
    """Raised when a command line has missing or malformed arguments."""

    def __init__(self, verb: str, reason: Optional[str] = None):
        super().__init__(f"Invalid {verb} command format", error_code="invalid_format",
                         details={"verb": verb, "reason": reason})
        self.verb = verb


class UnknownCommandError(RegistrarException):
    """Raised when a command verb is not recognised."""

    def __init__(self, verb: str):
        super().__init__(f"Unknown command: {verb}", error_code="unknown_command", details={"verb": verb})
        self.verb = verb


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass
