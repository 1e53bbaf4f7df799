"""
Core module containing the entities, command model and exceptions.
"""

from .entities import *
from .commands import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Student",
    "Exam",
    "Grade",
    "GradeReport",

    # Commands
    "Command",
    "AddStudentCommand",
    "AddExamCommand",
    "AddGradeCommand",
    "UpdateExamCommand",
    "UpdateGradeCommand",
    "DeleteStudentCommand",
    "SearchStudentCommand",
    "SearchGradeCommand",
    "ListAllStudentsCommand",
    "EndCommand",
    "parse_command",

    # Enums
    "Faculty",
    "ExamType",
    "CommandType",

    # Exceptions
    "RegistrarException",
    "ValidationError",
    "InvalidLengthError",
    "InvalidNameError",
    "InvalidFacultyError",
    "InvalidExamTypeError",
    "InvalidGradeError",
    "ResourceNotFoundError",
    "StudentNotFoundError",
    "ExamNotFoundError",
    "GradeNotFoundError",
    "DuplicateEntityError",
    "CommandFormatError",
    "UnknownCommandError",
    "ConfigurationError",
]
