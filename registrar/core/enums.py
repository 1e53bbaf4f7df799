"""
Enumerations and constants for the Registrar record store.
"""

from enum import Enum
from typing import Set


class Faculty(Enum):
    """Faculties a student may belong to."""
    SOFTWARE_ENGINEERING = "SoftwareEngineering"
    COMPUTER_SCIENCE = "ComputerScience"
    DATA_SCIENCE = "DataScience"
    CYBER_SECURITY = "CyberSecurity"
    INFORMATION_TECHNOLOGY = "InformationTechnology"
    PROGRAMMING_LANGUAGES_AND_COMPILERS = "ProgrammingLanguagesAndCompilers"

    @classmethod
    def values(cls) -> Set[str]:
        return {member.value for member in cls}


class ExamType(Enum):
    """Exam types accepted when an exam is updated."""
    WRITTEN = "WRITTEN"
    DIGITAL = "DIGITAL"

    @classmethod
    def values(cls) -> Set[str]:
        return {member.value for member in cls}


class CommandType(Enum):
    """Verbs understood by the command interpreter."""
    ADD_STUDENT = "ADD_STUDENT"
    ADD_EXAM = "ADD_EXAM"
    ADD_GRADE = "ADD_GRADE"
    UPDATE_EXAM = "UPDATE_EXAM"
    UPDATE_GRADE = "UPDATE_GRADE"
    DELETE_STUDENT = "DELETE_STUDENT"
    SEARCH_STUDENT = "SEARCH_STUDENT"
    SEARCH_GRADE = "SEARCH_GRADE"
    LIST_ALL_STUDENTS = "LIST_ALL_STUDENTS"
    END = "END"


MIN_GRADE = 0
MAX_GRADE = 100
