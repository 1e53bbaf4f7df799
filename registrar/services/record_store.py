"""
Record store service owning the student, exam and grade collections.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from ..config import RegistrarConfig
from ..core.entities import (
    Student, Exam, Grade, GradeReport,
    validate_faculty, validate_grade_value, validate_name
)
from ..core.exceptions import (
    DuplicateEntityError, ExamNotFoundError, GradeNotFoundError,
    InvalidLengthError, StudentNotFoundError
)
from ..storage.repositories import StudentRepository, ExamRepository, GradeRepository

logger = logging.getLogger(__name__)


class RecordStore:
    """In-memory store of students, exams and grades.

    Every operation either returns its result or raises a
    ``RegistrarException`` subclass describing why the store was left
    unchanged.
    """

    def __init__(self, config: Optional[RegistrarConfig] = None):
        self._config = config or RegistrarConfig()
        self._students = StudentRepository()
        self._exams = ExamRepository()
        self._grades = GradeRepository()
        self._lock = threading.RLock()

    @property
    def config(self) -> RegistrarConfig:
        return self._config

    def add_student(self, student_id: int, name: str, faculty: str) -> Student:
        """Add a student."""
        with self._lock:
            if self._students.exists(student_id):
                raise DuplicateEntityError("Student", student_id)
            if (len(name) >= self._config.max_name_length
                    or len(faculty) >= self._config.max_faculty_length):
                raise InvalidLengthError("Invalid name or faculty length", error_code="invalid_length",
                                         details={"name": name, "faculty": faculty})
            validate_faculty(faculty)
            validate_name(name)

            student = self._students.save(Student(student_id, name, faculty))
            logger.info("Added student %s", student_id)
            return student

    def add_exam(self, exam_id: int, exam_type: str, info: str) -> Exam:
        """Add an exam. The type is not restricted on creation."""
        with self._lock:
            if self._exams.exists(exam_id):
                raise DuplicateEntityError("Exam", exam_id)
            if (len(exam_type) >= self._config.max_type_length
                    or len(info) >= self._config.max_info_length):
                raise InvalidLengthError("Invalid type or info length", error_code="invalid_length",
                                         details={"type": exam_type, "info": info})

            exam = self._exams.save(Exam(exam_id, exam_type, info))
            logger.info("Added exam %s", exam_id)
            return exam

    def add_grade(self, exam_id: int, student_id: int, value: int) -> Grade:
        """Record a grade. Several grades for the same pair may coexist."""
        with self._lock:
            validate_grade_value(value)
            if not self._students.exists(student_id):
                raise StudentNotFoundError(student_id)
            if not self._exams.exists(exam_id):
                raise ExamNotFoundError(exam_id)

            grade = self._grades.save(Grade(exam_id, student_id, value))
            logger.info("Added grade %s for student %s on exam %s", value, student_id, exam_id)
            return grade

    def update_exam(self, exam_id: int, exam_type: str, info: str) -> Exam:
        """Overwrite an exam's type and info."""
        with self._lock:
            exam = self._exams.find_by_id(exam_id)
            if exam is None:
                raise ExamNotFoundError(exam_id)
            exam.update_details(exam_type, info)
            logger.info("Updated exam %s", exam_id)
            return exam

    def update_grade(self, exam_id: int, student_id: int, value: int) -> Grade:
        """Overwrite the first grade recorded for the pair.

        A missing grade is reported as ``StudentNotFoundError``.
        """
        with self._lock:
            validate_grade_value(value)
            grade = self._grades.find_by_pair(exam_id, student_id)
            if grade is None:
                raise StudentNotFoundError(student_id)
            grade.set_value(value)
            logger.info("Updated grade for student %s on exam %s to %s", student_id, exam_id, value)
            return grade

    def delete_student(self, student_id: int) -> Student:
        """Delete a student together with all of their grades."""
        with self._lock:
            student = self._students.find_by_id(student_id)
            if student is None:
                raise StudentNotFoundError(student_id)
            removed = self._grades.delete_by_student(student_id)
            self._students.delete(student_id)
            logger.info("Deleted student %s and %d grade(s)", student_id, removed)
            return student

    def search_student(self, student_id: int) -> Student:
        with self._lock:
            student = self._students.find_by_id(student_id)
            if student is None:
                raise StudentNotFoundError(student_id)
            return student

    def search_grade(self, exam_id: int, student_id: int) -> GradeReport:
        """Join the first matching grade with its student and exam."""
        with self._lock:
            student = self._students.find_by_id(student_id)
            if student is None:
                raise StudentNotFoundError(student_id)
            grade = self._grades.find_by_pair(exam_id, student_id)
            if grade is None:
                raise GradeNotFoundError(exam_id, student_id)
            exam = self._exams.find_by_id(exam_id)
            if exam is None:
                raise ExamNotFoundError(exam_id)
            return GradeReport(
                exam_id=exam_id,
                student_id=student_id,
                name=student.name,
                grade=grade.value,
                exam_type=exam.type,
                info=exam.info,
            )

    def list_all_students(self) -> List[Student]:
        """All students in storage order."""
        with self._lock:
            return self._students.find_all()

    def grades_for_student(self, student_id: int) -> List[Grade]:
        with self._lock:
            return self._grades.find_by_student(student_id)

    def snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        """Dictionary view of the whole store."""
        with self._lock:
            return {
                'students': [s.to_dict() for s in self._students.find_all()],
                'exams': [e.to_dict() for e in self._exams.find_all()],
                'grades': [g.to_dict() for g in self._grades.find_all()],
            }

    def get_statistics(self) -> Dict[str, int]:
        """Get record counts."""
        with self._lock:
            return {
                'students': self._students.count(),
                'exams': self._exams.count(),
                'grades': self._grades.count(),
            }
