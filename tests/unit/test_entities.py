"""
Unit tests for core entities
"""
import pytest

from registrar.core.entities import (
    Student,
    Exam,
    Grade,
    GradeReport,
    validate_faculty,
    validate_name,
    validate_exam_type,
    validate_grade_value,
)
from registrar.core.enums import Faculty, ExamType
from registrar.core.exceptions import (
    InvalidExamTypeError,
    InvalidFacultyError,
    InvalidGradeError,
    InvalidNameError,
    ValidationError,
)


class TestValidators:
    """Test field validators"""

    @pytest.mark.parametrize("faculty", sorted(Faculty.values()))
    def test_known_faculties(self, faculty):
        assert validate_faculty(faculty) == faculty

    def test_unknown_faculty(self):
        with pytest.raises(InvalidFacultyError) as exc_info:
            validate_faculty("computerscience")
        assert exc_info.value.message == "Invalid faculty"

    def test_alphabetic_name(self):
        assert validate_name("John") == "John"

    @pytest.mark.parametrize("name", ["J0hn", "Anne-Marie", "O'Neil", "José"])
    def test_non_alphabetic_name(self, name):
        with pytest.raises(InvalidNameError):
            validate_name(name)

    @pytest.mark.parametrize("value", [0, 50, 100])
    def test_grade_bounds_inclusive(self, value):
        assert validate_grade_value(value) == value

    @pytest.mark.parametrize("value", [-1, 101])
    def test_grade_out_of_range(self, value):
        with pytest.raises(InvalidGradeError) as exc_info:
            validate_grade_value(value)
        assert exc_info.value.message == "Invalid grade"
        assert isinstance(exc_info.value, ValidationError)

    def test_exam_types(self):
        assert ExamType.values() == {"WRITTEN", "DIGITAL"}
        with pytest.raises(InvalidExamTypeError):
            validate_exam_type("ORAL")


class TestStudent:
    """Test Student entity"""

    def test_properties(self):
        student = Student(1, "John", "ComputerScience")
        assert student.id == 1
        assert student.name == "John"
        assert student.faculty == "ComputerScience"
        assert student.version == 1

    def test_str_matches_listing_format(self):
        assert str(Student(1, "John", "ComputerScience")) == "ID: 1, Name: John, Faculty: ComputerScience"

    def test_to_dict(self):
        data = Student(1, "John", "ComputerScience").to_dict()
        assert data["id"] == 1
        assert data["name"] == "John"
        assert data["faculty"] == "ComputerScience"
        assert "created_at" in data


class TestExam:
    """Test Exam entity"""

    def test_free_form_type_on_creation(self):
        exam = Exam(10, "ORAL", "Midterm")
        assert exam.type == "ORAL"

    def test_update_details(self):
        exam = Exam(10, "WRITTEN", "Midterm")
        exam.update_details("DIGITAL", "Final")
        assert exam.type == "DIGITAL"
        assert exam.info == "Final"
        assert exam.version == 2
        assert exam.updated_at >= exam.created_at

    def test_update_details_rejects_type(self):
        exam = Exam(10, "WRITTEN", "Midterm")
        with pytest.raises(InvalidExamTypeError):
            exam.update_details("ORAL", "Final")
        assert exam.type == "WRITTEN"
        assert exam.info == "Midterm"
        assert exam.version == 1


class TestGrade:
    """Test Grade entity"""

    def test_key(self):
        assert Grade(10, 1, 85).key == (10, 1)

    def test_rejects_invalid_value_on_creation(self):
        with pytest.raises(InvalidGradeError):
            Grade(10, 1, 101)

    def test_set_value(self):
        grade = Grade(10, 1, 85)
        grade.set_value(90)
        assert grade.value == 90
        assert grade.version == 2

    def test_set_invalid_value_keeps_old(self):
        grade = Grade(10, 1, 85)
        with pytest.raises(InvalidGradeError):
            grade.set_value(-1)
        assert grade.value == 85


class TestGradeReport:
    """Test GradeReport view"""

    def test_str(self):
        report = GradeReport(exam_id=10, student_id=1, name="John", grade=85,
                             exam_type="WRITTEN", info="Midterm")
        assert str(report) == "Exam: 10, Student: 1, Name: John, Grade: 85, Type: WRITTEN, Info: Midterm"
