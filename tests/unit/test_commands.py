"""
Unit tests for the command parser
"""
import pytest

from registrar.core.commands import (
    AddStudentCommand,
    AddExamCommand,
    AddGradeCommand,
    UpdateExamCommand,
    UpdateGradeCommand,
    DeleteStudentCommand,
    SearchStudentCommand,
    SearchGradeCommand,
    ListAllStudentsCommand,
    EndCommand,
    COMMAND_ARGUMENTS,
    parse_command,
    tokenize,
)
from registrar.core.enums import CommandType
from registrar.core.exceptions import CommandFormatError, UnknownCommandError


class TestTokenize:
    """Test tokenize function"""

    def test_splits_on_any_whitespace(self):
        assert tokenize("ADD_GRADE\t10  1 85\n") == ("ADD_GRADE", "10", "1", "85")

    def test_blank_line(self):
        assert tokenize("   \n") == ()


class TestParseCommand:
    """Test parse_command function"""

    def test_blank_line_returns_none(self):
        """Test that blank lines produce no command"""
        assert parse_command("\n") is None
        assert parse_command("") is None

    def test_add_student(self):
        command = parse_command("ADD_STUDENT 1 John ComputerScience\n")
        assert isinstance(command, AddStudentCommand)
        assert command.student_id == 1
        assert command.name == "John"
        assert command.faculty == "ComputerScience"
        assert command.command_type == CommandType.ADD_STUDENT

    def test_add_exam(self):
        command = parse_command("ADD_EXAM 10 WRITTEN Midterm")
        assert isinstance(command, AddExamCommand)
        assert (command.exam_id, command.exam_type, command.info) == (10, "WRITTEN", "Midterm")

    def test_add_grade(self):
        command = parse_command("ADD_GRADE 10 1 85")
        assert isinstance(command, AddGradeCommand)
        assert (command.exam_id, command.student_id, command.value) == (10, 1, 85)

    def test_update_commands(self):
        exam = parse_command("UPDATE_EXAM 10 DIGITAL Final")
        grade = parse_command("UPDATE_GRADE 10 1 90")
        assert isinstance(exam, UpdateExamCommand)
        assert exam.exam_type == "DIGITAL"
        assert isinstance(grade, UpdateGradeCommand)
        assert grade.value == 90

    def test_single_id_commands(self):
        assert isinstance(parse_command("DELETE_STUDENT 3"), DeleteStudentCommand)
        assert isinstance(parse_command("SEARCH_STUDENT 3"), SearchStudentCommand)
        search = parse_command("SEARCH_GRADE 10 3")
        assert isinstance(search, SearchGradeCommand)
        assert (search.exam_id, search.student_id) == (10, 3)

    def test_argumentless_commands_ignore_trailing_tokens(self):
        assert isinstance(parse_command("LIST_ALL_STUDENTS"), ListAllStudentsCommand)
        assert isinstance(parse_command("LIST_ALL_STUDENTS now please"), ListAllStudentsCommand)
        assert isinstance(parse_command("END"), EndCommand)

    def test_trailing_tokens_ignored(self):
        command = parse_command("SEARCH_STUDENT 7 extra tokens")
        assert command.student_id == 7

    def test_signed_integers(self):
        command = parse_command("ADD_GRADE +10 -1 85")
        assert command.exam_id == 10
        assert command.student_id == -1

    def test_negative_grade_parses(self):
        """Test that range checks are left to the store"""
        assert parse_command("ADD_GRADE 10 1 -5").value == -5

    def test_unknown_verb(self):
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_command("FOO 1 2")
        assert exc_info.value.message == "Unknown command: FOO"

    def test_verbs_are_case_sensitive(self):
        with pytest.raises(UnknownCommandError):
            parse_command("add_student 1 John ComputerScience")

    @pytest.mark.parametrize("line", [
        "ADD_STUDENT 1 John",
        "ADD_STUDENT",
        "ADD_GRADE 10 1",
        "SEARCH_GRADE 10",
        "DELETE_STUDENT",
    ])
    def test_missing_arguments(self, line):
        verb = line.split()[0]
        with pytest.raises(CommandFormatError) as exc_info:
            parse_command(line)
        assert exc_info.value.message == f"Invalid {verb} command format"

    @pytest.mark.parametrize("line", [
        "ADD_STUDENT one John ComputerScience",
        "ADD_GRADE 10 x 85",
        "UPDATE_GRADE 10 1 ninety",
        "SEARCH_STUDENT abc12",
        "SEARCH_STUDENT \u0661\u0662",
        "ADD_GRADE 10 1 .5",
        "ADD_GRADE 10 1 -",
    ])
    def test_malformed_integers(self, line):
        verb = line.split()[0]
        with pytest.raises(CommandFormatError) as exc_info:
            parse_command(line)
        assert exc_info.value.verb == verb

    @pytest.mark.parametrize("token, expected", [
        ("85.5", 85),
        ("12abc", 12),
        ("-7x", -7),
        ("+3", 3),
    ])
    def test_integer_prefix_is_read(self, token, expected):
        """Test that only the leading digits of a token are read"""
        assert parse_command(f"ADD_GRADE 10 1 {token}").value == expected

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(CommandFormatError):
            parse_command("ADD_GRADE 10 1 \u0661\u0662")

    def test_every_verb_has_argument_names(self):
        assert set(COMMAND_ARGUMENTS) == set(CommandType)

    def test_commands_are_immutable(self):
        command = parse_command("SEARCH_STUDENT 1")
        with pytest.raises(Exception):
            command.student_id = 2
