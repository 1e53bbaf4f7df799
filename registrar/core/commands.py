"""
Typed command values and the line parser that produces them.

A command line is a verb followed by whitespace-separated arguments. Parsing
turns it into one of the command models below, discriminated on ``verb``.
Trailing tokens beyond a command's arguments are ignored.
"""

import re
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .enums import CommandType
from .exceptions import CommandFormatError, UnknownCommandError


_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+", re.ASCII)


def _parse_int(value: Any) -> Any:
    if isinstance(value, str):
        # Leading digits are read and the rest of the token is dropped, as scanf does
        match = _INTEGER_PATTERN.match(value)
        if match is None:
            raise ValueError(f"{value!r} does not start with an integer")
        return int(match.group(0))
    return value


CommandInt = Annotated[int, BeforeValidator(_parse_int)]


class Command(BaseModel):
    """Base class for parsed commands."""
    model_config = ConfigDict(frozen=True)

    verb: str

    @property
    def command_type(self) -> CommandType:
        return CommandType(self.verb)


class AddStudentCommand(Command):
    verb: Literal["ADD_STUDENT"] = "ADD_STUDENT"
    student_id: CommandInt
    name: str
    faculty: str


class AddExamCommand(Command):
    verb: Literal["ADD_EXAM"] = "ADD_EXAM"
    exam_id: CommandInt
    exam_type: str
    info: str


class AddGradeCommand(Command):
    verb: Literal["ADD_GRADE"] = "ADD_GRADE"
    exam_id: CommandInt
    student_id: CommandInt
    value: CommandInt


class UpdateExamCommand(Command):
    verb: Literal["UPDATE_EXAM"] = "UPDATE_EXAM"
    exam_id: CommandInt
    exam_type: str
    info: str


class UpdateGradeCommand(Command):
    verb: Literal["UPDATE_GRADE"] = "UPDATE_GRADE"
    exam_id: CommandInt
    student_id: CommandInt
    value: CommandInt


class DeleteStudentCommand(Command):
    verb: Literal["DELETE_STUDENT"] = "DELETE_STUDENT"
    student_id: CommandInt


class SearchStudentCommand(Command):
    verb: Literal["SEARCH_STUDENT"] = "SEARCH_STUDENT"
    student_id: CommandInt


class SearchGradeCommand(Command):
    verb: Literal["SEARCH_GRADE"] = "SEARCH_GRADE"
    exam_id: CommandInt
    student_id: CommandInt


class ListAllStudentsCommand(Command):
    verb: Literal["LIST_ALL_STUDENTS"] = "LIST_ALL_STUDENTS"


class EndCommand(Command):
    verb: Literal["END"] = "END"


AnyCommand = Annotated[
    Union[
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
    ],
    Field(discriminator="verb"),
]

_COMMAND_ADAPTER: TypeAdapter = TypeAdapter(AnyCommand)

# Positional argument names, in the order they appear on a command line.
COMMAND_ARGUMENTS: Dict[CommandType, Tuple[str, ...]] = {
    CommandType.ADD_STUDENT: ("student_id", "name", "faculty"),
    CommandType.ADD_EXAM: ("exam_id", "exam_type", "info"),
    CommandType.ADD_GRADE: ("exam_id", "student_id", "value"),
    CommandType.UPDATE_EXAM: ("exam_id", "exam_type", "info"),
    CommandType.UPDATE_GRADE: ("exam_id", "student_id", "value"),
    CommandType.DELETE_STUDENT: ("student_id",),
    CommandType.SEARCH_STUDENT: ("student_id",),
    CommandType.SEARCH_GRADE: ("exam_id", "student_id"),
    CommandType.LIST_ALL_STUDENTS: (),
    CommandType.END: (),
}


def tokenize(line: str) -> Tuple[str, ...]:
    """Split a command line into whitespace-delimited tokens."""
    return tuple(line.split())


def parse_command(line: str) -> Optional[Command]:
    """Parse one command line.

    Returns ``None`` for a blank line. Raises ``UnknownCommandError`` when the
    verb is not recognised and ``CommandFormatError`` when the arguments are
    missing or not of the expected type.
    """
    tokens = tokenize(line)
    if not tokens:
        return None

    verb = tokens[0]
    try:
        command_type = CommandType(verb)
    except ValueError:
        raise UnknownCommandError(verb)

    names = COMMAND_ARGUMENTS[command_type]
    arguments = tokens[1:1 + len(names)]
    if len(arguments) < len(names):
        raise CommandFormatError(verb, f"expected {len(names)} arguments, got {len(arguments)}")

    payload: Dict[str, Any] = dict(zip(names, arguments))
    payload["verb"] = verb
    try:
        return _COMMAND_ADAPTER.validate_python(payload)
    except PydanticValidationError as e:
        raise CommandFormatError(verb, str(e)) from e
