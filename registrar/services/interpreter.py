"""
Command interpreter mapping command lines to record store operations.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from ..core.commands import (
    Command, AddStudentCommand, AddExamCommand, AddGradeCommand, UpdateExamCommand,
    UpdateGradeCommand, DeleteStudentCommand, SearchStudentCommand, SearchGradeCommand,
    parse_command
)
from ..core.enums import CommandType
from ..core.exceptions import RegistrarException
from .record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a single command line."""
    lines: List[str] = field(default_factory=list)
    success: bool = True
    halt: bool = False


class CommandInterpreter:
    """Reads command lines one at a time and writes one response per command."""

    def __init__(self, store: RecordStore, output: Optional[TextIO] = None):
        self._store = store
        self._output = output
        self._halted = False
        self._commands_processed = 0
        self._handlers: Dict[CommandType, Callable[[Command], List[str]]] = {
            CommandType.ADD_STUDENT: self._add_student,
            CommandType.ADD_EXAM: self._add_exam,
            CommandType.ADD_GRADE: self._add_grade,
            CommandType.UPDATE_EXAM: self._update_exam,
            CommandType.UPDATE_GRADE: self._update_grade,
            CommandType.DELETE_STUDENT: self._delete_student,
            CommandType.SEARCH_STUDENT: self._search_student,
            CommandType.SEARCH_GRADE: self._search_grade,
            CommandType.LIST_ALL_STUDENTS: self._list_all_students,
        }

    @property
    def halted(self) -> bool:
        """Whether END has been processed."""
        return self._halted

    @property
    def commands_processed(self) -> int:
        return self._commands_processed

    def execute_line(self, line: str) -> CommandResult:
        """Parse and execute one line without writing anything."""
        try:
            command = parse_command(line)
        except RegistrarException as e:
            logger.debug("Rejected line %r: %s", line.rstrip("\n"), e.details or e.message)
            return CommandResult(lines=[e.message], success=False)

        if command is None:
            return CommandResult()
        return self.execute(command)

    def execute(self, command: Command) -> CommandResult:
        """Execute a parsed command against the store."""
        command_type = command.command_type
        logger.debug("Dispatching %s", command_type.value)

        if command_type == CommandType.END:
            return CommandResult(halt=True)

        try:
            return CommandResult(lines=self._handlers[command_type](command))
        except RegistrarException as e:
            logger.debug("%s failed: %s", command_type.value, e.error_code)
            return CommandResult(lines=[e.message], success=False)

    def process_line(self, line: str) -> bool:
        """Execute one line and write its response. Returns False once halted."""
        if self._halted:
            return False

        result = self.execute_line(line)
        if result.halt:
            self._halted = True
            logger.info("END reached after %d command(s)", self._commands_processed)
            return False

        if line.strip():
            self._commands_processed += 1
        for text in result.lines:
            self._write(text)
        return True

    def run(self, lines: Iterable[str]) -> int:
        """Process lines until they run out or END is reached.

        Returns the number of commands processed, END excluded.
        """
        for line in lines:
            if not self.process_line(line):
                break
        return self._commands_processed

    def _write(self, text: str) -> None:
        if self._output is None:
            raise RuntimeError("CommandInterpreter has no output stream")
        self._output.write(text + "\n")

    def _add_student(self, command: AddStudentCommand) -> List[str]:
        self._store.add_student(command.student_id, command.name, command.faculty)
        return [f"Student: {command.student_id} added"]

    def _add_exam(self, command: AddExamCommand) -> List[str]:
        self._store.add_exam(command.exam_id, command.exam_type, command.info)
        return [f"Exam: {command.exam_id} added"]

    def _add_grade(self, command: AddGradeCommand) -> List[str]:
        self._store.add_grade(command.exam_id, command.student_id, command.value)
        return [f"Grade {command.value} added for the student: {command.student_id}"]

    def _update_exam(self, command: UpdateExamCommand) -> List[str]:
        self._store.update_exam(command.exam_id, command.exam_type, command.info)
        return [f"Exam: {command.exam_id} updated"]

    def _update_grade(self, command: UpdateGradeCommand) -> List[str]:
        self._store.update_grade(command.exam_id, command.student_id, command.value)
        return [f"Grade {command.value} updated for the student: {command.student_id}"]

    def _delete_student(self, command: DeleteStudentCommand) -> List[str]:
        self._store.delete_student(command.student_id)
        return [f"Student: {command.student_id} deleted"]

    def _search_student(self, command: SearchStudentCommand) -> List[str]:
        return [str(self._store.search_student(command.student_id))]

    def _search_grade(self, command: SearchGradeCommand) -> List[str]:
        return [str(self._store.search_grade(command.exam_id, command.student_id))]

    def _list_all_students(self, command: Command) -> List[str]:
        return [str(student) for student in self._store.list_all_students()]
