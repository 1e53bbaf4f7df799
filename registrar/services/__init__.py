"""
Services module containing the record store and the command interpreter.
"""

from .record_store import RecordStore
from .interpreter import CommandInterpreter, CommandResult

__all__ = [
    "RecordStore",
    "CommandInterpreter",
    "CommandResult",
]
