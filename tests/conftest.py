"""
Pytest configuration and fixtures
"""
import io
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from registrar.config import RegistrarConfig
from registrar.services import RecordStore, CommandInterpreter


@pytest.fixture
def config():
    """Default configuration"""
    return RegistrarConfig()


@pytest.fixture
def store(config):
    """Empty record store"""
    return RecordStore(config)


@pytest.fixture
def output():
    """In-memory output stream"""
    return io.StringIO()


@pytest.fixture
def interpreter(store, output):
    """Interpreter writing to the in-memory output stream"""
    return CommandInterpreter(store, output)


@pytest.fixture
def run_commands(interpreter, output):
    """Run command text through the interpreter and return the response lines"""
    def _run(text):
        interpreter.run(text.splitlines(keepends=True))
        return output.getvalue().splitlines()
    return _run
