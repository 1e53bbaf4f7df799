"""
Main entry point for the Registrar record store.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .config import RegistrarConfig, load_config
from .core.exceptions import ConfigurationError
from .services import RecordStore, CommandInterpreter

logger = logging.getLogger(__name__)


def setup_logging(config: RegistrarConfig) -> None:
    """Configure root logging from the numeric level in the configuration."""
    level_map = {
        0: logging.CRITICAL + 1,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    level = level_map.get(config.log_level, logging.ERROR)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    handler.setLevel(level)
    root_logger.addHandler(handler)


class Registrar:
    """Application object tying the store and interpreter to input and output."""

    def __init__(self, config: Optional[RegistrarConfig] = None):
        self._config = config or RegistrarConfig()
        self._store = RecordStore(self._config)

    @property
    def config(self) -> RegistrarConfig:
        return self._config

    @property
    def store(self) -> RecordStore:
        return self._store

    def run(self, lines: Iterable[str], output: TextIO) -> int:
        """Process command lines, writing responses to ``output``."""
        interpreter = CommandInterpreter(self._store, output)
        processed = interpreter.run(lines)
        logger.info("Processed %d command(s)", processed)
        return processed

    def run_files(self) -> int:
        """Process the configured input file into the configured output file.

        Raises ``OSError`` if either file cannot be opened; nothing is
        processed in that case.
        """
        logger.info("Reading commands from %s", self._config.input_path)
        with open(self._config.input_path, 'r', encoding='utf-8', errors='surrogateescape') as input_file:
            logger.info("Writing responses to %s", self._config.output_path)
            with open(self._config.output_path, 'w', encoding='utf-8', errors='surrogateescape') as output_file:
                return self.run(input_file, output_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Registrar academic record store")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--input", type=str, dest="input_path", help="Command file to read")
    parser.add_argument("--output", type=str, dest="output_path", help="Response file to write")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            overrides={"input_path": args.input_path, "output_path": args.output_path},
        )
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        return 1

    setup_logging(config)

    try:
        Registrar(config).run_files()
    except OSError as e:
        logger.error("Failed to open %s: %s", e.filename, e.strerror)
        print(f"Failed to open {e.filename}: {e.strerror}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
