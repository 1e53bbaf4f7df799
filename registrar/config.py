"""
Configuration for the Registrar record store.

Values come from, in increasing precedence: the defaults below, a JSON
configuration file, the ``LOG_LEVEL`` / ``LOG_FILE`` environment variables,
and explicit overrides from the command line.
"""

import json
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .core.exceptions import ConfigurationError


class RegistrarConfig(BaseModel):
    """Runtime settings."""

    input_path: str = Field(default="input.txt", min_length=1)
    output_path: str = Field(default="output.txt", min_length=1)

    # A value is too long once its length reaches the limit.
    max_name_length: int = Field(default=100, ge=1)
    max_faculty_length: int = Field(default=100, ge=1)
    max_type_length: int = Field(default=20, ge=1)
    max_info_length: int = Field(default=100, ge=1)

    # 0 silent, 1 INFO, 2 DEBUG
    log_level: int = Field(default=0, ge=0, le=2)
    log_file: Optional[str] = None


def load_config(path: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None,
                overrides: Optional[Dict[str, Any]] = None) -> RegistrarConfig:
    """Build a configuration from a JSON file, the environment and overrides."""
    data: Dict[str, Any] = {}

    if path:
        try:
            with open(path, 'r') as f:
                loaded = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}")
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        data.update(loaded)

    env = os.environ if environ is None else environ
    raw_level = env.get("LOG_LEVEL")
    if raw_level is not None:
        try:
            data["log_level"] = int(raw_level)
        except ValueError:
            data["log_level"] = 0
    if env.get("LOG_FILE"):
        data["log_file"] = env["LOG_FILE"]

    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return RegistrarConfig(**data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", details={"errors": e.errors()})
