"""
Runtime configuration for the Registrar CLI.

Values come from defaults, then an optional JSON file, then command-line
overrides.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator, ValidationError as PydanticValidationError

from .core.enums import ReportFormat
from .core.exceptions import ConfigurationError


class AppConfig(BaseModel):
    seed_sample_data: bool = True
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    report_width: int = Field(70, ge=10, le=200)
    report_format: ReportFormat = ReportFormat.TEXT

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_config(path: Optional[Union[str, Path]] = None,
                overrides: Optional[Dict[str, Any]] = None) -> AppConfig:
    """Build the configuration from an optional JSON file and overrides."""
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must be a JSON object")

    data.update({key: value for key, value in (overrides or {}).items() if value is not None})

    try:
        return AppConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} error(s)",
            error_code="invalid_config",
            details={'errors': [error['msg'] for error in e.errors()]}
        ) from e
