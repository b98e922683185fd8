"""Service for loading course settings from defaults and an optional JSON file."""
from typing import Dict, Any, Optional, List
import json
import logging
from pathlib import Path

from es123.core.schema_validator import settings_validator
from es123.formatting import DEFAULT_PRECISION
from es123.timer import CLOCKS, DEFAULT_CLOCK

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class CourseConfig:
    """Configuration object holding all course program settings."""

    def __init__(self):
        # Timer
        self.clock: str = DEFAULT_CLOCK

        # Output
        self.float_precision: int = DEFAULT_PRECISION

        # Console prompts
        self.first_name_prompt: str = "Please enter your first name: "
        self.age_prompt: str = "Please enter your age: "
        self.float_prompt: str = "Please enter a floating point value: "


class SettingsService:
    """Service for parsing JSON settings and creating the course configuration."""

    @staticmethod
    def load_defaults() -> CourseConfig:
        """Load the default configuration."""
        return CourseConfig()

    @staticmethod
    def parse_settings(params: Optional[Dict[str, Any]]) -> CourseConfig:
        """Parse JSON settings and merge with defaults."""
        config = SettingsService.load_defaults()

        if not params:
            return config

        if "clock" in params:
            config.clock = params["clock"]
        if "floatPrecision" in params:
            config.float_precision = params["floatPrecision"]

        if "prompts" in params:
            prompts = params["prompts"]
            if "firstName" in prompts:
                config.first_name_prompt = prompts["firstName"]
            if "age" in prompts:
                config.age_prompt = prompts["age"]
            if "floatValue" in prompts:
                config.float_prompt = prompts["floatValue"]

        return config

    @staticmethod
    def validate_config(config: CourseConfig) -> List[str]:
        """Validate configuration and return list of any errors."""
        errors = []

        if config.clock not in CLOCKS:
            errors.append(f"Clock must be one of: {', '.join(CLOCKS)}")

        precision = config.float_precision
        if isinstance(precision, bool) or not isinstance(precision, int):
            errors.append(f"Float precision must be a whole number, got {precision!r}")
        elif not (1 <= precision <= 17):
            errors.append("Float precision must be between 1 and 17")

        return errors

    @staticmethod
    def load_file(path) -> CourseConfig:
        """Read, schema-check and parse a JSON settings file."""
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                params = json.load(f)
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SettingsError(f"Settings file {path} is not valid JSON: {e}") from e

        errors = settings_validator.validate(params)
        if errors:
            raise SettingsError("; ".join(errors))

        config = SettingsService.parse_settings(params)
        errors = SettingsService.validate_config(config)
        if errors:
            raise SettingsError("; ".join(errors))

        logger.info(f"Loaded settings from {path}")
        return config
