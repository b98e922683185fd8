"""The course's console programs: read a value, derive a few results."""
import logging
from typing import TextIO

from es123.adapters.console import ConsoleReader, ReadResult
from es123.core.settings import CourseConfig
from es123.schemas.programs import Greeting, OperatorTable

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when console input cannot be parsed into the expected type."""


def _require(result: ReadResult, what: str):
    if not result.ok:
        logger.info(f"Invalid {what}: {result.error}")
        raise InvalidInputError(f"invalid {what}: {result.error}")
    return result.value


def greet(reader: ConsoleReader, out: TextIO, config: CourseConfig) -> Greeting:
    """Ask for a first name and an age."""
    reader.prompt(config.first_name_prompt, out)
    first_name = _require(reader.read_token(), "first name")
    reader.prompt(config.age_prompt, out)
    age = _require(reader.read_int(), "age")
    return Greeting(first_name=first_name, age=age)


def operators(reader: ConsoleReader, out: TextIO, config: CourseConfig) -> OperatorTable:
    """Ask for a floating point value and apply the basic operators to it."""
    reader.prompt(config.float_prompt, out)
    value = _require(reader.read_float(), "floating point value")
    return OperatorTable(value=value)


PROGRAMS = {
    "greet": greet,
    "operators": operators,
}
