import io

import pytest

from es123.adapters.console import ConsoleReader
from es123.application.programs import InvalidInputError, greet, operators
from es123.core.settings import SettingsService
from es123.schemas.programs import OperatorTable


@pytest.fixture
def config():
    return SettingsService.load_defaults()


def test_greet(config):
    out = io.StringIO()
    result = greet(ConsoleReader(io.StringIO("Ada 30\n")), out, config)
    assert result.message == "Hello, Ada (age 30)"
    assert result.lines() == ["Hello, Ada (age 30)"]
    assert out.getvalue() == "Please enter your first name: Please enter your age: "


def test_greet_rejects_bad_age(config):
    with pytest.raises(InvalidInputError, match="invalid age: expected an integer, got 'thirty'"):
        greet(ConsoleReader(io.StringIO("Ada\nthirty\n")), io.StringIO(), config)


def test_greet_rejects_missing_name(config):
    with pytest.raises(InvalidInputError, match="unexpected end of input"):
        greet(ConsoleReader(io.StringIO("")), io.StringIO(), config)


def test_operators(config):
    out = io.StringIO()
    result = operators(ConsoleReader(io.StringIO("2.0\n")), out, config)
    assert result.lines() == [
        "v == 2",
        "v+1 == 3",
        "3*v == 6",
        "v+v == 4",
        "v*v == 4",
        "v/2 == 1",
    ]
    assert out.getvalue() == "Please enter a floating point value: "


def test_operators_uses_stream_rendering():
    table = OperatorTable(value=0.1)
    assert table.lines() == [
        "v == 0.1",
        "v+1 == 1.1",
        "3*v == 0.3",
        "v+v == 0.2",
        "v*v == 0.01",
        "v/2 == 0.05",
    ]
    assert OperatorTable(value=1234567.0).lines(3)[0] == "v == 1.23e+06"


def test_operators_rejects_text(config):
    with pytest.raises(InvalidInputError):
        operators(ConsoleReader(io.StringIO("abc")), io.StringIO(), config)


def test_custom_prompts(config):
    config.float_prompt = "v? "
    out = io.StringIO()
    operators(ConsoleReader(io.StringIO("1")), out, config)
    assert out.getvalue() == "v? "
