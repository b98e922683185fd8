"""Token-based console input, one whitespace-delimited value at a time."""
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, TextIO

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
# plain decimal or exponent notation, no underscores, inf or nan
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


@dataclass
class ReadResult:
    """Outcome of a single read: a value on success, a message on failure."""
    ok: bool
    value: Any = None
    error: Optional[str] = None
    token: Optional[str] = None  # raw text that failed to parse

    @classmethod
    def success(cls, value: Any, token: str) -> "ReadResult":
        return cls(ok=True, value=value, token=token)

    @classmethod
    def failure(cls, error: str, token: Optional[str] = None) -> "ReadResult":
        return cls(ok=False, error=error, token=token)


class ConsoleReader:
    """Reads whitespace-delimited tokens from a text stream across line boundaries."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pending: List[str] = []

    def _next_token(self) -> Optional[str]:
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    @staticmethod
    def prompt(text: str, out: TextIO) -> None:
        """Write a prompt without a trailing newline."""
        out.write(text)
        out.flush()

    def read_token(self) -> ReadResult:
        token = self._next_token()
        if token is None:
            logger.debug("read_token hit end of input")
            return ReadResult.failure("unexpected end of input")
        return ReadResult.success(token, token)

    def read_int(self) -> ReadResult:
        result = self.read_token()
        if not result.ok:
            return result
        token = result.token
        if not _INT_RE.fullmatch(token):
            logger.debug(f"read_int rejected {token!r}")
            return ReadResult.failure(f"expected an integer, got '{token}'", token)
        return ReadResult.success(int(token), token)

    def read_float(self) -> ReadResult:
        result = self.read_token()
        if not result.ok:
            return result
        token = result.token
        if not _FLOAT_RE.fullmatch(token):
            logger.debug(f"read_float rejected {token!r}")
            return ReadResult.failure(f"expected a floating point value, got '{token}'", token)
        return ReadResult.success(float(token), token)
