"""Error hierarchy for dotgraph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotgraph.validation import ValidationResult


class DotgraphError(Exception):
    """Base error for all dotgraph errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class DotParseError(DotgraphError, ValueError):
    """DOT source did not match the supported grammar."""

    def __init__(
        self,
        message: str,
        *,
        index: int,
        line: int,
        column: int,
        expected: str,
        found: str,
        context: list[str] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found
        self.context = list(context or [])


class InvalidGraphError(DotgraphError, ValueError):
    """A graph carries attributes outside their permitted domain."""

    def __init__(self, message: str, *, result: ValidationResult):
        super().__init__(message)
        self.result = result


class ConfigurationError(DotgraphError):
    """Renderer misconfiguration."""
