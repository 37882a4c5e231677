"""Small backtracking parser combinators over a string and an index.

A parser is a function ``(state, index) -> (value, next_index)`` that raises
``ParseFailure`` when the input does not match. ``Parser.named`` appends a
rule name to a failure on its way out, so the error that reaches the caller
lists the lowest-level mismatch followed by every enclosing rule.

``optional`` and ``many`` backtrack over failures; a backtracked failure that
passed through a named rule is kept on the ``ParseState`` and reported instead
of the final one when it got further into the input.
"""

import re
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dotgraph.errors import DotParseError

T = TypeVar("T")
U = TypeVar("U")


class ParseFailure(Exception):
    def __init__(self, index: int, expected: str, context: list[str] | None = None):
        super().__init__(expected)
        self.index = index
        self.expected = expected
        self.context = list(context or [])


class ParseState:
    def __init__(self, source: str):
        self.source = source
        self.rules: list[str] = []
        self.furthest: ParseFailure | None = None

    def backtracked(self, failure: ParseFailure) -> None:
        if not failure.context:
            return
        if self.furthest is not None and self.furthest.index >= failure.index:
            return
        self.furthest = ParseFailure(
            failure.index, failure.expected, failure.context + self.rules[::-1]
        )


class Parser(Generic[T]):
    def __init__(self, run: Callable[[ParseState, int], tuple[T, int]]):
        self._run = run

    def __call__(self, state: ParseState, index: int) -> tuple[T, int]:
        return self._run(state, index)

    def map(self, fn: Callable[[T], U]) -> "Parser[U]":
        def run(state: ParseState, index: int) -> tuple[U, int]:
            value, index = self._run(state, index)
            return fn(value), index

        return Parser(run)

    def then(self, other: "Parser[U]") -> "Parser[U]":
        """Run ``self`` then ``other``, keeping the value of ``other``."""

        def run(state: ParseState, index: int) -> tuple[U, int]:
            _, index = self._run(state, index)
            return other(state, index)

        return Parser(run)

    def discard(self, other: "Parser[Any]") -> "Parser[T]":
        """Run ``self`` then ``other``, keeping the value of ``self``."""

        def run(state: ParseState, index: int) -> tuple[T, int]:
            value, index = self._run(state, index)
            _, index = other(state, index)
            return value, index

        return Parser(run)

    def named(self, context: str) -> "Parser[T]":
        def run(state: ParseState, index: int) -> tuple[T, int]:
            state.rules.append(context)
            try:
                return self._run(state, index)
            except ParseFailure as failure:
                failure.context.append(context)
                raise
            finally:
                state.rules.pop()

        return Parser(run)

    def parse(self, source: str) -> T:
        state = ParseState(source)
        try:
            value, _ = self._run(state, 0)
        except ParseFailure as failure:
            if state.furthest is not None and state.furthest.index > failure.index:
                failure = state.furthest
            raise _to_error(source, failure) from None
        return value


def _to_error(source: str, failure: ParseFailure) -> DotParseError:
    index = failure.index
    line = source.count("\n", 0, index) + 1
    column = index - (source.rfind("\n", 0, index) + 1) + 1
    found = repr(source[index]) if index < len(source) else "end of input"
    lines = [f"line {line}, column {column}: expected {failure.expected}, found {found}"]
    lines.extend(failure.context)
    return DotParseError(
        "\n".join(lines),
        index=index,
        line=line,
        column=column,
        expected=failure.expected,
        found=found,
        context=failure.context,
    )


def literal(text: str) -> Parser[str]:
    def run(state: ParseState, index: int) -> tuple[str, int]:
        if state.source.startswith(text, index):
            return text, index + len(text)
        raise ParseFailure(index, repr(text))

    return Parser(run)


def pattern(regex: str, description: str) -> Parser[str]:
    compiled = re.compile(regex)

    def run(state: ParseState, index: int) -> tuple[str, int]:
        match = compiled.match(state.source, index)
        if match is None:
            raise ParseFailure(index, description)
        return match.group(0), match.end()

    return Parser(run)


def end_of_input() -> Parser[None]:
    def run(state: ParseState, index: int) -> tuple[None, int]:
        if index != len(state.source):
            raise ParseFailure(index, "end of input")
        return None, index

    return Parser(run)


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    def run(state: ParseState, index: int) -> tuple[tuple[Any, ...], int]:
        values = []
        for parser in parsers:
            value, index = parser(state, index)
            values.append(value)
        return tuple(values), index

    return Parser(run)


def one_of(*parsers: Parser[Any]) -> Parser[Any]:
    """Try each alternative from the same index; report the furthest failure."""

    def run(state: ParseState, index: int) -> tuple[Any, int]:
        failures: list[ParseFailure] = []
        for parser in parsers:
            try:
                return parser(state, index)
            except ParseFailure as failure:
                failures.append(failure)

        furthest = max(failure.index for failure in failures)
        best = [failure for failure in failures if failure.index == furthest]
        if len(best) == 1:
            raise best[0]
        raise ParseFailure(furthest, " or ".join(failure.expected for failure in best))

    return Parser(run)


def optional(parser: Parser[T], default: Any = None) -> Parser[Any]:
    def run(state: ParseState, index: int) -> tuple[Any, int]:
        try:
            return parser(state, index)
        except ParseFailure as failure:
            state.backtracked(failure)
            return default, index

    return Parser(run)


def many(parser: Parser[T]) -> Parser[list[T]]:
    def run(state: ParseState, index: int) -> tuple[list[T], int]:
        values: list[T] = []
        while True:
            try:
                value, next_index = parser(state, index)
            except ParseFailure as failure:
                state.backtracked(failure)
                return values, index
            if next_index == index:
                return values, index
            values.append(value)
            index = next_index

    return Parser(run)


def many1(parser: Parser[T]) -> Parser[list[T]]:
    rest = many(parser)

    def run(state: ParseState, index: int) -> tuple[list[T], int]:
        first, index = parser(state, index)
        values, index = rest(state, index)
        return [first, *values], index

    return Parser(run)


def sep_by1(parser: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    return sequence(parser, many(separator.then(parser))).map(
        lambda parts: [parts[0], *parts[1]]
    )


whitespace = pattern(r"[ \t]+", "whitespace")
optional_whitespace = pattern(r"[ \t]*", "whitespace")
blank = pattern(r"\s*", "whitespace")
skip_to_newline = pattern(r"[^\n]*\n?", "rest of line")
