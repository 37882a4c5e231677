import pytest

from dotgraph.errors import DotParseError
from dotgraph.parser.combinators import (
    end_of_input,
    literal,
    many,
    many1,
    one_of,
    optional,
    pattern,
    sep_by1,
    sequence,
)

digit = pattern(r"\d", "digit")


def test_sequence_and_map_build_values():
    pair = sequence(digit, literal("+"), digit).map(lambda parts: int(parts[0]) + int(parts[2]))

    assert pair.parse("1+2") == 3


def test_then_and_discard_keep_one_side():
    assert literal("(").then(digit).discard(literal(")")).parse("(7)") == "7"


def test_many_and_many1():
    assert many(digit).parse("") == []
    assert many(digit).parse("123x") == ["1", "2", "3"]
    assert many1(digit).parse("45") == ["4", "5"]
    with pytest.raises(DotParseError, match="expected digit"):
        many1(digit).parse("x")


def test_many_stops_on_parsers_that_consume_nothing():
    assert many(pattern(r"a*", "as")).parse("b") == []


def test_optional_backtracks_to_the_start():
    parser = sequence(optional(literal("ab"), "none"), literal("ac"))

    assert parser.parse("ac") == ("none", "ac")


def test_one_of_reports_the_furthest_failure():
    parser = one_of(literal("abc"), sequence(literal("ab"), literal("d")))

    with pytest.raises(DotParseError) as excinfo:
        parser.parse("abx")

    assert excinfo.value.expected == "'d'"
    assert excinfo.value.column == 3


def test_one_of_merges_failures_at_the_same_position():
    with pytest.raises(DotParseError, match="expected 'a' or 'b', found 'c'"):
        one_of(literal("a"), literal("b")).parse("c")


def test_named_appends_rule_context_innermost_first():
    inner = digit.named("Not a valid Digit")
    outer = sequence(literal("#"), inner).named("Not a valid Tag")

    with pytest.raises(DotParseError) as excinfo:
        outer.parse("#x")

    assert excinfo.value.context == ["Not a valid Digit", "Not a valid Tag"]
    assert str(excinfo.value).splitlines() == [
        "line 1, column 2: expected digit, found 'x'",
        "Not a valid Digit",
        "Not a valid Tag",
    ]


def test_errors_report_line_and_column():
    parser = sequence(literal("a\nb\n"), literal("c"))

    with pytest.raises(DotParseError) as excinfo:
        parser.parse("a\nb\nd")

    assert (excinfo.value.line, excinfo.value.column) == (3, 1)
    assert excinfo.value.index == 4


def test_sep_by1_and_end_of_input():
    parser = sep_by1(digit, literal(",")).discard(end_of_input())

    assert parser.parse("1,2,3") == ["1", "2", "3"]
    with pytest.raises(DotParseError, match="expected end of input"):
        parser.parse("1,2;")


def test_backtracked_named_failure_that_got_further_is_reported():
    item = sequence(literal("["), digit, literal("]")).named("Not a valid Item")
    line = sequence(optional(item), literal(";")).named("Not a valid Line")

    with pytest.raises(DotParseError) as excinfo:
        line.parse("[x;")

    assert (excinfo.value.column, excinfo.value.expected) == (2, "digit")
    assert excinfo.value.context == ["Not a valid Item", "Not a valid Line"]


def test_many_keeps_the_furthest_named_failure():
    item = sequence(digit, literal("!")).named("Not a valid Item")
    items = many(item).discard(end_of_input())

    with pytest.raises(DotParseError) as excinfo:
        items.parse("1!2?")

    assert (excinfo.value.index, excinfo.value.expected) == (3, "'!'")
    assert excinfo.value.context == ["Not a valid Item"]


def test_backtracked_unnamed_failures_are_not_reported():
    parser = sequence(optional(sequence(literal("["), digit)), literal(";"))

    with pytest.raises(DotParseError) as excinfo:
        parser.parse("[x")

    assert (excinfo.value.column, excinfo.value.expected) == (1, "';'")
