import pytest  # type: ignore

from backparsec.errors import (
    line_and_column,
    source_line,
    ParseError,
    RepeatedEmptyMatchError,
    GrammarError,
)


@pytest.mark.parametrize(
    "string, index, exp_line, exp_column",
    [
        # Special case: Empty string
        ("", 0, 1, 1),
        # Special case: Beyond end of string
        ("foobar", 111, 1, 7),
        ("foo\nbar", 111, 2, 4),
        ("foobar\n", 111, 2, 1),
        # Single line
        ("foobar", 0, 1, 1),
        ("foobar", 3, 1, 4),
        ("foobar", 5, 1, 6),
        # Multiple lines
        ("foo\nbar", 0, 1, 1),
        ("foo\nbar", 3, 1, 4),  # The newline
        ("foo\nbar", 4, 2, 1),
        ("foo\nbar", 6, 2, 3),
        # Other line endings
        ("foo\rbar", 4, 2, 1),
        ("foo\r\nbar", 4, 1, 5),  # The LF of a CRLF
        ("foo\r\nbar", 5, 2, 1),
    ],
)
def test_line_and_column(
    string: str, index: int, exp_line: int, exp_column: int
) -> None:
    assert line_and_column(string, index) == (exp_line, exp_column)


@pytest.mark.parametrize(
    "string, line, exp",
    [
        ("", 1, ""),
        ("foo", 1, "foo"),
        ("foo\n", 1, "foo"),
        ("foo\n", 2, ""),
        ("foo\r\nbar", 2, "bar"),
        ("foo\rbar\n", 2, "bar"),
    ],
)
def test_source_line(string: str, line: int, exp: str) -> None:
    assert source_line(string, line) == exp


def test_parse_error_message() -> None:
    error = ParseError("first\n  abc  \nlast", 8, ["string b", "string c"])
    assert (error.line, error.column) == (2, 3)
    assert str(error) == (
        "At line 2 column 3:\n"
        "      abc\n"
        "      ^\n"
        "Expected string b or string c"
    )


def test_parse_error_message_without_expectations() -> None:
    assert str(ParseError("abc", 0, [])).endswith("Expected nothing")


def test_repeated_empty_match_error() -> None:
    error = RepeatedEmptyMatchError(4)
    assert isinstance(error, GrammarError)
    assert error.index == 4
    assert str(error) == "Repeated parser matched the empty string at offset 4"
