"""
Leaf parsers matching literal strings and regular expressions.
"""

import re

from typing import Pattern, Union

from backparsec.stream import Failure, ResultStream, Success
from backparsec.parser import Parser


__all__ = [
    "string",
    "regexp",
    "letter",
    "letters",
    "digit",
    "digits",
    "whitespace",
    "any_char",
    "all_chars",
]


def string(literal: str) -> Parser[str]:
    """Match the literal string ``literal``, producing it."""

    def step(string: str, index: int) -> ResultStream:
        if string.startswith(literal, index):
            yield Success(index + len(literal), literal)
        else:
            yield Failure(index, "string {}".format(literal))

    return Parser(step)


def regexp(
    pattern: Union[str, Pattern[str]], group: Union[int, str] = 0, flags: int = 0
) -> Parser[str]:
    """
    Match a :py:mod:`re` regular expression at the current offset.

    Produces the text of the given ``group`` (the whole match by default) and
    consumes as many characters as that text is long. A group which did not
    take part in the match is treated as a failure.

    ``flags`` are only used when ``pattern`` is given as a string.
    """
    compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
    expect = "match {}".format(compiled.pattern)

    def step(string: str, index: int) -> ResultStream:
        match = compiled.match(string[index:])
        text = match.group(group) if match is not None else None
        if text is None:
            yield Failure(index, expect)
        else:
            yield Success(index + len(text), text)

    return Parser(step)


def letter() -> Parser[str]:
    """A single ASCII letter."""
    return regexp(r"[a-z]", flags=re.IGNORECASE)


def letters() -> Parser[str]:
    """One or more ASCII letters."""
    return regexp(r"[a-z]+", flags=re.IGNORECASE)


def digit() -> Parser[str]:
    return regexp(r"[0-9]")


def digits() -> Parser[str]:
    return regexp(r"[0-9]+")


def whitespace() -> Parser[str]:
    """One or more whitespace characters."""
    return regexp(r"\s+")


def any_char() -> Parser[str]:
    """Any single character other than a newline."""
    return regexp(r".")


def all_chars() -> Parser[str]:
    """Everything up to the next newline (possibly nothing)."""
    return regexp(r".*")
