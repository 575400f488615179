"""
Exceptions raised by backparsec and helpers for describing where in an input
string a failure occurred.

Ordinary parse failures are not exceptions: they are :py:class:`.Failure`
outcomes which alternation is free to recover from. Exceptions are only raised
for mis-built grammars (:py:exc:`GrammarError`) or when explicitly requested
by :py:meth:`.Parser.parse_or_raise` (:py:exc:`ParseError`).
"""

import re

from textwrap import indent

from typing import List, Tuple


__all__ = [
    "GrammarError",
    "RepeatedEmptyMatchError",
    "ParseError",
    "line_and_column",
    "source_line",
]


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def line_and_column(string: str, index: int) -> Tuple[int, int]:
    """
    Return the (1-indexed) line and column number of an offset into a
    string. Offsets beyond the end of the string are treated as pointing just
    beyond its last character.
    """
    index = min(index, len(string))
    line = 1
    line_start = 0
    for match in _LINE_BREAK.finditer(string):
        if match.end() > index:
            break
        line += 1
        line_start = match.end()
    return line, index - line_start + 1


def source_line(string: str, line: int) -> str:
    """
    Return the given (1-indexed, from :py:func:`line_and_column`) line of a
    string without its line ending.
    """
    return _LINE_BREAK.split(string)[line - 1]


class GrammarError(Exception):
    """Thrown when a parser is found to be ill-formed while parsing."""


class RepeatedEmptyMatchError(GrammarError):
    """
    Thrown when a repeated parser (e.g. via :py:meth:`.Parser.many`) succeeds
    without consuming any input, which would otherwise repeat forever.
    """

    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return "Repeated parser matched the empty string at offset {}".format(
            self.index
        )


class ParseError(Exception):
    """Thrown by :py:meth:`.Parser.parse_or_raise` when parsing fails."""

    def __init__(self, string: str, index: int, expected: List[str]) -> None:
        super().__init__()
        self.string = string
        self.index = index
        self.line, self.column = line_and_column(string, index)
        self.expected = expected

    def __str__(self) -> str:
        snippet = source_line(self.string, self.line).rstrip()
        pointer = (" " * (self.column - 1)) + "^"
        return "At line {} column {}:\n{}\nExpected {}".format(
            self.line,
            self.column,
            indent(f"{snippet}\n{pointer}", "    "),
            " or ".join(self.expected) if self.expected else "nothing",
        )
