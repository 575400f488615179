"""
Combinators over any number of parsers.
"""

from functools import reduce

from typing import Any, List

from backparsec.parser import Parser, succeed, fail


__all__ = [
    "seq",
    "choice",
]


def seq(*parsers: Parser[Any]) -> Parser[List[Any]]:
    """Match each parser in turn, producing a list of their values."""
    return reduce(lambda acc, parser: acc.push(parser), parsers, succeed([]))


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """
    Ordered alternation between any number of parsers, tried left to right.
    With no alternatives, always fails.
    """
    if not parsers:
        return fail("some choice")
    return reduce(lambda acc, parser: acc.or_(parser), parsers)
