r"""
Backparsec is a parser combinator library for building backtracking parsers
which tolerate ambiguous grammars.

Unlike a PEG or Packrat parser, which commits to the first alternative that
matches, every parser here produces a lazily evaluated stream of *candidate*
parses. When a later part of a grammar fails, parsing backtracks into the
remaining candidates of earlier parts. Because candidates are produced on
demand, no more work is done than is needed to find the first complete
parse.

Basic usage
===========

Parsers are built from leaf parsers, such as :py:func:`string` and
:py:func:`regexp`, using the methods of :py:class:`Parser` and a few
functions such as :py:func:`seq` and :py:func:`choice`::

    >>> from backparsec import string, regexp, seq, choice, rec
    >>> number = regexp(r"[0-9]+").map(int)
    >>> number.parse("123abc")
    ParseSuccess(status=True, index=3, value=123)

:py:meth:`Parser.parse` returns a :py:class:`ParseSuccess` for the first
successful candidate, giving the offset just beyond the input consumed and the
value produced. When no candidate succeeds, a :py:class:`ParseFailure` lists
every failed candidate in the order they were tried::

    >>> string("a").cont(string("b")).parse("ac")
    ParseFailure(status=False, errors=(Expected(index=1, expect='string b'),))

Ambiguity
---------

Alternation is ordered but not committed. In the following example, the first
alternative matches ``"a"`` but then fails to reach the end of the input, so
parsing backtracks into the second alternative::

    >>> choice(string("a"), string("ab")).end().parse("ab")
    ParseSuccess(status=True, index=2, value='ab')

Repetition behaves the same way: :py:meth:`Parser.many` prefers more
repetitions but will fall back to fewer when that allows the rest of a grammar
to match::

    >>> seq(regexp(r"[a-z]").many(), string("z")).parse_or_raise("xyz", to_end=True)
    [['x', 'y'], 'z']

Recursion
---------

Self-referential grammars are defined using :py:func:`rec`, whose argument is
passed a handle to the parser being defined. For example, a parser for nested
lists of numbers such as ``[1, [2, 3], []]``::

    >>> space = regexp(r"\s*")
    >>> comma = string(",").skip(space)
    >>> value = rec(lambda value: choice(
    ...     number,
    ...     string("[").then(value.sep_by(comma)).skip(string("]")),
    ... ))
    >>> value.parse_or_raise("[1, [2, 3], []]")
    [1, [2, 3], []]

Grammars must consume some input before recursing. Likewise, a repeated
parser must consume input whenever it succeeds: a
:py:exc:`RepeatedEmptyMatchError` is raised rather than looping forever.

Errors
------

:py:meth:`Parser.parse_or_raise` returns just the parsed value and raises a
:py:exc:`ParseError` on failure, describing the failed candidates which got
furthest into the input, for example::

    At line 1 column 1:
        abc
        ^
    Expected match [0-9]+

Names which are Python keywords or builtins carry a trailing underscore
(:py:meth:`Parser.or_`, :py:meth:`Parser.not_`) or a longer name
(:py:func:`any_char`, :py:func:`all_chars`).
"""

from backparsec.version import __version__

from backparsec.stream import *
from backparsec.report import *
from backparsec.errors import *
from backparsec.parser import *
from backparsec.primitives import *
from backparsec.combinators import *

# NB: These names are explicitly re-exported here because mypy in strict mode
# does not allow implicit re-exports. The completeness of this list is tested
# by the test suite.
__all__ = [  # noqa: F405
    # stream.*
    "Success",
    "Failure",
    "Outcome",
    "ResultStream",
    "StepFunction",
    # report.*
    "Expected",
    "ParseSuccess",
    "ParseFailure",
    "ParseReport",
    "report_from_stream",
    # errors.*
    "GrammarError",
    "RepeatedEmptyMatchError",
    "ParseError",
    "line_and_column",
    "source_line",
    # parser.*
    "Parser",
    "rec",
    "succeed",
    "fail",
    "eos",
    # primitives.*
    "string",
    "regexp",
    "letter",
    "letters",
    "digit",
    "digits",
    "whitespace",
    "any_char",
    "all_chars",
    # combinators.*
    "seq",
    "choice",
]
