"""
The :py:class:`Parser` type and the combinators it is built from.

A :py:class:`Parser` wraps a *step function* which, given the input string and
a start offset, returns a lazy stream of candidate outcomes (see
:py:mod:`backparsec.stream`). Every combinator below builds a new step function
out of the streams of its operands, so no outcome is computed before something
asks for it.

Only :py:meth:`Parser.cont`, :py:meth:`Parser.or_`,
:py:meth:`Parser.result_map`, :py:meth:`Parser.not_` and :py:func:`rec` deal
with streams directly. All other combinators are written in terms of these.
"""

import logging

from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from backparsec.stream import (
    Success,
    Failure,
    Outcome,
    ResultStream,
    StepFunction,
)
from backparsec.report import (
    ParseReport,
    ParseSuccess,
    report_from_stream,
)
from backparsec.errors import (
    ParseError,
    RepeatedEmptyMatchError,
)


__all__ = [
    "Parser",
    "rec",
    "succeed",
    "fail",
    "eos",
]


logger = logging.getLogger(__name__)


T = TypeVar("T")
U = TypeVar("U")


class Parser(Generic[T]):
    """
    A backtracking parser producing values of type ``T``.

    Parsers are immutable and may be freely shared between grammars and run
    any number of times.
    """

    _step: StepFunction
    """The wrapped step function."""

    def __init__(self, step: StepFunction) -> None:
        self._step = step

    def step(self, string: str, index: int) -> ResultStream:
        """
        Run this parser on ``string`` starting at ``index``, returning an
        iterator over the candidate outcomes in order of preference.
        """
        return iter(self._step(string, index))

    # Entry points

    def parse(self, string: str) -> ParseReport:
        """
        Parse ``string`` from its start, returning a :py:class:`.ParseSuccess`
        for the first successful candidate or, if there is none, a
        :py:class:`.ParseFailure` listing every failed candidate.

        The input need not be consumed entirely; see :py:meth:`parse_to_end`.
        """
        report = report_from_stream(self.step(string, 0))
        if isinstance(report, ParseSuccess):
            logger.debug(
                "Parse succeeded, consuming %d of %d", report.index, len(string)
            )
        else:
            logger.debug("Parse failed with %d candidate(s)", len(report.errors))
        return report

    def parse_to_end(self, string: str) -> ParseReport:
        """Like :py:meth:`parse` but requires the whole input to be consumed."""
        return self.end().parse(string)

    def parse_or_raise(self, string: str, to_end: bool = False) -> T:
        """
        Parse ``string`` returning just the value produced. Raises
        :py:exc:`.ParseError` describing the failures which got furthest into
        the input when parsing fails.
        """
        report = self.parse_to_end(string) if to_end else self.parse(string)
        if isinstance(report, ParseSuccess):
            value: T = report.value
            return value
        raise ParseError(string, *report.furthest())

    # Stream-level combinators

    def cont(self, other: "Parser[U]") -> "Parser[Tuple[T, U]]":
        """
        Sequence: match this parser then ``other``, producing a pair of their
        values.

        Every success of this parser is continued with every outcome of
        ``other``. Failures of this parser are passed along and ``other`` is
        not run for them.
        """

        def step(string: str, index: int) -> ResultStream:
            for outcome in self.step(string, index):
                if isinstance(outcome, Failure):
                    yield outcome
                    continue

                for next_outcome in other.step(string, outcome.index):
                    if isinstance(next_outcome, Success):
                        yield Success(
                            next_outcome.index, (outcome.value, next_outcome.value)
                        )
                    else:
                        yield next_outcome

        return Parser(step)

    def or_(self, other: "Parser[U]") -> "Parser[Union[T, U]]":
        """
        Ordered alternation: all outcomes of this parser followed by all
        outcomes of ``other``, both starting from the same offset.

        ``other`` is only run once this parser's outcomes are exhausted.
        """

        def step(string: str, index: int) -> ResultStream:
            yield from self.step(string, index)
            yield from other.step(string, index)

        return Parser(step)

    def result_map(self, f: Callable[[Outcome, int], Outcome]) -> "Parser[Any]":
        """
        Transform every outcome of this parser with ``f``, which is also
        passed the offset this parser was started at.
        """

        def step(string: str, index: int) -> ResultStream:
            for outcome in self.step(string, index):
                yield f(outcome, index)

        return Parser(step)

    def not_(self) -> "Parser[None]":
        """
        Negative lookahead. Fails (at the start offset) if this parser has any
        successful candidate, otherwise succeeds with None without consuming
        input.
        """

        def step(string: str, index: int) -> ResultStream:
            for outcome in self.step(string, index):
                if isinstance(outcome, Success):
                    yield Failure(
                        index, "not string {}".format(string[index : outcome.index])
                    )
                    return
            yield Success(index, None)

        return Parser(step)

    # Derived combinators

    def map(self, f: Callable[[T], U]) -> "Parser[U]":
        """Transform the value of every successful candidate with ``f``."""

        def map_success(outcome: Outcome, start: int) -> Outcome:
            if isinstance(outcome, Success):
                return Success(outcome.index, f(outcome.value))
            else:
                return outcome

        return self.result_map(map_success)

    def value(self, value: U) -> "Parser[U]":
        """Replace the value of every successful candidate with ``value``."""
        return self.map(lambda _: value)

    def then(self, other: "Parser[U]") -> "Parser[U]":
        """Match this parser then ``other``, keeping ``other``'s value."""
        return self.cont(other).map(lambda pair: pair[1])

    def skip(self, other: "Parser[Any]") -> "Parser[T]":
        """Match this parser then ``other``, keeping this parser's value."""
        return self.cont(other).map(lambda pair: pair[0])

    def unshift(self, other: "Parser[Iterable[T]]") -> "Parser[List[T]]":
        """
        Match this parser then ``other`` (which produces a sequence),
        producing ``other``'s values with this parser's value prepended.
        """
        return self.cont(other).map(lambda pair: [pair[0]] + list(pair[1]))

    def push(self, other: "Parser[U]") -> "Parser[List[U]]":
        """
        Match this parser (which produces a sequence) then ``other``,
        producing this parser's values with ``other``'s value appended.
        """
        return self.cont(other).map(lambda pair: list(pair[0]) + [pair[1]])

    def end(self) -> "Parser[T]":
        """Match this parser, then require the end of the input."""
        return self.skip(eos())

    def many(self) -> "Parser[List[T]]":
        """
        Match zero or more repetitions of this parser.

        Candidates with more repetitions are tried first but candidates with
        fewer repetitions follow, so that a later failure may backtrack to a
        shorter match.

        The repeated parser must consume input whenever it succeeds:
        :py:exc:`.RepeatedEmptyMatchError` is raised if it does not.
        """
        item = self.result_map(_require_progress)
        return rec(lambda rest: item.unshift(rest).or_(succeed([])))

    def many1(self) -> "Parser[List[T]]":
        """Match one or more repetitions of this parser."""
        return self.unshift(self.many())

    def sep_by1(self, separator: "Parser[Any]") -> "Parser[List[T]]":
        """
        Match one or more repetitions of this parser separated by
        ``separator``, producing only this parser's values.
        """
        return self.unshift(separator.then(self).many())

    def sep_by(self, separator: "Parser[Any]") -> "Parser[List[T]]":
        """As :py:meth:`sep_by1` but also matches zero repetitions."""
        return self.sep_by1(separator).or_(succeed([]))

    def desc(self, expect: str) -> "Parser[T]":
        """Replace the description of every failed candidate with ``expect``."""

        def describe(outcome: Outcome, start: int) -> Outcome:
            if isinstance(outcome, Failure):
                return Failure(outcome.index, expect)
            else:
                return outcome

        return self.result_map(describe)

    def unconsume(self) -> "Parser[T]":
        """Positive lookahead: match this parser without consuming input."""

        def rewind(outcome: Outcome, start: int) -> Outcome:
            if isinstance(outcome, Success):
                return Success(start, outcome.value)
            else:
                return outcome

        return self.result_map(rewind)

    def not_followed_by(self, other: "Parser[Any]") -> "Parser[T]":
        """Match this parser only when ``other`` does not match after it."""
        return self.skip(other.not_())

    def lookahead(self, other: "Parser[Any]") -> "Parser[T]":
        """Match this parser only when ``other`` matches after it."""
        return self.skip(other.unconsume())


def _require_progress(outcome: Outcome, start: int) -> Outcome:
    # A repeated parser succeeding without consuming input would be repeated
    # at the same offset forever.
    if isinstance(outcome, Success) and outcome.index <= start:
        logger.debug("Repeated parser consumed no input at offset %d", start)
        raise RepeatedEmptyMatchError(start)
    return outcome


def rec(build: Callable[[Parser[Any]], Parser[T]]) -> Parser[T]:
    """
    Define a self-referential parser.

    ``build`` is passed a handle to the parser being defined and should return
    its body, for example::

        nested = rec(lambda nested: string("(").then(nested.many()).skip(string(")")))

    ``build`` is called once, immediately. The handle may be freely combined
    while building but running it requires the body to exist, so ``build``
    must not run the handle itself. Bodies should consume input before
    recursing: left-recursive bodies will recurse forever.
    """
    body: Optional[Parser[T]] = None

    def step(string: str, index: int) -> ResultStream:
        assert body is not None, "recursive parser run before being defined"
        return body.step(string, index)

    handle: Parser[T] = Parser(step)
    body = build(handle)
    return handle


def succeed(value: Any = None) -> Parser[Any]:
    """Always succeed with ``value`` without consuming input."""

    def step(string: str, index: int) -> ResultStream:
        yield Success(index, value)

    return Parser(step)


def fail(expect: str = "nothing") -> Parser[Any]:
    """Always fail, describing the failure with ``expect``."""

    def step(string: str, index: int) -> ResultStream:
        yield Failure(index, expect)

    return Parser(step)


def eos() -> Parser[None]:
    """Match the end of the input, producing None."""

    def step(string: str, index: int) -> ResultStream:
        if index == len(string):
            yield Success(index, None)
        else:
            yield Failure(index, "end of string")

    return Parser(step)
