"""
Terminal reports produced by :py:meth:`.Parser.parse`.
"""

from dataclasses import dataclass, field

from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    List,
    Tuple,
    TypeVar,
    Union,
)

from backparsec.stream import Outcome, Success


__all__ = [
    "Expected",
    "ParseSuccess",
    "ParseFailure",
    "ParseReport",
    "report_from_stream",
]


T = TypeVar("T")


@dataclass(frozen=True)
class Expected:
    """A single failed candidate seen while parsing."""

    index: int
    expect: str

    def as_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "expect": self.expect}


@dataclass(frozen=True)
class ParseSuccess(Generic[T]):
    """The first successful candidate found by a parse."""

    status: bool = field(default=True, init=False)
    index: int
    value: T

    def as_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "index": self.index, "value": self.value}


@dataclass(frozen=True)
class ParseFailure:
    """
    Reported when no candidate succeeded.

    Every failed candidate is listed in :py:attr:`errors`, in the order the
    candidates were tried. Nothing is filtered or de-duplicated: use
    :py:meth:`furthest` when only the failures which got furthest through the
    input are of interest.
    """

    status: bool = field(default=False, init=False)
    errors: Tuple[Expected, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "errors": [error.as_dict() for error in self.errors],
        }

    def furthest(self) -> Tuple[int, List[str]]:
        """
        Return the greatest failure offset along with the (de-duplicated)
        expectations reported there, in the order they were first reported.
        """
        if not self.errors:
            return 0, []

        index = max(error.index for error in self.errors)
        expected: List[str] = []
        for error in self.errors:
            if error.index == index and error.expect not in expected:
                expected.append(error.expect)
        return index, expected


ParseReport = Union[ParseSuccess[Any], ParseFailure]


def report_from_stream(outcomes: Iterable[Outcome]) -> ParseReport:
    """
    Scan a result stream for its first success, collecting the failures seen
    along the way. The stream is not consumed beyond the first success.
    """
    errors = []
    for outcome in outcomes:
        if isinstance(outcome, Success):
            return ParseSuccess(outcome.index, outcome.value)
        errors.append(Expected(outcome.index, outcome.expect))
    return ParseFailure(tuple(errors))
