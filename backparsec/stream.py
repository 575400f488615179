"""
Outcomes and the lazy result streams which carry them.

Running a parser at some offset into a string yields a stream of candidate
outcomes, each either a :py:class:`Success` or a :py:class:`Failure`. Streams
are ordinary Python iterators: they are consumed once, front to back, and
outcomes are only computed when asked for. Earlier outcomes represent earlier
tried alternatives and are preferred over later ones.
"""

from dataclasses import dataclass

from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    TypeVar,
    Union,
)


__all__ = [
    "Success",
    "Failure",
    "Outcome",
    "ResultStream",
    "StepFunction",
]


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A candidate parse which consumed the input up to :py:attr:`index`."""

    index: int
    """The offset just beyond the consumed input."""

    value: T
    """The value produced by the parser."""


@dataclass(frozen=True)
class Failure:
    """A candidate parse which failed at :py:attr:`index`."""

    index: int
    """The offset at which the failure occurred."""

    expect: str
    """A description of what would have matched at :py:attr:`index`."""


Outcome = Union[Success[Any], Failure]

ResultStream = Iterator[Outcome]

StepFunction = Callable[[str, int], Iterable[Outcome]]
"""
A function taking the input string and a start offset and producing the
outcomes of parsing from that offset.
"""
