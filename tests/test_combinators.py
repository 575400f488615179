import pytest  # type: ignore

from typing import Any

from backparsec.report import Expected, ParseSuccess, ParseFailure
from backparsec.primitives import string, regexp
from backparsec.combinators import seq, choice


a = string("a")
ab = string("ab")
c = string("c")


class TestSeq:
    @pytest.mark.parametrize(
        "string_, exp",
        [
            ("aababc", ParseSuccess(6, ["a", "ab", "ab", "c"])),
            ("aabab", ParseFailure((Expected(5, "string c"),))),
            ("b", ParseFailure((Expected(0, "string a"),))),
        ],
    )
    def test_seq(self, string_: str, exp: Any) -> None:
        assert seq(a, ab, ab, c).parse(string_) == exp

    def test_empty(self) -> None:
        assert seq().parse("abc") == ParseSuccess(0, [])

    def test_values_in_order(self) -> None:
        p = seq(regexp(r"[0-9]+").map(int), string("+"), regexp(r"[0-9]+").map(int))
        assert p.map(lambda xs: xs).parse("12+34") == ParseSuccess(5, [12, "+", 34])

    def test_backtracks_between_elements(self) -> None:
        p = seq(a.many(), string("ab"))
        assert p.parse("aab") == ParseSuccess(3, [["a"], "ab"])


class TestChoice:
    @pytest.mark.parametrize(
        "string_, exp",
        [
            ("a", ParseSuccess(1, "a")),
            ("ab", ParseSuccess(2, "ab")),
        ],
    )
    def test_backtracking(self, string_: str, exp: Any) -> None:
        assert choice(a, ab).end().parse(string_) == exp

    def test_empty(self) -> None:
        assert choice().parse("a") == ParseFailure((Expected(0, "some choice"),))

    def test_single(self) -> None:
        assert choice(a).parse("a") == ParseSuccess(1, "a")

    def test_order(self) -> None:
        assert choice(a, ab, c).parse("abc") == ParseSuccess(1, "a")
        assert choice(ab, a, c).parse("abc") == ParseSuccess(2, "ab")

    def test_failures_in_order(self) -> None:
        assert choice(ab, a, c).parse("x") == ParseFailure(
            (
                Expected(0, "string ab"),
                Expected(0, "string a"),
                Expected(0, "string c"),
            )
        )
