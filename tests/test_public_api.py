from backparsec import __all__ as backparsec_all

from backparsec.stream import __all__ as stream_all
from backparsec.report import __all__ as report_all
from backparsec.errors import __all__ as errors_all
from backparsec.parser import __all__ as parser_all
from backparsec.primitives import __all__ as primitives_all
from backparsec.combinators import __all__ as combinators_all


def test_all_is_complete() -> None:
    assert sorted(backparsec_all) == sorted(
        stream_all
        + report_all
        + errors_all
        + parser_all
        + primitives_all
        + combinators_all
    )


def test_scenarios() -> None:
    from backparsec import string, choice

    assert string("a").parse("a").as_dict() == {
        "status": True,
        "index": 1,
        "value": "a",
    }
    assert string("a").parse("b").as_dict() == {
        "status": False,
        "errors": [{"index": 0, "expect": "string a"}],
    }
    assert string("a").cont(string("b")).parse("ac").as_dict() == {
        "status": False,
        "errors": [{"index": 1, "expect": "string b"}],
    }
    assert string("a").many().parse("aab").as_dict() == {
        "status": True,
        "index": 2,
        "value": ["a", "a"],
    }
    assert choice(string("a"), string("ab")).end().parse("ab").as_dict() == {
        "status": True,
        "index": 2,
        "value": "ab",
    }
    assert string("ab").sep_by(string("b")).parse("abbab").as_dict() == {
        "status": True,
        "index": 5,
        "value": ["ab", "ab"],
    }
