from __future__ import annotations

import pytest

from adapters.notation_converter.shunting_yard import ShuntingYardConverter, render_postfix
from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from contracts import BracketToken, UnmatchedBracket


def _postfix(line: str) -> str:
    tokens = RegexTokenizer().tokenize(line)
    return render_postfix(ShuntingYardConverter().to_postfix(tokens))


@pytest.mark.parametrize(
    ("infix", "postfix"),
    [
        ("2+3*4", "2 3 4 * +"),
        ("(2+3)*4", "2 3 + 4 *"),
        ("8-3-2", "8 3 - 2 -"),
        ("8/4/2", "8 4 / 2 /"),
        ("2*3+4", "2 3 * 4 +"),
        ("a*(b+c)/d", "a b c + * d /"),
        ("((1))", "1"),
        ("1 --(3+x)/2", "1 3 x + 2 / +"),
    ],
)
def test_to_postfix_respects_precedence_and_order(infix, postfix):
    assert _postfix(infix) == postfix


def test_unary_operators_bind_tighter_than_binary():
    assert _postfix("-2*3") == "2 u- 3 *"
    assert _postfix("2*(-(3+1))") == "2 3 1 + u- *"
    assert _postfix("-(3+x)") == "3 x + u-"


def test_postfix_contains_no_brackets():
    tokens = RegexTokenizer().tokenize("((1+2)*(3-4))")
    postfix = ShuntingYardConverter().to_postfix(tokens)

    assert not any(isinstance(t, BracketToken) for t in postfix)


@pytest.mark.parametrize("line", ["(1+2", "1+2)", ")(", "((1)", "1)+(2"])
def test_unmatched_brackets_raise(line):
    with pytest.raises(UnmatchedBracket):
        _postfix(line)


def test_empty_stream_converts_to_empty_postfix():
    assert ShuntingYardConverter().to_postfix([]) == []
