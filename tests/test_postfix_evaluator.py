from __future__ import annotations

import pytest

from adapters.evaluator.postfix_evaluator import PostfixEvaluator, apply_binary, truncating_div
from adapters.variable_store.in_memory_store import InMemoryVariableStore
from contracts import (
    DivisionByZero,
    IdentifierToken,
    IntegerToken,
    MalformedPostfix,
    OperatorToken,
    UnknownOperator,
    UnknownVariable,
)


def _int(v: int) -> IntegerToken:
    return IntegerToken(value=v)


def test_evaluate_binary_stream():
    postfix = [_int(2), _int(3), _int(4), OperatorToken(symbol="*"), OperatorToken(symbol="+")]

    assert PostfixEvaluator().evaluate(postfix, InMemoryVariableStore()) == 14


def test_evaluate_resolves_identifiers():
    env = InMemoryVariableStore()
    env.set("x", 5)
    postfix = [IdentifierToken(name="x"), _int(1), OperatorToken(symbol="+")]

    assert PostfixEvaluator().evaluate(postfix, env) == 6


def test_unbound_identifier_raises_unknown_variable():
    with pytest.raises(UnknownVariable) as exc:
        PostfixEvaluator().evaluate([IdentifierToken(name="y")], InMemoryVariableStore())

    assert exc.value.name == "y"


def test_unary_minus_negates_and_unary_plus_passes_through():
    env = InMemoryVariableStore()
    neg = [_int(7), OperatorToken(symbol="-", unary=True)]
    pos = [_int(7), OperatorToken(symbol="+", unary=True)]

    assert PostfixEvaluator().evaluate(neg, env) == -7
    assert PostfixEvaluator().evaluate(pos, env) == 7


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (6, 3, 2), (0, 5, 0)],
)
def test_division_truncates_toward_zero(a, b, expected):
    assert truncating_div(a, b) == expected


def test_division_by_zero_raises():
    postfix = [_int(1), _int(0), OperatorToken(symbol="/")]

    with pytest.raises(DivisionByZero):
        PostfixEvaluator().evaluate(postfix, InMemoryVariableStore())


def test_mixed_operator_run_is_unknown_binary_operator():
    with pytest.raises(UnknownOperator) as exc:
        apply_binary("*-", 2, 3)

    assert exc.value.symbol == "*-"


def test_missing_operand_is_malformed():
    postfix = [_int(2), OperatorToken(symbol="+")]

    with pytest.raises(MalformedPostfix):
        PostfixEvaluator().evaluate(postfix, InMemoryVariableStore())


@pytest.mark.parametrize("postfix", [[], [_int(1), _int(2)]])
def test_empty_or_leftover_stack_is_malformed(postfix):
    with pytest.raises(MalformedPostfix):
        PostfixEvaluator().evaluate(postfix, InMemoryVariableStore())


def test_arbitrary_precision_product():
    a = 10 ** 40 + 7
    postfix = [_int(a), _int(a), OperatorToken(symbol="*")]

    assert PostfixEvaluator().evaluate(postfix, InMemoryVariableStore()) == a * a
