"""
Adapter: PostfixEvaluator
Implements port Evaluator — single operand stack over Python ints.

Python ints are arbitrary precision, so + - * never overflow.
"/" truncates toward zero (-7 / 2 == -3), unlike Python's floor "//".
"""
from __future__ import annotations

import logging
from typing import Callable

from contracts import (
    DivisionByZero,
    IdentifierToken,
    IntegerToken,
    MalformedPostfix,
    OperatorToken,
    PostfixToken,
    UnknownOperator,
    UnknownVariable,
)
from ports.variable_store import VariableStore

logger = logging.getLogger("bigcalc.evaluator")


def truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero("Division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# Mapping of operator symbols to binary operations
_BINARY_OPS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": truncating_div,
}


def apply_binary(symbol: str, left: int, right: int) -> int:
    fn = _BINARY_OPS.get(symbol)
    if fn is None:
        raise UnknownOperator(symbol)
    return fn(left, right)


def apply_unary(symbol: str, value: int) -> int:
    return -value if symbol == "-" else value


class PostfixEvaluator:
    """Stack machine for postfix streams produced by ShuntingYardConverter."""

    # -- Evaluator protocol -------------------------------------------------

    def evaluate(self, postfix: list[PostfixToken], env: VariableStore) -> int:
        stack: list[int] = []
        for token in postfix:
            if isinstance(token, IntegerToken):
                stack.append(token.value)
            elif isinstance(token, IdentifierToken):
                value = env.get(token.name)
                if value is None:
                    raise UnknownVariable(token.name)
                stack.append(value)
            elif isinstance(token, OperatorToken):
                stack.append(self._apply(token, stack))
            else:
                raise MalformedPostfix(f"Unexpected token in postfix stream: {token!r}")

        if len(stack) != 1:
            raise MalformedPostfix(f"{len(stack)} value(s) left on the operand stack")
        return stack[0]

    # -- Private ------------------------------------------------------------

    def _apply(self, op: OperatorToken, stack: list[int]) -> int:
        arity = 1 if op.unary else 2
        if len(stack) < arity:
            raise MalformedPostfix(f"Operator {op.text!r} is missing an operand")
        if op.unary:
            return apply_unary(op.symbol, stack.pop())
        right = stack.pop()
        left = stack.pop()
        return apply_binary(op.symbol, left, right)
