"""
Port: Evaluator
Responsibility: deterministic evaluation of a postfix stream.
"""
from typing import Protocol, runtime_checkable

from contracts import PostfixToken
from ports.variable_store import VariableStore


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, postfix: list[PostfixToken], env: VariableStore) -> int:
        """
        Runs the postfix stream on an operand stack and returns the single
        remaining value. Identifiers are resolved through env (read only).
        Raises UnknownVariable for unbound identifiers,
        DivisionByZero for "/" with a zero divisor,
        UnknownOperator for a binary symbol outside + - * /,
        MalformedPostfix when operands are missing or left over.
        """
        ...
