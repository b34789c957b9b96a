"""
contracts.py — Single source of truth for every data type in bigcalc.
All modules import tokens, models and error kinds ONLY from here.
"""
from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

CONTRACTS_VERSION = "1.0.0"

# Binary precedence per operator symbol; unknown symbols rank 0.
OPERATOR_PRECEDENCE: dict[str, int] = {"+": 1, "-": 1, "*": 2, "/": 2}

# Prefix operators bind tighter than any binary operator.
UNARY_BINDING_POWER = 3


# ─────────────────────────── Tokens ──────────────────────────────────────

class IntegerToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: Literal["integer"] = "integer"
    value: int  # unsigned literal, arbitrary precision

    @property
    def text(self) -> str:
        return str(self.value)


class IdentifierToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: Literal["identifier"] = "identifier"
    name: str

    @property
    def text(self) -> str:
        return self.name


class OperatorToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: Literal["operator"] = "operator"
    symbol: str          # "+", "-", "*", "/" or an un-normalized run ("*-")
    unary: bool = False  # prefix position: start, after operator or "("

    @property
    def precedence(self) -> int:
        return OPERATOR_PRECEDENCE.get(self.symbol, 0)

    @property
    def binding_power(self) -> int:
        return UNARY_BINDING_POWER if self.unary else self.precedence

    @property
    def text(self) -> str:
        return f"u{self.symbol}" if self.unary else self.symbol


class BracketToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: Literal["bracket"] = "bracket"
    kind: Literal["open", "close"]

    @property
    def text(self) -> str:
        return "(" if self.kind == "open" else ")"


Token = Union[IntegerToken, IdentifierToken, OperatorToken, BracketToken]

# Postfix streams never contain brackets.
PostfixToken = Union[IntegerToken, IdentifierToken, OperatorToken]


# ─────────────────────────── Variables ───────────────────────────────────

class Variable(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class Assignment(BaseModel):
    target: str   # text before the first "=", trimmed
    source: str   # text after the first "=", trimmed


# ─────────────────────────── REPL ────────────────────────────────────────

class LineOutcome(BaseModel):
    """Result of processing one input line; errors are encoded, not raised."""
    line: str
    kind: Literal["blank", "command", "assignment", "expression"]
    output: Optional[str] = None   # what the driver prints (None = nothing)
    error: Optional[str] = None    # error kind name, e.g. "UnknownVariable"
    finished: bool = False         # True after /exit

    @property
    def ok(self) -> bool:
        return self.error is None


# ─────────────────────────── Errors ──────────────────────────────────────

INVALID_EXPRESSION = "Invalid expression"


class CalculatorError(Exception):
    """Base class; user_message is what the REPL prints for the error."""
    user_message = INVALID_EXPRESSION

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.user_message)


class EvaluationError(CalculatorError):
    pass


class UnmatchedBracket(EvaluationError):
    pass


class UnknownVariable(EvaluationError):
    user_message = "Unknown variable"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown variable: {name!r}")
        self.name = name


class UnknownOperator(EvaluationError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown binary operator: {symbol!r}")
        self.symbol = symbol


class DivisionByZero(EvaluationError):
    pass


class MalformedPostfix(EvaluationError):
    pass


class NumberTooLarge(EvaluationError):
    """A literal or result exceeds the int <-> str digit limit."""


class UnrecognizedInput(EvaluationError):
    def __init__(self, remainder: str) -> None:
        super().__init__(f"Unrecognized input: {remainder!r}")
        self.remainder = remainder


class AssignmentError(CalculatorError):
    pass


class InvalidIdentifier(AssignmentError):
    user_message = "Invalid identifier"


class InvalidAssignmentValue(AssignmentError):
    user_message = "Invalid assignment"
