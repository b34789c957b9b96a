"""
engine.py — The expression pipeline behind the REPL.

    line -> Tokenizer -> NotationConverter -> Evaluator(env) -> str

evaluate() and assign() raise CalculatorError subclasses;
process() classifies one line, runs it and encodes any error into a
LineOutcome, so a malformed line never escapes to the read loop.
The variable environment is always passed in explicitly.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from adapters.evaluator.postfix_evaluator import PostfixEvaluator
from adapters.notation_converter.shunting_yard import ShuntingYardConverter
from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from contracts import (
    Assignment,
    CalculatorError,
    InvalidAssignmentValue,
    InvalidIdentifier,
    LineOutcome,
    NumberTooLarge,
    PostfixToken,
    Token,
    UnknownVariable,
)
from ports.evaluator import Evaluator
from ports.notation_converter import NotationConverter
from ports.tokenizer import Tokenizer
from ports.variable_store import VariableStore

logger = logging.getLogger("bigcalc.engine")

_IDENTIFIER_RE = re.compile(r"[a-zA-Z]+")
_INTEGER_LITERAL_RE = re.compile(r"[+-]?[0-9]+")


def is_identifier(text: str) -> bool:
    return _IDENTIFIER_RE.fullmatch(text) is not None


def is_assignment(line: str) -> bool:
    return "=" in line


def parse_assignment(line: str) -> Optional[Assignment]:
    """Splits on the first "="; returns None for lines without one."""
    if not is_assignment(line):
        return None
    target, _, source = line.partition("=")
    return Assignment(target=target.strip(), source=source.strip())


class ExpressionEngine:
    """Wires the tokenizer, converter and evaluator together."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        converter: NotationConverter | None = None,
        evaluator: Evaluator | None = None,
    ) -> None:
        self.tokenizer = tokenizer or RegexTokenizer()
        self.converter = converter or ShuntingYardConverter()
        self.evaluator = evaluator or PostfixEvaluator()

    # -- Core ---------------------------------------------------------------

    def tokenize(self, line: str) -> list[Token]:
        return self.tokenizer.tokenize(line)

    def to_postfix(self, line: str) -> list[PostfixToken]:
        return self.converter.to_postfix(self.tokenize(line))

    def evaluate(self, line: str, env: VariableStore) -> str:
        """Evaluates an expression line. Never writes to env."""
        value = self.evaluator.evaluate(self.to_postfix(line), env)
        try:
            return str(value)
        except ValueError as exc:
            raise NumberTooLarge(f"Result too long to print: {exc}") from exc

    def assign(self, line: str, env: VariableStore) -> None:
        """
        Handles "name = value". The right-hand side is a single identifier
        or a single (optionally signed) integer literal, not an expression.
        env is written only after both sides validate.
        """
        assignment = parse_assignment(line)
        if assignment is None:
            raise InvalidAssignmentValue(f"Not an assignment: {line!r}")
        if not is_identifier(assignment.target):
            raise InvalidIdentifier(f"Invalid identifier: {assignment.target!r}")
        value = self._resolve_source(assignment.source, env)
        env.set(assignment.target, value)
        logger.debug("Assigned %s", assignment.target)

    # -- Line processing ----------------------------------------------------

    def process(self, line: str, env: VariableStore) -> LineOutcome:
        """Runs one non-command line; errors become LineOutcome.error."""
        if not line.strip():
            return LineOutcome(line=line, kind="blank")

        kind = "assignment" if is_assignment(line) else "expression"
        try:
            if kind == "assignment":
                self.assign(line, env)
                return LineOutcome(line=line, kind=kind)
            return LineOutcome(line=line, kind=kind, output=self.evaluate(line, env))
        except CalculatorError as exc:
            logger.debug("Rejected %s %r: %s", kind, line, exc)
            return LineOutcome(
                line=line,
                kind=kind,
                output=exc.user_message,
                error=type(exc).__name__,
            )

    # -- Private ------------------------------------------------------------

    def _resolve_source(self, source: str, env: VariableStore) -> int:
        if is_identifier(source):
            value = env.get(source)
            if value is None:
                raise UnknownVariable(source)
            return value
        if _INTEGER_LITERAL_RE.fullmatch(source):
            try:
                return int(source)
            except ValueError as exc:
                raise InvalidAssignmentValue(f"Literal of {len(source)} chars: {exc}") from exc
        raise InvalidAssignmentValue(f"Invalid assignment: {source!r}")
