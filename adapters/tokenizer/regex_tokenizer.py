"""
Adapter: RegexTokenizer
Implements port Tokenizer.

Matching order at the current position (first match wins):
  1. a single bracket        ( )
  2. a maximal operator run  [+-*/]+
  3. a maximal letter run    identifier
  4. a maximal digit run     unsigned integer

Operator runs go through normalize_signs():
  "+++" -> "+",  "---" -> "-",  "----" -> "+",  mixed runs unchanged.

No match at the current position ends tokenization; the remainder is
dropped (logged at DEBUG), or raises UnrecognizedInput in strict mode.
"""
from __future__ import annotations

import logging
import re

from contracts import (
    BracketToken,
    IdentifierToken,
    IntegerToken,
    NumberTooLarge,
    OperatorToken,
    Token,
    UnrecognizedInput,
)

logger = logging.getLogger("bigcalc.tokenizer")

_WHITESPACE_RE = re.compile(r"\s+")

# Order matters: first alternative that matches at pos wins.
_TOKEN_RE = re.compile(
    r"(?P<bracket>[()])"
    r"|(?P<operator>[+\-*/]+)"
    r"|(?P<identifier>[a-zA-Z]+)"
    r"|(?P<integer>[0-9]+)"
)

_PLUS_RUN_RE = re.compile(r"\++")
_MINUS_RUN_RE = re.compile(r"-+")


def strip_whitespace(line: str) -> str:
    return _WHITESPACE_RE.sub("", line)


def normalize_signs(run: str) -> str:
    """Collapses a run of "+" or of "-" into one effective operator."""
    if _PLUS_RUN_RE.fullmatch(run):
        return "+"
    if _MINUS_RUN_RE.fullmatch(run):
        return "+" if len(run) % 2 == 0 else "-"
    return run


def _is_prefix_position(previous: Token | None) -> bool:
    if previous is None:
        return True
    if isinstance(previous, OperatorToken):
        return True
    return isinstance(previous, BracketToken) and previous.kind == "open"


class RegexTokenizer:
    """Cursor-based tokenizer over a whitespace-free line."""

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    # -- Tokenizer protocol -------------------------------------------------

    def tokenize(self, line: str) -> list[Token]:
        text = strip_whitespace(line)
        tokens: list[Token] = []
        pos = 0
        while pos < len(text):
            m = _TOKEN_RE.match(text, pos)
            if m is None:
                remainder = text[pos:]
                if self._strict:
                    raise UnrecognizedInput(remainder)
                logger.debug("Dropping unrecognized remainder %r", remainder)
                break
            previous = tokens[-1] if tokens else None
            tokens.append(self._make_token(m, previous))
            pos = m.end()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tokens: %s", " ".join(t.text for t in tokens))
        return tokens

    # -- Private ------------------------------------------------------------

    def _make_token(self, m: re.Match[str], previous: Token | None) -> Token:
        kind, value = m.lastgroup, m.group()
        if kind == "bracket":
            return BracketToken(kind="open" if value == "(" else "close")
        if kind == "operator":
            return OperatorToken(
                symbol=normalize_signs(value),
                unary=_is_prefix_position(previous),
            )
        if kind == "identifier":
            return IdentifierToken(name=value)
        try:
            return IntegerToken(value=int(value))
        except ValueError as exc:
            raise NumberTooLarge(f"Literal of {len(value)} digits: {exc}") from exc
