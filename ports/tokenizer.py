"""
Port: Tokenizer
Responsibility: turning a raw input line into typed tokens.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, line: str) -> list[Token]:
        """
        Strips all whitespace from line and splits it into tokens by matching
        the longest admissible prefix (bracket, operator run, identifier,
        unsigned integer) at each position.
        Runs of "+"/"-" are collapsed to a single operator before the token
        is produced; operators in prefix position are marked unary.
        An unmatched remainder is dropped (or, in strict mode, raises
        UnrecognizedInput).
        """
        ...
