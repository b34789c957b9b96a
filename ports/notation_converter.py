"""
Port: NotationConverter
Responsibility: reordering an infix token stream into postfix order.
"""
from typing import Protocol, runtime_checkable

from contracts import PostfixToken, Token


@runtime_checkable
class NotationConverter(Protocol):
    def to_postfix(self, tokens: list[Token]) -> list[PostfixToken]:
        """
        Converts infix tokens (brackets included) into a postfix stream with
        no brackets, honouring operator precedence and left-to-right order
        for equal precedence.
        Raises UnmatchedBracket on an extra ")" or an unclosed "(".
        """
        ...
