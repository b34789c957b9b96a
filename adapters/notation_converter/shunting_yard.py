"""
Adapter: ShuntingYardConverter
Implements port NotationConverter — bracket-scoped shunting-yard.

One operator group per bracket depth:
  literal / identifier -> straight to output
  binary operator      -> pop from the current group every operator binding
                          at least as tightly, then push
  unary operator       -> push (prefix operators never pop)
  "("                  -> depth + 1, fresh group
  ")"                  -> depth - 1, flush the group top-first
End of input flushes the outermost group; depth must be back to 0.
"""
from __future__ import annotations

import logging

from contracts import (
    BracketToken,
    OperatorToken,
    PostfixToken,
    Token,
    UnmatchedBracket,
)

logger = logging.getLogger("bigcalc.converter")


def _flush(group: list[OperatorToken], output: list[PostfixToken]) -> None:
    while group:
        output.append(group.pop())


def render_postfix(postfix: list[PostfixToken]) -> str:
    return " ".join(t.text for t in postfix)


class ShuntingYardConverter:

    # -- NotationConverter protocol -----------------------------------------

    def to_postfix(self, tokens: list[Token]) -> list[PostfixToken]:
        output: list[PostfixToken] = []
        groups: list[list[OperatorToken]] = [[]]
        depth = 0

        for token in tokens:
            if isinstance(token, OperatorToken):
                group = groups[-1]
                if not token.unary:
                    while group and group[-1].binding_power >= token.binding_power:
                        output.append(group.pop())
                group.append(token)
            elif isinstance(token, BracketToken):
                if token.kind == "open":
                    depth += 1
                    groups.append([])
                else:
                    if depth == 0:
                        raise UnmatchedBracket("Closing bracket without a matching '('")
                    depth -= 1
                    _flush(groups.pop(), output)
            else:
                output.append(token)

        if depth != 0:
            raise UnmatchedBracket(f"{depth} unclosed bracket(s)")
        _flush(groups[0], output)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Postfix: %s", render_postfix(output))
        return output
