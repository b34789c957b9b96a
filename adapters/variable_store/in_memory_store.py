"""
Adapter: InMemoryVariableStore
Implements port VariableStore — a plain dict living as long as the process.
"""
from __future__ import annotations

from typing import Optional

from contracts import Variable


class InMemoryVariableStore:

    def __init__(self) -> None:
        self._variables: dict[str, Variable] = {}

    # -- VariableStore protocol ---------------------------------------------

    def get(self, name: str) -> Optional[int]:
        variable = self._variables.get(name)
        return variable.value if variable is not None else None

    def set(self, name: str, value: int) -> None:
        # Reassignment replaces the Variable, never mutates it.
        self._variables[name] = Variable(name=name, value=value)

    def snapshot(self) -> dict[str, int]:
        return {name: v.value for name, v in self._variables.items()}
