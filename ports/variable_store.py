"""
Port: VariableStore
Responsibility: the variable environment — name → arbitrary-precision int.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class VariableStore(Protocol):
    def get(self, name: str) -> Optional[int]:
        """Returns the bound value, or None if name was never assigned."""
        ...

    def set(self, name: str, value: int) -> None:
        """Inserts or overwrites the binding. There is no delete."""
        ...

    def snapshot(self) -> dict[str, int]:
        """Returns a copy of all bindings (no ordering guarantee)."""
        ...
