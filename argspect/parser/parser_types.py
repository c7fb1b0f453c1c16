# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value-store models used when an argument computes its value-if-absent.

Contents:
- `InputKey`: Identifies one declared property, including its option group path.
- `InputOrigin`: The input positions a value came from (empty for defaults).
- `ParsedValue`: One recorded value together with its origin.
- `ParsedValues`: The accumulated values keyed by `InputKey`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class InputKey:
    """Key for a declared property, scoped by the option groups above it."""

    name: str
    path: tuple[str, ...] = ()

    def child(self, name: str) -> InputKey:
        """Return the key for `name` declared inside this key's group."""
        return InputKey(name=name, path=(*self.path, self.name))

    def __str__(self) -> str:
        return ".".join((*self.path, self.name))


@dataclass(frozen=True)
class InputOrigin:
    """Positions in the original input that produced a value."""

    positions: tuple[int, ...] = ()

    @property
    def is_default(self) -> bool:
        return not self.positions


@dataclass(frozen=True)
class ParsedValue:
    """Represents a value recorded for a key."""

    value: Any
    origin: InputOrigin = field(default_factory=InputOrigin)


@dataclass
class ParsedValues:
    """Tracks the values recorded while applying arguments to input."""

    original_input: tuple[str, ...] = ()
    elements: dict[InputKey, ParsedValue] = field(default_factory=dict)

    def set(self, key: InputKey, value: Any, origin: InputOrigin) -> None:
        """Record `value` for `key`, replacing any earlier value."""
        self.elements[key] = ParsedValue(value=value, origin=origin)

    def get(self, key: InputKey) -> ParsedValue | None:
        """Return the value recorded for `key`, if any."""
        return self.elements.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.elements
