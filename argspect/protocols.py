# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for argument declarations.

Protocols:
- ArgumentSetProvider: Anything that contributes argument definitions for a key.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from argspect.parser.argument import ArgumentSet
    from argspect.parser.parser_types import InputKey


@runtime_checkable
class ArgumentSetProvider(Protocol):
    def argument_set(self, key: InputKey) -> ArgumentSet: ...

    def value_type(self) -> Any: ...
