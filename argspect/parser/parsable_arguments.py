# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsableArguments`, the base class for argument-bearing records.

Fields are registered once, when a subclass is created. Each class attribute
is classified into a `FieldShape`:

- `LEAF`: an `ArgumentSetProvider` such as `Flag`, `Option` or `Argument`.
- `GROUP`: an `OptionGroup` embedding another `ParsableArguments` type.
- `OPAQUE`: an annotated plain data field with no argument semantics.

The resulting registry keeps declaration order, with inherited fields first
and overridden fields kept at their inherited position. Walkers iterate
`argument_fields()` instead of inspecting instances.

Example:
    class Shared(ParsableArguments):
        verbose: bool = Flag("-v")

    class Build(ParsableArguments):
        shared: Shared = OptionGroup(Shared)
        target: str = Argument()
        cache: dict = {}          # OPAQUE
"""
from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from argspect.exceptions import ArgumentDeclarationError
from argspect.logger import logger
from argspect.parser.declarations import OptionGroup
from argspect.protocols import ArgumentSetProvider

STORAGE_PREFIX = "_"


class FieldShape(Enum):
    """Classification of a declared field."""

    LEAF = "leaf"
    GROUP = "group"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class FieldDeclaration:
    """
    One registered field of a `ParsableArguments` type.

    Attributes:
        name (str): Attribute name as written in the class body.
        shape (FieldShape): How the walker treats this field.
        value_type (Any): Declared value type of the property.
        provider (ArgumentSetProvider | None): Source of definitions for leaves.
        group_type (type[ParsableArguments] | None): Nested type for groups.
    """

    name: str
    shape: FieldShape
    value_type: Any = None
    provider: ArgumentSetProvider | None = None
    group_type: type[ParsableArguments] | None = None

    @property
    def coding_key(self) -> str:
        """The declared argument name, without the storage prefix."""
        if self.name.startswith(STORAGE_PREFIX):
            return self.name[len(STORAGE_PREFIX) :]
        return self.name


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _own_annotations(cls: type) -> dict[str, Any]:
    """Annotations declared on `cls` itself, resolved where possible."""
    own = inspect.get_annotations(cls)
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError) as error:
        logger.debug("[%s] Keeping unresolved annotations: %s", cls.__name__, error)
        return dict(own)
    return {name: hints.get(name, annotation) for name, annotation in own.items()}


def _classify(
    cls: type, name: str, value: Any, annotations: dict[str, Any]
) -> FieldDeclaration | None:
    annotation = annotations.get(name)
    if isinstance(value, OptionGroup):
        if not (
            isinstance(value.arguments_type, type)
            and issubclass(value.arguments_type, ParsableArguments)
        ):
            raise ArgumentDeclarationError(
                f"OptionGroup '{cls.__name__}.{name}' must wrap a ParsableArguments "
                f"subclass, got {value.arguments_type!r}"
            )
        return FieldDeclaration(
            name=name,
            shape=FieldShape.GROUP,
            value_type=annotation if annotation is not None else value.value_type(),
            group_type=value.arguments_type,
        )
    if isinstance(value, ArgumentSetProvider) and not isinstance(value, type):
        return FieldDeclaration(
            name=name,
            shape=FieldShape.LEAF,
            value_type=annotation if annotation is not None else value.value_type(),
            provider=value,
        )
    if name in annotations:
        return FieldDeclaration(name=name, shape=FieldShape.OPAQUE, value_type=annotation)
    return None


class ParsableArguments:
    """
    Base class for records whose fields declare command-line arguments.

    Subclasses are registered at creation; see `argument_fields()`.
    """

    _argument_fields: ClassVar[tuple[FieldDeclaration, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        own = _own_annotations(cls)
        class_vars = {
            name for name, annotation in own.items() if _is_class_var(annotation)
        }
        annotations = {
            name: annotation for name, annotation in own.items() if name not in class_vars
        }
        fields = {field.name: field for field in cls._argument_fields}
        for name, value in vars(cls).items():
            if name.startswith("__") or name == "_argument_fields":
                continue
            if name in class_vars:
                fields.pop(name, None)
                continue
            declaration = _classify(cls, name, value, annotations)
            if declaration is not None:
                fields[name] = declaration
            elif name in fields:
                # A plain value shadows the inherited argument.
                fields[name] = FieldDeclaration(
                    name=name, shape=FieldShape.OPAQUE, value_type=annotations.get(name)
                )
        for name, annotation in annotations.items():
            if name not in vars(cls) and name not in fields:
                fields[name] = FieldDeclaration(
                    name=name, shape=FieldShape.OPAQUE, value_type=annotation
                )
        cls._argument_fields = tuple(fields.values())
        logger.debug(
            "[%s] Registered %d field(s): %s",
            cls.__name__,
            len(cls._argument_fields),
            ", ".join(field.name for field in cls._argument_fields),
        )

    @classmethod
    def argument_fields(cls) -> tuple[FieldDeclaration, ...]:
        """Registered fields, in declaration order."""
        return cls._argument_fields

    @classmethod
    def metadata(cls) -> list[Any]:
        """Return the `PropertyMetadata` for every argument of this type."""
        from argspect.metadata import collect_metadata

        return collect_metadata(cls)
