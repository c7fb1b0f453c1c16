# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Derives `PropertyMetadata` records from `ParsableArguments` declarations.

The walker visits a type's registered fields in declaration order. Option
groups are walked recursively and their records spliced in place; every other
argument-bearing field is resolved to its `ArgumentSet` and turned into at
most one record. Plain data fields are skipped.

Each record's `id` is the dot-joined key-path from the command root with a
leading dot, e.g. `.outer.verbose`. Consumers key on that exact format.

Public Interface:
- `collect_metadata(arguments_type, parent_key=None)`: Flat record list.
- `metadata(command_type)`: Same, for a command's own arguments.
- `PropertyMetadata.from_argument_set(...)`: Build one record, or None.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic_core import to_jsonable_python

from argspect.logger import logger
from argspect.parser.argument import (
    ArgumentDefinition,
    ArgumentSet,
    DefinitionKind,
    Name,
    NameStyle,
    UpdateArity,
    Visibility,
)
from argspect.parser.parsable_arguments import FieldShape, ParsableArguments
from argspect.parser.parser_types import InputKey
from argspect.parser.parsing_strategy import ParsingStrategy
from argspect.utils import normalize_text

KEY_SEPARATOR = "."


class NameKind(Enum):
    """Prefix style of an argument name."""

    LONG = "long"
    SHORT = "short"
    LONG_SINGLE_DASH = "long_single_dash"


_NAME_KINDS = {
    NameStyle.LONG: NameKind.LONG,
    NameStyle.SHORT: NameKind.SHORT,
    NameStyle.LONG_WITH_SINGLE_DASH: NameKind.LONG_SINGLE_DASH,
}


class ArgumentNameInfo(BaseModel):
    """One declared name form of an argument."""

    model_config = ConfigDict(frozen=True)

    kind: NameKind
    name: str

    @classmethod
    def from_name(cls, name: Name) -> ArgumentNameInfo:
        return cls(kind=_NAME_KINDS[name.style], name=name.value)

    def __str__(self) -> str:
        if self.kind is NameKind.LONG:
            return f"--{self.name}"
        return f"-{self.name}"


class ArgumentKind(Enum):
    """How an argument is supplied."""

    POSITIONAL = "positional"
    OPTION = "option"
    FLAG = "flag"

    @classmethod
    def of(cls, definition: ArgumentDefinition) -> ArgumentKind | None:
        """
        Classify a definition, or return None for defaults-only placeholders.

        Named definitions are flags when they take no value and options when
        they take one.
        """
        if definition.kind is DefinitionKind.POSITIONAL:
            return cls.POSITIONAL
        if definition.kind is DefinitionKind.NAMED:
            if definition.update is UpdateArity.NULLARY:
                return cls.FLAG
            return cls.OPTION
        return None


class PropertyMetadata(BaseModel):
    """
    A resolved, displayable argument.

    Attributes:
        id (str): Leading-dot key-path of the declaring fields.
        kind (ArgumentKind): Flag, option or positional.
        names (tuple[ArgumentNameInfo, ...] | None): Every name form, None for
            positionals.
        preferred_name (ArgumentNameInfo | None): Name to use in generated text.
        value_name (str | None): Placeholder for the value.
        abstract (str | None): Short help.
        discussion (str | None): Long help.
        parsing_strategy (ParsingStrategy): How tokens are consumed.
        initial_value (Any): Value-if-absent, None when there is none.
        type (Any): Declared value type of the property.
        visibility (Visibility): Whether the argument is shown to users.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str
    kind: ArgumentKind
    names: tuple[ArgumentNameInfo, ...] | None = None
    preferred_name: ArgumentNameInfo | None = None
    value_name: str | None = None
    abstract: str | None = None
    discussion: str | None = None
    parsing_strategy: ParsingStrategy = ParsingStrategy.DEFAULT
    initial_value: Any = None
    type: Any = None
    visibility: Visibility = Visibility.DEFAULT

    @field_serializer("type")
    def serialize_type(self, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, type):
            return value.__name__
        return str(value)

    @field_serializer("initial_value", when_used="json")
    def serialize_initial_value(self, value: Any) -> Any:
        return to_jsonable_python(value, fallback=repr)

    @classmethod
    def from_argument_set(
        cls,
        argument_set: ArgumentSet,
        id: str,
        value_type: Any = None,
    ) -> PropertyMetadata | None:
        """
        Build the record for one argument set.

        The first classifiable definition is the primary one; names are
        gathered from every classifiable definition. Returns None if no
        definition can be classified.
        """
        classified = [
            (definition, kind)
            for definition in argument_set
            if (kind := ArgumentKind.of(definition)) is not None
        ]
        if not classified:
            logger.debug("[%s] No classifiable argument definition", id)
            return None

        primary, kind = classified[0]
        names = ArgumentSet(tuple(definition for definition, _ in classified)).names()
        preferred = primary.preferred_name
        initial = primary.simulate_initial()
        return cls(
            id=id,
            kind=kind,
            names=tuple(ArgumentNameInfo.from_name(name) for name in names) or None,
            preferred_name=ArgumentNameInfo.from_name(preferred) if preferred else None,
            value_name=normalize_text(primary.value_name),
            abstract=normalize_text(primary.help.abstract),
            discussion=normalize_text(primary.help.discussion),
            parsing_strategy=primary.parsing_strategy,
            initial_value=initial.value if initial is not None else None,
            type=value_type,
            visibility=primary.help.visibility,
        )


def collect_metadata(
    arguments_type: type[ParsableArguments],
    parent_key: str | None = None,
    parent_input_key: InputKey | None = None,
) -> list[PropertyMetadata]:
    """
    Walk `arguments_type` and return one record per resolvable argument.

    Args:
        arguments_type (type[ParsableArguments]): The type to walk.
        parent_key (str | None): Key-path of the enclosing option group.
        parent_input_key (InputKey | None): Input key of the enclosing group.

    Returns:
        list[PropertyMetadata]: Records in depth-first declaration order.
    """
    results: list[PropertyMetadata] = []
    for field in arguments_type.argument_fields():
        key = f"{parent_key or ''}{KEY_SEPARATOR}{field.coding_key}"
        input_key = (
            parent_input_key.child(field.coding_key)
            if parent_input_key is not None
            else InputKey(field.coding_key)
        )
        if field.shape is FieldShape.GROUP:
            assert field.group_type is not None
            results.extend(collect_metadata(field.group_type, key, input_key))
        elif field.shape is FieldShape.LEAF:
            assert field.provider is not None
            argument_set = field.provider.argument_set(input_key)
            metadata = PropertyMetadata.from_argument_set(
                argument_set, id=key, value_type=field.value_type
            )
            if metadata is not None:
                results.append(metadata)
        else:
            logger.debug("[%s] Skipping plain field '%s'", arguments_type.__name__, key)
    return results


def metadata(command_type: type[ParsableArguments]) -> list[PropertyMetadata]:
    """Return the argument records for `command_type`'s own declarations."""
    return collect_metadata(command_type)
