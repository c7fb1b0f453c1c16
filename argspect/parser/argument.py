# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentDefinition`, the atomic description of how one value or flag
is recognized, and `ArgumentSet`, the definitions contributed by one declared
property.

Declarations (`Flag`, `Option`, `Argument`, `Value`) build these on demand;
the metadata walker only ever reads them.

Key Types:
- `Name`: One name form (`--long`, `-s`, or `-longWithSingleDash`).
- `ArgumentHelp`: Abstract, discussion, value name and visibility.
- `DefinitionKind`: Named, positional, or a defaults-only placeholder.
- `UpdateArity`: Whether an occurrence carries zero or one value.
- `ArgumentDefinition`: All static attributes plus the defaulting routine.
- `ArgumentSet`: Ordered definitions for one property.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

from argspect.exceptions import ArgumentDeclarationError
from argspect.logger import logger
from argspect.parser.parser_types import InputKey, InputOrigin, ParsedValue, ParsedValues
from argspect.parser.parsing_strategy import ParsingStrategy


class NameStyle(Enum):
    """Prefix style of a name."""

    LONG = "long"
    SHORT = "short"
    LONG_WITH_SINGLE_DASH = "long_with_single_dash"


@dataclass(frozen=True)
class Name:
    """A single name an argument can be referred to by."""

    style: NameStyle
    value: str

    @classmethod
    def from_flag(cls, flag: str) -> Name:
        """
        Parse a flag string into a `Name`.

        `--verbose` is long, `-v` is short and `-verbose` is a long name with a
        single dash.

        Raises:
            ArgumentDeclarationError: If the flag has no leading dash, no body,
                or contains whitespace.
        """
        if not isinstance(flag, str) or not flag.startswith("-"):
            raise ArgumentDeclarationError(
                f"Invalid flag {flag!r}: named arguments must start with '-'"
            )
        if flag.startswith("--"):
            style, body = NameStyle.LONG, flag[2:]
        else:
            body = flag[1:]
            style = NameStyle.SHORT if len(body) == 1 else NameStyle.LONG_WITH_SINGLE_DASH
        if not body or body.startswith("-") or any(char.isspace() for char in body):
            raise ArgumentDeclarationError(f"Invalid flag {flag!r}")
        return cls(style=style, value=body)

    @property
    def is_short(self) -> bool:
        return self.style is NameStyle.SHORT

    @property
    def synopsis_string(self) -> str:
        if self.style is NameStyle.LONG:
            return f"--{self.value}"
        return f"-{self.value}"

    def __str__(self) -> str:
        return self.synopsis_string


class Visibility(Enum):
    """Where an argument is shown to users."""

    DEFAULT = "default"
    HIDDEN = "hidden"
    PRIVATE = "private"


@dataclass(frozen=True)
class ArgumentHelp:
    """Help attached to an argument declaration."""

    abstract: str = ""
    discussion: str = ""
    value_name: str | None = None
    visibility: Visibility = Visibility.DEFAULT

    @classmethod
    def coerce(cls, help: str | ArgumentHelp | None) -> ArgumentHelp:
        if help is None:
            return cls()
        if isinstance(help, ArgumentHelp):
            return help
        return cls(abstract=help)


class DefinitionKind(Enum):
    """How a definition is supplied on the command line."""

    NAMED = "named"
    POSITIONAL = "positional"
    DEFAULT = "default"


class UpdateArity(Enum):
    """Number of values an occurrence carries."""

    NULLARY = "nullary"
    UNARY = "unary"


def _no_initial(origin: InputOrigin, values: ParsedValues) -> None:
    return None


@dataclass(frozen=True)
class ArgumentDefinition:
    """
    Represents one way a property's value is recognized.

    Attributes:
        key (InputKey): The property this definition stores into.
        kind (DefinitionKind): Named, positional, or defaults-only.
        update (UpdateArity): Nullary (flag) or unary (value-carrying).
        names (tuple[Name, ...]): Name forms; empty for positionals.
        help (ArgumentHelp): Help text and visibility.
        value_name (str): Placeholder used for the value in help, e.g. `path`.
        parsing_strategy (ParsingStrategy): How tokens are consumed.
        initial (Callable): Records the value-if-absent into a `ParsedValues`.
    """

    key: InputKey
    kind: DefinitionKind
    update: UpdateArity
    names: tuple[Name, ...] = ()
    help: ArgumentHelp = field(default_factory=ArgumentHelp)
    value_name: str = ""
    parsing_strategy: ParsingStrategy = ParsingStrategy.DEFAULT
    initial: Callable[[InputOrigin, ParsedValues], None] = field(
        default=_no_initial, compare=False
    )

    def __post_init__(self) -> None:
        if self.kind is DefinitionKind.NAMED and not self.names:
            raise ArgumentDeclarationError(
                f"Named argument '{self.key}' must declare at least one name"
            )
        if self.kind is not DefinitionKind.NAMED and self.names:
            raise ArgumentDeclarationError(
                f"Only named arguments can declare names, got {self.kind} for '{self.key}'"
            )

    @property
    def is_positional(self) -> bool:
        return self.kind is DefinitionKind.POSITIONAL

    @property
    def preferred_name(self) -> Name | None:
        """The first non-short name, falling back to the first name."""
        for name in self.names:
            if not name.is_short:
                return name
        return self.names[0] if self.names else None

    def simulate_initial(self) -> ParsedValue | None:
        """
        Apply this definition to empty input and read back its value.

        Returns None when the defaulting routine fails or records nothing.
        """
        values = ParsedValues()
        try:
            self.initial(InputOrigin(), values)
        except Exception as error:
            logger.debug("[%s] No initial value: %s", self.key, error)
            return None
        return values.get(self.key)


@dataclass(frozen=True)
class ArgumentSet:
    """The ordered definitions contributed by one declared property."""

    content: tuple[ArgumentDefinition, ...] = ()

    def __iter__(self) -> Iterator[ArgumentDefinition]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)

    def __bool__(self) -> bool:
        return bool(self.content)

    def first(self) -> ArgumentDefinition | None:
        return self.content[0] if self.content else None

    def names(self) -> list[Name]:
        """Every name across the set, in order, without duplicates."""
        names: list[Name] = []
        for definition in self.content:
            for name in definition.names:
                if name not in names:
                    names.append(name)
        return names

