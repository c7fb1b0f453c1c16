# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Argument declarations used as class attributes on `ParsableArguments`.

Each declaration contributes an `ArgumentSet` for the key it is bound to:

- `Flag`: Named, presence-only switch. Optionally counting, or inverted as a
  `--x`/`--no-x` (or `--enable-x`/`--disable-x`) pair.
- `Option`: Named, value-carrying argument.
- `Argument`: Positional value.
- `Value`: Defaults-only placeholder; never supplied on the command line.
- `OptionGroup`: Embeds another `ParsableArguments` type, flattening its
  arguments under this field's key-path.

Example:
    class Options(ParsableArguments):
        verbose: bool = Flag("-v", "--verbose", help="Print more.")
        jobs: int = Option("-j", type=int, default="4")
        path: str = Argument(help="Where to look.")

Declarations validate their own configuration eagerly and raise
`ArgumentDeclarationError` at class-definition time.
"""
from __future__ import annotations

import builtins
from enum import Enum
from typing import Any, Callable, Optional, get_origin

from argspect.exceptions import ArgumentDeclarationError, MissingDefaultError
from argspect.parser.argument import (
    ArgumentDefinition,
    ArgumentHelp,
    ArgumentSet,
    DefinitionKind,
    Name,
    NameStyle,
    UpdateArity,
    Visibility,
)
from argspect.parser.parser_types import InputKey, InputOrigin, ParsedValues
from argspect.parser.parsing_strategy import ParsingStrategy
from argspect.parser.utils import coerce_default
from argspect.utils import convert_to_snake_case

Initial = Callable[[InputOrigin, ParsedValues], None]


class _UnsetType:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Unset"

    def __bool__(self) -> bool:
        return False


Unset: Any = _UnsetType()


class FlagInversion(Enum):
    """Naming scheme for the negative half of an inverted flag."""

    PREFIXED_NO = "prefixed_no"
    PREFIXED_ENABLE_DISABLE = "prefixed_enable_disable"


def _parse_flags(flags: tuple[str, ...]) -> tuple[Name, ...]:
    names = tuple(Name.from_flag(flag) for flag in flags)
    if len(set(names)) != len(names):
        raise ArgumentDeclarationError(f"Duplicate names in {flags!r}")
    return names


def _default_long_name(key: InputKey) -> Name:
    return Name(style=NameStyle.LONG, value=convert_to_snake_case(key.name))


class Declaration:
    """Shared behavior of all argument declarations."""

    def __init__(self, help: str | ArgumentHelp | None = None) -> None:
        self.help: ArgumentHelp = ArgumentHelp.coerce(help)
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Flag(Declaration):
    """
    A named argument that takes no value.

    Args:
        *flags (str): Name forms, e.g. `-v`, `--verbose`. Defaults to the
            field's coding key as a long name.
        default (bool | int): Value when the flag is absent.
        inversion (FlagInversion | str | None): Add a negative counterpart.
            An inverted flag with no default must be supplied.
        counting (bool): Count occurrences instead of toggling.
        help (str | ArgumentHelp | None): Help text.
    """

    def __init__(
        self,
        *flags: str,
        default: Any = Unset,
        inversion: FlagInversion | str | None = None,
        counting: bool = False,
        help: str | ArgumentHelp | None = None,
    ) -> None:
        super().__init__(help)
        self.names: tuple[Name, ...] = _parse_flags(flags)
        self.default = default
        try:
            self.inversion: FlagInversion | None = (
                FlagInversion(inversion) if inversion is not None else None
            )
        except ValueError as error:
            raise ArgumentDeclarationError(str(error)) from error
        self.counting = counting
        if counting and self.inversion is not None:
            raise ArgumentDeclarationError("A counting flag cannot be inverted")
        if counting and default is not Unset and not isinstance(default, int):
            raise ArgumentDeclarationError("A counting flag needs an integer default")
        if self.inversion is not None and self.names:
            if not any(name.style is NameStyle.LONG for name in self.names):
                raise ArgumentDeclarationError(
                    f"Inverted flag {flags!r} needs a long name to invert"
                )

    def value_type(self) -> Any:
        return int if self.counting else bool

    def _initial(self, key: InputKey) -> Initial:
        def initial(origin: InputOrigin, values: ParsedValues) -> None:
            if self.default is not Unset:
                values.set(key, self.default, origin)
            elif self.counting:
                values.set(key, 0, origin)
            elif self.inversion is None:
                values.set(key, False, origin)
            else:
                raise MissingDefaultError(f"Missing expected flag for '{key}'")

        return initial

    def _definition(self, key: InputKey, names: tuple[Name, ...]) -> ArgumentDefinition:
        return ArgumentDefinition(
            key=key,
            kind=DefinitionKind.NAMED,
            update=UpdateArity.NULLARY,
            names=names,
            help=self.help,
            initial=self._initial(key),
        )

    def argument_set(self, key: InputKey) -> ArgumentSet:
        names = self.names or (_default_long_name(key),)
        if self.inversion is None:
            return ArgumentSet((self._definition(key, names),))

        long_name = next(name for name in names if name.style is NameStyle.LONG)
        if self.inversion is FlagInversion.PREFIXED_NO:
            enable = names
            disable = (Name(NameStyle.LONG, f"no-{long_name.value}"),)
        else:
            shorts = tuple(name for name in names if name.is_short)
            enable = (Name(NameStyle.LONG, f"enable-{long_name.value}"), *shorts)
            disable = (Name(NameStyle.LONG, f"disable-{long_name.value}"),)
        return ArgumentSet(
            (self._definition(key, enable), self._definition(key, disable))
        )


class _ValueDeclaration(Declaration):
    """Shared behavior of value-carrying declarations."""

    allowed_strategies: tuple[ParsingStrategy, ...] = ()

    def __init__(
        self,
        default: Any = Unset,
        type: Any = str,
        optional: bool = False,
        multiple: bool = False,
        parsing: ParsingStrategy | str = ParsingStrategy.DEFAULT,
        value_name: str | None = None,
        help: str | ArgumentHelp | None = None,
    ) -> None:
        super().__init__(help)
        if not (
            isinstance(type, builtins.type) or get_origin(type) is not None or type is Any
        ):
            raise ArgumentDeclarationError(f"type must be a type, got {type!r}")
        self.default = default
        self.type = type
        self.optional = optional
        self.multiple = multiple
        self.value_name = value_name
        self.parsing_strategy = self._validate_parsing(parsing)

    def _validate_parsing(self, parsing: ParsingStrategy | str) -> ParsingStrategy:
        if not isinstance(parsing, ParsingStrategy):
            try:
                parsing = ParsingStrategy(parsing)
            except ValueError as error:
                raise ArgumentDeclarationError(str(error)) from error
        if parsing not in self.allowed_strategies:
            raise ArgumentDeclarationError(
                f"{type(self).__name__} does not support parsing strategy '{parsing}'"
            )
        if parsing.consumes_many and not self.multiple:
            raise ArgumentDeclarationError(
                f"Parsing strategy '{parsing}' requires multiple=True"
            )
        return parsing

    def value_type(self) -> Any:
        if self.multiple:
            return list[self.type]
        if self.optional:
            return Optional[self.type]
        return self.type

    def _value_name(self, key: InputKey) -> str:
        return (
            self.value_name or self.help.value_name or convert_to_snake_case(key.name)
        )

    def _initial(self, key: InputKey) -> Initial:
        def initial(origin: InputOrigin, values: ParsedValues) -> None:
            if self.default is not Unset:
                default = self.default
                if self.multiple and not isinstance(default, (list, tuple)):
                    default = [default]
                values.set(key, coerce_default(default, self.type), origin)
            elif self.multiple:
                values.set(key, [], origin)
            elif self.optional:
                values.set(key, None, origin)
            else:
                raise MissingDefaultError(f"Missing expected argument '{key}'")

        return initial


class Option(_ValueDeclaration):
    """
    A named argument that takes a value.

    Args:
        *flags (str): Name forms. Defaults to the field's coding key as a
            long name.
        default (Any): Value when absent. Strings are coerced to `type`.
        type (Any): Declared element type.
        optional (bool): Absent means None rather than missing.
        multiple (bool): Collect repeated values into a list.
        parsing (ParsingStrategy | str): How values are consumed.
        value_name (str | None): Placeholder for the value in help.
        help (str | ArgumentHelp | None): Help text.
    """

    allowed_strategies = (
        ParsingStrategy.DEFAULT,
        ParsingStrategy.SCANNING_FOR_VALUE,
        ParsingStrategy.UNCONDITIONAL,
        ParsingStrategy.UP_TO_NEXT_OPTION,
        ParsingStrategy.ALL_REMAINING_INPUT,
    )

    def __init__(self, *flags: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.names: tuple[Name, ...] = _parse_flags(flags)

    def argument_set(self, key: InputKey) -> ArgumentSet:
        return ArgumentSet(
            (
                ArgumentDefinition(
                    key=key,
                    kind=DefinitionKind.NAMED,
                    update=UpdateArity.UNARY,
                    names=self.names or (_default_long_name(key),),
                    help=self.help,
                    value_name=self._value_name(key),
                    parsing_strategy=self.parsing_strategy,
                    initial=self._initial(key),
                ),
            )
        )


class Argument(_ValueDeclaration):
    """
    A positional argument.

    Takes the same keyword arguments as `Option`, without flags.
    """

    allowed_strategies = (
        ParsingStrategy.DEFAULT,
        ParsingStrategy.ALL_REMAINING_INPUT,
        ParsingStrategy.POST_TERMINATOR,
        ParsingStrategy.ALL_UNRECOGNIZED,
    )

    def argument_set(self, key: InputKey) -> ArgumentSet:
        return ArgumentSet(
            (
                ArgumentDefinition(
                    key=key,
                    kind=DefinitionKind.POSITIONAL,
                    update=UpdateArity.UNARY,
                    help=self.help,
                    value_name=self._value_name(key),
                    parsing_strategy=self.parsing_strategy,
                    initial=self._initial(key),
                ),
            )
        )


class Value(Declaration):
    """A property whose value only ever comes from its default."""

    def __init__(self, default: Any, type: Any = None) -> None:
        super().__init__(None)
        self.default = default
        self.type = type if type is not None else builtins.type(default)

    def value_type(self) -> Any:
        return self.type

    def argument_set(self, key: InputKey) -> ArgumentSet:
        def initial(origin: InputOrigin, values: ParsedValues) -> None:
            values.set(key, self.default, origin)

        return ArgumentSet(
            (
                ArgumentDefinition(
                    key=key,
                    kind=DefinitionKind.DEFAULT,
                    update=UpdateArity.NULLARY,
                    initial=initial,
                ),
            )
        )


class OptionGroup(Declaration):
    """
    Embeds the arguments of another `ParsableArguments` type.

    Args:
        arguments_type (type[ParsableArguments]): The grouped arguments.
        title (str): Optional heading for the group.
        visibility (Visibility): Whether the group is shown.
    """

    def __init__(
        self,
        arguments_type: type,
        title: str = "",
        visibility: Visibility = Visibility.DEFAULT,
    ) -> None:
        super().__init__(None)
        self.arguments_type = arguments_type
        self.title = title
        self.visibility = visibility

    def value_type(self) -> Any:
        return self.arguments_type
