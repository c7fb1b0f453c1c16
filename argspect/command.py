# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines `ParsableCommand` and its `CommandConfiguration`.

A command is a `ParsableArguments` record plus a configuration describing how
it is invoked and what it contains:

- command name (derived from the class name when omitted)
- abstract and discussion help text
- sub-commands, an optional default sub-command, and aliases
- an optional external super-command name for the root of a tool

Example:
    class Add(ParsableCommand):
        configuration = CommandConfiguration(abstract="Add two numbers.")
        lhs: int = Argument(type=int)
        rhs: int = Argument(type=int)

    class Math(ParsableCommand):
        configuration = CommandConfiguration(
            super_command_name="tool", subcommands=[Add]
        )

    Math.command_name()   # "math"
    Math.command_info()   # CommandInfo tree rooted at `math`
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from argspect.parser.parsable_arguments import ParsableArguments
from argspect.utils import convert_to_snake_case

if TYPE_CHECKING:
    from argspect.command_info import CommandInfo


class CommandConfiguration(BaseModel):
    """
    Static configuration of a command.

    Attributes:
        command_name (str | None): Invocation name; derived from the class name
            when omitted.
        abstract (str): One-line description.
        discussion (str): Longer description.
        version (str): Version string shown by the command.
        should_display (bool): Whether the command is listed in help.
        subcommands (list[type[ParsableCommand]]): Child commands, in order.
        default_subcommand (type[ParsableCommand] | None): Child used when none
            is named; must be listed in `subcommands`.
        aliases (list[str]): Alternate invocation names.
        super_command_name (str | None): Name of an external parent tool, only
            meaningful on a root command.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    command_name: str | None = None
    abstract: str = ""
    discussion: str = ""
    version: str = ""
    should_display: bool = True
    subcommands: list[Any] = Field(default_factory=list)
    default_subcommand: Any = None
    aliases: list[str] = Field(default_factory=list)
    super_command_name: str | None = None

    @field_validator("abstract", "discussion", "version")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("command_name", "super_command_name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value or any(char.isspace() for char in value):
            raise ValueError(f"Invalid command name: {value!r}")
        return value

    @field_validator("subcommands")
    @classmethod
    def validate_subcommands(cls, value: list[Any]) -> list[Any]:
        for subcommand in value:
            if not (
                isinstance(subcommand, type) and issubclass(subcommand, ParsableCommand)
            ):
                raise ValueError(
                    f"Sub-commands must be ParsableCommand subclasses, got {subcommand!r}"
                )
        return value

    @model_validator(mode="after")
    def validate_default_subcommand(self) -> CommandConfiguration:
        if (
            self.default_subcommand is not None
            and self.default_subcommand not in self.subcommands
        ):
            raise ValueError(
                f"Default sub-command {self.default_subcommand!r} is not listed "
                "in subcommands"
            )
        return self


class ParsableCommand(ParsableArguments):
    """
    Base class for commands.

    Subclasses set `configuration` and declare their arguments as class
    attributes.
    """

    configuration: ClassVar[CommandConfiguration] = CommandConfiguration()

    @classmethod
    def command_name(cls) -> str:
        """The configured invocation name, or the class name in kebab case."""
        return cls.configuration.command_name or convert_to_snake_case(cls.__name__)

    @classmethod
    def all_names(cls) -> list[str]:
        return [cls.command_name(), *cls.configuration.aliases]

    @classmethod
    def command_info(cls) -> CommandInfo:
        """Return the `CommandInfo` tree rooted at this command."""
        from argspect.command_info import build_command_info

        return build_command_info([cls])
