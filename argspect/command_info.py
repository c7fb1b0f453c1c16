# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds `CommandInfo` trees from stacks of nested commands.

A command stack lists commands from the outermost one to the target. The tree
is rooted at the target: it carries the names of every command above it, its
own arguments, and one recursively built node per declared sub-command.

Public Interface:
- `build_command_info(stack)`: The `CommandInfo` tree for the stack's target.
- `resolve_command_stack(root, names)`: Follow sub-command names from a root.
- `command_tree(info)`: A `rich.tree.Tree` view of a `CommandInfo`.
"""
from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict
from rich.markup import escape
from rich.tree import Tree

from argspect.command import ParsableCommand
from argspect.exceptions import CommandDeclarationError
from argspect.logger import logger
from argspect.metadata import ArgumentKind, PropertyMetadata, collect_metadata
from argspect.utils import normalize_text


class CommandInfo(BaseModel):
    """
    One node of a command tree.

    Attributes:
        super_commands (tuple[str, ...]): Names of the commands above this one.
        command_name (str): This command's invocation name.
        abstract (str | None): One-line description.
        discussion (str | None): Longer description.
        aliases (tuple[str, ...]): Alternate invocation names.
        should_display (bool): Whether the command is listed in help.
        subcommands (tuple[CommandInfo, ...]): Child command nodes.
        arguments (tuple[PropertyMetadata, ...]): This command's own arguments.
    """

    model_config = ConfigDict(frozen=True)

    super_commands: tuple[str, ...] = ()
    command_name: str
    abstract: str | None = None
    discussion: str | None = None
    aliases: tuple[str, ...] = ()
    should_display: bool = True
    subcommands: tuple[CommandInfo, ...] = ()
    arguments: tuple[PropertyMetadata, ...] = ()

    @property
    def full_name(self) -> str:
        return " ".join((*self.super_commands, self.command_name))

    def find(self, name: str) -> CommandInfo | None:
        """Return the direct sub-command named `name` or aliased as `name`."""
        for subcommand in self.subcommands:
            if name == subcommand.command_name or name in subcommand.aliases:
                return subcommand
        return None


def build_command_info(stack: Sequence[type[ParsableCommand]]) -> CommandInfo:
    """
    Build the `CommandInfo` tree rooted at the last command of `stack`.

    Args:
        stack (Sequence[type[ParsableCommand]]): Commands from the outermost to
            the target.

    Raises:
        CommandDeclarationError: If `stack` is empty.
    """
    if not stack:
        raise CommandDeclarationError("Command stack must contain at least one command")

    command = stack[-1]
    super_commands = [ancestor.command_name() for ancestor in stack[:-1]]
    if stack[0].configuration.super_command_name:
        super_commands.insert(0, stack[0].configuration.super_command_name)

    configuration = command.configuration
    logger.debug("[%s] Building command info", command.command_name())
    return CommandInfo(
        super_commands=tuple(super_commands),
        command_name=command.command_name(),
        abstract=normalize_text(configuration.abstract),
        discussion=normalize_text(configuration.discussion),
        aliases=tuple(configuration.aliases),
        should_display=configuration.should_display,
        subcommands=tuple(
            build_command_info([*stack, subcommand])
            for subcommand in configuration.subcommands
        ),
        arguments=tuple(collect_metadata(command)),
    )


def resolve_command_stack(
    root: type[ParsableCommand], names: Sequence[str]
) -> list[type[ParsableCommand]]:
    """
    Follow sub-command `names` (or aliases) from `root` to build a stack.

    Raises:
        CommandDeclarationError: If a name does not match any sub-command.
    """
    stack = [root]
    for name in names:
        current = stack[-1]
        for subcommand in current.configuration.subcommands:
            if name in subcommand.all_names():
                stack.append(subcommand)
                break
        else:
            raise CommandDeclarationError(
                f"'{current.command_name()}' has no sub-command named '{name}'"
            )
    return stack


def _argument_label(argument: PropertyMetadata) -> str:
    if argument.kind is ArgumentKind.POSITIONAL:
        label = f"<{argument.value_name or argument.id.rsplit('.', 1)[-1]}>"
    else:
        label = ", ".join(str(name) for name in argument.names or ())
    text = f"[bold]{escape(label)}[/] [dim]{argument.kind.value}[/]"
    if argument.abstract:
        text += f" {escape(argument.abstract)}"
    if argument.initial_value is not None:
        text += f" [dim](default: {escape(repr(argument.initial_value))})[/]"
    return text


def command_tree(info: CommandInfo, tree: Tree | None = None) -> Tree:
    """Render `info` and its sub-commands as a rich tree."""
    label = f"[bold]{escape(info.full_name)}[/]"
    if info.abstract:
        label += f" [dim]{escape(info.abstract)}[/]"
    node = tree.add(label) if tree is not None else Tree(label)
    for argument in info.arguments:
        node.add(_argument_label(argument))
    for subcommand in info.subcommands:
        command_tree(subcommand, node)
    return node
