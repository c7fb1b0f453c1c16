"""
argspect

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import importlib
import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import Any, Sequence

import yaml

from argspect.command import ParsableCommand
from argspect.command_info import (
    CommandInfo,
    build_command_info,
    command_tree,
    resolve_command_stack,
)
from argspect.console import console
from argspect.exceptions import CommandDeclarationError
from argspect.logger import logger
from argspect.utils import setup_logging
from argspect.version import __version__


def import_command(target: str) -> type[ParsableCommand]:
    """Import a command class from `package.module:Class` or `package.module.Class`."""
    if ":" in target:
        module_path, _, attr = target.partition(":")
    else:
        module_path, _, attr = target.rpartition(".")
    if not module_path or not attr:
        console.print(f"[bold red]❌ Invalid command path:[/] {target}")
        sys.exit(1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        console.print(
            f"[bold red]❌ Could not import '{target}': {error}[/]\n"
            "[dim]Ensure the module is installed and discoverable via PYTHONPATH."
        )
        sys.exit(1)
    command = getattr(module, attr, None)
    if not (isinstance(command, type) and issubclass(command, ParsableCommand)):
        logger.error("'%s' is not a ParsableCommand subclass", target)
        console.print(f"[bold red]❌ '{target}' is not a ParsableCommand subclass.[/]")
        sys.exit(1)
    return command


def render(info: CommandInfo, output_format: str) -> None:
    if output_format == "json":
        console.print_json(info.model_dump_json())
    elif output_format == "yaml":
        console.print(
            yaml.safe_dump(info.model_dump(mode="json"), sort_keys=False),
            end="",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        console.print(command_tree(info))


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="argspect",
        description="Inspect the arguments declared by a command hierarchy.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Logging output mode."
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", required=True)
    describe = subparsers.add_parser(
        "describe",
        help="Print the command tree of a command class.",
        description="Print the arguments and sub-commands of a command class.",
    )
    describe.add_argument("target", help="Command class, as 'package.module:Class'.")
    describe.add_argument(
        "path", nargs="*", help="Sub-command names to descend into before printing."
    )
    describe.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=["tree", "json", "yaml"],
        default="tree",
        help="Output format.",
    )
    return parser


def describe(args: Namespace) -> CommandInfo:
    root = import_command(args.target)
    try:
        stack = resolve_command_stack(root, args.path)
    except CommandDeclarationError as error:
        logger.error("Could not resolve command path: %s", error)
        console.print(f"[bold red]❌ {error}[/]")
        sys.exit(1)
    info = build_command_info(stack)
    render(info, args.output_format)
    return info


def main(argv: Sequence[str] | None = None) -> Any:
    args = get_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    if args.command == "describe":
        return describe(args)
    return None


if __name__ == "__main__":
    main()
