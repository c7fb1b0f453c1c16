"""
argspect

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import CommandConfiguration, ParsableCommand
from .command_info import CommandInfo, build_command_info, resolve_command_stack
from .metadata import ArgumentKind, ArgumentNameInfo, NameKind, PropertyMetadata, collect_metadata
from .parser import (
    Argument,
    ArgumentHelp,
    Flag,
    FlagInversion,
    Option,
    OptionGroup,
    ParsableArguments,
    ParsingStrategy,
    Value,
    Visibility,
)
from .version import __version__

__all__ = [
    "Argument",
    "ArgumentHelp",
    "ArgumentKind",
    "ArgumentNameInfo",
    "CommandConfiguration",
    "CommandInfo",
    "Flag",
    "FlagInversion",
    "NameKind",
    "Option",
    "OptionGroup",
    "ParsableArguments",
    "ParsableCommand",
    "ParsingStrategy",
    "PropertyMetadata",
    "Value",
    "Visibility",
    "__version__",
    "build_command_info",
    "collect_metadata",
    "resolve_command_stack",
]
