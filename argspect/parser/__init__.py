"""
argspect

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import (
    ArgumentDefinition,
    ArgumentHelp,
    ArgumentSet,
    DefinitionKind,
    Name,
    NameStyle,
    UpdateArity,
    Visibility,
)
from .declarations import Argument, Flag, FlagInversion, Option, OptionGroup, Unset, Value
from .parsable_arguments import FieldDeclaration, FieldShape, ParsableArguments
from .parser_types import InputKey, InputOrigin, ParsedValue, ParsedValues
from .parsing_strategy import ParsingStrategy

__all__ = [
    "Argument",
    "ArgumentDefinition",
    "ArgumentHelp",
    "ArgumentSet",
    "DefinitionKind",
    "FieldDeclaration",
    "FieldShape",
    "Flag",
    "FlagInversion",
    "InputKey",
    "InputOrigin",
    "Name",
    "NameStyle",
    "Option",
    "OptionGroup",
    "ParsableArguments",
    "ParsedValue",
    "ParsedValues",
    "ParsingStrategy",
    "Unset",
    "UpdateArity",
    "Value",
    "Visibility",
]
