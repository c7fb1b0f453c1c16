# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argspect.

Declaration problems are programmer errors: they signal a defect in how a
command or argument was declared and are not meant to be caught by consumers
of the metadata tree. `MissingDefaultError` is the one expected failure; it is
raised by an argument's defaulting routine and always absorbed while computing
initial values.

All exceptions inherit from `ArgspectError`.

Exception Hierarchy:
- ArgspectError
    ├── CommandDeclarationError
    ├── ArgumentDeclarationError
    └── MissingDefaultError
"""


class ArgspectError(Exception):
    """Base exception for argspect."""


class CommandDeclarationError(ArgspectError):
    """Exception raised when a command or command stack violates its contract."""


class ArgumentDeclarationError(ArgspectError):
    """Exception raised when an argument declaration is invalid."""


class MissingDefaultError(ArgspectError):
    """Exception raised when a required argument has no value to default to."""
