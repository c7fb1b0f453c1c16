# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsingStrategy`, the closed set of tags describing how an argument
consumes tokens during real parsing.

The same enum is carried by argument definitions and by the metadata produced
for them, so every distinct strategy stays distinct in the metadata tree.

Supports alias coercion for shorthand or config-friendly values.

Example:
    ParsingStrategy("scanning_for_value") → ParsingStrategy.SCANNING_FOR_VALUE
    ParsingStrategy("remaining")          → ParsingStrategy.ALL_REMAINING_INPUT
"""
from __future__ import annotations

from enum import Enum


class ParsingStrategy(Enum):
    """
    Describes how an argument consumes input tokens.

    Members:
        DEFAULT: Take the very next token; fail if it looks like an option.
        SCANNING_FOR_VALUE: Scan forward for the next value token.
        UNCONDITIONAL: Take the next token regardless of its shape.
        UP_TO_NEXT_OPTION: Consume values up to the next option-looking token.
        ALL_REMAINING_INPUT: Consume every remaining token.
        POST_TERMINATOR: Consume the tokens after a `--` terminator.
        ALL_UNRECOGNIZED: Collect every token no other argument claimed.

    Aliases:
        - "next" → "default"
        - "scan" → "scanning_for_value"
        - "remaining" → "all_remaining_input"
        - "unrecognized" → "all_unrecognized"
    """

    DEFAULT = "default"
    SCANNING_FOR_VALUE = "scanning_for_value"
    UNCONDITIONAL = "unconditional"
    UP_TO_NEXT_OPTION = "up_to_next_option"
    ALL_REMAINING_INPUT = "all_remaining_input"
    POST_TERMINATOR = "post_terminator"
    ALL_UNRECOGNIZED = "all_unrecognized"

    @classmethod
    def choices(cls) -> list[ParsingStrategy]:
        """Return a list of all parsing strategies."""
        return list(cls)

    @property
    def consumes_many(self) -> bool:
        """True if the strategy can consume more than one token."""
        return self in (
            ParsingStrategy.UP_TO_NEXT_OPTION,
            ParsingStrategy.ALL_REMAINING_INPUT,
            ParsingStrategy.POST_TERMINATOR,
            ParsingStrategy.ALL_UNRECOGNIZED,
        )

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "next": "default",
            "scan": "scanning_for_value",
            "remaining": "all_remaining_input",
            "unrecognized": "all_unrecognized",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ParsingStrategy:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the parsing strategy."""
        return self.value
