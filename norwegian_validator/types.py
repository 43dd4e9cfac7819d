"""
Type definitions for norwegian_validator.

Provides the Rule, Options and Outcome records and message resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

# Type aliases
CheckFn = Callable[[Any], bool]
MessageFn = Callable[[Any], str]
Message = str | MessageFn


def resolve_message(message: Message | None, value: Any) -> str | None:
    """Return a literal message as-is, or call a message function with the value."""
    if callable(message):
        return message(value)
    return message


@dataclass(frozen=True, slots=True)
class Rule:
    """One predicate over a candidate value and the message reported when it fails."""

    check: CheckFn
    message: Message | None = None

    def __call__(self, value: Any) -> bool:
        return self.check(value)

    def message_for(self, value: Any) -> str | None:
        return resolve_message(self.message, value)


@dataclass(frozen=True, slots=True)
class Options:
    """Whether an empty value is itself an error, and what to report then."""

    required: bool = False
    required_message: Message | None = None


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of the most recent evaluation. `message` is None when valid."""

    valid: bool
    message: str | None = None
