"""
Built-in rules for norwegian_validator.

Provides factory functions that return Rule instances. String rules test the
trimmed string form of the value; `boolean` and `allow` test the raw value.
"""

from __future__ import annotations

import re
from typing import Any

from .types import Message, Rule

PHONE_NUMBER = re.compile(
    r"^(?:(?:(?:00)|\+)\s*(?:[0-9]\s*){2})?(?:[0-9]\s*){8}$|^0[0-9]{4}$"
)
EMAIL_ADDRESS = re.compile(
    r"^[a-zA-Z0-9._%&\-][a-zA-Z0-9._%&+\-]*@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,6}$"
)
POSTAL_NUMBER = re.compile(r"^[0-9]{4}$")
NUMBER = re.compile(r"^[0-9]*$")
URL = re.compile(r"^[^ ]+\.[^ ]+$")
AT_LEAST_TWO_WORDS = re.compile(
    r"[a-zA-ZæøåÆØÅ]{3,}.*\s[a-zA-ZæøåÆØÅ]{3,}", re.MULTILINE
)
AT_LEAST_THREE_WORDS = re.compile(
    r"[a-zA-ZæøåÆØÅ]{3,}.*\s[a-zA-ZæøåÆØÅ]{3,}.*\s[a-zA-ZæøåÆØÅ]{3,}", re.MULTILINE
)
ORG_NUMBER = re.compile(r"^[89][0-9]{2}\s?[0-9]{3}\s?[0-9]{3}$")


def _trimmed(value: Any) -> str:
    return str(value).strip()


def Matches(pattern: str | re.Pattern[str], message: Message | None = None) -> Rule:
    """
    Validate the trimmed value contains a match for a regex pattern.

    Usage:
        Matches(r"\\d+")
        Matches(POSTAL_NUMBER, "Ugyldig postnummer")
    """
    compiled = re.compile(pattern)

    def check(x: Any) -> bool:
        return compiled.search(_trimmed(x)) is not None

    return Rule(check=check, message=message)


def MaxLength(n: int, message: Message | None = None) -> Rule:
    """Validate the trimmed value is at most n characters long."""

    def check(x: Any) -> bool:
        return len(_trimmed(x)) <= n

    return Rule(check=check, message=message)


def IsBoolean(message: Message | None = None) -> Rule:
    """Validate the raw value is True or False."""

    def check(x: Any) -> bool:
        return isinstance(x, bool)

    return Rule(check=check, message=message)


def Allow(allowed: Any, message: Message | None = None) -> Rule:
    """
    Validate the raw value equals `allowed`.

    Values of a different type never match, so Allow(True) rejects 1.
    """

    def check(x: Any) -> bool:
        return type(x) is type(allowed) and x == allowed

    return Rule(check=check, message=message)


def Predicate(fn: Any, message: Message | None = None) -> Rule:
    """
    Create a rule from an arbitrary predicate function.

    Usage:
        Predicate(lambda x: int(x) > 0, "Må være positivt")
    """
    return Rule(check=fn, message=message)
