"""
Core Validator class for norwegian_validator.

A Validator is an immutable chain of rules. Every builder call returns a new
Validator; validate() returns a new Validator carrying the outcome.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Any

from . import rules as builtin
from .errors import NotValidatedError
from .messages import DEFAULT_MESSAGES, Messages
from .types import CheckFn, Message, Options, Outcome, Rule, resolve_message

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """None and blank strings are empty. Numbers and booleans never are."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


@dataclass(frozen=True, slots=True)
class Validator:
    """
    Immutable validator for a single form field.

    Usage:
        Validator().required().phone_number().validate("934 17 480").is_valid()

    Rules are checked in declaration order and the first failing rule decides
    the error message. `required()` is checked before any rule regardless of
    where it appears in the chain.
    """

    rules: tuple[Rule, ...] = ()
    options: Options = field(default_factory=Options)
    messages: Messages = DEFAULT_MESSAGES
    outcome: Outcome | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))

    # Evaluation

    def validate(self, value: Any) -> Validator:
        """Evaluate the rules against `value` and return a Validator holding the outcome."""
        return replace(self, outcome=self._evaluate(value))

    def _evaluate(self, value: Any) -> Outcome:
        if is_empty(value):
            if self.options.required:
                logger.debug("Empty value for required field")
                message = self.options.required_message or self.messages.required
                return Outcome(valid=False, message=resolve_message(message, value))
            return Outcome(valid=True)

        for index, rule in enumerate(self.rules):
            if not rule(value):
                logger.debug("Rule %d of %d failed", index + 1, len(self.rules))
                return Outcome(valid=False, message=rule.message_for(value))

        return Outcome(valid=True)

    # Queries

    def is_valid(self) -> bool:
        if self.outcome is None:
            raise NotValidatedError()
        return self.outcome.valid

    def get_error_message(self) -> str | None:
        # Unlike is_valid(), this does not require a prior validate() call.
        if self.outcome is None:
            return None
        return self.outcome.message

    def is_required(self) -> bool:
        return self.options.required

    # Builders

    def _new_validator(self, rule: Rule) -> Validator:
        return Validator(
            rules=(*self.rules, rule),
            options=self.options,
            messages=self.messages,
        )

    def required(self, message: Message | None = None) -> Validator:
        """Make an empty value an error. Takes precedence over every rule."""
        return Validator(
            rules=self.rules,
            options=Options(required=True, required_message=message),
            messages=self.messages,
        )

    def rule(self, check: CheckFn, message: Message | None = None) -> Validator:
        """Append a rule built from an arbitrary predicate."""
        return self._new_validator(builtin.Predicate(check, message))

    def phone_number(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Matches(builtin.PHONE_NUMBER, message or self.messages.phone_number)
        )

    def email_address(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Matches(
                builtin.EMAIL_ADDRESS, message or self.messages.email_address
            )
        )

    def max_length(self, max_length: int, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.MaxLength(max_length, message or self.messages.max_length)
        )

    def postal_number(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Matches(
                builtin.POSTAL_NUMBER, message or self.messages.postal_number
            )
        )

    def number(self, message: Message | None = None) -> Validator:
        """Digits only. Note that an empty value never reaches this rule."""
        return self._new_validator(
            builtin.Matches(builtin.NUMBER, message or self.messages.number)
        )

    def boolean(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.IsBoolean(message or self.messages.boolean)
        )

    def url(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Matches(builtin.URL, message or self.messages.url)
        )

    def at_least_two_words(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Matches(
                builtin.AT_LEAST_TWO_WORDS, message or self.messages.at_least_two_words
            )
        )

    def at_least_three_words(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Matches(
                builtin.AT_LEAST_THREE_WORDS,
                message or self.messages.at_least_three_words,
            )
        )

    def org_number(self, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Matches(builtin.ORG_NUMBER, message or self.messages.org_number)
        )

    def pattern(
        self, regexp: str | re.Pattern[str], message: Message | None = None
    ) -> Validator:
        """
        Match the trimmed value against a regex, anywhere in the value.

        Usage:
            Validator().pattern(r"\\d+", "Må inneholde et tall")
            Validator().pattern(re.compile(r"^[A-Z]{2}$"))
        """
        return self._new_validator(
            builtin.Matches(regexp, message or self.messages.pattern)
        )

    def allow(self, allowed: Any, message: Message | None = None) -> Validator:
        return self._new_validator(
            builtin.Allow(allowed, message or self.messages.allow)
        )
