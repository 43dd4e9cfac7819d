"""
norwegian_validator - Immutable, chainable validation of single form values
with Norwegian error messages.

Usage:
    from norwegian_validator import Validator

    phone = Validator().required().phone_number()

    result = phone.validate("934 17 480")
    result.is_valid()           # True
    phone.validate("").get_error_message()  # "Må fylles ut"
"""

from .core import Validator, is_empty
from .errors import NotValidatedError
from .messages import DEFAULT_MESSAGES, Messages
from .types import Options, Outcome, Rule, resolve_message

__all__ = [
    # Core
    "Validator",
    "is_empty",
    # Records
    "Rule",
    "Options",
    "Outcome",
    "resolve_message",
    # Messages
    "Messages",
    "DEFAULT_MESSAGES",
    # Errors
    "NotValidatedError",
]
