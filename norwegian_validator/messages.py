"""
Default Norwegian error messages.

The catalog is a frozen pydantic model so overrides are checked on load:

    messages = Messages(phone_number="Skriv inn et norsk telefonnummer")
    messages = Messages.model_validate({"required": "Feltet er påkrevd"})
    Validator(messages=messages).required().phone_number()
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Messages(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    required: str = "Må fylles ut"
    phone_number: str = "Ugyldig telefonnummer"
    email_address: str = "Ugyldig e-postadresse"
    max_length: str = "Teksten er for lang"
    postal_number: str = "Ugyldig postnummer"
    number: str = "Må være tall"
    boolean: str = "Må være sann eller usann"
    url: str = "Ugyldig url"
    at_least_two_words: str = "Må inneholde minst 2 ord"
    at_least_three_words: str = "Må inneholde minst 3 ord"
    org_number: str = "Ugyldig organisasjonsnummer"
    pattern: str = "Ugyldig verdi"
    allow: str = "Ugyldig verdi"


DEFAULT_MESSAGES = Messages()
