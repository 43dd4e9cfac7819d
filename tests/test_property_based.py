"""Property-based tests for rule ordering and required precedence."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from norwegian_validator import NotValidatedError, Validator

non_empty_text = st.text(min_size=1).filter(lambda s: s.strip() != "")
empty_values = st.one_of(st.none(), st.text(alphabet=" \t\n\r", max_size=5))
scalars = st.one_of(st.none(), st.text(), st.integers(), st.booleans())


@given(value=scalars)
def test_validate_leaves_receiver_unvalidated(value):
    v = Validator().phone_number()
    v.validate(value)
    with pytest.raises(NotValidatedError):
        v.is_valid()


@given(
    value=non_empty_text,
    messages=st.lists(st.text(min_size=1), min_size=2, max_size=5),
)
def test_first_failure_wins(value, messages):
    v = Validator()
    for message in messages:
        v = v.rule(lambda _: False, message)
    result = v.validate(value)
    assert not result.is_valid()
    assert result.get_error_message() == messages[0]


@given(value=empty_values)
def test_required_precedes_rules(value):
    def check(_):
        raise AssertionError("rule should not be evaluated")

    v = Validator().rule(check, "rule").required()
    result = v.validate(value)
    assert not result.is_valid()
    assert result.get_error_message() == "Må fylles ut"


@given(value=empty_values)
def test_empty_passes_when_not_required(value):
    v = Validator().phone_number().email_address().org_number()
    assert v.validate(value).is_valid()


@given(digits=st.text(alphabet="0123456789", min_size=1, max_size=20))
def test_number_accepts_digits(digits):
    assert Validator().number().validate(digits).is_valid()
