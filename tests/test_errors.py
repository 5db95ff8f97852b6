"""Tests for the error taxonomy."""

import pytest

from iris_functor import (
    FunctorError,
    MissingValidatorError,
    NoSuchElementError,
    NullPayloadError,
)


class TestErrorHierarchy:
    """Every error derives from FunctorError plus a matching builtin."""

    @pytest.mark.parametrize('error_type', [NullPayloadError, MissingValidatorError, NoSuchElementError])
    def test_subclasses_functor_error(self, error_type):
        assert issubclass(error_type, FunctorError)

    def test_null_payload_is_value_error(self):
        assert issubclass(NullPayloadError, ValueError)

    def test_no_such_element_is_lookup_error(self):
        assert issubclass(NoSuchElementError, LookupError)


class TestErrorMessages:
    """Default and custom messages."""

    def test_null_payload_default(self):
        assert str(NullPayloadError()) == 'Payload must not be None'

    def test_no_such_element_default(self):
        assert str(NoSuchElementError()) == 'No value present'

    def test_no_such_element_custom(self):
        assert str(NoSuchElementError('gone')) == 'gone'

    def test_missing_validator_with_operation(self):
        error = MissingValidatorError('is_true')
        assert error.operation == 'is_true'
        assert str(error) == 'is_true: no validator set'

    def test_missing_validator_without_operation(self):
        error = MissingValidatorError()
        assert error.operation is None
        assert str(error) == 'no validator set'
