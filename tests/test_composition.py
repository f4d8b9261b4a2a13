"""
Tests for the validator contract, AND/OR/NOT combinators and AnyValidator.
"""

import pytest

from dataknobs_valid import (
    VALID,
    AndValidator,
    AnyValidator,
    NotValidator,
    OrValidator,
    ValidationFailedError,
    ValidationResult,
    ValidError,
    Validator,
)
from dataknobs_valid.validators import EvenValidator, LengthValidator, RangeValidator


def failing(message):
    return AnyValidator.always_invalid(message)


class TestValidatorContract:
    """Test the derived operations every validator gets."""

    def test_is_valid(self):
        validator = RangeValidator(1, 10)
        assert validator.is_valid(5)
        assert not validator.is_valid(11)

    def test_callable(self):
        """Test validators can be called like functions."""
        assert RangeValidator(1, 10)(5) == VALID

    def test_validate_or_raise_first_error_only(self):
        """Test the fail-fast helper surfaces only the first error."""
        validator = failing("first") & failing("second")
        with pytest.raises(ValidationFailedError) as exc_info:
            validator.validate_or_raise("anything")
        assert exc_info.value.error == ValidError("first")

    def test_validate_or_raise_valid(self):
        RangeValidator(1, 10).validate_or_raise(3)

    def test_abstract(self):
        """Test the contract cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Validator()

    def test_idempotent(self):
        """Test repeated validation yields identical results."""
        validator = (LengthValidator(3, 5) & LengthValidator(4, 10)) | failing("never")
        results = [validator.validate("ab") for _ in range(5)]
        assert all(result == results[0] for result in results)


class TestAndValidator:
    """Test AND composition."""

    def test_concrete_scenario(self):
        """Test range 1..10 AND even."""
        validator = RangeValidator(1, 10).and_(EvenValidator())
        assert validator.validate(4).is_valid
        result = validator.validate(7)
        assert result.errors == (ValidError("Value must be even"),)

    def test_operator_builds_and_validator(self):
        first, second = RangeValidator(1, 10), EvenValidator()
        combined = first & second
        assert isinstance(combined, AndValidator)
        assert combined.first is first
        assert combined.second is second

    def test_both_sides_always_invoked(self, counting_validator):
        """Test the second validator runs even when the first fails."""
        first = counting_validator(ValidationResult.failure("first failed"))
        second = counting_validator(ValidationResult.failure("second failed"))
        result = AndValidator(first, second).validate("x")
        assert first.calls == 1
        assert second.calls == 1
        assert [e.message for e in result.errors] == ["first failed", "second failed"]

    def test_left_leaning_chain(self):
        """Test chaining nests the existing validator as first."""
        a, b, c = failing("a"), failing("b"), failing("c")
        chain = a & b & c
        assert isinstance(chain.first, AndValidator)
        assert chain.second is c
        assert [e.message for e in chain.validate(0).errors] == ["a", "b", "c"]

    def test_grouping_does_not_change_errors(self):
        """Test associativity at the validator level."""
        a, b, c = failing("a"), failing("b"), failing("c")
        left = (a & b) & c
        right = a & (b & c)
        assert left.validate(0) == right.validate(0)


class TestOrValidator:
    """Test OR composition."""

    def test_either_passes(self):
        validator = RangeValidator(1, 5) | RangeValidator(10, 15)
        assert isinstance(validator, OrValidator)
        assert validator.validate(3).is_valid
        assert validator.validate(12).is_valid

    def test_both_fail_concatenates(self):
        validator = RangeValidator(1, 5).or_(RangeValidator(10, 15))
        result = validator.validate(7)
        assert [e.message for e in result.errors] == [
            "Value must be between 1 and 5",
            "Value must be between 10 and 15",
        ]

    def test_success_discards_errors(self):
        assert (failing("gone") | AnyValidator.always_valid()).validate(0) == VALID
        assert (AnyValidator.always_valid() | failing("gone")).validate(0) == VALID

    def test_both_sides_always_invoked(self, counting_validator):
        """Test OR evaluates eagerly even when the first side passes."""
        first = counting_validator(VALID)
        second = counting_validator(ValidationResult.failure("unused"))
        assert OrValidator(first, second).validate("x").is_valid
        assert first.calls == 1
        assert second.calls == 1


class TestNotValidator:
    """Test NOT composition."""

    def test_inverts_valid(self):
        """Test a passing wrapped validator yields exactly the supplied error."""
        error = ValidError("Must not be between 1 and 10")
        validator = RangeValidator(1, 10).not_(error)
        assert isinstance(validator, NotValidator)
        assert validator.validate(5).errors == (error,)

    def test_inverts_invalid(self):
        """Test a failing wrapped validator makes NOT pass."""
        validator = RangeValidator(1, 10).not_("Must be outside 1..10")
        assert validator.validate(50) == VALID

    def test_wrapped_errors_never_surface(self):
        """Test the wrapped validator's errors are discarded."""
        inner = failing("inner") & failing("also inner")
        assert inner.not_("outer").validate(0) == VALID
        passing = AnyValidator.always_valid().not_("outer")
        assert [e.message for e in passing.validate(0).errors] == ["outer"]

    def test_message_is_coerced(self):
        validator = NotValidator(AnyValidator.always_valid(), "no")
        assert validator.error == ValidError("no")


class TestAnyValidator:
    """Test type erasure."""

    def test_wraps_validator(self):
        erased = RangeValidator(1, 10).erase()
        assert isinstance(erased, AnyValidator)
        assert erased.validate(5).is_valid
        assert erased.validate(11).is_invalid

    def test_wraps_callable(self):
        validator = AnyValidator(
            lambda value: ValidationResult.from_condition(value > 0, "Must be positive")
        )
        assert validator.validate(1).is_valid
        assert validator.validate(-1).errors == (ValidError("Must be positive"),)

    def test_heterogeneous_storage(self):
        """Test differently typed validators stored uniformly in a list."""
        validators = [
            RangeValidator(0, 100).erase(),
            EvenValidator().erase(),
            AnyValidator(lambda v: VALID),
        ]
        combined = ValidationResult.success()
        for validator in validators:
            combined = combined & validator.validate(42)
        assert combined.is_valid

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            AnyValidator(42)

    def test_always_valid(self):
        assert AnyValidator.always_valid().validate(None) == VALID

    def test_always_invalid(self):
        """Test exactly one error, from a message or an error."""
        assert AnyValidator.always_invalid("nope").validate(1).errors == (ValidError("nope"),)
        error = ValidError.field("x", "nope")
        assert AnyValidator.always_invalid(error).validate(1).errors == (error,)

    def test_predicate(self):
        adult = AnyValidator.predicate("Must be an adult", lambda age: age >= 18)
        assert adult.validate(30).is_valid
        assert adult.validate(12).errors == (ValidError("Must be an adult"),)

    def test_predicate_composes(self):
        short = AnyValidator.predicate("Too long", lambda s: len(s) < 5)
        lower = AnyValidator.predicate("Not lowercase", str.islower)
        result = (short & lower).validate("HELLO WORLD")
        assert [e.message for e in result.errors] == ["Too long", "Not lowercase"]
