"""The validator contract and its logical combinators.

Every validator maps a value to a :class:`ValidationResult` without side
effects. Validators compose with ``&`` (AND), ``|`` (OR) and :meth:`not_`
(NOT). Chaining builds a left-leaning tree, so ``a & b & c`` is
``AndValidator(AndValidator(a, b), c)`` and reports errors left to right.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .error import ValidError
from .result import VALID, ValidationResult

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """Base class for all validators.

    Subclasses implement :meth:`validate`. Instances must be immutable once
    constructed so the same validator can be shared freely.
    """

    __slots__ = ()

    @abstractmethod
    def validate(self, value: T) -> ValidationResult:
        """Validate a value.

        Args:
            value: Value to validate

        Returns:
            ValidationResult with the validation outcome
        """

    def __call__(self, value: T) -> ValidationResult:
        return self.validate(value)

    def is_valid(self, value: T) -> bool:
        """Check whether a value passes this validator."""
        return self.validate(value).is_valid

    def validate_or_raise(self, value: T) -> None:
        """Validate and raise the first error, if any.

        Only the first error is surfaced; use :meth:`validate` to see all of
        them.

        Raises:
            ValidationFailedError: If validation fails
        """
        self.validate(value).raise_for_errors()

    def and_(self, other: Validator[T]) -> AndValidator[T]:
        """Combine with AND: both validators must pass."""
        return AndValidator(self, other)

    def or_(self, other: Validator[T]) -> OrValidator[T]:
        """Combine with OR: at least one validator must pass."""
        return OrValidator(self, other)

    def not_(self, error: ValidError | str) -> NotValidator[T]:
        """Negate this validator, failing with ``error`` when it passes."""
        return NotValidator(self, error)

    def erase(self) -> AnyValidator[T]:
        """Wrap this validator in an :class:`AnyValidator`."""
        return AnyValidator(self)

    def __and__(self, other: Validator[T]) -> AndValidator[T]:
        return self.and_(other)

    def __or__(self, other: Validator[T]) -> OrValidator[T]:
        return self.or_(other)


class AndValidator(Validator[T]):
    """Both validators must pass (AND logic).

    Both sides are always evaluated so that every error is reported, even
    when ``first`` has already failed.
    """

    __slots__ = ("_first", "_second")

    def __init__(self, first: Validator[T], second: Validator[T]):
        self._first = first
        self._second = second

    @property
    def first(self) -> Validator[T]:
        return self._first

    @property
    def second(self) -> Validator[T]:
        return self._second

    def validate(self, value: T) -> ValidationResult:
        first_result = self._first.validate(value)
        second_result = self._second.validate(value)
        return first_result.and_(second_result)

    def __repr__(self) -> str:
        return f"AndValidator({self._first!r}, {self._second!r})"


class OrValidator(Validator[T]):
    """At least one validator must pass (OR logic).

    Both sides are always evaluated. When either passes the result is valid
    and the other side's errors are dropped; when both fail their errors are
    concatenated.
    """

    __slots__ = ("_first", "_second")

    def __init__(self, first: Validator[T], second: Validator[T]):
        self._first = first
        self._second = second

    @property
    def first(self) -> Validator[T]:
        return self._first

    @property
    def second(self) -> Validator[T]:
        return self._second

    def validate(self, value: T) -> ValidationResult:
        first_result = self._first.validate(value)
        second_result = self._second.validate(value)
        return first_result.or_(second_result)

    def __repr__(self) -> str:
        return f"OrValidator({self._first!r}, {self._second!r})"


class NotValidator(Validator[T]):
    """Negates a validator.

    Passes when the wrapped validator fails. When the wrapped validator
    passes, fails with the caller-supplied error; the wrapped validator's own
    errors are never reported.
    """

    __slots__ = ("_validator", "_error")

    def __init__(self, validator: Validator[T], error: ValidError | str):
        self._validator = validator
        self._error = ValidError.coerce(error)

    @property
    def validator(self) -> Validator[T]:
        return self._validator

    @property
    def error(self) -> ValidError:
        return self._error

    def validate(self, value: T) -> ValidationResult:
        if self._validator.validate(value).is_valid:
            return ValidationResult((self._error,))
        return VALID

    def __repr__(self) -> str:
        return f"NotValidator({self._validator!r}, {self._error.message!r})"


class AnyValidator(Validator[T]):
    """Type-erased validator.

    Wraps either another validator or a bare ``value -> ValidationResult``
    callable, so validators of different concrete classes can be stored and
    passed around uniformly (for example in a list).

    Example:
        ```python
        adult = AnyValidator.predicate("Must be an adult", lambda age: age >= 18)
        adult.validate(12).errors[0].message
        # 'Must be an adult'
        ```
    """

    __slots__ = ("_validate",)

    def __init__(self, validator: Validator[T] | Callable[[T], ValidationResult]):
        if isinstance(validator, AnyValidator):
            self._validate: Callable[[T], ValidationResult] = validator._validate
        elif isinstance(validator, Validator):
            self._validate = validator.validate
        elif callable(validator):
            self._validate = validator
        else:
            raise TypeError(
                f"AnyValidator requires a Validator or callable, got {type(validator).__name__}"
            )

    def validate(self, value: T) -> ValidationResult:
        return self._validate(value)

    def erase(self) -> AnyValidator[T]:
        return self

    @classmethod
    def always_valid(cls) -> AnyValidator[Any]:
        """Validator that accepts every value."""
        return cls(_always_valid)

    @classmethod
    def always_invalid(cls, error: ValidError | str) -> AnyValidator[Any]:
        """Validator that rejects every value with exactly ``error``."""
        failure = ValidationResult((ValidError.coerce(error),))
        return cls(lambda _value: failure)

    @classmethod
    def predicate(cls, error: ValidError | str, predicate: Callable[[T], bool]) -> AnyValidator[T]:
        """Validator that passes iff ``predicate(value)`` is true.

        Args:
            error: Error (or message) reported when the predicate is false
            predicate: Side-effect free test applied to each value

        Returns:
            AnyValidator wrapping the predicate
        """
        error = ValidError.coerce(error)
        return cls(lambda value: ValidationResult.from_condition(bool(predicate(value)), error))


def _always_valid(_value: Any) -> ValidationResult:
    return VALID
