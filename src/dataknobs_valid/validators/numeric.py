"""Numeric and comparable-value validators.

Range and bound validators work with any mutually comparable values (numbers,
dates, strings). A value that cannot be compared with the bound fails with a
descriptive error rather than raising. NaN (float or Decimal) never satisfies
a bound.
"""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Integral, Real
from typing import Any

from ..result import ValidationResult
from ..validator import Validator


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _is_real(value: Any) -> bool:
    # Decimal is not registered as numbers.Real
    return isinstance(value, (Real, Decimal))


def _not_comparable(value: Any, bound: Any) -> ValidationResult:
    return ValidationResult.failure(
        f"Value of type {type(value).__name__} cannot be compared with {bound!r}"
    )


def _not_a_real_number(value: Any) -> ValidationResult:
    return ValidationResult.failure(f"Value must be a real number, got {type(value).__name__}")


def _not_an_integer(value: Any) -> ValidationResult:
    return ValidationResult.failure(f"Value must be an integer, got {type(value).__name__}")


class RangeValidator(Validator[Any]):
    """Value must lie within an inclusive range."""

    __slots__ = ("_minimum", "_maximum")

    def __init__(self, minimum: Any, maximum: Any):
        """Initialize range validator.

        Args:
            minimum: Lower bound (inclusive)
            maximum: Upper bound (inclusive)
        """
        if minimum > maximum:
            raise ValueError(f"min ({minimum}) cannot be greater than max ({maximum})")
        self._minimum = minimum
        self._maximum = maximum

    @property
    def minimum(self) -> Any:
        return self._minimum

    @property
    def maximum(self) -> Any:
        return self._maximum

    def validate(self, value: Any) -> ValidationResult:
        message = f"Value must be between {self._minimum} and {self._maximum}"
        if _is_nan(value):
            return ValidationResult.failure(message)
        try:
            in_range = self._minimum <= value <= self._maximum
        except (TypeError, ArithmeticError):
            return _not_comparable(value, self._minimum)
        return ValidationResult.from_condition(in_range, message)

    def __repr__(self) -> str:
        return f"RangeValidator({self._minimum!r}, {self._maximum!r})"


class MinimumValidator(Validator[Any]):
    """Value must be at least a minimum."""

    __slots__ = ("_minimum", "_inclusive")

    def __init__(self, minimum: Any, inclusive: bool = True):
        self._minimum = minimum
        self._inclusive = inclusive

    @property
    def minimum(self) -> Any:
        return self._minimum

    @property
    def inclusive(self) -> bool:
        return self._inclusive

    def validate(self, value: Any) -> ValidationResult:
        operator = ">=" if self._inclusive else ">"
        message = f"Value must be {operator} {self._minimum}"
        if _is_nan(value):
            return ValidationResult.failure(message)
        try:
            ok = value >= self._minimum if self._inclusive else value > self._minimum
        except (TypeError, ArithmeticError):
            return _not_comparable(value, self._minimum)
        return ValidationResult.from_condition(ok, message)


class MaximumValidator(Validator[Any]):
    """Value must be at most a maximum."""

    __slots__ = ("_maximum", "_inclusive")

    def __init__(self, maximum: Any, inclusive: bool = True):
        self._maximum = maximum
        self._inclusive = inclusive

    @property
    def maximum(self) -> Any:
        return self._maximum

    @property
    def inclusive(self) -> bool:
        return self._inclusive

    def validate(self, value: Any) -> ValidationResult:
        operator = "<=" if self._inclusive else "<"
        message = f"Value must be {operator} {self._maximum}"
        if _is_nan(value):
            return ValidationResult.failure(message)
        try:
            ok = value <= self._maximum if self._inclusive else value < self._maximum
        except (TypeError, ArithmeticError):
            return _not_comparable(value, self._maximum)
        return ValidationResult.from_condition(ok, message)


class PositiveValidator(Validator[Any]):
    """Real number must be positive, or non-negative when not strict."""

    __slots__ = ("_strict",)

    def __init__(self, strict: bool = True):
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def validate(self, value: Any) -> ValidationResult:
        if not _is_real(value):
            return _not_a_real_number(value)
        if self._strict:
            message = "Value must be positive (> 0)"
            return ValidationResult.from_condition(not _is_nan(value) and value > 0, message)
        message = "Value must be non-negative (>= 0)"
        return ValidationResult.from_condition(not _is_nan(value) and value >= 0, message)


class NegativeValidator(Validator[Any]):
    """Real number must be negative, or non-positive when not strict."""

    __slots__ = ("_strict",)

    def __init__(self, strict: bool = True):
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def validate(self, value: Any) -> ValidationResult:
        if not _is_real(value):
            return _not_a_real_number(value)
        if self._strict:
            message = "Value must be negative (< 0)"
            return ValidationResult.from_condition(not _is_nan(value) and value < 0, message)
        message = "Value must be non-positive (<= 0)"
        return ValidationResult.from_condition(not _is_nan(value) and value <= 0, message)


class EvenValidator(Validator[int]):
    """Integer must be even."""

    __slots__ = ()

    def validate(self, value: int) -> ValidationResult:
        if not isinstance(value, Integral):
            return _not_an_integer(value)
        return ValidationResult.from_condition(value % 2 == 0, "Value must be even")


class OddValidator(Validator[int]):
    """Integer must be odd."""

    __slots__ = ()

    def validate(self, value: int) -> ValidationResult:
        if not isinstance(value, Integral):
            return _not_an_integer(value)
        return ValidationResult.from_condition(value % 2 != 0, "Value must be odd")


class MultipleOfValidator(Validator[int]):
    """Integer must be a multiple of a divisor."""

    __slots__ = ("_divisor",)

    def __init__(self, divisor: int):
        if divisor == 0:
            raise ValueError("divisor cannot be zero")
        self._divisor = divisor

    @property
    def divisor(self) -> int:
        return self._divisor

    def validate(self, value: int) -> ValidationResult:
        if not isinstance(value, Integral):
            return _not_an_integer(value)
        return ValidationResult.from_condition(
            value % self._divisor == 0, f"Value must be a multiple of {self._divisor}"
        )
