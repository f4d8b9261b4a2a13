"""Validators that apply to values of any type.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..result import ValidationResult
from ..validator import Validator


class RequiredValidator(Validator[Any]):
    """Value must be present (not ``None``)."""

    __slots__ = ()

    def validate(self, value: Any) -> ValidationResult:
        return ValidationResult.from_condition(value is not None, "Value is required")


class OneOfValidator(Validator[Any]):
    """Value must be one of an allowed set of values."""

    __slots__ = ("_values", "_case_sensitive", "_allowed", "_allowed_str")

    def __init__(self, values: Iterable[Any], case_sensitive: bool = True):
        """Initialize allowed-values validator.

        Args:
            values: Allowed values
            case_sensitive: If False, string comparisons ignore case
        """
        self._values = tuple(values)
        if not self._values:
            raise ValueError("OneOfValidator requires at least one allowed value")
        self._case_sensitive = case_sensitive
        self._allowed_str = ", ".join(repr(v) for v in self._values)
        self._allowed = [self._normalize(v) for v in self._values]

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    def _normalize(self, value: Any) -> Any:
        if not self._case_sensitive and isinstance(value, str):
            return value.casefold()
        return value

    def validate(self, value: Any) -> ValidationResult:
        return ValidationResult.from_condition(
            self._normalize(value) in self._allowed,
            f"Value '{value}' is not in allowed values: {self._allowed_str}",
        )
