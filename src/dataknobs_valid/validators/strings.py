"""String validators.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Any

from ..result import ValidationResult
from ..validator import Validator

EMAIL_PATTERN = r"^[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"


def _not_a_string(value: Any) -> ValidationResult:
    return ValidationResult.failure(f"Value must be a string, got {type(value).__name__}")


class LengthValidator(Validator[str]):
    """String length must be within inclusive bounds.

    Either bound may be ``None`` for an open range. Works for any sized
    value, though it is meant for strings; see
    :class:`~dataknobs_valid.validators.CountValidator` for collections.
    """

    __slots__ = ("_min_length", "_max_length")

    def __init__(self, min_length: int | None = None, max_length: int | None = None):
        """Initialize length validator.

        Args:
            min_length: Minimum length (inclusive)
            max_length: Maximum length (inclusive)
        """
        if min_length is not None and min_length < 0:
            raise ValueError(f"min length cannot be negative: {min_length}")
        if max_length is not None and max_length < 0:
            raise ValueError(f"max length cannot be negative: {max_length}")
        if min_length is not None and max_length is not None and min_length > max_length:
            raise ValueError(f"min length ({min_length}) cannot be greater than max ({max_length})")
        self._min_length = min_length
        self._max_length = max_length

    @classmethod
    def exactly(cls, length: int) -> LengthValidator:
        return cls(length, length)

    @classmethod
    def minimum(cls, length: int) -> LengthValidator:
        return cls(min_length=length)

    @classmethod
    def maximum(cls, length: int) -> LengthValidator:
        return cls(max_length=length)

    @property
    def min_length(self) -> int | None:
        return self._min_length

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def validate(self, value: str) -> ValidationResult:
        if not hasattr(value, "__len__"):
            return ValidationResult.failure(
                f"Value does not have a length: {type(value).__name__}"
            )

        length = len(value)
        too_short = self._min_length is not None and length < self._min_length
        too_long = self._max_length is not None and length > self._max_length
        if not (too_short or too_long):
            return ValidationResult.success()

        if self._min_length is not None and self._max_length is not None:
            bounds = f"between {self._min_length} and {self._max_length}"
        elif self._min_length is not None:
            bounds = f"at least {self._min_length}"
        else:
            bounds = f"at most {self._max_length}"
        return ValidationResult.failure(f"Length must be {bounds}, got {length}")

    def __repr__(self) -> str:
        return f"LengthValidator({self._min_length}, {self._max_length})"


class NotEmptyValidator(Validator[str]):
    """String must not be empty."""

    __slots__ = ()

    def validate(self, value: str) -> ValidationResult:
        if not isinstance(value, str):
            return _not_a_string(value)
        return ValidationResult.from_condition(value != "", "String must not be empty")


class NotBlankValidator(Validator[str]):
    """String must contain at least one non-whitespace character."""

    __slots__ = ()

    def validate(self, value: str) -> ValidationResult:
        if not isinstance(value, str):
            return _not_a_string(value)
        return ValidationResult.from_condition(value.strip() != "", "String must not be blank")


class PatternValidator(Validator[str]):
    """String must contain a match for a regular expression.

    The pattern is searched anywhere in the string; anchor it with ``^`` and
    ``$`` to require a full match. A pattern that does not compile makes
    every validation fail with a diagnostic error instead of raising.
    """

    __slots__ = ("_pattern_str", "_regex", "_compile_error", "_message")

    def __init__(
        self,
        pattern: str | RegexPattern[str],
        message: str = "String does not match required pattern",
    ):
        """Initialize pattern validator.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            message: Error message when the string does not match
        """
        self._message = message
        self._compile_error: str | None = None
        self._regex: RegexPattern[str] | None
        if isinstance(pattern, str):
            self._pattern_str = pattern
            try:
                self._regex = re.compile(pattern)
            except re.error as e:
                self._regex = None
                self._compile_error = str(e)
        else:
            self._pattern_str = pattern.pattern
            self._regex = pattern

    @property
    def pattern(self) -> str:
        return self._pattern_str

    @property
    def message(self) -> str:
        return self._message

    def validate(self, value: str) -> ValidationResult:
        if self._regex is None:
            return ValidationResult.failure(
                f"Invalid regex pattern '{self._pattern_str}': {self._compile_error}"
            )
        if not isinstance(value, str):
            return _not_a_string(value)
        return ValidationResult.from_condition(self._regex.search(value) is not None, self._message)

    def __repr__(self) -> str:
        return f"PatternValidator({self._pattern_str!r})"


class EmailValidator(Validator[str]):
    """String must look like an email address."""

    __slots__ = ()

    regex = re.compile(EMAIL_PATTERN)

    def validate(self, value: str) -> ValidationResult:
        if not isinstance(value, str):
            return _not_a_string(value)
        # fullmatch so that "$" can't accept a trailing newline
        return ValidationResult.from_condition(
            self.regex.fullmatch(value) is not None, "Invalid email format"
        )


class ContainsValidator(Validator[str]):
    """String must contain a substring."""

    __slots__ = ("_substring", "_case_sensitive")

    def __init__(self, substring: str, case_sensitive: bool = True):
        self._substring = substring
        self._case_sensitive = case_sensitive

    @property
    def substring(self) -> str:
        return self._substring

    def validate(self, value: str) -> ValidationResult:
        if not isinstance(value, str):
            return _not_a_string(value)
        if self._case_sensitive:
            found = self._substring in value
        else:
            found = self._substring.casefold() in value.casefold()
        return ValidationResult.from_condition(found, f"String must contain '{self._substring}'")


class PrefixValidator(Validator[str]):
    """String must start with a prefix."""

    __slots__ = ("_prefix",)

    def __init__(self, prefix: str):
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def validate(self, value: str) -> ValidationResult:
        if not isinstance(value, str):
            return _not_a_string(value)
        return ValidationResult.from_condition(
            value.startswith(self._prefix), f"String must start with '{self._prefix}'"
        )


class SuffixValidator(Validator[str]):
    """String must end with a suffix."""

    __slots__ = ("_suffix",)

    def __init__(self, suffix: str):
        self._suffix = suffix

    @property
    def suffix(self) -> str:
        return self._suffix

    def validate(self, value: str) -> ValidationResult:
        if not isinstance(value, str):
            return _not_a_string(value)
        return ValidationResult.from_condition(
            value.endswith(self._suffix), f"String must end with '{self._suffix}'"
        )
