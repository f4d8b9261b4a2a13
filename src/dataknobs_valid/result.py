"""Validation result algebra.

A :class:`ValidationResult` is either valid (no errors) or invalid (one or
more errors, in the order they were found). Results combine under AND and OR:

- ``a & b`` is valid only when both are; otherwise it holds the errors of the
  invalid side(s), ``a``'s errors first.
- ``a | b`` is valid when either is, discarding all errors; otherwise it holds
  ``a``'s errors followed by ``b``'s.

Both operations are associative. Neither is commutative in error order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from .error import ValidError
from .exceptions import ValidationFailedError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation: valid, or invalid with ordered errors.

    The empty error tuple means valid. Use :meth:`success` and
    :meth:`failure` rather than the constructor; :meth:`failure` refuses an
    empty error sequence so an invalid result always explains itself.
    """

    errors: tuple[ValidError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult.success()"
        return f"ValidationResult.failure({list(self.errors)!r})"

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_invalid(self) -> bool:
        return bool(self.errors)

    @property
    def first_error(self) -> ValidError | None:
        """The first error found, or None when valid."""
        return self.errors[0] if self.errors else None

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a valid result."""
        return VALID

    @classmethod
    def failure(cls, errors: ValidError | str | Iterable[ValidError | str]) -> ValidationResult:
        """Create an invalid result.

        Args:
            errors: One error (or message), or a non-empty sequence of them

        Returns:
            Invalid ValidationResult

        Raises:
            ValueError: If no errors are given
        """
        if isinstance(errors, (ValidError, str)):
            errors = [errors]
        coerced = tuple(ValidError.coerce(error) for error in errors)
        if not coerced:
            raise ValueError("An invalid result requires at least one error")
        return cls(coerced)

    @classmethod
    def from_condition(cls, condition: bool, error: ValidError | str) -> ValidationResult:
        """Valid if ``condition`` holds, else invalid with exactly ``error``.

        This is the standard way leaf validators report their outcome.
        """
        if condition:
            return VALID
        return cls((ValidError.coerce(error),))

    def and_(self, other: ValidationResult) -> ValidationResult:
        """Combine with logical AND, accumulating errors from both sides."""
        if self.is_valid:
            return other
        if other.is_valid:
            return self
        return ValidationResult(self.errors + other.errors)

    def or_(self, other: ValidationResult) -> ValidationResult:
        """Combine with logical OR; any valid side makes the result valid."""
        if self.is_valid or other.is_valid:
            return VALID
        return ValidationResult(self.errors + other.errors)

    __and__ = and_
    __or__ = or_

    def map_errors(self, transform: Callable[[ValidError], ValidError]) -> ValidationResult:
        """Rebuild every error with ``transform``, preserving order.

        Valid results pass through unchanged.
        """
        if self.is_valid:
            return self
        return ValidationResult(tuple(transform(error) for error in self.errors))

    def with_context(
        self, entries: Mapping[str, str] | None = None, **kwargs: str
    ) -> ValidationResult:
        """Merge context entries into every error (new entries win)."""
        return self.map_errors(lambda error: error.with_context(entries, **kwargs))

    def raise_for_errors(self) -> None:
        """Raise the first error, if any.

        Raises:
            ValidationFailedError: If the result is invalid
        """
        if self.errors:
            raise ValidationFailedError(self.errors[0])

    def to_dict(self) -> dict:
        """Convert to a dictionary representation."""
        return {
            "valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }


VALID = ValidationResult()
