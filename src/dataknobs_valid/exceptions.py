"""Exceptions for the dataknobs_valid package.

Validation failures are normally reported as values (see
:class:`~dataknobs_valid.result.ValidationResult`). The exception defined here
is only raised by the ``validate_or_raise`` helpers, for call sites that want
fail-fast behaviour. It is built on the common dataknobs exception framework.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dataknobs_common import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from dataknobs_valid.error import ValidError

__all__ = [
    "ConfigurationError",
    "ValidationFailedError",
]


class ValidationFailedError(ValidationError):
    """Raised when fail-fast validation finds an error.

    Only the first error of the failed result is carried; callers that need
    every error should call ``validate`` and inspect the result instead.
    """

    def __init__(self, error: ValidError):
        self.error = error
        super().__init__(error.message, context=dict(error.context))

    def __str__(self) -> str:
        return str(self.error)
