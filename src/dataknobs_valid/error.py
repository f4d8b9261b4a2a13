"""The single error value produced by every validator.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class ValidError:
    """Immutable validation error: a message plus string context.

    The context carries metadata such as the field name or element index the
    error applies to. Errors are never modified in place; use
    :meth:`with_context` to obtain an annotated copy.

    Example:
        ```python
        error = ValidError.field("age", "Value must be between 18 and 120")
        str(error)
        # 'Value must be between 18 and 120 [field: age]'
        error.with_context(index="2").context
        # {'field': 'age', 'index': '2'}
        ```
    """

    message: str
    context: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy of the caller's mapping
        copied = {str(k): str(v) for k, v in (self.context or {}).items()}
        object.__setattr__(self, "context", MappingProxyType(copied))

    def __hash__(self) -> int:
        return hash((self.message, frozenset(self.context.items())))

    def __repr__(self) -> str:
        return f"ValidError(message={self.message!r}, context={dict(self.context)!r})"

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}: {value}" for key, value in self.context.items())
        return f"{self.message} [{details}]"

    @classmethod
    def field(cls, name: str, message: str) -> ValidError:
        """Create an error scoped to a record field.

        Args:
            name: Field name stored under the ``"field"`` context key
            message: Error message

        Returns:
            New ValidError
        """
        return cls(message, {"field": name})

    @classmethod
    def coerce(cls, error: ValidError | str) -> ValidError:
        """Accept either an error or a bare message."""
        if isinstance(error, ValidError):
            return error
        if isinstance(error, str):
            return cls(error)
        raise TypeError(f"Expected ValidError or str, got {type(error).__name__}")

    def with_context(
        self, entries: Mapping[str, str] | None = None, **kwargs: str
    ) -> ValidError:
        """Return a copy with additional context entries.

        New entries overwrite existing keys of the same name.

        Args:
            entries: Optional mapping of context entries
            **kwargs: Context entries given as keywords

        Returns:
            New ValidError with the merged context
        """
        merged = dict(self.context)
        if entries:
            merged.update(entries)
        merged.update(kwargs)
        return ValidError(self.message, merged)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary representation."""
        return {"message": self.message, "context": dict(self.context)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidError:
        """Create an error from its dictionary representation."""
        return cls(data["message"], data.get("context") or {})
