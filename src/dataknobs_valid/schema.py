"""Record validation: per-field property validators and schemas.

A :class:`PropertyValidator` projects one field out of a record, validates it
and tags every resulting error with ``context["field"]``. A :class:`Schema`
ANDs property validators together in declaration order, so the errors of the
first declared field always come before those of later fields.

Example:
    ```python
    from dataknobs_valid import Schema
    from dataknobs_valid.validators import EmailValidator, LengthValidator, RangeValidator

    user_schema = (
        Schema("user")
        .property("username", "username", LengthValidator(3, 20))
        .property("email", "email", EmailValidator())
        .property(lambda user: user["age"], "age", RangeValidator(18, 120))
    )

    result = user_schema.validate({"username": "ab", "email": "x", "age": 15})
    [error.context["field"] for error in result.errors]
    # ['username', 'email', 'age']
    ```
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from functools import reduce
from typing import Any, TypeVar, Union

from .error import ValidError
from .result import ValidationResult
from .validator import AnyValidator, Validator

logger = logging.getLogger(__name__)

R = TypeVar("R")

Accessor = Union[str, Callable[[Any], Any]]
ValueValidator = Union[Validator[Any], Callable[[Any], ValidationResult]]


def field_accessor(name: str) -> Callable[[Any], Any]:
    """Build a projection reading field ``name`` from a record.

    Mappings are read by key, other objects by attribute. A missing field
    projects to ``None`` so that validators report it rather than the
    projection raising.

    Args:
        name: Field name

    Returns:
        Callable mapping a record to the field value
    """

    def accessor(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name, None)

    accessor.__name__ = f"field_accessor[{name}]"
    return accessor


class PropertyValidator(Validator[R]):
    """Validates one field of a record.

    Every error produced by the wrapped validator is rebuilt with
    ``context["field"]`` set to this validator's field name, replacing any
    ``"field"`` entry the wrapped validator set. Other context entries (such
    as ``"index"`` from :class:`~dataknobs_valid.validators.EachValidator`)
    are preserved.
    """

    __slots__ = ("_accessor", "_field_name", "_validator")

    def __init__(self, accessor: Accessor, field_name: str, validator: ValueValidator):
        """Initialize the property validator.

        Args:
            accessor: Read-only projection from record to field value, or a
                field name to read by key/attribute
            field_name: Name stored in the ``"field"`` context of errors
            validator: Validator (or validation callable) for the field value
        """
        if isinstance(accessor, str):
            accessor = field_accessor(accessor)
        elif not callable(accessor):
            raise TypeError(f"Field accessor must be callable or str, got {type(accessor).__name__}")
        self._accessor: Callable[[Any], Any] = accessor
        self._field_name = field_name
        self._validator: AnyValidator[Any] = AnyValidator(validator)

    @property
    def field_name(self) -> str:
        return self._field_name

    def validate(self, value: R) -> ValidationResult:
        field_value = self._accessor(value)
        result = self._validator.validate(field_value)
        if result.is_valid:
            return result
        return result.with_context(field=self._field_name)

    def __repr__(self) -> str:
        return f"PropertyValidator(field_name={self._field_name!r})"


def build_schema(*validators: Validator[R]) -> Validator[R]:
    """Fold validators into one record validator with AND.

    The fold runs left to right in the given order, so the result is
    equivalent to ``v1 & v2 & ... & vn``. With no validators the record is
    always valid.
    """
    if not validators:
        return AnyValidator.always_valid()
    return reduce(lambda combined, validator: combined.and_(validator), validators)


class Schema(Validator[R]):
    """Ordered collection of property validators applied to a record.

    Schemas are immutable: :meth:`property` returns a new schema with the
    property appended, leaving the original untouched. Validation is the AND
    fold of the properties in declaration order.
    """

    __slots__ = ("_name", "_properties", "_validator")

    def __init__(self, name: str = "schema", properties: Iterable[PropertyValidator[R]] = ()):
        """Initialize schema.

        Args:
            name: Schema name for identification
            properties: Property validators in declaration order
        """
        self._name = name
        self._properties: tuple[PropertyValidator[R], ...] = tuple(properties)
        self._validator = build_schema(*self._properties)

    @classmethod
    def of(cls, *properties: PropertyValidator[R], name: str = "schema") -> Schema[R]:
        """Create a schema from existing property validators."""
        return cls(name, properties)

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> tuple[PropertyValidator[R], ...]:
        return self._properties

    @property
    def field_names(self) -> list[str]:
        return [prop.field_name for prop in self._properties]

    def __len__(self) -> int:
        return len(self._properties)

    # Shadows the builtin for the rest of the class body; keep every
    # @property above this method.
    def property(self, accessor: Accessor, field_name: str, validator: ValueValidator) -> Schema[R]:
        """Return a new schema with one more field (fluent API).

        Args:
            accessor: Projection from record to field value, or a field name
            field_name: Field name used in error context
            validator: Validator (or validation callable) for the field value

        Returns:
            New Schema including the field
        """
        if field_name in self.field_names:
            logger.debug(f"Schema '{self._name}' declares field '{field_name}' more than once")
        prop: PropertyValidator[R] = PropertyValidator(accessor, field_name, validator)
        return Schema(self._name, self._properties + (prop,))

    def validate(self, value: R) -> ValidationResult:
        return self._validator.validate(value)

    def validate_many(self, records: Iterable[R]) -> list[ValidationResult]:
        """Validate multiple records, one result per record."""
        return [self.validate(record) for record in records]

    def __repr__(self) -> str:
        return f"Schema({self._name!r}, fields={self.field_names!r})"


class Validatable(ABC):
    """Mixin for record types that know how to validate themselves.

    Subclasses implement :meth:`validate`, typically by applying a schema
    built once at class level:

        ```python
        @dataclass(frozen=True)
        class User(Validatable):
            username: str
            age: int

            schema: ClassVar[Schema] = (
                Schema("user")
                .property("username", "username", LengthValidator(3, 20))
                .property("age", "age", RangeValidator(18, 120))
            )

            def validate(self) -> ValidationResult:
                return self.schema.validate(self)
        ```
    """

    __slots__ = ()

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Validate this instance."""

    @property
    def is_valid(self) -> bool:
        return self.validate().is_valid

    @property
    def validation_errors(self) -> tuple[ValidError, ...]:
        return self.validate().errors

    def validate_or_raise(self) -> None:
        """Validate and raise the first error, if any.

        Raises:
            ValidationFailedError: If validation fails
        """
        self.validate().raise_for_errors()

    @classmethod
    def validator(cls) -> AnyValidator[Any]:
        """Validator that delegates to each instance's own :meth:`validate`.

        Lets self-validating types plug into code that consumes validators,
        such as :class:`~dataknobs_valid.validators.EachValidator`.
        """
        return AnyValidator(_validate_instance)


def _validate_instance(instance: Validatable) -> ValidationResult:
    return instance.validate()
