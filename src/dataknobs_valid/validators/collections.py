"""Collection validators.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from enum import Enum
from typing import Any

from ..result import VALID, ValidationResult
from ..validator import Validator


def _not_a_collection(value: Any) -> ValidationResult:
    return ValidationResult.failure(f"Value must be a collection, got {type(value).__name__}")


class CountValidator(Validator[Collection[Any]]):
    """Number of elements must be within inclusive bounds."""

    __slots__ = ("_min_count", "_max_count")

    def __init__(self, min_count: int | None = None, max_count: int | None = None):
        """Initialize count validator.

        Args:
            min_count: Minimum number of elements (inclusive)
            max_count: Maximum number of elements (inclusive)
        """
        if min_count is not None and min_count < 0:
            raise ValueError(f"min count cannot be negative: {min_count}")
        if max_count is not None and max_count < 0:
            raise ValueError(f"max count cannot be negative: {max_count}")
        if min_count is not None and max_count is not None and min_count > max_count:
            raise ValueError(f"min count ({min_count}) cannot be greater than max ({max_count})")
        self._min_count = min_count
        self._max_count = max_count

    @classmethod
    def exactly(cls, count: int) -> CountValidator:
        return cls(count, count)

    @classmethod
    def minimum(cls, count: int) -> CountValidator:
        return cls(min_count=count)

    @classmethod
    def maximum(cls, count: int) -> CountValidator:
        return cls(max_count=count)

    @property
    def min_count(self) -> int | None:
        return self._min_count

    @property
    def max_count(self) -> int | None:
        return self._max_count

    def validate(self, value: Collection[Any]) -> ValidationResult:
        if not hasattr(value, "__len__"):
            return _not_a_collection(value)

        count = len(value)
        too_few = self._min_count is not None and count < self._min_count
        too_many = self._max_count is not None and count > self._max_count
        if not (too_few or too_many):
            return VALID

        if self._min_count is not None and self._max_count is not None:
            bounds = f"between {self._min_count} and {self._max_count}"
        elif self._min_count is not None:
            bounds = f"at least {self._min_count}"
        else:
            bounds = f"at most {self._max_count}"
        return ValidationResult.failure(f"Count must be {bounds}, got {count}")


class CollectionNotEmptyValidator(Validator[Collection[Any]]):
    """Collection must have at least one element."""

    __slots__ = ()

    def validate(self, value: Collection[Any]) -> ValidationResult:
        if not hasattr(value, "__len__"):
            return _not_a_collection(value)
        return ValidationResult.from_condition(len(value) > 0, "Collection must not be empty")


class EachValidator(Validator[Iterable[Any]]):
    """Every element must pass an element validator.

    Errors are tagged with the element's position under ``context["index"]``
    and reported in element order.

    Example:
        ```python
        result = EachValidator(RangeValidator(1, 10)).validate([1, 5, 15, 20])
        [error.context["index"] for error in result.errors]
        # ['2', '3']
        ```
    """

    __slots__ = ("_element_validator",)

    def __init__(self, element_validator: Validator[Any]):
        self._element_validator = element_validator

    @property
    def element_validator(self) -> Validator[Any]:
        return self._element_validator

    def validate(self, value: Iterable[Any]) -> ValidationResult:
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            return _not_a_collection(value)

        result = VALID
        for index, element in enumerate(value):
            element_result = self._element_validator.validate(element)
            result = result.and_(element_result.with_context(index=str(index)))
        return result

    def __repr__(self) -> str:
        return f"EachValidator({self._element_validator!r})"


class UniqueValidator(Validator[Iterable[Any]]):
    """All elements must be distinct.

    Each duplicated element is named once, in the order its first repeat was
    seen. Unhashable elements are compared by equality.
    """

    __slots__ = ()

    def validate(self, value: Iterable[Any]) -> ValidationResult:
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            return _not_a_collection(value)

        seen_hashable: set[Any] = set()
        seen_other: list[Any] = []
        duplicates: list[Any] = []

        for element in value:
            try:
                repeated = element in seen_hashable
                if not repeated:
                    seen_hashable.add(element)
            except TypeError:
                repeated = element in seen_other
                if not repeated:
                    seen_other.append(element)
            if repeated and element not in duplicates:
                duplicates.append(element)

        if not duplicates:
            return VALID

        names = ", ".join(str(element) for element in duplicates)
        return ValidationResult.failure(f"Collection contains duplicate elements: {names}")


class ContainsElementValidator(Validator[Collection[Any]]):
    """Collection must contain a given element.

    A collection that cannot hold the element at all (an unhashable element
    against a set, a non-string against a string) fails instead of raising.
    """

    __slots__ = ("_element",)

    def __init__(self, element: Any):
        self._element = element

    @property
    def element(self) -> Any:
        return self._element

    def validate(self, value: Collection[Any]) -> ValidationResult:
        if not isinstance(value, Iterable):
            return _not_a_collection(value)
        try:
            found = self._element in value
        except TypeError as e:
            return ValidationResult.failure(
                f"Collection of type {type(value).__name__} cannot contain "
                f"{self._element!r}: {e}"
            )
        return ValidationResult.from_condition(
            found, f"Collection must contain element: {self._element}"
        )


class AllSatisfyValidator(Validator[Iterable[Any]]):
    """Every element must satisfy a predicate.

    The predicate must be free of side effects, like any validator.
    """

    __slots__ = ("_predicate", "_message")

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        message: str = "Not all elements satisfy the condition",
    ):
        self._predicate = predicate
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def validate(self, value: Iterable[Any]) -> ValidationResult:
        if not isinstance(value, Iterable):
            return _not_a_collection(value)
        return ValidationResult.from_condition(
            all(self._predicate(element) for element in value), self._message
        )


class SortOrder(Enum):
    """Expected ordering for :class:`SortedValidator`."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortedValidator(Validator[Iterable[Any]]):
    """Elements must be in ascending (or descending) order.

    Equal neighbours are allowed. Empty and single-element collections are
    always sorted.
    """

    __slots__ = ("_order",)

    def __init__(self, order: SortOrder | str = SortOrder.ASCENDING):
        self._order = SortOrder(order)

    @property
    def order(self) -> SortOrder:
        return self._order

    def validate(self, value: Iterable[Any]) -> ValidationResult:
        if not isinstance(value, Iterable):
            return _not_a_collection(value)

        elements = list(value)
        pairs = zip(elements, elements[1:])
        try:
            if self._order is SortOrder.ASCENDING:
                is_sorted = all(a <= b for a, b in pairs)
            else:
                is_sorted = all(a >= b for a, b in pairs)
        except TypeError as e:
            return ValidationResult.failure(f"Collection elements are not comparable: {e}")

        return ValidationResult.from_condition(
            is_sorted, f"Collection must be sorted in {self._order.value} order"
        )
