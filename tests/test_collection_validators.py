"""
Tests for collection validators.
"""

import pytest

from dataknobs_valid import VALID, AnyValidator, ValidError
from dataknobs_valid.validators import (
    AllSatisfyValidator,
    CollectionNotEmptyValidator,
    ContainsElementValidator,
    CountValidator,
    EachValidator,
    LengthValidator,
    OneOfValidator,
    RangeValidator,
    RequiredValidator,
    SortedValidator,
    SortOrder,
    UniqueValidator,
)


class TestCountValidator:
    """Test CountValidator."""

    def test_bounds(self):
        validator = CountValidator(1, 3)
        assert validator.is_valid([1])
        assert validator.is_valid({"a": 1, "b": 2, "c": 3})
        assert validator.validate([]).errors == (
            ValidError("Count must be between 1 and 3, got 0"),
        )

    def test_shortcuts(self):
        assert CountValidator.exactly(2).is_valid((1, 2))
        assert not CountValidator.exactly(2).is_valid((1,))
        assert CountValidator.minimum(2).validate([1]).errors[0].message == (
            "Count must be at least 2, got 1"
        )
        assert CountValidator.maximum(1).validate([1, 2]).errors[0].message == (
            "Count must be at most 1, got 2"
        )

    def test_not_a_collection(self):
        assert CountValidator(0, 1).validate(5).is_invalid

    def test_bad_bounds(self):
        with pytest.raises(ValueError):
            CountValidator(3, 1)


class TestCollectionNotEmptyValidator:
    """Test CollectionNotEmptyValidator."""

    def test_empty(self):
        assert CollectionNotEmptyValidator().validate([]).errors == (
            ValidError("Collection must not be empty"),
        )
        assert CollectionNotEmptyValidator().is_valid({1})


class TestEachValidator:
    """Test EachValidator."""

    def test_tags_indexes(self):
        """Test errors carry the failing element's index, in order."""
        result = EachValidator(RangeValidator(1, 10)).validate([1, 5, 15, 20])
        assert len(result.errors) == 2
        assert [e.context["index"] for e in result.errors] == ["2", "3"]
        assert all(e.message == "Value must be between 1 and 10" for e in result.errors)

    def test_all_valid(self):
        assert EachValidator(RangeValidator(1, 10)).validate([1, 2, 3]) == VALID
        assert EachValidator(RangeValidator(1, 10)).validate([]) == VALID

    def test_keeps_every_error_per_element(self):
        element = AnyValidator.always_invalid("a") & AnyValidator.always_invalid("b")
        result = EachValidator(element).validate(["x", "y"])
        assert [(e.message, e.context["index"]) for e in result.errors] == [
            ("a", "0"), ("b", "0"), ("a", "1"), ("b", "1"),
        ]

    def test_index_overrides_inner_index(self):
        """Test the outer index wins over an inner one."""
        inner = EachValidator(LengthValidator.minimum(2))
        result = EachValidator(inner).validate([["ok", "x"], ["ok"]])
        assert result.errors[0].context == {"index": "0"}

    def test_strings_rejected(self):
        assert EachValidator(RangeValidator(1, 2)).validate("abc").is_invalid


class TestUniqueValidator:
    """Test UniqueValidator."""

    def test_names_duplicate(self):
        result = UniqueValidator().validate([1, 2, 3, 2])
        assert result.errors == (ValidError("Collection contains duplicate elements: 2"),)

    def test_each_duplicate_named_once(self):
        result = UniqueValidator().validate(["b", "a", "b", "a", "b"])
        assert result.errors[0].message == "Collection contains duplicate elements: b, a"

    def test_unique(self):
        assert UniqueValidator().validate([1, 2, 3]) == VALID
        assert UniqueValidator().validate([]) == VALID

    def test_unhashable_elements(self):
        result = UniqueValidator().validate([[1], [2], [1]])
        assert result.errors[0].message == "Collection contains duplicate elements: [1]"


class TestContainsElementValidator:
    """Test ContainsElementValidator."""

    def test_contains(self):
        validator = ContainsElementValidator("admin")
        assert validator.is_valid(["user", "admin"])
        assert validator.validate(["user"]).errors == (
            ValidError("Collection must contain element: admin"),
        )

    def test_string_with_non_string_element(self):
        """Test a string collection that can't hold the element fails instead of raising."""
        result = ContainsElementValidator(1).validate("abc")
        assert len(result.errors) == 1
        assert "cannot contain" in result.errors[0].message

    def test_unhashable_element_in_set(self):
        result = ContainsElementValidator([1]).validate({1, 2})
        assert result.is_invalid
        assert "cannot contain" in result.errors[0].message

    def test_substring_in_string(self):
        assert ContainsElementValidator("b").is_valid("abc")


class TestLeafImmutability:
    """Test leaf validators can't be reconfigured after construction."""

    def test_configuration_is_read_only(self):
        with pytest.raises(AttributeError):
            CountValidator(1, 3).min_count = 0
        with pytest.raises(AttributeError):
            EachValidator(RangeValidator(1, 10)).element_validator = RangeValidator(0, 1)
        with pytest.raises(AttributeError):
            SortedValidator().order = SortOrder.DESCENDING
        with pytest.raises(AttributeError):
            ContainsElementValidator("a").element = "b"
        with pytest.raises(AttributeError):
            OneOfValidator(["a"]).values = ("b",)

    def test_no_new_attributes(self):
        for validator in (
            UniqueValidator(),
            AllSatisfyValidator(bool),
            RequiredValidator(),
            CollectionNotEmptyValidator(),
        ):
            with pytest.raises(AttributeError):
                validator.extra = 1


class TestAllSatisfyValidator:
    """Test AllSatisfyValidator."""

    def test_default_message(self):
        validator = AllSatisfyValidator(lambda n: n > 0)
        assert validator.is_valid([1, 2])
        assert validator.validate([1, -2]).errors == (
            ValidError("Not all elements satisfy the condition"),
        )

    def test_custom_message(self):
        validator = AllSatisfyValidator(str.isupper, message="Must be upper case")
        assert validator.validate(["A", "b"]).errors == (ValidError("Must be upper case"),)


class TestSortedValidator:
    """Test SortedValidator."""

    def test_ascending(self):
        validator = SortedValidator()
        assert validator.is_valid([1, 2, 2, 3])
        assert validator.is_valid([])
        assert validator.is_valid([1])
        assert validator.validate([2, 1]).errors == (
            ValidError("Collection must be sorted in ascending order"),
        )

    def test_descending(self):
        validator = SortedValidator(SortOrder.DESCENDING)
        assert validator.is_valid([3, 3, 1])
        assert validator.validate([1, 2]).errors == (
            ValidError("Collection must be sorted in descending order"),
        )

    def test_order_by_name(self):
        assert SortedValidator("descending").order is SortOrder.DESCENDING

    def test_incomparable(self):
        assert SortedValidator().validate([1, "a"]).is_invalid


class TestGeneralValidators:
    """Test RequiredValidator and OneOfValidator."""

    def test_required(self):
        assert RequiredValidator().validate(None).errors == (ValidError("Value is required"),)
        assert RequiredValidator().is_valid(0)
        assert RequiredValidator().is_valid("")

    def test_one_of(self):
        validator = OneOfValidator(["red", "green"])
        assert validator.is_valid("red")
        assert validator.validate("blue").errors == (
            ValidError("Value 'blue' is not in allowed values: 'red', 'green'"),
        )

    def test_one_of_case_insensitive(self):
        validator = OneOfValidator(["Red"], case_sensitive=False)
        assert validator.is_valid("RED")

    def test_one_of_requires_values(self):
        with pytest.raises(ValueError):
            OneOfValidator([])
