"""Leaf validators for strings, numbers and collections.
"""

from .collections import (
    AllSatisfyValidator,
    CollectionNotEmptyValidator,
    ContainsElementValidator,
    CountValidator,
    EachValidator,
    SortedValidator,
    SortOrder,
    UniqueValidator,
)
from .general import OneOfValidator, RequiredValidator
from .numeric import (
    EvenValidator,
    MaximumValidator,
    MinimumValidator,
    MultipleOfValidator,
    NegativeValidator,
    OddValidator,
    PositiveValidator,
    RangeValidator,
)
from .strings import (
    EMAIL_PATTERN,
    ContainsValidator,
    EmailValidator,
    LengthValidator,
    NotBlankValidator,
    NotEmptyValidator,
    PatternValidator,
    PrefixValidator,
    SuffixValidator,
)

__all__ = [
    # Strings
    "EMAIL_PATTERN",
    "LengthValidator",
    "NotEmptyValidator",
    "NotBlankValidator",
    "EmailValidator",
    "PatternValidator",
    "ContainsValidator",
    "PrefixValidator",
    "SuffixValidator",
    # Numeric
    "RangeValidator",
    "MinimumValidator",
    "MaximumValidator",
    "PositiveValidator",
    "NegativeValidator",
    "EvenValidator",
    "OddValidator",
    "MultipleOfValidator",
    # Collections
    "CountValidator",
    "CollectionNotEmptyValidator",
    "EachValidator",
    "UniqueValidator",
    "ContainsElementValidator",
    "AllSatisfyValidator",
    "SortedValidator",
    "SortOrder",
    # General
    "RequiredValidator",
    "OneOfValidator",
]
