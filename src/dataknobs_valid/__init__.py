"""DataKnobs Valid package.

Composable validators for the DataKnobs ecosystem:
- Validators map a value to a ValidationResult, with no side effects
- Validators combine with AND (``&``), OR (``|``) and NOT (``not_``)
- Errors accumulate in order and carry string context (field, index)
- Schemas validate records field by field
- Validators and schemas can be built from configuration
"""

from .error import ValidError
from .exceptions import ValidationFailedError
from .factory import SchemaFactory, ValidatorFactory, schema_factory, validator_factory
from .result import VALID, ValidationResult
from .schema import PropertyValidator, Schema, Validatable, build_schema, field_accessor
from .validator import AndValidator, AnyValidator, NotValidator, OrValidator, Validator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Results
    "ValidError",
    "ValidationResult",
    "VALID",
    "ValidationFailedError",
    # Validators
    "Validator",
    "AndValidator",
    "OrValidator",
    "NotValidator",
    "AnyValidator",
    # Schema
    "PropertyValidator",
    "Schema",
    "Validatable",
    "build_schema",
    "field_accessor",
    # Factories
    "ValidatorFactory",
    "SchemaFactory",
    "validator_factory",
    "schema_factory",
]
