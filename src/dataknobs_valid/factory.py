"""Factory classes for building validators and schemas from configuration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import reduce
from typing import Any

from dataknobs_common import ConfigurationError, NotFoundError, Registry
from dataknobs_config import FactoryBase

from .schema import PropertyValidator, Schema
from .validator import AnyValidator, Validator
from .validators import (
    AllSatisfyValidator,
    CollectionNotEmptyValidator,
    ContainsElementValidator,
    ContainsValidator,
    CountValidator,
    EachValidator,
    EmailValidator,
    EvenValidator,
    LengthValidator,
    MaximumValidator,
    MinimumValidator,
    MultipleOfValidator,
    NegativeValidator,
    NotBlankValidator,
    NotEmptyValidator,
    OddValidator,
    OneOfValidator,
    PatternValidator,
    PositiveValidator,
    PrefixValidator,
    RangeValidator,
    RequiredValidator,
    SortedValidator,
    SuffixValidator,
    UniqueValidator,
)

logger = logging.getLogger(__name__)

ValidatorBuilder = Callable[["ValidatorFactory", dict[str, Any]], Validator[Any]]


def _require(config: dict[str, Any], key: str) -> Any:
    if key not in config:
        raise ConfigurationError(
            f"Validator '{config.get('type')}' requires '{key}'",
            context={"type": config.get("type"), "missing": key},
        )
    return config[key]


def _length(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    if "exactly" in config:
        return LengthValidator.exactly(config["exactly"])
    return LengthValidator(config.get("min"), config.get("max"))


def _count(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    if "exactly" in config:
        return CountValidator.exactly(config["exactly"])
    return CountValidator(config.get("min"), config.get("max"))


def _pattern(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    pattern = _require(config, "pattern")
    if "message" in config:
        return PatternValidator(pattern, config["message"])
    return PatternValidator(pattern)


def _all_satisfy(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    # Elements must pass the nested validator; reported as one error
    element_validator = factory.create(**_require(config, "validator"))
    message = config.get("message", "Not all elements satisfy the condition")
    return AllSatisfyValidator(element_validator.is_valid, message)


def _each(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    return EachValidator(factory.create(**_require(config, "validator")))


def _and(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    validators = factory.create_all(_require(config, "validators"))
    if not validators:
        raise ConfigurationError("'and' validator requires at least one sub-validator")
    return reduce(lambda combined, validator: combined.and_(validator), validators)


def _or(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    validators = factory.create_all(_require(config, "validators"))
    if not validators:
        raise ConfigurationError("'or' validator requires at least one sub-validator")
    return reduce(lambda combined, validator: combined.or_(validator), validators)


def _not(factory: ValidatorFactory, config: dict[str, Any]) -> Validator[Any]:
    validator = factory.create(**_require(config, "validator"))
    return validator.not_(_require(config, "message"))


_BUILTIN_BUILDERS: dict[str, ValidatorBuilder] = {
    # Strings
    "length": _length,
    "not_empty": lambda f, c: NotEmptyValidator(),
    "not_blank": lambda f, c: NotBlankValidator(),
    "email": lambda f, c: EmailValidator(),
    "pattern": _pattern,
    "contains": lambda f, c: ContainsValidator(
        _require(c, "substring"), c.get("case_sensitive", True)
    ),
    "prefix": lambda f, c: PrefixValidator(_require(c, "prefix")),
    "suffix": lambda f, c: SuffixValidator(_require(c, "suffix")),
    # Numeric
    "range": lambda f, c: RangeValidator(_require(c, "min"), _require(c, "max")),
    "minimum": lambda f, c: MinimumValidator(_require(c, "value"), c.get("inclusive", True)),
    "maximum": lambda f, c: MaximumValidator(_require(c, "value"), c.get("inclusive", True)),
    "positive": lambda f, c: PositiveValidator(c.get("strict", True)),
    "negative": lambda f, c: NegativeValidator(c.get("strict", True)),
    "even": lambda f, c: EvenValidator(),
    "odd": lambda f, c: OddValidator(),
    "multiple_of": lambda f, c: MultipleOfValidator(_require(c, "divisor")),
    # Collections
    "count": _count,
    "collection_not_empty": lambda f, c: CollectionNotEmptyValidator(),
    "each": _each,
    "unique": lambda f, c: UniqueValidator(),
    "contains_element": lambda f, c: ContainsElementValidator(_require(c, "element")),
    "all_satisfy": _all_satisfy,
    "sorted": lambda f, c: SortedValidator(c.get("order", "ascending")),
    # General
    "required": lambda f, c: RequiredValidator(),
    "one_of": lambda f, c: OneOfValidator(_require(c, "values"), c.get("case_sensitive", True)),
    # Composition
    "and": _and,
    "all": _and,
    "or": _or,
    "any": _or,
    "not": _not,
}


class ValidatorFactory(FactoryBase):
    """Factory for creating validators from configuration.

    Each configuration names a validator ``type`` plus that validator's
    options. Composite types nest further configurations, so arbitrary
    AND/OR/NOT trees can be described declaratively.

    Example Configuration:
        ```yaml
        type: or
        validators:
          - type: email
          - type: pattern
            pattern: "^\\+?[0-9 ]{7,15}$"
            message: Must be a phone number
        ```

    Custom validator types can be added with :meth:`register`.
    """

    def __init__(self) -> None:
        self._builders: Registry[ValidatorBuilder] = Registry("validator_builders")
        for type_name, builder in _BUILTIN_BUILDERS.items():
            self._builders.register(type_name, builder)

    @property
    def types(self) -> list[str]:
        """Registered validator type names."""
        return self._builders.list_keys()

    def register(self, type_name: str, builder: ValidatorBuilder, allow_overwrite: bool = False) -> None:
        """Register a builder for a validator type.

        Args:
            type_name: Name used as ``type`` in configurations
            builder: Callable taking ``(factory, config)`` and returning a Validator
            allow_overwrite: Whether to replace an existing builder
        """
        self._builders.register(type_name.lower(), builder, allow_overwrite=allow_overwrite)
        logger.debug(f"Registered validator type: {type_name}")

    def create(self, **config: Any) -> Validator[Any]:
        """Create a validator from configuration.

        Args:
            **config: Validator configuration; ``type`` selects the validator

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If the type is missing or unknown, or a
                required option is absent
        """
        type_name = str(config.get("type", "")).lower()
        if not type_name:
            raise ConfigurationError("Validator configuration missing 'type'", context=config)

        try:
            builder = self._builders.get(type_name)
        except NotFoundError as e:
            raise ConfigurationError(
                f"Unknown validator type: {type_name}",
                context={"type": type_name, "available_types": self.types},
            ) from e

        logger.debug(f"Creating validator: {type_name}")
        return builder(self, config)

    def create_all(self, configs: list[dict[str, Any]]) -> list[Validator[Any]]:
        """Create one validator per configuration, preserving order."""
        return [self.create(**config) for config in configs]


class SchemaFactory(FactoryBase):
    """Factory for creating record schemas from configuration.

    Configuration Options:
        name (str): Schema name
        fields (list): Field definitions, in validation order

    Field Definition Options:
        name (str): Field name, read from each record by key or attribute
        validators (list): Validator configurations, ANDed in order

    Example Configuration:
        schemas:
          - name: user_schema
            factory: dataknobs_valid.factory.SchemaFactory
            fields:
              - name: username
                validators:
                  - type: length
                    min: 3
                    max: 20
              - name: email
                validators:
                  - type: email
              - name: age
                validators:
                  - type: range
                    min: 18
                    max: 120
    """

    def __init__(self, validator_factory: ValidatorFactory | None = None) -> None:
        self.validator_factory = validator_factory or ValidatorFactory()

    def create(self, **config: Any) -> Schema[Any]:
        """Create a Schema instance from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance
        """
        name = config.get("name", "unnamed_schema")
        logger.info(f"Creating schema: {name}")

        properties = []
        for field_config in config.get("fields", []):
            prop = self._build_property(field_config)
            if prop is not None:
                properties.append(prop)

        return Schema(name, properties)

    def _build_property(self, field_config: dict[str, Any]) -> PropertyValidator[Any] | None:
        """Build the property validator for one field definition.

        Args:
            field_config: Field configuration

        Returns:
            PropertyValidator, or None if the definition has no name
        """
        field_name = field_config.get("name")
        if not field_name:
            logger.warning("Field configuration missing 'name', skipping")
            return None

        validators = self.validator_factory.create_all(field_config.get("validators", []))
        if validators:
            validator = reduce(lambda combined, v: combined.and_(v), validators)
        else:
            validator = AnyValidator.always_valid()
        return PropertyValidator(field_name, field_name, validator)


# Create singleton instances for registration
validator_factory = ValidatorFactory()
schema_factory = SchemaFactory(validator_factory)
