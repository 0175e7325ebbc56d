"""Factory for building fields from configuration."""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

from .config import load_mapping
from .exceptions import ConfigurationError
from .fields import FIELD_CONSTRUCTORS, Field, FieldKind

logger = logging.getLogger(__name__)


class FieldFactory:
    """Factory for creating validated fields from configuration.

    Configuration Options:
        name (str): Field name
        type (str): Field kind (int, float, string, bool, or optional_<kind>)
        value (any): Field value (may be omitted or null for optional kinds)
        to_float (bool): Convert an int field to float before adding rules
        rules (list): List of rule definitions

    Rule Definition Options:
        type (str): required, min_size, max_size, min_length, max_length,
            eq, not_eq or pattern
        value (any): Threshold or comparand
        label (str): Tag for eq, not_eq and pattern rules
        pattern (str): Pattern text for pattern rules
        message (str): Error text for pattern rules

    Example Configuration:
        fields:
          - name: username
            type: string
            value: "al"
            rules:
              - type: required
              - type: min_length
                value: 3
              - type: pattern
                label: slug
                pattern: "^[a-z_]+$"
                message: must only contain lowercase letters
          - name: age
            type: int
            value: 16
            to_float: true
            rules:
              - type: min_size
                value: 18
    """

    def create(self, **config: Any) -> Field:
        """Create a Field from configuration.

        Args:
            **config: Field configuration

        Returns:
            Field with the configured rules attached

        Raises:
            ConfigurationError: If the name, type, value or a rule definition is
                missing or invalid
        """
        name = config.get("name")
        if not name:
            raise ConfigurationError("Field configuration missing 'name'", context={"config": config})

        kind = self._parse_kind(name, config.get("type", "string"))
        if "value" not in config and not kind.is_optional:
            raise ConfigurationError(
                f"Field '{name}' of type {kind.value} requires a 'value'",
                context={"field": name, "type": kind.value},
            )

        logger.info(f"Creating field: {name} ({kind.value})")
        field = FIELD_CONSTRUCTORS[kind](name, config.get("value"))

        if config.get("to_float", False):
            field = field.to_float()

        rule_configs = config.get("rules") or []
        if not isinstance(rule_configs, list):
            raise ConfigurationError(
                f"Rules for '{name}' must be a list, got {type(rule_configs).__name__}",
                context={"field": name},
            )
        for rule_config in rule_configs:
            if not isinstance(rule_config, Mapping):
                raise ConfigurationError(
                    f"Rule definitions for '{name}' must be mappings, got {rule_config!r}",
                    context={"field": name, "rule": rule_config},
                )
            field = self._add_rule(field, rule_config)

        return field

    def create_many(self, configs: Iterable[Mapping[str, Any]]) -> list[Field]:
        return [self.create(**config) for config in configs]

    def _parse_kind(self, name: str, type_name: Any) -> FieldKind:
        try:
            return FieldKind(str(type_name).strip().lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid field type for '{name}': {type_name}",
                context={"field": name, "allowed": [k.value for k in FieldKind]},
            ) from e

    def _add_rule(self, field: Field, rule_config: Mapping[str, Any]) -> Field:
        """Attach one configured rule to a field.

        Unknown rule types are skipped with a warning. Rules that the field's
        kind does not expose raise ``UnsupportedRuleError``.
        """
        rule_type = str(rule_config.get("type", "")).lower()
        label = rule_config.get("label", "")
        value = rule_config.get("value")

        logger.debug(f"Adding {rule_type} rule to field '{field.name}'")

        if rule_type == "required":
            return field.required()
        elif rule_type in ("min_size", "max_size", "min_length", "max_length"):
            if value is None:
                raise ConfigurationError(
                    f"Rule {rule_type} on '{field.name}' requires a 'value'",
                    context={"field": field.name, "rule": rule_type},
                )
            try:
                return getattr(field, rule_type)(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Invalid {rule_type} value for '{field.name}': {value!r}",
                    context={"field": field.name, "rule": rule_type, "value": value},
                ) from e
        elif rule_type == "eq":
            return field.eq(label, value)
        elif rule_type == "not_eq":
            return field.not_eq(label, value)
        elif rule_type == "pattern":
            pattern = rule_config.get("pattern")
            if not pattern:
                raise ConfigurationError(
                    f"Pattern rule on '{field.name}' requires a 'pattern'",
                    context={"field": field.name},
                )
            message = rule_config.get("message", f"must match pattern '{pattern}'")
            return field.raw_pattern(label, pattern, message)

        logger.warning(f"Unknown rule type: {rule_type}")
        return field


def load_fields(path: Union[str, Path]) -> list[Field]:
    """Build fields from the ``fields`` list of a YAML or JSON file."""
    data = load_mapping(path)
    configs = data.get("fields", [])
    if not isinstance(configs, list):
        raise ConfigurationError("'fields' must be a list", context={"path": str(path)})
    return field_factory.create_many(configs)


# Singleton instance
field_factory = FieldFactory()
