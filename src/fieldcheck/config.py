"""Configuration for validation reporting.

Settings can come from a dictionary, a YAML or JSON file, and environment
variables, in increasing order of precedence when combined:

```python
config = ValidationConfig.from_file("fieldcheck.yaml").with_environment_overrides()
print(config.report(fields))
```

Environment variable format: ``FIELDCHECK_<SETTING>``, e.g.
``FIELDCHECK_MODE=list`` or ``FIELDCHECK_KEEP_FAILED_ONLY=true``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError
from .fields import Field
from .serialization import SerializationMode, serializables_to_string, to_serializable
from .validator import validate

logger = logging.getLogger(__name__)

ENV_PREFIX = "FIELDCHECK_"


def load_mapping(path: Union[str, Path]) -> dict[str, Any]:
    """Load a YAML or JSON file into a dictionary.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

    Returns:
        The loaded mapping (empty for an empty file)

    Raises:
        ConfigurationError: If the file is missing, has an unsupported suffix,
            cannot be parsed, or does not contain a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    try:
        with open(path, encoding="utf-8") as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file format: {suffix}", context={"path": str(path)}
                )
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Cannot parse configuration file {path}: {e}", context={"path": str(path)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    return data


def _parse_mode(value: Any) -> SerializationMode:
    if isinstance(value, SerializationMode):
        return value
    try:
        return SerializationMode(str(value).strip().lower())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid serialization mode: {value!r}",
            context={"setting": "mode", "allowed": [m.value for m in SerializationMode]},
        ) from e


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ["true", "yes", "1", "on"]:
        return True
    if text in ["false", "no", "0", "off"]:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}", context={"setting": name})


def _parse_indent(value: Any) -> int | None:
    if value is None or (isinstance(value, str) and value.strip().lower() in ["", "none"]):
        return None
    try:
        indent = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid json_indent: {value!r}", context={"setting": "json_indent"}
        ) from e
    if indent < 0:
        raise ConfigurationError(
            f"json_indent cannot be negative: {indent}", context={"setting": "json_indent"}
        )
    return indent


@dataclass(frozen=True)
class ValidationConfig:
    """Reporting settings.

    Attributes:
        mode: Shape of each field's failures in serialized output
        keep_failed_only: Whether batch reports omit fields that passed
        json_indent: Indentation for rendered JSON; compact when None
    """

    mode: SerializationMode = SerializationMode.MAP
    keep_failed_only: bool = False
    json_indent: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidationConfig:
        """Create a configuration from a dictionary.

        Unknown keys are ignored with a warning.

        Raises:
            ConfigurationError: If a setting has an invalid value
        """
        known = {"mode", "keep_failed_only", "json_indent"}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown configuration setting: {key}")

        defaults = cls()
        return cls(
            mode=_parse_mode(data.get("mode", defaults.mode)),
            keep_failed_only=_parse_bool(
                "keep_failed_only", data.get("keep_failed_only", defaults.keep_failed_only)
            ),
            json_indent=_parse_indent(data.get("json_indent", defaults.json_indent)),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> ValidationConfig:
        """Load a configuration from a YAML or JSON file.

        The settings may sit at the top level or under a ``validation`` key.
        """
        data = load_mapping(path)
        section = data.get("validation", data)
        if not isinstance(section, dict):
            raise ConfigurationError(
                "'validation' section must be a mapping", context={"path": str(path)}
            )
        logger.info(f"Loaded validation configuration from {path}")
        return cls.from_dict(section)

    def with_environment_overrides(
        self,
        prefix: str = ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> ValidationConfig:
        """Return a copy with settings overridden from environment variables.

        Args:
            prefix: Environment variable prefix
            environ: Environment to read (defaults to ``os.environ``)
        """
        environ = os.environ if environ is None else environ
        updates: dict[str, Any] = {}

        if f"{prefix}MODE" in environ:
            updates["mode"] = _parse_mode(environ[f"{prefix}MODE"])
        if f"{prefix}KEEP_FAILED_ONLY" in environ:
            updates["keep_failed_only"] = _parse_bool(
                "keep_failed_only", environ[f"{prefix}KEEP_FAILED_ONLY"]
            )
        if f"{prefix}JSON_INDENT" in environ:
            updates["json_indent"] = _parse_indent(environ[f"{prefix}JSON_INDENT"])

        return replace(self, **updates) if updates else self

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "keep_failed_only": self.keep_failed_only,
            "json_indent": self.json_indent,
        }

    def serialize(self, fields: Iterable[Field]) -> list[tuple[str, Any]]:
        """Validate fields and convert them using the configured settings."""
        pairs = [to_serializable(validate(field), mode=self.mode) for field in fields]
        if self.keep_failed_only:
            pairs = [(name, value) for name, value in pairs if value is not None]
        return pairs

    def report(self, fields: Iterable[Field]) -> str:
        """Validate fields and render the configured JSON report."""
        return serializables_to_string(self.serialize(fields), indent=self.json_indent)
