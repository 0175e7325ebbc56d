"""Exception hierarchy for fieldcheck.

Validation failures are never raised: they are returned as data in a
``ValidationOutcome``. The exceptions below signal programmer or contract
errors (a rule attached to a kind that does not expose it, an invalid pattern,
a broken configuration) and are meant to propagate.

Example:
    ```python
    from fieldcheck.exceptions import FieldcheckError, UnsupportedRuleError

    try:
        string_field("name", "x").min_size(3.0)
    except UnsupportedRuleError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class FieldcheckError(Exception):
    """Base exception for all fieldcheck errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field names, kinds, etc.)
        details: Alternative to context (both are supported)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class UnsupportedRuleError(FieldcheckError):
    """Raised when a rule or conversion is not exposed for a field kind.

    Example:
        ```python
        raise UnsupportedRuleError("age", "INT", "min_length")
        # Field 'age': min_length is not available for INT fields
        ```
    """

    def __init__(self, field_name: str, kind: str, operation: str):
        super().__init__(
            f"Field '{field_name}': {operation} is not available for {kind} fields",
            context={"field": field_name, "kind": kind, "operation": operation},
        )
        self.field_name = field_name
        self.kind = kind
        self.operation = operation


class PatternCompileError(FieldcheckError):
    """Raised when pattern text cannot be compiled into a matcher."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(
            f"Invalid pattern '{pattern}': {reason}",
            context={"pattern": pattern, "reason": reason},
        )
        self.pattern = pattern


class ConfigurationError(FieldcheckError):
    """Raised when configuration is invalid or missing.

    Example:
        ```python
        raise ConfigurationError(
            "Unknown field type",
            context={"field": "age", "type": "decimal"}
        )
        ```
    """

    pass


class SerializationError(FieldcheckError):
    """Raised when serialized output cannot be rendered as JSON."""

    pass


__all__ = [
    "FieldcheckError",
    "UnsupportedRuleError",
    "PatternCompileError",
    "ConfigurationError",
    "SerializationError",
]
