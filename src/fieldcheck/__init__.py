"""Declarative, composable field validation.

Wrap a scalar value into a named field, attach an ordered chain of rules and
validate it to get either the field back or every failure at once:

- **Fields**: immutable named values (int, float, string, bool and optional forms)
- **Rules**: required, size and length bounds, equality, patterns, custom predicates
- **Validation**: every rule is evaluated, failures are accumulated in order
- **Serialization**: JSON-shaped reports in list or map mode

Example:
    ```python
    from fieldcheck import (
        int_field, string_field, validate, to_serializable,
        serializables_to_string, has_errors,
    )

    first_name = string_field("first_name", "").required().min_length(3)
    age = int_field("age", 16).required().to_float().min_size(18.0)

    pairs = [to_serializable(validate(first_name)), to_serializable(validate(age))]
    if has_errors(pairs):
        print(serializables_to_string(pairs))
    ```
"""

from fieldcheck.coercion import UNREPRESENTABLE, CoercionResult, coerce, stringify, try_coerce
from fieldcheck.config import ValidationConfig
from fieldcheck.engine import evaluate
from fieldcheck.exceptions import (
    ConfigurationError,
    FieldcheckError,
    PatternCompileError,
    SerializationError,
    UnsupportedRuleError,
)
from fieldcheck.factory import FieldFactory, field_factory, load_fields
from fieldcheck.fields import (
    Field,
    FieldKind,
    append_rule,
    bool_field,
    eq,
    float_field,
    int_field,
    max_length,
    max_size,
    min_length,
    min_size,
    not_eq,
    optional_bool_field,
    optional_float_field,
    optional_int_field,
    optional_string_field,
    pattern,
    raw_pattern,
    required,
    string_field,
    to_float,
    with_predicate,
)
from fieldcheck.patterns import Matcher, RegexMatcher, compile_pattern
from fieldcheck.result import ValidationFailure, ValidationOutcome
from fieldcheck.rules import (
    Eq,
    MaxLength,
    MaxSize,
    MinLength,
    MinSize,
    NotEq,
    Pattern,
    Predicate,
    Required,
    Rule,
)
from fieldcheck.serialization import (
    SerializationMode,
    has_errors,
    serializables_to_string,
    to_serializable,
    to_serializable_list,
)
from fieldcheck.validator import validate, validate_many

__version__ = "1.0.0"

__all__ = [
    # Coercion
    "UNREPRESENTABLE",
    "CoercionResult",
    "coerce",
    "stringify",
    "try_coerce",
    # Fields
    "Field",
    "FieldKind",
    "int_field",
    "float_field",
    "string_field",
    "bool_field",
    "optional_int_field",
    "optional_float_field",
    "optional_string_field",
    "optional_bool_field",
    # Rule attachment
    "append_rule",
    "required",
    "min_size",
    "max_size",
    "min_length",
    "max_length",
    "eq",
    "not_eq",
    "pattern",
    "raw_pattern",
    "with_predicate",
    "to_float",
    # Rules
    "Rule",
    "Required",
    "MinSize",
    "MaxSize",
    "MinLength",
    "MaxLength",
    "Eq",
    "NotEq",
    "Pattern",
    "Predicate",
    # Patterns
    "Matcher",
    "RegexMatcher",
    "compile_pattern",
    # Validation
    "evaluate",
    "validate",
    "validate_many",
    "ValidationFailure",
    "ValidationOutcome",
    # Serialization
    "SerializationMode",
    "to_serializable",
    "to_serializable_list",
    "serializables_to_string",
    "has_errors",
    # Configuration
    "ValidationConfig",
    "FieldFactory",
    "field_factory",
    "load_fields",
    # Exceptions
    "FieldcheckError",
    "UnsupportedRuleError",
    "PatternCompileError",
    "ConfigurationError",
    "SerializationError",
]
