"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    InvalidInputError,
    GenerationResult,
    generate_code,
)
from .schema import (
    Schema,
    Field,
    FieldType,
    TypeInfo,
    DiscoveryError,
    classify_value,
    discover_shapes,
    flat_nested_name,
    qualified_nested_name,
)
from .naming import (
    NameSanitizer,
    NamingCase,
    is_iso_date_string,
    singularize,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from .config import (
    GeneratorOptions,
    ConfigManager,
    ConfigError,
    load_options,
    parse_option_overrides,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "InvalidInputError",
    "GenerationResult",
    "generate_code",
    # Shape discovery
    "Schema",
    "Field",
    "FieldType",
    "TypeInfo",
    "DiscoveryError",
    "classify_value",
    "discover_shapes",
    "flat_nested_name",
    "qualified_nested_name",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "is_iso_date_string",
    "singularize",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    # Configuration system
    "GeneratorOptions",
    "ConfigManager",
    "ConfigError",
    "load_options",
    "parse_option_overrides",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
