"""
Model Forge Code Generation Module

Generates model declarations in twenty target languages from a JSON sample.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    list_all_language_info,
    list_supported_languages,
    register_generator,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    InvalidInputError,
    generate_code,
)
from .core.schema import Schema, Field, FieldType, TypeInfo, discover_shapes
from .core.config import GeneratorOptions, ConfigError, load_options
from .languages.cpp import generate_cpp_code
from .languages.csharp import generate_csharp_code
from .languages.dart import generate_dart_code
from .languages.elixir import generate_elixir_code
from .languages.erlang import generate_erlang_code
from .languages.go import generate_go_code
from .languages.java import generate_java_code
from .languages.javascript import generate_javascript_code
from .languages.kotlin import generate_kotlin_code
from .languages.objc import generate_objc_code
from .languages.php import generate_php_code
from .languages.python import generate_python_code
from .languages.r import generate_r_code
from .languages.ruby import generate_ruby_code
from .languages.rust import generate_rust_code
from .languages.scala import generate_scala_code
from .languages.sql import generate_sql_code
from .languages.swift import generate_swift_code
from .languages.typescript import generate_typescript_code
from .languages.vbnet import generate_vbnet_code


def generate_model_code(data, language="typescript", root_name="DataModel", options=None):
    """
    Generate model code for a parsed JSON object.

    Args:
        data: Parsed JSON object
        language: Target language name or alias
        root_name: Name of the root model
        options: Options instance, dict of option values, or config file path

    Returns:
        Generated code string

    Raises:
        RegistryError: If the language is unknown or the options are invalid
        GeneratorError: If the input cannot be modelled
    """
    generator = get_generator(language, options)
    return generator.generate(data, root_name)


def generate_from_json(json_text, language="typescript", root_name="DataModel", **options):
    """
    Quick code generation from JSON text.

    Args:
        json_text: JSON document as a string
        language: Target language
        root_name: Name of the root model
        **options: Generator options

    Returns:
        GenerationResult with generated code
    """
    import json

    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        return GenerationResult.error(f"Invalid JSON: {e}", exception=e)

    try:
        generator = get_generator(language, options)
    except RegistryError as e:
        return GenerationResult.error(str(e), exception=e)

    return generate_code(generator, data, root_name)


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "InvalidInputError",
    "Schema",
    "Field",
    "FieldType",
    "TypeInfo",
    "GeneratorOptions",
    "ConfigError",
    "discover_shapes",
    "generate_code",
    "generate_model_code",
    "generate_from_json",
    "get_generator",
    "get_language_info",
    "get_registry",
    "list_all_language_info",
    "list_supported_languages",
    "load_options",
    "register_generator",
    "generate_cpp_code",
    "generate_csharp_code",
    "generate_dart_code",
    "generate_elixir_code",
    "generate_erlang_code",
    "generate_go_code",
    "generate_java_code",
    "generate_javascript_code",
    "generate_kotlin_code",
    "generate_objc_code",
    "generate_php_code",
    "generate_python_code",
    "generate_r_code",
    "generate_ruby_code",
    "generate_rust_code",
    "generate_scala_code",
    "generate_sql_code",
    "generate_swift_code",
    "generate_typescript_code",
    "generate_vbnet_code",
]
