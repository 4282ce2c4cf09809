"""
TypeScript code generator module.

Generates type aliases or interfaces from a JSON sample.
"""

from .generator import TypeScriptGenerator, TypeScriptOptions

__all__ = ["TypeScriptGenerator", "TypeScriptOptions", "generate_typescript_code"]


def generate_typescript_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate TypeScript declarations for ``data``."""
    return TypeScriptGenerator(options).generate(data, root_name)
