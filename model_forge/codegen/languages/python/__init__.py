"""
Python code generator module.

Generates dataclasses or plain classes from a JSON sample.
"""

from .config import PythonOptions
from .generator import PythonGenerator
from .naming import create_python_sanitizer, to_python_identifier

__all__ = [
    "PythonGenerator",
    "PythonOptions",
    "create_python_sanitizer",
    "to_python_identifier",
    "create_frozen_generator",
    "generate_python_code",
]


def create_frozen_generator() -> PythonGenerator:
    """Generator for immutable, hashable dataclasses."""
    return PythonGenerator(PythonOptions(frozen=True, include_hash=True))


def generate_python_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Python classes for ``data``."""
    return PythonGenerator(options).generate(data, root_name)
