"""
Dart code generator module.
"""

from .generator import DartGenerator, DartOptions

__all__ = ["DartGenerator", "DartOptions", "generate_dart_code"]


def generate_dart_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Dart model classes for ``data``."""
    return DartGenerator(options).generate(data, root_name)
