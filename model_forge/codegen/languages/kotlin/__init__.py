"""
Kotlin code generator module.
"""

from .generator import KotlinGenerator, KotlinOptions

__all__ = ["KotlinGenerator", "KotlinOptions", "generate_kotlin_code"]


def generate_kotlin_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Kotlin classes for ``data``."""
    return KotlinGenerator(options).generate(data, root_name)
