"""
Java code generator module.
"""

from .generator import JavaGenerator, JavaOptions

__all__ = ["JavaGenerator", "JavaOptions", "generate_java_code"]


def generate_java_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate a Java class (with static nested classes) for ``data``."""
    return JavaGenerator(options).generate(data, root_name)
