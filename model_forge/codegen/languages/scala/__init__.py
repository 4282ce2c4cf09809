"""
Scala code generator module.
"""

from .generator import ScalaGenerator, ScalaOptions

__all__ = ["ScalaGenerator", "ScalaOptions", "generate_scala_code"]


def generate_scala_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Scala case classes for ``data``."""
    return ScalaGenerator(options).generate(data, root_name)
