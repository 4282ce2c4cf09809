"""
JavaScript code generator module.
"""

from .generator import JavaScriptGenerator, JavaScriptOptions

__all__ = ["JavaScriptGenerator", "JavaScriptOptions", "generate_javascript_code"]


def generate_javascript_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate JavaScript classes for ``data``."""
    return JavaScriptGenerator(options).generate(data, root_name)
