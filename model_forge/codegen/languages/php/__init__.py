"""
PHP code generator module.
"""

from .generator import PhpGenerator, PhpOptions

__all__ = ["PhpGenerator", "PhpOptions", "generate_php_code"]


def generate_php_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate PHP classes for ``data``."""
    return PhpGenerator(options).generate(data, root_name)
