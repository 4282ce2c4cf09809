"""
Ruby code generator module.
"""

from .generator import RubyGenerator, RubyOptions, to_ruby_snake_case

__all__ = ["RubyGenerator", "RubyOptions", "to_ruby_snake_case", "generate_ruby_code"]


def generate_ruby_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Ruby classes for ``data``."""
    return RubyGenerator(options).generate(data, root_name)
