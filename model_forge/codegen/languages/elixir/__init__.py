"""
Elixir code generator module.
"""

from .generator import ElixirGenerator, ElixirOptions

__all__ = ["ElixirGenerator", "ElixirOptions", "generate_elixir_code"]


def generate_elixir_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Elixir modules for ``data``."""
    return ElixirGenerator(options).generate(data, root_name)
