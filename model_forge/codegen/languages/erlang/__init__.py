"""
Erlang code generator module.
"""

from .generator import ErlangGenerator, ErlangOptions

__all__ = ["ErlangGenerator", "ErlangOptions", "generate_erlang_code"]


def generate_erlang_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Erlang records for ``data``."""
    return ErlangGenerator(options).generate(data, root_name)
