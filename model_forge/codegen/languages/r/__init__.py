"""
R code generator module.
"""

from .generator import RGenerator, ROptions

__all__ = ["RGenerator", "ROptions", "generate_r_code"]


def generate_r_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate R constructor functions for ``data``."""
    return RGenerator(options).generate(data, root_name)
