"""
VB.NET code generator module.
"""

from .generator import VBNetGenerator, VBNetOptions

__all__ = ["VBNetGenerator", "VBNetOptions", "generate_vbnet_code"]


def generate_vbnet_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate a VB.NET module for ``data``."""
    return VBNetGenerator(options).generate(data, root_name)
