"""
C# code generator module.
"""

from .generator import CSharpGenerator, CSharpOptions

__all__ = ["CSharpGenerator", "CSharpOptions", "generate_csharp_code"]


def generate_csharp_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate C# records or classes for ``data``."""
    return CSharpGenerator(options).generate(data, root_name)
