"""
C++ code generator module.
"""

from .generator import CppGenerator, CppOptions

__all__ = ["CppGenerator", "CppOptions", "generate_cpp_code"]


def generate_cpp_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate a C++ header for ``data``."""
    return CppGenerator(options).generate(data, root_name)
