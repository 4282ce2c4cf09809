"""
Swift code generator module.
"""

from .generator import SwiftGenerator, SwiftOptions

__all__ = ["SwiftGenerator", "SwiftOptions", "generate_swift_code"]


def generate_swift_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Swift structs or classes for ``data``."""
    return SwiftGenerator(options).generate(data, root_name)
