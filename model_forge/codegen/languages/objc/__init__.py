"""
Objective-C code generator module.
"""

from .generator import ObjCGenerator, ObjCOptions

__all__ = ["ObjCGenerator", "ObjCOptions", "generate_objc_code"]


def generate_objc_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Objective-C classes for ``data``."""
    return ObjCGenerator(options).generate(data, root_name)
