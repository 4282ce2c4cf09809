"""
Rust code generator module.

Generates serde-annotated structs from a JSON sample.
"""

from .generator import RustGenerator, RustOptions

__all__ = ["RustGenerator", "RustOptions", "generate_rust_code"]


def generate_rust_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Rust structs for ``data``."""
    return RustGenerator(options).generate(data, root_name)
