"""
Go code generator module.

Generates Go structs with JSON tags from a JSON sample.
"""

from .config import GoOptions, WEB_API_OPTIONS, LIBRARY_OPTIONS
from .generator import GoGenerator
from .naming import to_go_name
from .types import GoType, GoTypeMapper

__all__ = [
    "GoGenerator",
    "GoOptions",
    "GoType",
    "GoTypeMapper",
    "to_go_name",
    "create_web_api_generator",
    "create_library_generator",
    "generate_go_code",
]


def create_web_api_generator() -> GoGenerator:
    """Generator for web API models: package ``models``, pointer fields."""
    return GoGenerator(WEB_API_OPTIONS)


def create_library_generator() -> GoGenerator:
    """Generator for reusable libraries: package ``types``, plain value fields."""
    return GoGenerator(LIBRARY_OPTIONS)


def generate_go_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate Go structs for ``data``."""
    return GoGenerator(options).generate(data, root_name)
