"""
Go-specific configuration.
"""

from dataclasses import dataclass

from ...core.config import GeneratorOptions


@dataclass
class GoOptions(GeneratorOptions):
    """Options for Go struct generation."""

    # Pointer fields distinguish "absent" from the zero value
    use_pointers: bool = True
    package_name: str = "main"
    use_array_of_pointers: bool = False


# Presets for common use cases
WEB_API_OPTIONS = {
    "package_name": "models",
    "use_pointers": True,
}

LIBRARY_OPTIONS = {
    "package_name": "types",
    "use_pointers": False,
}
