"""Model Forge: generate typed model declarations from a JSON sample."""

from .codegen import (
    GenerationResult,
    GeneratorError,
    InvalidInputError,
    RegistryError,
    generate_code,
    generate_from_json,
    generate_model_code,
    get_generator,
    list_supported_languages,
)
from .logging_config import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorError",
    "InvalidInputError",
    "RegistryError",
    "generate_code",
    "generate_from_json",
    "generate_model_code",
    "get_generator",
    "list_supported_languages",
    "get_logger",
    "setup_logging",
    "__version__",
]
