"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Type

from ...logging_config import get_logger
from .config import GeneratorOptions
from .schema import (
    DiscoveryError,
    FieldType,
    Schema,
    discover_shapes,
    flat_nested_name,
)
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidInputError(GeneratorError):
    """Raised when the input is not a JSON object a generator accepts."""

    pass


class CodeGenerator(ABC):
    """
    Abstract base class for all code generators.

    A generator is configured once with its options and may then be called
    any number of times; no state is carried from one ``generate`` call to
    the next.
    """

    #: Human readable language name
    label: str = ""

    #: Options dataclass for this language
    options_class: Type[GeneratorOptions] = GeneratorOptions

    #: Exact message raised for rejected input
    invalid_input_message: str = "Invalid or empty JSON object provided."

    #: Whether ``{}`` produces a degenerate model instead of an error
    allow_empty: bool = False

    #: Visit JSON keys alphabetically instead of in insertion order
    sort_keys: bool = False

    #: Templates registered with this generator's engine
    templates: Dict[str, str] = {}

    def __init__(self, options: Optional[Any] = None):
        """
        Initialize generator with optional configuration.

        Args:
            options: Options instance or a dict of option values
        """
        self.options = self.options_class.from_dict(options)
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go', '.py')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.templates)
        return self._template_engine

    def name_nested(self, parent: Schema, key: str, is_array_item: bool) -> str:
        """
        Canonical name of a nested shape.

        Defaults to flat names (``profile`` -> ``Profile``, ``posts`` ->
        ``Post``); generators that qualify names by their parent override it.
        """
        return flat_nested_name(parent, key, is_array_item)

    def validate_input(self, data: Any) -> None:
        """
        Reject input this generator cannot model.

        Raises:
            InvalidInputError: With the language's exact message
        """
        if not isinstance(data, dict):
            raise InvalidInputError(self.invalid_input_message)
        if not data and not self.allow_empty:
            raise InvalidInputError(self.invalid_input_message)

    def discover(self, data: Dict[str, Any], root_name: str) -> List[Schema]:
        """Run shape discovery with this generator's key order and naming."""
        try:
            shapes = discover_shapes(
                data,
                root_name,
                sort_keys=self.sort_keys,
                name_nested=self.name_nested,
                max_depth=self.options.max_depth,
            )
        except DiscoveryError as e:
            raise GeneratorError(str(e)) from e

        logger.debug(
            f"{self.language_name}: discovered {len(shapes)} shapes: "
            f"{[shape.name for shape in shapes]}"
        )
        return shapes

    def generate(self, data: Any, root_name: str = "DataModel") -> str:
        """
        Generate model code for a parsed JSON object.

        Args:
            data: Parsed JSON value; must be an object
            root_name: Name of the root model

        Returns:
            Generated source code
        """
        self.validate_input(data)
        shapes = self.discover(data, root_name)
        return self.render(shapes, root_name)

    @abstractmethod
    def render(self, shapes: List[Schema], root_name: str) -> str:
        """
        Render discovered shapes as source code.

        Args:
            shapes: Shapes in discovery order, root first
            root_name: Name of the root model

        Returns:
            Generated code as a string
        """
        pass

    def validate_schemas(self, shapes: List[Schema]) -> List[str]:
        """
        Validate schemas for basic structural issues.

        Args:
            shapes: Discovered shapes

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for schema in shapes:
            if not schema.fields:
                warnings.append(f"Schema '{schema.name}' has no fields")

            for field in schema.fields:
                if field.type == FieldType.NULL:
                    warnings.append(
                        f"Field {schema.name}.{field.name} is null; its type cannot be inferred"
                    )
                elif field.type_info.is_empty_array:
                    warnings.append(
                        f"Array field {schema.name}.{field.name} is empty; element type is unknown"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """Strip trailing whitespace from every line."""
        return "\n".join(line.rstrip() for line in code.split("\n"))


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, data: Any, root_name: str = "DataModel"
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        data: Parsed JSON object
        root_name: Name of the root model

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        generator.validate_input(data)
        shapes = generator.discover(data, root_name)
        warnings = generator.validate_schemas(shapes)
        code = generator.format_code(generator.render(shapes, root_name))

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "schema_count": len(shapes),
            "root_schema": root_name,
            "schemas": [shape.name for shape in shapes],
        }

        return GenerationResult(code, warnings, metadata)

    except GeneratorError as e:
        return GenerationResult.error(str(e), exception=e)
    except RecursionError as e:
        return GenerationResult.error("JSON nesting is too deep to generate code", exception=e)
    except Exception as e:
        logger.exception("Unexpected failure during code generation")
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
