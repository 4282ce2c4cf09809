"""
Go code generator implementation.

Generates Go structs with JSON tags from a JSON sample.
"""

from typing import Dict, List, Any

from ....logging_config import get_logger
from ...core.generator import CodeGenerator
from ...core.naming import natural_sort_key
from ...core.schema import Schema
from .config import GoOptions
from .naming import to_go_name, validate_go_package_name
from .types import GoType, GoTypeMapper

logger = get_logger(__name__)

STRUCT_TEMPLATE = """type {{ struct_name }} struct {
{% for field in fields %}
\t{{ field.name }} {{ field.type }} `json:"{{ field.json_name }},omitempty"`
{% endfor %}
}
"""

IMPORTS_TEMPLATE = """{% if imports | length == 1 %}
import "{{ imports[0] }}"
{% else %}
import (
{% for imp in imports %}
\t"{{ imp }}"
{% endfor %}
)
{% endif %}
"""


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    label = "Go"
    options_class = GoOptions
    sort_keys = True
    templates = {"struct.go.j2": STRUCT_TEMPLATE, "imports.go.j2": IMPORTS_TEMPLATE}

    def __init__(self, options=None):
        """Initialize Go generator with configuration."""
        super().__init__(options)
        self.type_mapper = GoTypeMapper(self.options)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        """Generate complete Go code; nested structs precede the root."""
        struct_definitions = []
        go_types_used: List[GoType] = []

        for schema in reversed(shapes):
            struct_code, go_types = self.generate_single_schema(schema)
            struct_definitions.append(struct_code)
            go_types_used.extend(go_types)

        parts = [f"package {self.options.package_name}\n\n"]

        imports = self.type_mapper.get_all_imports(go_types_used)
        logger.debug(f"Go imports needed: {imports}")
        if imports:
            parts.append(
                self.template_engine.render_template(
                    "imports.go.j2", {"imports": imports}
                )
            )
            parts.append("\n")

        parts.append("\n".join(struct_definitions))
        return "".join(parts)

    def generate_single_schema(self, schema: Schema) -> tuple[str, List[GoType]]:
        """Generate the Go struct for one schema plus the types it uses."""
        field_data_list: List[Dict[str, Any]] = []
        go_types: List[GoType] = []

        for field in schema.fields:
            go_type = self.type_mapper.map_field_type(field)
            go_types.append(go_type)
            field_data_list.append(
                {
                    "name": to_go_name(field.name),
                    "type": go_type.name,
                    "json_name": field.name,
                }
            )

        field_data_list.sort(key=lambda data: natural_sort_key(data["name"]))

        template_context = {
            "struct_name": to_go_name(schema.name),
            "fields": field_data_list,
        }
        code = self.template_engine.render_template("struct.go.j2", template_context)
        return code, go_types

    def validate_schemas(self, shapes: List[Schema]) -> List[str]:
        """Validate schemas for Go generation."""
        warnings = super().validate_schemas(shapes)
        warnings.extend(
            f"Invalid Go package name: {error}"
            for error in validate_go_package_name(self.options.package_name)
        )

        for schema in shapes:
            names = [to_go_name(field.name) for field in schema.fields]
            duplicates = sorted({name for name in names if names.count(name) > 1})
            for name in duplicates:
                warnings.append(f"Struct {to_go_name(schema.name)} has duplicate field {name}")

        return warnings
