"""
Elixir code generator implementation.

Generates one module per shape with ``@type`` attributes and a
``defstruct`` whose defaults are ``nil``.
"""

import json
from dataclasses import dataclass
from typing import Any, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_camel_case, to_pascal_case, to_snake_case
from ...core.schema import FieldType, Schema, qualified_nested_name

MODULE_TEMPLATE = """defmodule {{ module_name }} do
{% if include_types and fields %}
{% for field in fields %}
  @type {{ field.name }} :: {{ field.type }}
{% endfor %}
{% if include_struct %}

{% endif %}
{% endif %}
{% if include_struct and fields %}
  defstruct [
{% for field in fields %}
    {{ field.name }}: nil{{ "," if not loop.last else "" }}{% if field.comment %} # default: {{ field.comment }}{% endif %}

{% endfor %}
  ]
{% endif %}
end"""

ELIXIR_TYPES = {
    FieldType.INTEGER: "integer",
    FieldType.FLOAT: "float",
    FieldType.BOOLEAN: "boolean",
    FieldType.STRING: "String.t()",
    FieldType.DATETIME: "String.t()",
    FieldType.ARRAY: "list",
    FieldType.OBJECT: "map",
}


@dataclass
class ElixirOptions(GeneratorOptions):
    """Options for Elixir generation."""

    use_snake_case: bool = True
    include_types: bool = True
    # Sample values shown as comments on the struct fields
    default_values: bool = False
    include_struct: bool = True


class ElixirGenerator(CodeGenerator):
    """Code generator for Elixir structs."""

    label = "Elixir"
    options_class = ElixirOptions
    invalid_input_message = "Invalid JSON object"
    allow_empty = True
    templates = {"module.ex.j2": MODULE_TEMPLATE}

    @property
    def language_name(self) -> str:
        return "elixir"

    @property
    def file_extension(self) -> str:
        return ".ex"

    def name_nested(self, parent: Schema, key: str, is_array_item: bool) -> str:
        return qualified_nested_name(parent, key, is_array_item)

    def render(self, shapes: List[Schema], root_name: str) -> str:
        return "\n\n".join(self._render_module(schema) for schema in reversed(shapes))

    def _comment(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return "nil"
        if isinstance(value, str):
            return json.dumps(value)
        if isinstance(value, (int, float)):
            return str(value)
        return json.dumps(value)

    def _render_module(self, schema: Schema) -> str:
        fields = []
        for field in schema.fields:
            name = (
                to_snake_case(field.name)
                if self.options.use_snake_case
                else to_camel_case(field.name)
            )
            fields.append(
                {
                    "name": name,
                    "type": ELIXIR_TYPES.get(field.type, "any"),
                    "comment": self._comment(field.value) if self.options.default_values else "",
                }
            )

        context = {
            "module_name": to_pascal_case(schema.name),
            "fields": fields,
            "include_types": self.options.include_types,
            "include_struct": self.options.include_struct,
        }
        return self.template_engine.render_template("module.ex.j2", context)
