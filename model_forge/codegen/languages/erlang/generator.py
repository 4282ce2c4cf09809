"""
Erlang code generator implementation.

Generates ``-record`` definitions, one per discovered shape, with the
inferred field types listed as EDoc-style comments.
"""

import re
from dataclasses import dataclass
from typing import Any, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_pascal_case, to_snake_case
from ...core.schema import FieldType, Schema, qualified_nested_name

RECORD_TEMPLATE = """%% Generated module: {{ module_name }}
{% for field in fields if include_types %}
%% @type {{ field.name }} :: {{ field.type }}
{% endfor %}
{% if fields %}
-record({{ record_name }}, {
    {{ fields | map(attribute="declaration") | join(",\\n    ") }}
}).
{% else %}
-record({{ record_name }}, {}).
{% endif %}
"""

ERLANG_TYPES = {
    FieldType.INTEGER: "integer()",
    FieldType.FLOAT: "float()",
    FieldType.BOOLEAN: "boolean()",
    FieldType.STRING: "string()",
    FieldType.DATETIME: "string()",
    FieldType.ARRAY: "list()",
    FieldType.OBJECT: "map()",
}


def to_erlang_camel_case(name: str) -> str:
    return re.sub(r"_([a-z])", lambda m: m.group(1).upper(), name)


@dataclass
class ErlangOptions(GeneratorOptions):
    """Options for Erlang generation."""

    use_snake_case: bool = True
    include_types: bool = True
    include_defaults: bool = False


class ErlangGenerator(CodeGenerator):
    """Code generator for Erlang records."""

    label = "Erlang"
    options_class = ErlangOptions
    invalid_input_message = "Invalid JSON object"
    allow_empty = True
    templates = {"record.erl.j2": RECORD_TEMPLATE}

    @property
    def language_name(self) -> str:
        return "erlang"

    @property
    def file_extension(self) -> str:
        return ".hrl"

    def name_nested(self, parent: Schema, key: str, is_array_item: bool) -> str:
        return qualified_nested_name(parent, key, is_array_item)

    def _name(self, name: str) -> str:
        if self.options.use_snake_case:
            return to_snake_case(name)
        return to_erlang_camel_case(name)

    def _default(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace("'", "\\'")
            return f"'{escaped}'"
        return "undefined"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        return "\n".join(self._render_record(schema) for schema in reversed(shapes))

    def _render_record(self, schema: Schema) -> str:
        fields = []
        for field in schema.fields:
            name = self._name(field.name)
            declaration = name
            if self.options.include_defaults:
                declaration = f"{name} = {self._default(field.value)}"
            fields.append(
                {
                    "name": name,
                    "type": ERLANG_TYPES.get(field.type, "term()"),
                    "declaration": declaration,
                }
            )

        record_name = self._name(schema.name)
        if self.options.use_snake_case:
            record_name = record_name.lower()

        context = {
            "module_name": to_pascal_case(schema.name),
            "record_name": record_name,
            "fields": fields,
            "include_types": self.options.include_types,
        }
        return self.template_engine.render_template("record.erl.j2", context)
