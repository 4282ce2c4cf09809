"""
JavaScript code generator implementation.

Generates ES2020 classes with JSDoc field types, a constructor that
hydrates nested objects and dates, and ``fromJSON``/``toJSON`` helpers.
"""

import json
import re
from dataclasses import dataclass
from typing import Dict, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import natural_sort_key, to_camel_case, to_pascal_case
from ...core.schema import Field, FieldType, Schema, TypeInfo

IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass
class JavaScriptOptions(GeneratorOptions):
    """Options for JavaScript generation."""

    include_js_doc: bool = True
    include_from_to_json: bool = True
    convert_dates: bool = True

    aliases = {"includeJSDoc": "include_js_doc", "include_jsdoc": "include_js_doc"}


def _member(key: str) -> str:
    """Property access on ``data`` for a JSON key."""
    if IDENTIFIER.match(key):
        return f"data.{key}"
    return f"data[{json.dumps(key)}]"


class JavaScriptGenerator(CodeGenerator):
    """Code generator for JavaScript classes."""

    label = "JavaScript"
    options_class = JavaScriptOptions
    invalid_input_message = "Invalid JSON object provided."
    allow_empty = True
    sort_keys = True

    @property
    def language_name(self) -> str:
        return "javascript"

    @property
    def file_extension(self) -> str:
        return ".js"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        return "\n".join(
            self._render_class(schema, class_names) for schema in reversed(shapes)
        )

    def _is_date(self, info: TypeInfo) -> bool:
        return self.options.convert_dates and info.type == FieldType.DATETIME

    def _jsdoc_type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if self._is_date(info):
            return "Date"
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return "string"
        if info.type in (FieldType.INTEGER, FieldType.FLOAT):
            return "number"
        if info.type == FieldType.BOOLEAN:
            return "boolean"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return "any[]"
            return f"{self._jsdoc_type(info.element, class_names)}[]"
        return "any"

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        class_name = class_names[schema.name]
        fields = sorted(
            ((field, to_camel_case(field.name)) for field in schema.fields),
            key=lambda entry: natural_sort_key(entry[1]),
        )

        sections = []
        if self.options.include_js_doc and fields:
            sections.append(
                "\n\n".join(
                    f"    /** @type {{{self._jsdoc_type(field.type_info, class_names)}|null}} */\n"
                    f"    {name};"
                    for field, name in fields
                )
            )

        if fields:
            assignments = "\n".join(
                f"        this.{name} = {self._assignment(field, class_names)};"
                for field, name in fields
            )
            sections.append(f"    constructor(data = {{}}) {{\n{assignments}\n    }}")
        else:
            sections.append("    constructor(data = {}) {}")

        if self.options.include_from_to_json:
            sections.append(
                f"    static fromJSON(data) {{\n"
                f"        return new {class_name}(data);\n"
                f"    }}"
            )
            sections.append(self._to_json(schema, fields))

        return f"class {class_name} {{\n" + "\n\n".join(sections) + "\n}\n"

    def _assignment(self, field: Field, class_names: Dict[str, str]) -> str:
        info = field.type_info
        member = _member(field.name)
        if self._is_date(info):
            return f"{member} ? new Date({member}) : null"
        if info.is_object_array:
            item_class = class_names[info.element.shape.name]
            return f"Array.isArray({member}) ? {member}.map(item => new {item_class}(item)) : null"
        if info.is_object:
            return f"{member} ? new {class_names[info.shape.name]}({member}) : null"
        return f"{member} ?? null"

    def _to_json(self, schema: Schema, fields) -> str:
        if not fields:
            return "    toJSON() {\n        return {};\n    }"

        entries = []
        for field, name in sorted(fields, key=lambda entry: natural_sort_key(entry[0].name)):
            info = field.type_info
            value = f"this.{name}"
            if self._is_date(info):
                value = f"this.{name}?.toISOString()"
            elif info.is_object_array:
                value = f"this.{name}?.map(item => item.toJSON())"
            elif info.is_object:
                value = f"this.{name}?.toJSON()"
            key = field.name.replace("\\", "\\\\").replace("'", "\\'")
            entries.append(f"            '{key}': {value},")

        return (
            "    toJSON() {\n        return {\n"
            + "\n".join(entries)
            + "\n        };\n    }"
        )
