"""
Scala code generator implementation.

Generates case classes named after their path in the document
(``UserData`` + ``profile`` -> ``UserDataProfile``).
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_pascal_case, to_snake_case
from ...core.schema import FieldType, Schema, TypeInfo, qualified_nested_name

SCALA_KEYWORDS = {
    "abstract", "case", "catch", "class", "def", "do", "else", "extends",
    "false", "final", "finally", "for", "forSome", "if", "implicit", "import",
    "lazy", "match", "new", "null", "object", "override", "package",
    "private", "protected", "return", "sealed", "super", "this", "throw",
    "trait", "true", "try", "type", "val", "var", "while", "with", "yield",
}


def to_lower_camel_case(name: str) -> str:
    """``user_name`` -> ``userName``; other characters are left alone."""
    return re.sub(r"_([a-z])", lambda m: m.group(1).upper(), name)


@dataclass
class ScalaOptions(GeneratorOptions):
    """Options for Scala generation."""

    use_snake_case: bool = True
    include_types: bool = True
    default_values: bool = False
    # case class with fields; a bare class otherwise
    include_struct: bool = True


class ScalaGenerator(CodeGenerator):
    """Code generator for Scala case classes."""

    label = "Scala"
    options_class = ScalaOptions
    invalid_input_message = "Invalid JSON object"
    allow_empty = True

    @property
    def language_name(self) -> str:
        return "scala"

    @property
    def file_extension(self) -> str:
        return ".scala"

    def name_nested(self, parent: Schema, key: str, is_array_item: bool) -> str:
        return qualified_nested_name(parent, key, is_array_item)

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        return "\n\n".join(
            self._render_class(schema, class_names) for schema in reversed(shapes)
        )

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return "String"
        if info.type == FieldType.INTEGER:
            return "Int"
        if info.type == FieldType.FLOAT:
            return "Float"
        if info.type == FieldType.BOOLEAN:
            return "Boolean"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return "List[Any]"
            return f"List[{self._type(info.element, class_names)}]"
        return "Any"

    def _field_name(self, key: str) -> str:
        name = to_snake_case(key) if self.options.use_snake_case else to_lower_camel_case(key)
        if name in SCALA_KEYWORDS:
            return f"`{name}`"
        return name

    def _default(self, info: TypeInfo) -> str:
        value = info.sample
        if info.type == FieldType.BOOLEAN:
            return "true" if value else "false"
        if info.type == FieldType.INTEGER:
            return str(int(value))
        if info.type == FieldType.FLOAT:
            return f"{value}f"
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return json.dumps(value)
        if info.type == FieldType.ARRAY:
            return "List()"
        return "null"

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        class_name = class_names[schema.name]
        if not self.options.include_struct:
            return f"class {class_name}()"

        params = []
        for field in schema.fields:
            param = f"val {self._field_name(field.name)}"
            if self.options.include_types:
                param += f": {self._type(field.type_info, class_names)}"
            if self.options.default_values:
                param += f" = {self._default(field.type_info)}"
            params.append(param)

        if not params:
            return f"case class {class_name}()"
        joined = ",\n  ".join(params)
        return f"case class {class_name}(\n  {joined}\n)"
