"""
C# code generator implementation.

Generates records or classes with nullable auto-properties and
System.Text.Json annotations, wrapped in a namespace block.
"""

from dataclasses import dataclass
from typing import Dict, List

from ...core.config import ConfigError, GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_pascal_case
from ...core.schema import FieldType, Schema, TypeInfo

PROPERTY_SETTERS = ("init", "set")
LIST_TYPES = ("List<T>", "T[]")


@dataclass
class CSharpOptions(GeneratorOptions):
    """Options for C# generation."""

    namespace: str = "DataModels"
    use_records: bool = True
    property_setters: str = "init"
    json_annotations: bool = True
    list_type: str = "List<T>"

    def __post_init__(self):
        if self.property_setters not in PROPERTY_SETTERS:
            raise ConfigError(
                f"Invalid property_setters: {self.property_setters}. "
                f"Expected one of: {', '.join(PROPERTY_SETTERS)}"
            )
        if self.list_type not in LIST_TYPES:
            raise ConfigError(
                f"Invalid list_type: {self.list_type}. "
                f"Expected one of: {', '.join(LIST_TYPES)}"
            )


class CSharpGenerator(CodeGenerator):
    """Code generator for C# records and classes."""

    label = "C#"
    options_class = CSharpOptions

    @property
    def language_name(self) -> str:
        return "csharp"

    @property
    def file_extension(self) -> str:
        return ".cs"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        classes = [
            self._indent(self._render_class(schema, class_names))
            for schema in reversed(shapes)
        ]

        lines = ["using System;", "using System.Collections.Generic;"]
        if self.options.json_annotations:
            lines.append("using System.Text.Json.Serialization;")
        lines.extend(["", f"namespace {self.options.namespace}", "{"])

        return "\n".join(lines) + "\n" + "\n\n".join(classes) + "\n}\n"

    def _indent(self, code: str) -> str:
        return "\n".join(f"    {line}" if line else "" for line in code.split("\n")).rstrip()

    def _base_type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        """Type without the trailing nullable marker."""
        if info.type == FieldType.DATETIME:
            return "DateTime"
        if info.type == FieldType.STRING:
            return "string"
        if info.type == FieldType.INTEGER:
            return "int"
        if info.type == FieldType.FLOAT:
            return "double"
        if info.type == FieldType.BOOLEAN:
            return "bool"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            element = "object" if info.element is None else self._base_type(info.element, class_names)
            if self.options.list_type == "List<T>":
                return f"List<{element}>"
            return f"{element}[]"
        return "object"

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        declaration = "record" if self.options.use_records else "class"
        properties = []
        for field in schema.fields:
            lines = []
            if self.options.json_annotations:
                lines.append(f'    [JsonPropertyName("{field.name}")]')
            csharp_type = self._base_type(field.type_info, class_names)
            lines.append(
                f"    public {csharp_type}? {to_pascal_case(field.name)} "
                f"{{ get; {self.options.property_setters}; }}"
            )
            properties.append("\n".join(lines))

        body = "\n\n".join(properties)
        header = f"public {declaration} {class_names[schema.name]}\n{{\n"
        return header + (body + "\n" if body else "") + "}"
