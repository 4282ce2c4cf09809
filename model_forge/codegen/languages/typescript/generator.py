"""
TypeScript code generator implementation.

Generates exported ``type`` aliases or ``interface`` declarations.
"""

from dataclasses import dataclass
from typing import List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_camel_case, to_pascal_case
from ...core.schema import FieldType, Schema, TypeInfo


@dataclass
class TypeScriptOptions(GeneratorOptions):
    """Options for TypeScript generation."""

    use_type: bool = True
    optional_fields: bool = True
    readonly_fields: bool = True
    allow_nulls: bool = False


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript type declarations."""

    label = "TypeScript"
    options_class = TypeScriptOptions

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        return "\n".join(self._render_type(schema) for schema in reversed(shapes))

    def _render_type(self, schema: Schema) -> str:
        name = to_pascal_case(schema.name)
        readonly = "readonly " if self.options.readonly_fields else ""
        optional = "?" if self.options.optional_fields else ""

        if self.options.use_type:
            lines = [f"export type {name} = {{"]
        else:
            lines = [f"export interface {name} {{"]

        for field in schema.fields:
            lines.append(
                f"    {readonly}{to_camel_case(field.name)}{optional}: "
                f"{self._field_type(field.type_info)};"
            )

        lines.append("};" if self.options.use_type else "}")
        return "\n".join(lines) + "\n"

    def _field_type(self, info: TypeInfo) -> str:
        return self._nullable(self._type(info))

    def _nullable(self, ts_type: str) -> str:
        # A null sample is already typed as the null literal
        if self.options.allow_nulls and ts_type != "null":
            return f"{ts_type} | null"
        return ts_type

    def _type(self, info: TypeInfo) -> str:
        if info.type == FieldType.NULL:
            return "null"
        if info.type == FieldType.DATETIME:
            return "Date | string"
        if info.type == FieldType.STRING:
            return "string"
        if info.type in (FieldType.INTEGER, FieldType.FLOAT):
            return "number"
        if info.type == FieldType.BOOLEAN:
            return "boolean"
        if info.type == FieldType.OBJECT:
            return to_pascal_case(info.shape.name)
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return "any[]"
            element = self._nullable(self._type(info.element))
            if " " in element:
                return f"({element})[]"
            return f"{element}[]"
        return "any"
