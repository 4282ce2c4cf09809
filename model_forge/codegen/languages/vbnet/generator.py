"""
VB.NET code generator implementation.

Generates classes with auto-implemented properties inside a module,
annotated for Newtonsoft.Json where the property name differs from the key.
"""

from dataclasses import dataclass
from typing import Dict, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_pascal_case
from ...core.schema import FieldType, Schema, TypeInfo

# Visual Basic keywords are case-insensitive
VB_KEYWORDS = {
    "addhandler", "alias", "and", "andalso", "as", "boolean", "byref", "byte",
    "byval", "call", "case", "catch", "cbool", "char", "class", "const",
    "continue", "date", "decimal", "declare", "default", "delegate", "dim",
    "do", "double", "each", "else", "elseif", "end", "enum", "erase", "error",
    "event", "exit", "false", "finally", "for", "friend", "function", "get",
    "gettype", "global", "goto", "handles", "if", "implements", "imports",
    "in", "inherits", "integer", "interface", "is", "let", "lib", "like",
    "long", "loop", "me", "mod", "module", "mybase", "myclass", "namespace",
    "new", "next", "not", "nothing", "object", "of", "on", "operator",
    "option", "optional", "or", "orelse", "overloads", "overridable",
    "overrides", "paramarray", "partial", "private", "property", "protected",
    "public", "raiseevent", "readonly", "redim", "rem", "removehandler",
    "resume", "return", "select", "set", "shadows", "shared", "short",
    "single", "static", "step", "stop", "string", "structure", "sub",
    "synclock", "then", "throw", "to", "true", "try", "typeof", "using",
    "variant", "wend", "when", "while", "with", "withevents", "writeonly",
    "xor",
}


@dataclass
class VBNetOptions(GeneratorOptions):
    """Options for VB.NET generation."""

    module_name: str = "DataModels"
    json_annotations: bool = True
    pascal_case: bool = True


def escape_identifier(name: str) -> str:
    """Bracket a reserved word: ``End`` -> ``[End]``."""
    if name.lower() in VB_KEYWORDS:
        return f"[{name}]"
    return name


class VBNetGenerator(CodeGenerator):
    """Code generator for VB.NET classes."""

    label = "VB.NET"
    options_class = VBNetOptions

    @property
    def language_name(self) -> str:
        return "vbnet"

    @property
    def file_extension(self) -> str:
        return ".vb"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        all_code = "\n\n".join(
            self._render_class(schema, class_names) for schema in reversed(shapes)
        )

        imports = []
        if "<JsonProperty" in all_code:
            imports.append("Imports Newtonsoft.Json")
        if "List(Of" in all_code:
            imports.append("Imports System.Collections.Generic")

        indented = "\n".join(f"    {line}" if line else "" for line in all_code.split("\n"))
        header = "\n".join(imports) + "\n\n" if imports else ""
        return f"{header}Public Module {self.options.module_name}\n\n{indented}\n\nEnd Module\n"

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if info.type == FieldType.DATETIME:
            return "Date?"
        if info.type == FieldType.STRING:
            return "String"
        if info.type == FieldType.INTEGER:
            return "Integer?"
        if info.type == FieldType.FLOAT:
            return "Double?"
        if info.type == FieldType.BOOLEAN:
            return "Boolean?"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            element = "Object" if info.element is None else self._type(info.element, class_names)
            return f"List(Of {element.rstrip('?')})"
        return "Object"

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        properties = []
        for field in schema.fields:
            name = to_pascal_case(field.name) if self.options.pascal_case else field.name
            lines = []
            if self.options.json_annotations and name != field.name:
                lines.append(f'    <JsonProperty("{field.name}")>')
            lines.append(
                f"    Public Property {escape_identifier(name)} As {self._type(field.type_info, class_names)}"
            )
            properties.append("\n".join(lines))

        body = "\n\n".join(properties)
        return f"Public Class {class_names[schema.name]}\n" + (f"{body}\n" if body else "") + "End Class"
