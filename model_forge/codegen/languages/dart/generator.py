"""
Dart code generator implementation.

Generates Flutter-style model classes with ``fromJson`` factories,
``toJson`` maps and optional ``toString``/``copyWith`` members.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_camel_case, to_pascal_case
from ...core.schema import Field, FieldType, Schema, TypeInfo

PRIMITIVE_TYPES = {"String", "int", "double", "bool", "dynamic"}


@dataclass
class DartOptions(GeneratorOptions):
    """Options for Dart generation."""

    final_fields: bool = True
    nullable_fields: bool = True
    required_fields: bool = False
    copy_with: bool = False
    to_string: bool = False
    to_json: bool = True
    from_json: bool = True
    default_values: bool = False
    support_date_time: bool = False
    camel_case_fields: bool = True
    use_values_as_defaults: bool = False

    def __post_init__(self):
        # Required named parameters cannot also be nullable
        if self.required_fields:
            self.nullable_fields = False


class DartGenerator(CodeGenerator):
    """Code generator for Dart model classes."""

    label = "Dart"
    options_class = DartOptions
    invalid_input_message = "Invalid JSON object provided."
    allow_empty = True

    @property
    def language_name(self) -> str:
        return "dart"

    @property
    def file_extension(self) -> str:
        return ".dart"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        return "\n".join(self._render_class(schema, class_names) for schema in shapes)

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if info.type == FieldType.DATETIME:
            return "DateTime" if self.options.support_date_time else "String"
        if info.type == FieldType.STRING:
            return "String"
        if info.type == FieldType.INTEGER:
            return "int"
        if info.type == FieldType.FLOAT:
            return "double"
        if info.type == FieldType.BOOLEAN:
            return "bool"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return "List<dynamic>"
            return f"List<{self._type(info.element, class_names)}>"
        return "dynamic"

    def _field_name(self, field: Field) -> str:
        if self.options.camel_case_fields:
            return to_camel_case(field.name)
        return field.name

    def _default_value(self, dart_type: str, value: Any) -> str:
        if self.options.use_values_as_defaults:
            if value is None:
                return "null"
            if dart_type == "String":
                escaped = str(value).replace("'", "\\'")
                return f"'{escaped}'"
            if dart_type == "DateTime":
                return f"DateTime.parse('{value}')"
            if isinstance(value, list):
                return "const []"
            if isinstance(value, dict):
                return f"{dart_type}()"
            if isinstance(value, bool):
                return "true" if value else "false"
            return str(value)

        if dart_type == "dynamic":
            return "null"
        if dart_type.startswith("List"):
            return "const []"
        defaults = {
            "String": "''",
            "int": "0",
            "double": "0.0",
            "bool": "false",
            "DateTime": "DateTime.now()",
        }
        return defaults.get(dart_type, f"{dart_type}()")

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        class_name = class_names[schema.name]
        nested_classes = set(class_names.values())
        fields = [
            (field, self._field_name(field), self._type(field.type_info, class_names))
            for field in schema.fields
        ]

        nullable = "?" if self.options.nullable_fields else ""
        final = "final " if self.options.final_fields else ""

        sections = []
        if fields:
            sections.append(
                [
                    f"  {final}{dart_type}{'' if dart_type == 'dynamic' else nullable} {name};"
                    for _, name, dart_type in fields
                ]
            )
            required = "required " if self.options.required_fields else ""
            sections.append(
                [f"  {class_name}({{"]
                + [f"    {required}this.{name}," for _, name, _ in fields]
                + ["  });"]
            )
        else:
            sections.append([f"  {class_name}();"])

        if self.options.from_json:
            sections.append(self._from_json(class_name, fields, nested_classes))
        if self.options.to_json:
            sections.append(self._to_json(fields, nested_classes))
        if self.options.to_string:
            sections.append(self._to_string(class_name, fields))
        if self.options.copy_with:
            sections.append(self._copy_with(class_name, fields))

        lines = [f"class {class_name} {{"]
        for index, section in enumerate(sections):
            if index:
                lines.append("")
            lines.extend(section)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _from_json(self, class_name: str, fields, nested_classes) -> List[str]:
        defaults = self.options.default_values
        lines = [
            f"  factory {class_name}.fromJson(Map<String, dynamic> json) {{",
            f"    return {class_name}(",
        ]
        for field, name, dart_type in fields:
            key = f"json['{field.name}']"
            fallback = self._default_value(dart_type, field.value) if defaults else "null"

            if dart_type == "DateTime":
                if defaults:
                    logic = f"{key} != null ? DateTime.parse({key}) : {fallback}"
                else:
                    logic = f"{key} != null ? DateTime.tryParse({key}) : null"
            elif dart_type.startswith("List<"):
                item_type = dart_type[5:-1]
                list_fallback = "const []" if defaults else "null"
                if item_type in nested_classes:
                    logic = (
                        f"{key} != null ? List<{item_type}>.from("
                        f"{key}.map((x) => {item_type}.fromJson(x))) : {list_fallback}"
                    )
                else:
                    logic = f"{key} != null ? List<{item_type}>.from({key}) : {list_fallback}"
            elif dart_type in nested_classes:
                logic = f"{key} != null ? {dart_type}.fromJson({key}) : {fallback}"
            elif defaults:
                logic = f"{key} ?? {fallback}"
            else:
                logic = key

            lines.append(f"      {name}: {logic},")

        lines.extend(["    );", "  }"])
        return lines

    def _to_json(self, fields, nested_classes) -> List[str]:
        safe = "?" if self.options.nullable_fields else ""
        lines = ["  Map<String, dynamic> toJson() {", "    return {"]
        for field, name, dart_type in fields:
            value = name
            if dart_type == "DateTime":
                value = f"{name}{safe}.toIso8601String()"
            elif dart_type.startswith("List<") and dart_type[5:-1] in nested_classes:
                value = f"{name}{safe}.map((x) => x.toJson()).toList()"
            elif dart_type in nested_classes:
                value = f"{name}{safe}.toJson()"
            lines.append(f"      '{field.name}': {value},")
        lines.extend(["    };", "  }"])
        return lines

    def _to_string(self, class_name: str, fields) -> List[str]:
        parts = ", ".join(f"{name}: ${name}" for _, name, _ in fields)
        return [
            "  @override",
            "  String toString() {",
            f"    return '{class_name}({parts})';",
            "  }",
        ]

    def _copy_with(self, class_name: str, fields) -> List[str]:
        if not fields:
            return [f"  {class_name} copyWith() {{", f"    return {class_name}();", "  }"]

        lines = [f"  {class_name} copyWith({{"]
        for _, name, dart_type in fields:
            optional = "" if dart_type == "dynamic" else "?"
            lines.append(f"    {dart_type}{optional} {name},")
        lines.append("  }) {")
        lines.append(f"    return {class_name}(")
        for _, name, _ in fields:
            lines.append(f"      {name}: {name} ?? this.{name},")
        lines.extend(["    );", "  }"])
        return lines
