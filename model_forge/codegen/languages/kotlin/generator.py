"""
Kotlin code generator implementation.

Generates (data) classes with annotations for kotlinx.serialization, Gson
or Moshi, or with hand-written ``fromJson``/``toJson`` helpers.
"""

from dataclasses import dataclass
from typing import Dict, List

from ...core.config import ConfigError, GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer, NamingCase, to_pascal_case
from ...core.schema import Field, FieldType, Schema, TypeInfo

KOTLIN_KEYWORDS = {
    "as", "break", "class", "continue", "do", "else", "false", "for", "fun",
    "if", "in", "interface", "is", "null", "object", "package", "return",
    "super", "this", "throw", "true", "try", "typealias", "typeof", "val",
    "var", "when", "while",
}

SERIALIZATION_LIBRARIES = ("none", "manual", "gson", "moshi", "kotlinx")

PRIMITIVE_TYPES = {"Any", "String", "Int", "Double", "Boolean", "JsonElement"}

IMPORTS = {
    "@SerializedName": "import com.google.gson.annotations.SerializedName",
    "@Json(name": "import com.squareup.moshi.Json",
    "@Serializable": "import kotlinx.serialization.Serializable",
    "@SerialName": "import kotlinx.serialization.SerialName",
    "JsonElement": "import kotlinx.serialization.json.JsonElement",
    "JsonNull": "import kotlinx.serialization.json.JsonNull",
}


@dataclass
class KotlinOptions(GeneratorOptions):
    """Options for Kotlin generation."""

    use_val: bool = True
    nullable: bool = True
    data_class: bool = True
    default_values: bool = False
    serialization_library: str = "none"
    default_to_null: bool = False

    def __post_init__(self):
        if self.serialization_library not in SERIALIZATION_LIBRARIES:
            raise ConfigError(
                f"Invalid serialization_library: {self.serialization_library}. "
                f"Expected one of: {', '.join(SERIALIZATION_LIBRARIES)}"
            )


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin classes."""

    label = "Kotlin"
    options_class = KotlinOptions

    def __init__(self, options=None):
        super().__init__(options)
        self.sanitizer = NameSanitizer(KOTLIN_KEYWORDS, prefix="`", suffix="`")

    @property
    def language_name(self) -> str:
        return "kotlin"

    @property
    def file_extension(self) -> str:
        return ".kt"

    @property
    def library(self) -> str:
        return self.options.serialization_library

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        all_code = "\n\n".join(self._render_class(schema, class_names) for schema in shapes)

        imports = sorted({line for marker, line in IMPORTS.items() if marker in all_code})
        header = "\n".join(imports) + "\n\n" if imports else ""
        return header + all_code

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return "String"
        if info.type == FieldType.INTEGER:
            return "Int"
        if info.type == FieldType.FLOAT:
            return "Double"
        if info.type == FieldType.BOOLEAN:
            return "Boolean"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return f"List<{self._unknown_type()}>"
            return f"List<{self._type(info.element, class_names)}>"
        return self._unknown_type()

    def _unknown_type(self) -> str:
        return "JsonElement" if self.library == "kotlinx" else "Any"

    def _default_value(self, kotlin_type: str) -> str:
        if kotlin_type.startswith("List"):
            return "emptyList()"
        defaults = {
            "String": '""',
            "Int": "0",
            "Double": "0.0",
            "Boolean": "false",
            "JsonElement": "JsonNull",
            "Any": "Any()",
        }
        return defaults.get(kotlin_type, f"{kotlin_type}()")

    def _field_name(self, field: Field) -> str:
        return self.sanitizer.sanitize_name(field.name, NamingCase.CAMEL_CASE)

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        class_name = class_names[schema.name]
        fields = [
            (field, self._field_name(field), self._type(field.type_info, class_names))
            for field in schema.fields
        ]

        lines = []
        if self.library == "kotlinx":
            lines.append("@Serializable")

        # A data class needs at least one constructor parameter
        if not fields:
            lines.append(f"class {class_name}()")
            return "\n".join(lines)

        class_type = "data class" if self.options.data_class else "class"
        lines.append(f"{class_type} {class_name}(")
        lines.append(",\n".join(self._render_property(*entry) for entry in fields))

        if self.library == "manual":
            lines.append(") {")
            lines.extend(self._render_manual_serialization(class_name, fields, class_names))
            lines.append("}")
        else:
            lines.append(")")

        return "\n".join(lines)

    def _render_property(self, field: Field, name: str, kotlin_type: str) -> str:
        keyword = "val" if self.options.use_val else "var"
        nullable = "?" if self.options.nullable else ""

        default = ""
        if self.options.default_values:
            default = f" = {self._default_value(kotlin_type)}"
        elif self.options.default_to_null and self.options.nullable:
            default = " = null"

        declaration = f"{keyword} {name}: {kotlin_type}{nullable}{default}"

        if self.library == "gson":
            return f'    @SerializedName("{field.name}") {declaration}'
        if self.library == "moshi":
            return f'    @Json(name = "{field.name}") {declaration}'
        if self.library == "kotlinx" and name != field.name:
            return f'    @SerialName("{field.name}")\n    {declaration}'
        return f"    {declaration}"

    def _render_manual_serialization(self, class_name: str, fields, class_names) -> List[str]:
        nested_classes = set(class_names.values())
        nullable = "?" if self.options.nullable else ""

        parse_lines = []
        for field, name, kotlin_type in fields:
            key = field.name
            if kotlin_type.startswith("List<"):
                item_type = kotlin_type[5:-1]
                if item_type in PRIMITIVE_TYPES or item_type not in nested_classes:
                    logic = f'(json["{key}"] as? List<*>)?.mapNotNull {{ it as {item_type} }}'
                else:
                    logic = (
                        f'(json["{key}"] as? List<*>)?.mapNotNull '
                        f"{{ {item_type}.fromJson(it as Map<String, Any>) }}"
                    )
            elif kotlin_type in nested_classes:
                logic = (
                    f'json["{key}"]?.let {{ {kotlin_type}.fromJson(it as Map<String, Any>) }}'
                )
            else:
                logic = f'json["{key}"] as? {kotlin_type}{nullable}'

            if not self.options.nullable:
                logic = f"{logic} ?: {self._default_value(kotlin_type)}"

            parse_lines.append(f"                {name} = {logic}")

        safe_call = "?." if self.options.nullable else "."
        serialize_lines = []
        for field, name, kotlin_type in fields:
            value = name
            if kotlin_type.startswith("List<") and kotlin_type[5:-1] in nested_classes:
                value = f"{name}{safe_call}map {{ it.toJson() }}"
            elif kotlin_type in nested_classes:
                value = f"{name}{safe_call}toJson()"
            serialize_lines.append(f'        map["{field.name}"] = {value}')

        return [
            "    companion object {",
            f"        fun fromJson(json: Map<String, Any>): {class_name} {{",
            f"            return {class_name}(",
            ",\n".join(parse_lines),
            "            )",
            "        }",
            "    }",
            "",
            "    fun toJson(): Map<String, Any?> {",
            "        val map = mutableMapOf<String, Any?>()",
            *serialize_lines,
            "        return map.filterValues { it != null }",
            "    }",
        ]
