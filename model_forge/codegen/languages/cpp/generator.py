"""
C++ code generator implementation.

Generates a header with plain structs, ``std::optional`` (or raw pointer)
members and nlohmann/json conversion macros.
"""

from dataclasses import dataclass
from typing import Dict, List

from ....logging_config import get_logger
from ...core.config import ConfigError, GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_pascal_case, to_snake_case
from ...core.schema import FieldType, Schema, TypeInfo

logger = get_logger(__name__)

CPP_VERSIONS = ("03", "17", "20")

JSON_TYPE = "nlohmann::json"


@dataclass
class CppOptions(GeneratorOptions):
    """Options for C++ generation."""

    namespace: str = "DataModels"
    cpp_version: str = "17"
    use_nlohmann: bool = True
    # Derived from cpp_version; accepted for config compatibility only
    use_pointers_for_null: bool = False

    def __post_init__(self):
        version = str(self.cpp_version)
        if version == "3":
            version = "03"
        if version not in CPP_VERSIONS:
            raise ConfigError(
                f"Invalid cpp_version: {self.cpp_version}. "
                f"Expected one of: {', '.join(CPP_VERSIONS)}"
            )
        self.cpp_version = version

    @property
    def use_optional(self) -> bool:
        """C++03 has no ``std::optional``; raw pointers mark absence there."""
        return self.cpp_version != "03"


class CppGenerator(CodeGenerator):
    """Code generator for C++ structs."""

    label = "C++"
    options_class = CppOptions
    sort_keys = True

    @property
    def language_name(self) -> str:
        return "cpp"

    @property
    def file_extension(self) -> str:
        return ".hpp"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        ordered = list(reversed(shapes))
        struct_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        logger.debug(f"C++ standard {self.options.cpp_version}, structs: {list(struct_names.values())}")

        structs = [self._render_struct(schema, struct_names) for schema in ordered]
        uses_json = self.options.use_nlohmann or any(JSON_TYPE in struct for struct in structs)

        lines = ["#pragma once", "", "#include <string>", "#include <vector>"]
        if self.options.use_optional:
            lines.append("#include <optional>")
        if uses_json:
            lines.append("#include <nlohmann/json.hpp>")
        lines.extend(["", f"namespace {self.options.namespace} {{", ""])

        if self.options.use_nlohmann:
            lines.extend(["using nlohmann::json;", ""])

        lines.extend(f"struct {struct_names[schema.name]};" for schema in ordered)
        lines.append("")

        for struct in structs:
            lines.extend([struct, ""])

        if self.options.use_nlohmann:
            for schema in ordered:
                lines.extend([self._render_conversion(schema, struct_names), ""])

        lines.append(f"}} // namespace {self.options.namespace}")
        return "\n".join(lines) + "\n"

    def _type(self, info: TypeInfo, struct_names: Dict[str, str]) -> str:
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return "std::string"
        if info.type == FieldType.INTEGER:
            return "int"
        if info.type == FieldType.FLOAT:
            return "double"
        if info.type == FieldType.BOOLEAN:
            return "bool"
        if info.type == FieldType.OBJECT:
            return struct_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return f"std::vector<{JSON_TYPE}>"
            return f"std::vector<{self._type(info.element, struct_names)}>"
        return JSON_TYPE

    def _render_struct(self, schema: Schema, struct_names: Dict[str, str]) -> str:
        lines = [f"struct {struct_names[schema.name]} {{"]
        for field in schema.fields:
            base_type = self._type(field.type_info, struct_names)
            name = to_snake_case(field.name)
            if not self.options.use_optional:
                lines.append(f"    {base_type}* {name};")
            elif self.options.cpp_version == "20":
                lines.append(f"    std::optional<{base_type}> {name} = std::nullopt;")
            else:
                lines.append(f"    std::optional<{base_type}> {name};")
        lines.append("};")
        return "\n".join(lines)

    def _render_conversion(self, schema: Schema, struct_names: Dict[str, str]) -> str:
        members = "".join(f", {to_snake_case(field.name)}" for field in schema.fields)
        return f"NLOHMANN_DEFINE_TYPE_NON_INTRUSIVE({struct_names[schema.name]}{members});"
