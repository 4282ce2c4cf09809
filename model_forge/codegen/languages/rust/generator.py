"""
Rust code generator implementation.

Generates serde-annotated structs. Every field is an ``Option`` and keeps
an explicit ``#[serde(rename = ...)]`` so the wire name never depends on
the case conversion.
"""

from dataclasses import dataclass
from typing import List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer, NamingCase, to_pascal_case
from ...core.schema import FieldType, Schema, TypeInfo

RUST_KEYWORDS = {
    "as", "async", "await", "break", "const", "continue", "crate", "dyn",
    "else", "enum", "extern", "false", "fn", "for", "if", "impl", "in",
    "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
    "static", "struct", "trait", "true", "type", "unsafe", "use", "where",
    "while", "abstract", "become", "box", "do", "final", "macro",
    "override", "priv", "typeof", "unsized", "virtual", "yield", "try",
}

JSON_VALUE = "serde_json::Value"


@dataclass
class RustOptions(GeneratorOptions):
    """Options for Rust generation."""

    # Container-level #[serde(default)]; implies deriving Default
    use_serde_default: bool = False
    derive_default: bool = False


class RustGenerator(CodeGenerator):
    """Code generator for Rust structs with serde derives."""

    label = "Rust"
    options_class = RustOptions
    sort_keys = True

    def __init__(self, options=None):
        super().__init__(options)
        # Raw identifiers escape keywords: r#type
        self.sanitizer = NameSanitizer(RUST_KEYWORDS, prefix="r#", suffix="")

    @property
    def language_name(self) -> str:
        return "rust"

    @property
    def file_extension(self) -> str:
        return ".rs"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        all_code = "\n".join(self._render_struct(schema) for schema in reversed(shapes))

        header = "use serde::{Serialize, Deserialize};\n"
        if JSON_VALUE in all_code:
            header += "use serde_json;\n"

        return f"{header}\n{all_code}"

    def _derives(self) -> str:
        derives = ["Debug", "Clone", "PartialEq"]
        if self.options.derive_default or self.options.use_serde_default:
            derives.append("Default")
        derives.extend(["Serialize", "Deserialize"])
        return ", ".join(derives)

    def _render_struct(self, schema: Schema) -> str:
        lines = [f"#[derive({self._derives()})]"]
        if self.options.use_serde_default:
            lines.append("#[serde(default)]")
        lines.append(f"pub struct {to_pascal_case(schema.name)} {{")

        for field in schema.fields:
            name = self.sanitizer.sanitize_name(field.name, NamingCase.SNAKE_CASE)
            lines.append(f'    #[serde(rename = "{field.name}")]')
            lines.append(f"    pub {name}: Option<{self._type(field.type_info)}>,")
            lines.append("")

        if schema.fields:
            lines.pop()

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _type(self, info: TypeInfo) -> str:
        # Dates stay String; chrono is not assumed
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return "String"
        if info.type == FieldType.INTEGER:
            return "i64"
        if info.type == FieldType.FLOAT:
            return "f64"
        if info.type == FieldType.BOOLEAN:
            return "bool"
        if info.type == FieldType.OBJECT:
            return to_pascal_case(info.shape.name)
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return f"Vec<{JSON_VALUE}>"
            return f"Vec<{self._type(info.element)}>"
        return JSON_VALUE
