"""
Swift code generator implementation.

Generates Codable structs or ObservableObject classes, with optional
CodingKeys, protocol conformances, memberwise initializers and sample data.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ...core.config import ConfigError, GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer, NamingCase, to_pascal_case
from ...core.schema import Field, FieldType, Schema, TypeInfo

SWIFT_KEYWORDS = {
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "protocol", "public", "rethrows", "static", "struct",
    "subscript", "typealias", "var", "break", "case", "continue", "default",
    "defer", "do", "else", "fallthrough", "for", "guard", "if", "in",
    "repeat", "return", "switch", "where", "while", "as", "catch", "false",
    "is", "nil", "self", "super", "throw", "throws", "true", "try",
}

DATE_STRATEGIES = ("iso8601", "formatted", "none")

ISO8601_DATE_COMMENT = """// To decode dates automatically, use this with your JSONDecoder:
//
// let decoder = JSONDecoder()
// decoder.dateDecodingStrategy = .iso8601
"""

FORMATTED_DATE_COMMENT = """// To decode dates automatically, use this with your JSONDecoder:
//
// let formatter = DateFormatter()
// formatter.dateFormat = "yyyy-MM-dd'T'HH:mm:ssZ"
// let decoder = JSONDecoder()
// decoder.dateDecodingStrategy = .formatted(formatter)
"""

ANY_CODABLE_STRUCT = """
struct AnyCodable: Codable, Equatable, Hashable {
    let value: Any

    init<T>(_ value: T?) {
        self.value = value ?? ()
    }

    init(from decoder: Decoder) throws {
        let container = try decoder.singleValueContainer()
        if container.decodeNil() {
            self.value = ()
        } else if let bool = try? container.decode(Bool.self) {
            self.value = bool
        } else if let int = try? container.decode(Int.self) {
            self.value = int
        } else if let double = try? container.decode(Double.self) {
            self.value = double
        } else if let string = try? container.decode(String.self) {
            self.value = string
        } else if let array = try? container.decode([AnyCodable].self) {
            self.value = array.map { $0.value }
        } else if let dictionary = try? container.decode([String: AnyCodable].self) {
            self.value = dictionary.mapValues { $0.value }
        } else {
            throw DecodingError.dataCorruptedError(in: container, debugDescription: "AnyCodable value cannot be decoded")
        }
    }

    func encode(to encoder: Encoder) throws {
        var container = encoder.singleValueContainer()
        switch value {
        case is Void:
            try container.encodeNil()
        case let bool as Bool:
            try container.encode(bool)
        case let int as Int:
            try container.encode(int)
        case let double as Double:
            try container.encode(double)
        case let string as String:
            try container.encode(string)
        case let array as [Any]:
            try container.encode(array.map { AnyCodable($0) })
        case let dictionary as [String: Any]:
            try container.encode(dictionary.mapValues { AnyCodable($0) })
        default:
            throw EncodingError.invalidValue(value, EncodingError.Context(codingPath: container.codingPath, debugDescription: "AnyCodable value cannot be encoded"))
        }
    }

    static func == (lhs: AnyCodable, rhs: AnyCodable) -> Bool {
        switch (lhs.value, rhs.value) {
        case (is Void, is Void):
            return true
        case (let lhsValue as (any Equatable), let rhsValue as (any Equatable)):
            return lhsValue.isEqual(to: rhsValue)
        default:
            return false
        }
    }

    func hash(into hasher: inout Hasher) {
        if let hashable = value as? AnyHashable {
            hasher.combine(hashable)
        }
    }
}

extension Equatable {
    func isEqual(to other: any Equatable) -> Bool {
        guard let other = other as? Self else {
            return false
        }
        return self == other
    }
}
"""


@dataclass
class SwiftOptions(GeneratorOptions):
    """Options for Swift generation."""

    is_codable: bool = True
    use_struct: bool = True
    is_equatable: bool = False
    is_hashable: bool = False
    generate_coding_keys: bool = True
    generate_custom_init: bool = False
    generate_sample_data: bool = False
    is_published: bool = False
    is_main_actor: bool = False
    is_custom_string_convertible: bool = False
    date_strategy: str = "iso8601"

    def __post_init__(self):
        if self.date_strategy not in DATE_STRATEGIES:
            raise ConfigError(
                f"Invalid date_strategy: {self.date_strategy}. "
                f"Expected one of: {', '.join(DATE_STRATEGIES)}"
            )


# (field, property name, swift type) for one property
Property = Tuple[Field, str, str]


class SwiftGenerator(CodeGenerator):
    """Code generator for Swift structs and classes."""

    label = "Swift"
    options_class = SwiftOptions

    def __init__(self, options=None):
        super().__init__(options)
        self.sanitizer = NameSanitizer(SWIFT_KEYWORDS, prefix="`", suffix="`")

    @property
    def language_name(self) -> str:
        return "swift"

    @property
    def file_extension(self) -> str:
        return ".swift"

    @property
    def is_class(self) -> bool:
        return not self.options.use_struct

    @property
    def uses_published(self) -> bool:
        return self.options.is_published and self.is_class

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        bodies = [self._render_type(schema, class_names) for schema in shapes]
        all_code = "\n".join(bodies)

        header = "import Foundation\n"
        if self.options.is_published or self.options.is_main_actor:
            header += "import Combine\n"

        date_comment = ""
        if ": Date?" in all_code:
            if self.options.date_strategy == "iso8601":
                date_comment = ISO8601_DATE_COMMENT
            elif self.options.date_strategy == "formatted":
                date_comment = FORMATTED_DATE_COMMENT

        any_codable = f"\n{ANY_CODABLE_STRUCT}" if "AnyCodable" in all_code else ""
        return f"{header}\n{date_comment}{all_code}{any_codable}"

    # Types

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        unknown = "AnyCodable" if self.options.is_codable else "Any"
        if info.type == FieldType.DATETIME:
            return "String" if self.options.date_strategy == "none" else "Date"
        if info.type == FieldType.STRING:
            return "String"
        if info.type == FieldType.INTEGER:
            return "Int"
        if info.type == FieldType.FLOAT:
            return "Double"
        if info.type == FieldType.BOOLEAN:
            return "Bool"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name]
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return f"[{unknown}]"
            return f"[{self._type(info.element, class_names)}]"
        return unknown

    # Declarations

    def _protocols(self) -> List[str]:
        protocols = []
        if self.options.is_codable:
            protocols.append("Codable")
        if self.options.is_equatable:
            protocols.append("Equatable")
        if self.options.is_hashable:
            protocols.append("Hashable")
        if self.options.is_custom_string_convertible:
            protocols.append("CustomStringConvertible")
        if self.is_class:
            protocols.append("ObservableObject")
        return protocols

    def _render_type(self, schema: Schema, class_names: Dict[str, str]) -> str:
        type_name = class_names[schema.name]
        properties: List[Property] = [
            (
                field,
                self.sanitizer.sanitize_name(field.name, NamingCase.CAMEL_CASE),
                self._type(field.type_info, class_names),
            )
            for field in schema.fields
        ]

        lines = []
        if self.options.is_main_actor:
            lines.append("@MainActor")

        declaration = "class" if self.is_class else "struct"
        protocols = self._protocols()
        conformance = f": {', '.join(protocols)}" if protocols else ""
        lines.append(f"{declaration} {type_name}{conformance} {{")

        keyword = "var" if self.is_class else "let"
        wrapper = "@Published " if self.uses_published else ""
        for _, name, swift_type in properties:
            lines.append(f"    {wrapper}{keyword} {name}: {swift_type}?")

        sections = [
            self._coding_keys(properties),
            self._memberwise_init(properties),
            self._codable_conformance(properties),
            self._equatable_conformance(type_name, properties),
            self._description(type_name, properties),
            self._sample_data(type_name, properties),
        ]
        for section in sections:
            if section:
                lines.append("")
                lines.extend(section)

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _needs_explicit_codable(self) -> bool:
        # @Published wrappers defeat synthesized Codable conformance
        return self.options.is_codable and self.uses_published

    def _coding_keys(self, properties: List[Property]) -> List[str]:
        if not self.options.is_codable or not properties:
            return []

        renamed = any(name != field.name for field, name, _ in properties)
        if not self._needs_explicit_codable():
            if not (self.options.generate_coding_keys and renamed):
                return []

        lines = ["    enum CodingKeys: String, CodingKey {"]
        for field, name, _ in properties:
            if name == field.name:
                lines.append(f"        case {name}")
            else:
                lines.append(f"        case {name} = {json.dumps(field.name)}")
        lines.append("    }")
        return lines

    def _memberwise_init(self, properties: List[Property]) -> List[str]:
        # Classes get no synthesized memberwise initializer
        wants_init = self.options.generate_custom_init or (
            self.is_class and self.options.generate_sample_data
        )
        if not wants_init:
            return []

        parameters = ", ".join(f"{name}: {swift_type}? = nil" for _, name, swift_type in properties)
        lines = [f"    init({parameters}) {{"]
        for _, name, _ in properties:
            lines.append(f"        self.{name} = {name}")
        lines.append("    }")
        return lines

    def _codable_conformance(self, properties: List[Property]) -> List[str]:
        if not self._needs_explicit_codable():
            return []

        lines = [
            "    required init(from decoder: Decoder) throws {",
        ]
        if properties:
            lines.append("        let container = try decoder.container(keyedBy: CodingKeys.self)")
        for _, name, swift_type in properties:
            lines.append(
                f"        {name} = try container.decodeIfPresent({swift_type}.self, forKey: .{name.strip('`')})"
            )
        lines.extend(
            [
                "    }",
                "",
                "    func encode(to encoder: Encoder) throws {",
            ]
        )
        if properties:
            lines.append("        var container = encoder.container(keyedBy: CodingKeys.self)")
        for _, name, _ in properties:
            lines.append(f"        try container.encodeIfPresent({name}, forKey: .{name.strip('`')})")
        lines.append("    }")
        return lines

    def _equatable_conformance(self, type_name: str, properties: List[Property]) -> List[str]:
        # Structs get both conformances synthesized
        if not self.is_class:
            return []

        lines = []
        if self.options.is_equatable or self.options.is_hashable:
            ordered = sorted(properties, key=lambda prop: prop[0].name)
            comparison = " && ".join(f"lhs.{name} == rhs.{name}" for _, name, _ in ordered)
            lines.extend(
                [
                    f"    static func == (lhs: {type_name}, rhs: {type_name}) -> Bool {{",
                    f"        return {comparison or 'true'}",
                    "    }",
                ]
            )

        if self.options.is_hashable:
            if lines:
                lines.append("")
            lines.append("    func hash(into hasher: inout Hasher) {")
            for _, name, _ in properties:
                lines.append(f"        hasher.combine({name})")
            lines.append("    }")

        return lines

    def _description(self, type_name: str, properties: List[Property]) -> List[str]:
        if not self.options.is_custom_string_convertible:
            return []

        parts = ", ".join(
            f"{name.strip('`')}: \\(String(describing: {name}))" for _, name, _ in properties
        )
        return [
            "    var description: String {",
            f'        return "{type_name}({parts})"',
            "    }",
        ]

    def _sample_data(self, type_name: str, properties: List[Property]) -> List[str]:
        if not self.options.generate_sample_data:
            return []

        arguments = ",\n".join(
            f"            {name}: {self._sample_value(swift_type, field.value)}"
            for field, name, swift_type in properties
        )
        lines = [f"    static var sample: {type_name} {{", f"        return {type_name}("]
        if arguments:
            lines.append(arguments)
        lines.extend(["        )", "    }"])
        return lines

    def _sample_value(self, swift_type: str, value: Any) -> str:
        if swift_type.startswith("["):
            item_type = swift_type[1:-1]
            if isinstance(value, list) and value:
                return "[" + ", ".join(self._sample_value(item_type, item) for item in value) + "]"
            return "[]"
        if swift_type == "String":
            return json.dumps(value if isinstance(value, str) else str(value))
        if swift_type == "Int":
            return str(int(value))
        if swift_type == "Double":
            return repr(float(value))
        if swift_type == "Bool":
            return "true" if value else "false"
        if swift_type == "Date":
            return "Date()"
        if swift_type in ("AnyCodable", "Any"):
            return "nil"
        return f"{swift_type}.sample"
