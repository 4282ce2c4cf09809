"""
Objective-C code generator implementation.

Generates ``NSObject`` subclasses with strong properties and an
``initWith...`` designated initializer.
"""

from dataclasses import dataclass
from typing import Dict, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_camel_case, to_pascal_case
from ...core.schema import FieldType, Schema, TypeInfo


@dataclass
class ObjCOptions(GeneratorOptions):
    """Options for Objective-C generation."""

    properties: bool = True
    initializers: bool = True
    nullability: bool = True
    snake_case: bool = True
    root_class_prefix: str = ""


def _declare(objc_type: str, name: str) -> str:
    """Pointer types bind the name directly: ``NSString *name`` but ``id name``."""
    if objc_type.endswith("*"):
        return f"{objc_type}{name}"
    return f"{objc_type} {name}"


class ObjCGenerator(CodeGenerator):
    """Code generator for Objective-C classes."""

    label = "Objective-C"
    options_class = ObjCOptions
    invalid_input_message = "Invalid JSON object."

    @property
    def language_name(self) -> str:
        return "objc"

    @property
    def file_extension(self) -> str:
        return ".m"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        prefix = self.options.root_class_prefix
        class_names = {schema.name: f"{prefix}{to_pascal_case(schema.name)}" for schema in shapes}
        classes = [self._render_class(schema, class_names) for schema in reversed(shapes)]
        return "#import <Foundation/Foundation.h>\n\n" + "\n".join(classes)

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return "NSString *"
        if info.type in (FieldType.INTEGER, FieldType.FLOAT, FieldType.BOOLEAN):
            return "NSNumber *"
        if info.type == FieldType.OBJECT:
            return f"{class_names[info.shape.name]} *"
        if info.type == FieldType.ARRAY:
            if info.is_object_array:
                return f"NSArray<{class_names[info.element.shape.name]} *> *"
            return "NSArray *"
        return "id"

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        class_name = class_names[schema.name]
        fields = [
            (
                to_camel_case(field.name) if self.options.snake_case else field.name,
                self._type(field.type_info, class_names),
            )
            for field in schema.fields
        ]
        with_initializer = self.options.initializers and fields

        lines = [f"@interface {class_name} : NSObject", ""]
        if self.options.properties:
            nullability = "nullable" if self.options.nullability else ""
            attributes = f"nonatomic, strong, {nullability}"
            lines.extend(f"@property ({attributes}) {_declare(objc_type, name)};" for name, objc_type in fields)
        if with_initializer:
            lines.extend(["", f"{self._initializer_signature(fields)};"])
        lines.extend(["", "@end", ""])

        if with_initializer:
            lines.extend(
                [
                    f"@implementation {class_name}",
                    "",
                    f"{self._initializer_signature(fields)} {{",
                    "    self = [super init];",
                    "    if (self) {",
                ]
            )
            lines.extend(f"        _{name} = {name};" for name, _ in fields)
            lines.extend(["    }", "    return self;", "}", "", "@end", ""])

        return "\n".join(lines)

    def _initializer_signature(self, fields) -> str:
        first_name, first_type = fields[0]
        parts = [f"initWith{to_pascal_case(first_name)}:({first_type.rstrip()}){first_name}"]
        parts.extend(f"{name}:({objc_type.rstrip()}){name}" for name, objc_type in fields[1:])
        return "- (instancetype)" + " ".join(parts)
