"""
Python code generator implementation.

Generates dataclasses (or plain classes) with optional ``from_dict`` and
``to_dict`` helpers.
"""

import re
from pprint import pformat
from typing import Dict, List, Optional

from ....logging_config import get_logger
from ...core.generator import CodeGenerator
from ...core.naming import NamingCase, to_pascal_case
from ...core.schema import Field, FieldType, Schema, TypeInfo
from .config import PythonOptions
from .naming import create_python_sanitizer, to_python_identifier

logger = get_logger(__name__)

TYPING_NAMES = ("Any", "Dict", "List", "Optional", "Tuple")

INDENT = "    "


class PythonGenerator(CodeGenerator):
    """Code generator for Python dataclasses."""

    label = "Python"
    options_class = PythonOptions

    def __init__(self, options=None):
        """Initialize Python generator with configuration."""
        super().__init__(options)
        self.sanitizer = create_python_sanitizer()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        """Generate the module: imports, classes, optional sample block."""
        if self.options.nested_classes:
            ordered = list(reversed(shapes))
        else:
            ordered = shapes[:1]

        class_names = {schema.name: self._class_name(schema) for schema in ordered}
        logger.debug(f"Rendering Python classes: {list(class_names.values())}")
        blocks = [self._render_class(schema, class_names) for schema in ordered]
        imports = self._get_imports("\n".join(blocks))

        if self.options.sample_instance and self.options.include_from_dict:
            blocks.append(self._render_sample(shapes[0], class_names[shapes[0].name]))

        body = "\n\n\n".join(blocks)
        return "\n".join(imports) + "\n\n\n" + body + "\n"

    def _get_imports(self, body: str) -> List[str]:
        imports = []
        if self.options.renders_dataclass:
            imports.append("from dataclasses import dataclass")
        if re.search(r"\bdatetime\b", body):
            imports.append("from datetime import datetime")

        typing_names = [
            name for name in TYPING_NAMES if re.search(rf"\b{name}\b", body)
        ]
        if typing_names:
            imports.append(f"from typing import {', '.join(typing_names)}")
        return imports

    def _class_name(self, schema: Schema) -> str:
        return self.sanitizer.sanitize_name(to_pascal_case(schema.name))

    def _field_name(self, field: Field) -> str:
        target = (
            NamingCase.SNAKE_CASE
            if self.options.camel_case_to_snake_case
            else NamingCase.ORIGINAL
        )
        return to_python_identifier(field.name, self.sanitizer, target)

    # Types

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if info.type == FieldType.DATETIME:
            return "datetime"
        if info.type == FieldType.STRING:
            return "str"
        if info.type == FieldType.INTEGER:
            return "int"
        if info.type == FieldType.FLOAT:
            return "float"
        if info.type == FieldType.BOOLEAN:
            return "bool"
        if info.type == FieldType.OBJECT:
            if self.options.nested_classes:
                return class_names[info.shape.name]
            return "Dict[str, Any]"
        if info.type == FieldType.ARRAY:
            element = "Any" if info.element is None else self._type(info.element, class_names)
            if self.options.frozen:
                return f"Tuple[{element}]"
            return f"List[{element}]"
        return "Any"

    def _nested_class(self, info: TypeInfo, class_names: Dict[str, str]) -> Optional[str]:
        """Class name for a nested object, when nested classes are rendered."""
        if info.is_object and self.options.nested_classes:
            return class_names[info.shape.name]
        return None

    # Class rendering

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        class_name = class_names[schema.name]
        fields = [(field, self._field_name(field)) for field in schema.fields]

        lines = []
        if self.options.renders_dataclass:
            arguments = self.options.dataclass_arguments()
            lines.append(f"@dataclass({', '.join(arguments)})")
            lines.append(f"class {class_name}:")
            lines.extend(self._dataclass_fields(fields, class_names))
        else:
            lines.append(f"class {class_name}:")
            lines.extend(self._init_method(fields, class_names))

        if self.options.include_from_dict:
            lines.append("")
            lines.extend(self._from_dict_method(class_name, fields, class_names))

        if self.options.include_to_dict:
            lines.append("")
            lines.extend(self._to_dict_method(fields, class_names))

        return "\n".join(lines)

    def _dataclass_fields(self, fields, class_names) -> List[str]:
        if not fields:
            return [f"{INDENT}pass"]

        default = " = None" if self.options.default_values else ""
        return [
            f"{INDENT}{name}: Optional[{self._type(field.type_info, class_names)}]{default}"
            for field, name in fields
        ]

    def _init_method(self, fields, class_names) -> List[str]:
        if not fields:
            return [f"{INDENT}def __init__(self):", f"{INDENT * 2}pass"]

        lines = [f"{INDENT}def __init__(", f"{INDENT * 2}self,"]
        for field, name in fields:
            if self.options.type_hints:
                hint = self._type(field.type_info, class_names)
                lines.append(f"{INDENT * 2}{name}: Optional[{hint}] = None,")
            else:
                lines.append(f"{INDENT * 2}{name}=None,")
        lines.append(f"{INDENT}):")
        for _, name in fields:
            lines.append(f"{INDENT * 2}self.{name} = {name}")
        return lines

    def _from_dict_method(self, class_name: str, fields, class_names) -> List[str]:
        if self.options.type_hints:
            signature = f'def from_dict(cls, data: Dict[str, Any]) -> "{class_name}":'
        else:
            signature = "def from_dict(cls, data):"

        lines = [f"{INDENT}@classmethod", f"{INDENT}{signature}", f"{INDENT * 2}return cls("]
        for field, name in fields:
            key = field.name
            info = field.type_info
            nested = self._nested_class(info, class_names)
            element_class = (
                self._nested_class(info.element, class_names) if info.element else None
            )

            if element_class:
                wrap = "tuple" if self.options.frozen else None
                generator = (
                    f"{element_class}.from_dict(item) for item in "
                    f'data.get("{key}", []) if item is not None'
                )
                value = f"{wrap}({generator})" if wrap else f"[{generator}]"
            elif info.is_array and self.options.frozen:
                value = f'tuple(item for item in data.get("{key}", []))'
            elif nested:
                value = (
                    f'{nested}.from_dict(data["{key}"]) '
                    f'if data.get("{key}") is not None else None'
                )
            elif info.type == FieldType.DATETIME:
                value = (
                    f'datetime.fromisoformat(data["{key}"]) '
                    f'if data.get("{key}") is not None else None'
                )
            else:
                value = f'data.get("{key}")'

            lines.append(f"{INDENT * 3}{name}={value},")

        lines.append(f"{INDENT * 2})")
        return lines

    def _to_dict_method(self, fields, class_names) -> List[str]:
        if self.options.type_hints:
            signature = "def to_dict(self) -> Dict[str, Any]:"
        else:
            signature = "def to_dict(self):"

        lines = [f"{INDENT}{signature}", f"{INDENT * 2}return {{"]
        for field, name in fields:
            info = field.type_info
            attr = f"self.{name}"

            if info.element is not None and self._nested_class(info.element, class_names):
                value = f"[item.to_dict() for item in {attr}] if {attr} is not None else []"
            elif self._nested_class(info, class_names):
                value = f"{attr}.to_dict() if {attr} is not None else None"
            elif info.type == FieldType.DATETIME:
                value = f"{attr}.isoformat() if {attr} is not None else None"
            else:
                value = attr

            lines.append(f'{INDENT * 3}"{field.name}": {value},')

        lines.append(f"{INDENT * 2}}}")
        return lines

    def _render_sample(self, root: Schema, class_name: str) -> str:
        sample = {key: value for key, value in root.data.items() if key != ""}
        literal = pformat(sample, indent=4, sort_dicts=False)
        return (
            f"SAMPLE_DATA = {literal}\n\n\n"
            f'if __name__ == "__main__":\n'
            f"{INDENT}print({class_name}.from_dict(SAMPLE_DATA))"
        )

    def validate_schemas(self, shapes: List[Schema]) -> List[str]:
        """Validate schemas for Python generation."""
        warnings = super().validate_schemas(shapes)
        if self.options.sample_instance and not self.options.include_from_dict:
            warnings.append("sample_instance requires from_dict; no sample was generated")
        if self.options.dataclass and not self.options.type_hints:
            warnings.append(
                "Dataclass fields need annotations; plain classes were generated instead"
            )
        return warnings
