"""
Java code generator implementation.

Generates a root class with Jackson annotations; nested shapes become
``public static`` classes inside it.
"""

from dataclasses import dataclass
from typing import Dict, List, Set

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer, NamingCase, to_pascal_case
from ...core.schema import Field, FieldType, Schema, TypeInfo

JAVA_KEYWORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
}

INDENT = "    "


def _capitalize(name: str) -> str:
    """JavaBeans accessor suffix: ``userName`` -> ``UserName``, ``class_`` -> ``Class_``."""
    return name[:1].upper() + name[1:]


@dataclass
class JavaOptions(GeneratorOptions):
    """Options for Java generation."""

    getters: bool = True
    setters: bool = False
    constructor: bool = True
    no_args_constructor: bool = False
    builder: bool = True
    equals_hash_code: bool = True
    to_string: bool = True
    snake_case: bool = True
    nested: bool = True
    final_fields: bool = True
    json_annotations: bool = True


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes."""

    label = "Java"
    options_class = JavaOptions

    def __init__(self, options=None):
        super().__init__(options)
        self.sanitizer = NameSanitizer(JAVA_KEYWORDS)

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        root = shapes[0]
        nested = list(reversed(shapes[1:])) if self.options.nested else []
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        imports: Set[str] = set()

        root_lines = self._render_class(root, class_names, imports, is_nested=False)
        for schema in nested:
            nested_lines = self._render_class(schema, class_names, imports, is_nested=True)
            root_lines.insert(-1, "")
            root_lines[-1:-1] = [f"{INDENT}{line}" if line else "" for line in nested_lines]

        header = "\n".join(sorted(imports))
        body = "\n".join(root_lines) + "\n"
        return f"{header}\n\n{body}" if header else body

    def _type(self, info: TypeInfo, class_names: Dict[str, str]) -> str:
        if info.type in (FieldType.STRING, FieldType.DATETIME):
            return "String"
        if info.type == FieldType.INTEGER:
            return "Integer"
        if info.type == FieldType.FLOAT:
            return "Double"
        if info.type == FieldType.BOOLEAN:
            return "Boolean"
        if info.type == FieldType.OBJECT:
            return class_names[info.shape.name] if self.options.nested else "Object"
        if info.type == FieldType.ARRAY:
            if info.element is None:
                return "List<Object>"
            return f"List<{self._type(info.element, class_names)}>"
        return "Object"

    def _field_name(self, field: Field) -> str:
        target = NamingCase.CAMEL_CASE if self.options.snake_case else NamingCase.ORIGINAL
        return self.sanitizer.sanitize_name(field.name, target)

    def _render_class(
        self, schema: Schema, class_names: Dict[str, str], imports: Set[str], is_nested: bool
    ) -> List[str]:
        class_name = class_names[schema.name]
        fields = [
            (field, self._field_name(field), self._type(field.type_info, class_names))
            for field in schema.fields
        ]

        for _, _, java_type in fields:
            if "List<" in java_type:
                imports.add("import java.util.List;")
        if fields and self.options.json_annotations:
            imports.add("import com.fasterxml.jackson.annotation.JsonProperty;")

        final = "final " if self.options.final_fields else ""
        blocks: List[List[str]] = []
        for field, name, java_type in fields:
            block = []
            if self.options.json_annotations:
                block.append(f'{INDENT}@JsonProperty("{field.name}")')
            block.append(f"{INDENT}private {final}{java_type} {name};")
            blocks.append(block)

        if self.options.no_args_constructor:
            blocks.append(self._no_args_constructor(class_name, fields))
        if self.options.constructor and fields:
            blocks.append(self._all_args_constructor(class_name, fields))
        if self.options.getters:
            blocks.extend(self._getter(name, java_type) for _, name, java_type in fields)
        if self.options.setters and not self.options.final_fields:
            blocks.extend(self._setter(name, java_type) for _, name, java_type in fields)
        if self.options.to_string:
            imports.add("import java.util.StringJoiner;")
            blocks.append(self._to_string(class_name, fields))
        if self.options.equals_hash_code:
            imports.add("import java.util.Objects;")
            blocks.extend(self._equals_hash_code(class_name, fields))
        if self.options.builder:
            blocks.append(self._builder(class_name, fields))

        modifier = "public static class" if is_nested else "public class"
        lines = [f"{modifier} {class_name} {{"]
        for index, block in enumerate(blocks):
            if index:
                lines.append("")
            lines.extend(block)
        lines.append("}")
        return lines

    def _no_args_constructor(self, class_name: str, fields) -> List[str]:
        if not (self.options.final_fields and fields):
            return [f"{INDENT}public {class_name}() {{}}"]
        # Final fields must still be assigned exactly once
        return (
            [f"{INDENT}public {class_name}() {{"]
            + [f"{INDENT * 2}this.{name} = null;" for _, name, _ in fields]
            + [f"{INDENT}}}"]
        )

    def _all_args_constructor(self, class_name: str, fields) -> List[str]:
        params = []
        for field, name, java_type in fields:
            annotation = f'@JsonProperty("{field.name}") ' if self.options.json_annotations else ""
            params.append(f"{annotation}{java_type} {name}")
        return (
            [f"{INDENT}public {class_name}({', '.join(params)}) {{"]
            + [f"{INDENT * 2}this.{name} = {name};" for _, name, _ in fields]
            + [f"{INDENT}}}"]
        )

    def _getter(self, name: str, java_type: str) -> List[str]:
        return [
            f"{INDENT}public {java_type} get{_capitalize(name)}() {{",
            f"{INDENT * 2}return {name};",
            f"{INDENT}}}",
        ]

    def _setter(self, name: str, java_type: str) -> List[str]:
        return [
            f"{INDENT}public void set{_capitalize(name)}({java_type} {name}) {{",
            f"{INDENT * 2}this.{name} = {name};",
            f"{INDENT}}}",
        ]

    def _to_string(self, class_name: str, fields) -> List[str]:
        lines = [
            f"{INDENT}@Override",
            f"{INDENT}public String toString() {{",
            f'{INDENT * 2}return new StringJoiner(", ", {class_name}.class.getSimpleName() + "[", "]")',
        ]
        lines.extend(f'{INDENT * 4}.add("{name}=" + {name})' for _, name, _ in fields)
        lines.extend([f"{INDENT * 4}.toString();", f"{INDENT}}}"])
        return lines

    def _equals_hash_code(self, class_name: str, fields) -> List[List[str]]:
        comparisons = " && ".join(f"Objects.equals({name}, that.{name})" for _, name, _ in fields)
        equals = [
            f"{INDENT}@Override",
            f"{INDENT}public boolean equals(Object o) {{",
            f"{INDENT * 2}if (this == o) return true;",
            f"{INDENT * 2}if (o == null || getClass() != o.getClass()) return false;",
        ]
        if fields:
            equals.append(f"{INDENT * 2}{class_name} that = ({class_name}) o;")
        equals.extend([f"{INDENT * 2}return {comparisons or 'true'};", f"{INDENT}}}"])

        hash_code = [
            f"{INDENT}@Override",
            f"{INDENT}public int hashCode() {{",
            f"{INDENT * 2}return Objects.hash({', '.join(name for _, name, _ in fields)});",
            f"{INDENT}}}",
        ]
        return [equals, hash_code]

    def _builder(self, class_name: str, fields) -> List[str]:
        inner = INDENT * 2
        lines = [f"{INDENT}public static final class Builder {{"]
        lines.extend(f"{inner}private {java_type} {name};" for _, name, java_type in fields)
        if fields:
            lines.append("")
        lines.extend([f"{inner}public Builder() {{}}", ""])

        for _, name, java_type in fields:
            lines.extend(
                [
                    f"{inner}public Builder {name}({java_type} val) {{",
                    f"{inner}{INDENT}{name} = val;",
                    f"{inner}{INDENT}return this;",
                    f"{inner}}}",
                    "",
                ]
            )

        lines.append(f"{inner}public {class_name} build() {{")
        if self.options.constructor and fields:
            arguments = ", ".join(f"this.{name}" for _, name, _ in fields)
            lines.append(f"{inner}{INDENT}return new {class_name}({arguments});")
        else:
            lines.append(f"{inner}{INDENT}{class_name} instance = new {class_name}();")
            if self.options.setters and not self.options.final_fields:
                lines.extend(
                    f"{inner}{INDENT}instance.set{_capitalize(name)}(this.{name});"
                    for _, name, _ in fields
                )
            lines.append(f"{inner}{INDENT}return instance;")
        lines.extend([f"{inner}}}", f"{INDENT}}}"])
        return lines
