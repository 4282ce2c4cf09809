"""
PHP code generator implementation.

Generates PHP 8.1 classes using constructor property promotion (or
classic properties), ``fromArray`` factories and ``JsonSerializable``.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import natural_sort_key, to_camel_case, to_pascal_case
from ...core.schema import Field, FieldType, Schema

DATE_TYPE = "\\DateTimeInterface"

HEADER = "<?php\n\ndeclare(strict_types=1);\n\n"


@dataclass
class PhpOptions(GeneratorOptions):
    """Options for PHP generation."""

    typed_properties: bool = True
    final_classes: bool = True
    readonly_properties: bool = True
    constructor_property_promotion: bool = True
    from_array: bool = True
    to_array: bool = True


@dataclass
class PhpProperty:
    """One rendered property of a PHP class."""

    field: Field
    name: str
    type: str
    object_class: Optional[str] = None  # nested object
    item_class: Optional[str] = None  # array of nested objects

    @property
    def key(self) -> str:
        return self.field.name.replace("\\", "\\\\").replace("'", "\\'")


class PhpGenerator(CodeGenerator):
    """Code generator for PHP classes."""

    label = "PHP"
    options_class = PhpOptions
    sort_keys = True

    @property
    def language_name(self) -> str:
        return "php"

    @property
    def file_extension(self) -> str:
        return ".php"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        class_names = {schema.name: to_pascal_case(schema.name) for schema in shapes}
        classes = [self._render_class(schema, class_names) for schema in reversed(shapes)]
        return HEADER + "\n".join(classes)

    def _property(self, field: Field, class_names: Dict[str, str]) -> PhpProperty:
        info = field.type_info
        prop = PhpProperty(field=field, name=to_camel_case(field.name), type="mixed")

        if info.type == FieldType.DATETIME:
            prop.type = DATE_TYPE
        elif info.type == FieldType.STRING:
            prop.type = "string"
        elif info.type == FieldType.INTEGER:
            prop.type = "int"
        elif info.type == FieldType.FLOAT:
            prop.type = "float"
        elif info.type == FieldType.BOOLEAN:
            prop.type = "bool"
        elif info.type == FieldType.ARRAY:
            prop.type = "array"
            if info.is_object_array:
                prop.item_class = class_names[info.element.shape.name]
        elif info.type == FieldType.OBJECT:
            prop.type = class_names[info.shape.name]
            prop.object_class = prop.type

        return prop

    def _type_hint(self, prop: PhpProperty) -> str:
        if not self.options.typed_properties:
            return ""
        # mixed already includes null
        if prop.type == "mixed":
            return "mixed "
        return f"?{prop.type} "

    def _render_class(self, schema: Schema, class_names: Dict[str, str]) -> str:
        class_name = class_names[schema.name]
        props = sorted(
            (self._property(field, class_names) for field in schema.fields),
            key=lambda prop: natural_sort_key(prop.name),
        )

        final = "final " if self.options.final_classes else ""
        implements = " implements \\JsonSerializable" if self.options.to_array else ""

        if self.options.constructor_property_promotion:
            sections = [self._promoted_constructor(props)]
        else:
            sections = [self._classic_properties(props), self._classic_constructor(props)]

        if self.options.from_array:
            sections.append(self._from_array(props))
        if self.options.to_array:
            sections.append(self._to_array(props))
            sections.append(
                "    public function jsonSerialize(): mixed\n"
                "    {\n"
                "        return $this->toArray();\n"
                "    }"
            )

        body = "\n\n".join(section for section in sections if section)
        return f"{final}class {class_name}{implements}\n{{\n{body}\n}}\n"

    def _promoted_constructor(self, props: List[PhpProperty]) -> str:
        lines = []
        doc_params = [
            f"     * @param {prop.item_class}[]|null ${prop.name}"
            for prop in props
            if prop.item_class
        ]
        if doc_params:
            lines.extend(["    /**", *doc_params, "     */"])

        if not props:
            lines.append("    public function __construct() {}")
            return "\n".join(lines)

        visibility = "public readonly " if self.options.readonly_properties else "public "
        params = [f"        {visibility}{self._type_hint(prop)}${prop.name}" for prop in props]
        lines.append("    public function __construct(")
        lines.append(",\n".join(params))
        lines.append("    ) {}")
        return "\n".join(lines)

    def _classic_properties(self, props: List[PhpProperty]) -> str:
        readonly = "readonly " if self.options.readonly_properties else ""
        lines = []
        for prop in props:
            if prop.item_class:
                lines.append(f"    /** @var {prop.item_class}[]|null */")
            lines.append(f"    public {readonly}{self._type_hint(prop)}${prop.name};")
        return "\n".join(lines)

    def _classic_constructor(self, props: List[PhpProperty]) -> str:
        lines = ["    public function __construct(array $data)", "    {"]
        lines.extend(f"        $this->{prop.name} = {self._parse(prop)};" for prop in props)
        lines.append("    }")
        return "\n".join(lines)

    def _instantiate(self, class_name: str, argument: str) -> str:
        if self.options.from_array:
            return f"{class_name}::fromArray({argument})"
        return f"new {class_name}({argument})"

    def _parse(self, prop: PhpProperty) -> str:
        value = f"$data['{prop.key}']"
        if prop.type == DATE_TYPE:
            return f"isset({value}) ? new \\DateTimeImmutable({value}) : null"
        if prop.item_class:
            mapper = f"fn($item) => {self._instantiate(prop.item_class, '$item')}"
            return f"is_array({value} ?? null) ? array_map({mapper}, {value}) : null"
        if prop.object_class:
            return f"isset({value}) ? {self._instantiate(prop.object_class, value)} : null"
        return f"{value} ?? null"

    def _from_array(self, props: List[PhpProperty]) -> str:
        lines = ["    public static function fromArray(array $data): self", "    {"]
        if not self.options.constructor_property_promotion:
            lines.append("        return new self($data);")
        elif props:
            lines.append("        return new self(")
            lines.append(",\n".join(f"            {self._parse(prop)}" for prop in props))
            lines.append("        );")
        else:
            lines.append("        return new self();")
        lines.append("    }")
        return "\n".join(lines)

    def _to_array(self, props: List[PhpProperty]) -> str:
        lines = ["    public function toArray(): array", "    {", "        return ["]
        for prop in props:
            attr = f"$this->{prop.name}"
            if prop.item_class:
                value = f"isset({attr}) ? array_map(fn($item) => $item->toArray(), {attr}) : null"
            elif prop.object_class:
                value = f"{attr}?->toArray()"
            elif prop.type == DATE_TYPE:
                value = f"{attr}?->format(\\DateTimeInterface::ATOM)"
            else:
                value = attr
            lines.append(f"            '{prop.key}' => {value},")
        lines.extend(["        ];", "    }"])
        return "\n".join(lines)
