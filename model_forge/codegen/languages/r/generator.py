"""
R code generator implementation.

Generates S3 constructor functions (``new_<name>``) that wrap a named
list in ``structure()``.
"""

from dataclasses import dataclass
from typing import Any, List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer, NamingCase, to_pascal_case, to_snake_case
from ...core.schema import Schema

R_RESERVED_WORDS = {
    "if", "else", "repeat", "while", "function", "for", "next", "break",
    "in", "TRUE", "FALSE", "NULL", "Inf", "NaN", "NA",
}

CONSTRUCTOR_TEMPLATE = """new_{{ function_name }} <- function({{ params | join(", ") }}) {
  structure(list({{ assignments | join(", ") }}), class = "{{ class_name }}")
}"""


@dataclass
class ROptions(GeneratorOptions):
    """Options for R generation."""

    # S3 constructors only; kept so shared configs stay valid
    use_struct: bool = True
    default_values: bool = False


class RGenerator(CodeGenerator):
    """Code generator for R S3 constructors."""

    label = "R"
    options_class = ROptions
    invalid_input_message = "Invalid JSON object"
    sort_keys = True
    templates = {"constructor.R.j2": CONSTRUCTOR_TEMPLATE}

    def __init__(self, options=None):
        super().__init__(options)
        self.sanitizer = NameSanitizer(R_RESERVED_WORDS, prefix="`", suffix="`")

    @property
    def language_name(self) -> str:
        return "r"

    @property
    def file_extension(self) -> str:
        return ".R"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        return "\n\n".join(self._render_constructor(schema) for schema in reversed(shapes))

    def _default(self, value: Any) -> str:
        if not self.options.default_values or value is None:
            return "NULL"
        if isinstance(value, bool):
            return "FALSE"
        if isinstance(value, str):
            return '""'
        if isinstance(value, (int, float)):
            return "0"
        return "list()"

    def _render_constructor(self, schema: Schema) -> str:
        params = []
        assignments = []
        for field in schema.fields:
            name = self.sanitizer.sanitize_name(field.name, NamingCase.SNAKE_CASE)
            params.append(f"{name} = {self._default(field.value)}")
            assignments.append(f"{name} = {name}")

        context = {
            "function_name": to_snake_case(schema.name),
            "class_name": to_pascal_case(schema.name),
            "params": params,
            "assignments": assignments,
        }
        return self.template_engine.render_template("constructor.R.j2", context)
