"""
Ruby code generator implementation.

Generates plain Ruby classes with ``attr_accessor`` and ``initialize``,
or ``Struct`` definitions.
"""

import re
from dataclasses import dataclass
from typing import List

from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_pascal_case
from ...core.schema import Schema

CLASS_TEMPLATE = """{% if use_struct %}
{{ class_name }} = Struct.new({{ attributes | join(", ") }})
{% else %}
class {{ class_name }}
{% if attr_accessor and attributes %}
  attr_accessor {{ attributes | join(", ") }}
{% endif %}
{% if initialize %}

  def initialize({{ params | join(", ") }})
{% for assignment in assignments %}
    {{ assignment }}
{% endfor %}
  end
{% endif %}
end
{% endif %}
"""


def to_ruby_snake_case(name: str) -> str:
    """``userName`` -> ``user_name``; dashes and spaces become underscores."""
    snake = re.sub(r"([a-z])([A-Z])", r"\1_\2", name)
    return re.sub(r"[-\s]", "_", snake).lower()


@dataclass
class RubyOptions(GeneratorOptions):
    """Options for Ruby generation."""

    attr_accessor: bool = True
    snake_case: bool = True
    initialize: bool = True
    default_values: bool = False
    use_struct: bool = False


class RubyGenerator(CodeGenerator):
    """Code generator for Ruby classes and Structs."""

    label = "Ruby"
    options_class = RubyOptions
    invalid_input_message = "Invalid or empty JSON object"
    templates = {"class.rb.j2": CLASS_TEMPLATE}

    @property
    def language_name(self) -> str:
        return "ruby"

    @property
    def file_extension(self) -> str:
        return ".rb"

    def render(self, shapes: List[Schema], root_name: str) -> str:
        return "\n".join(self._render_class(schema) for schema in reversed(shapes))

    def _render_class(self, schema: Schema) -> str:
        names = [
            to_ruby_snake_case(field.name) if self.options.snake_case else field.name
            for field in schema.fields
        ]

        if self.options.default_values:
            params = [f"{name} = nil" for name in names]
            assignments = [f"@{name} = {name} || nil" for name in names]
        else:
            params = names
            assignments = [f"@{name} = {name}" for name in names]

        context = {
            "class_name": to_pascal_case(schema.name),
            "attributes": [f":{name}" for name in names],
            "params": params,
            "assignments": assignments,
            "use_struct": self.options.use_struct,
            "attr_accessor": self.options.attr_accessor,
            "initialize": self.options.initialize,
        }
        return self.template_engine.render_template("class.rb.j2", context)
