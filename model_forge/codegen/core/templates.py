"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any

from jinja2 import Environment, DictLoader, StrictUndefined

from .naming import to_camel_case, to_pascal_case, to_snake_case


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Dict[str, str] = None):
        """
        Initialize template engine.

        Args:
            templates: Named in-memory templates to register up front
        """
        # Generated source is never HTML; escaping would corrupt quotes
        self._env = Environment(
            loader=DictLoader(dict(templates or {})),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        # Add custom filters for code generation
        self._env.filters["snake_case"] = to_snake_case
        self._env.filters["camel_case"] = to_camel_case
        self._env.filters["pascal_case"] = to_pascal_case
        self._env.filters["indent_lines"] = self._indent_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of a registered template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}")

    def _indent_filter(self, value: str, spaces: int = 4) -> str:
        """Indent all non-blank lines in a string."""
        indent = " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)


def create_template_engine(templates: Dict[str, str] = None) -> TemplateEngine:
    """Create a template engine preloaded with ``templates``."""
    return TemplateEngine(templates)
