"""
Python-specific naming utilities and sanitization.

Handles Python reserved words and identifier rules.
"""

import keyword
import re

from ...core.naming import NameSanitizer, NamingCase, convert_case

# Keywords get a trailing underscore (PEP 8): class -> class_
PYTHON_RESERVED_WORDS = set(keyword.kwlist)

_NON_IDENTIFIER = re.compile(r"\W")


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python."""
    return NameSanitizer(PYTHON_RESERVED_WORDS, suffix="_")


def to_python_identifier(
    name: str, sanitizer: NameSanitizer, target_case: NamingCase
) -> str:
    """
    Turn a JSON key into a valid Python identifier.

    Characters that cannot appear in an identifier become ``_`` and a
    leading digit is prefixed with ``_``.
    """
    converted = _NON_IDENTIFIER.sub("_", convert_case(name, target_case))
    if converted[:1].isdigit():
        converted = f"_{converted}"
    return sanitizer.sanitize_name(converted)
