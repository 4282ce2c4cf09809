"""
Naming utilities for safe code generation.

Case conversions shared by every language generator, the naive
singularization rule used to name array item shapes, ISO-8601 date
detection, and keyword escaping for targets that need it.
"""

import re
from typing import Set, Optional
from enum import Enum


ISO_DATE_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})"
)

_PASCAL_BOUNDARY = re.compile(r"(?:^|[-_])(\w)")
_CAMEL_BOUNDARY = re.compile(r"[-_][a-z]", re.IGNORECASE)
_SEPARATORS = re.compile(r"[-_]")


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    ORIGINAL = "original"  # left untouched


def to_pascal_case(name: str) -> str:
    """
    Convert a JSON key to PascalCase.

    Uppercases the first character and every character that follows a
    ``-`` or ``_`` separator, then drops the remaining separators.
    Characters that are already uppercase are left alone, so
    ``user_ID`` becomes ``UserID``.
    """
    pascal = _PASCAL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)
    return _SEPARATORS.sub("", pascal)


def to_camel_case(name: str) -> str:
    """Convert a JSON key to camelCase (``user_name`` -> ``userName``)."""
    camel = _CAMEL_BOUNDARY.sub(lambda m: m.group(0)[1].upper(), name)
    return camel[:1].lower() + camel[1:]


def to_snake_case(name: str) -> str:
    """
    Convert camelCase or PascalCase to snake_case.

    Two passes keep acronym runs together: ``userID`` becomes ``user_id``
    and ``HTMLParser`` becomes ``html_parser``.
    """
    snake = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    snake = re.sub(r"([A-Z])([A-Z][a-z])", r"\1_\2", snake)
    return snake.lower()


def singularize(key: str) -> str:
    """Strip exactly one trailing ``s``; ``status`` becomes ``statu``."""
    return key[:-1] if key.endswith("s") else key


def natural_sort_key(name: str):
    """Case-insensitive ordering with lowercase before uppercase on ties."""
    return (name.lower(), name.swapcase())


def is_iso_date_string(value) -> bool:
    """Check whether a value is a strict ISO-8601 date-time string."""
    return isinstance(value, str) and ISO_DATE_PATTERN.fullmatch(value) is not None


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert name to target case style."""
    if target_case == NamingCase.SNAKE_CASE:
        return to_snake_case(name)
    elif target_case == NamingCase.CAMEL_CASE:
        return to_camel_case(name)
    elif target_case == NamingCase.PASCAL_CASE:
        return to_pascal_case(name)
    return name


class NameSanitizer:
    """Escapes identifiers that collide with a target language's keywords."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        prefix: str = "",
        suffix: str = "_",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            prefix: Text prepended to a reserved identifier (e.g. ``r#`` for Rust)
            suffix: Text appended to a reserved identifier
        """
        self.reserved_words = reserved_words or set()
        self.prefix = prefix
        self.suffix = suffix

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words

    def sanitize_name(
        self, name: str, target_case: NamingCase = NamingCase.ORIGINAL
    ) -> str:
        """
        Convert and escape a name for safe use in the target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style

        Returns:
            Sanitized name safe for use
        """
        converted = convert_case(name, target_case)
        if self.is_reserved(converted):
            return f"{self.prefix}{converted}{self.suffix}"
        return converted
