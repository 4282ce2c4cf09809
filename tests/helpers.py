"""Shared helpers for generator tests."""

SAMPLE_USER = {
    "id": 1,
    "name": "Alice",
    "isActive": True,
    "score": 9.5,
    "createdAt": "2024-01-15T10:30:00Z",
    "tags": ["admin", "staff"],
    "profile": {"bio": "Hello", "age": 30},
    "posts": [{"title": "First", "likes": 3}],
}


def normalize(code: str) -> str:
    """Collapse every whitespace run to one space for containment checks."""
    return " ".join(code.split())


def contains(code: str, fragment: str) -> bool:
    """True if ``fragment`` appears in ``code`` ignoring whitespace layout."""
    return normalize(fragment) in normalize(code)
