"""
Go-specific naming utilities.

Exported Go identifiers are PascalCase, so JSON keys can never collide
with Go's lowercase keywords; the only adjustment Go needs is the
initialism convention (``UserID`` rather than ``UserId``).
"""

from ...core.naming import to_pascal_case

# Checked in order; each one is applied only as a suffix
GO_INITIALISMS = ["Id", "Url", "Api", "Json", "Html", "Http", "Https"]


def to_go_name(name: str) -> str:
    """
    Convert a JSON key or model name to an exported Go identifier.

    ``profile_picture_url`` -> ``ProfilePictureURL``, ``id`` -> ``ID``.
    """
    pascal = to_pascal_case(name)
    for initialism in GO_INITIALISMS:
        if pascal.endswith(initialism):
            pascal = pascal[: -len(initialism)] + initialism.upper()
    return pascal


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "-" in name:
        errors.append("Package names should not contain hyphens")

    return errors
