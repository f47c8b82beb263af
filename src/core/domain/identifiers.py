"""Reversed-domain identifier rules.

Android application IDs and iOS bundle identifiers share the same syntax
here: two or more dot-separated segments, each starting with a lowercase
letter followed by lowercase letters, digits or underscores.
"""

from __future__ import annotations

import re

from core.errors import IdentifierValidationError

PACKAGE_IDENTIFIER_PATTERN = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)+$")

# Packages already declared by a template: Java identifiers, any case.
DOTTED_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)+$")

EXAMPLE_PACKAGE_IDENTIFIER = "com.example.app"


def is_valid_package_identifier(value: str) -> bool:
    return PACKAGE_IDENTIFIER_PATTERN.fullmatch(value) is not None


def is_dotted_identifier(value: str) -> bool:
    return DOTTED_IDENTIFIER_PATTERN.fullmatch(value) is not None


def validate_package_identifier(value: str) -> str:
    """Return `value` unchanged, or raise `IdentifierValidationError`."""

    if not is_valid_package_identifier(value):
        raise IdentifierValidationError(
            f"Invalid package name {value!r}: expected something like {EXAMPLE_PACKAGE_IDENTIFIER}"
        )
    return value


def package_segments(identifier: str) -> list[str]:
    """Split an identifier into the directory segments of its source path."""

    return identifier.split(".")


def default_template_package(project_name: str) -> str:
    """Package the upstream template ships with: `com.<project name>`."""

    return f"com.{project_name.lower()}"
