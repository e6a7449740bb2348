"""Project name rules and the identifiers derived from a project name."""

from __future__ import annotations

import re

NAME_PATTERN = re.compile(r"^[a-z0-9-_]+$")

INVALID_NAME_MESSAGE = (
    "Use only lowercase letters, numbers, hyphens, and underscores."
)


def is_valid_project_name(name: str) -> bool:
    """Return True when name is usable as a project and scope name."""
    return bool(NAME_PATTERN.match(name))


def scope_token(name: str) -> str:
    """Return the package scope prefix for a project, e.g. ``@my-app/``."""
    return f"@{name}/"


def title_case(name: str) -> str:
    """Build the display form of a project name.

    Splits on hyphens and upper-cases the first letter of each word,
    leaving the rest untouched: ``my-new_app`` -> ``My New_app``.
    """
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))
