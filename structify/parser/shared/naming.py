"""
Identifier conversion helpers shared by parsers and generators.
"""

import re

# Anything that is not a letter or digit separates name segments
_SEGMENT_SEPARATOR = re.compile(r"[\W_]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")

FALLBACK_IDENTIFIER = "Field"


def to_camel_case(name: str) -> str:
    """
    Convert a snake_case, kebab-case or mixed name to a leading-uppercase Go identifier.

    Every segment gets its first letter capitalized and separators are dropped,
    so ``user_id`` becomes ``UserId`` and ``createdAt`` becomes ``CreatedAt``.
    The result is never empty and never starts with a digit.

    Args:
        name: Original column or key name

    Returns:
        Go identifier
    """
    segments = [s for s in _SEGMENT_SEPARATOR.split(name) if s]
    identifier = "".join(s[:1].upper() + s[1:] for s in segments)

    if not identifier:
        return FALLBACK_IDENTIFIER
    if identifier[0].isdigit():
        return FALLBACK_IDENTIFIER + identifier
    return identifier


def to_snake_case(name: str) -> str:
    """Convert a CamelCase identifier to lower snake_case (``UserID`` -> ``user_id``)."""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower().strip("_")
