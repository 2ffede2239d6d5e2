"""
Display helpers for generated code.
"""

import re

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


def add_line_numbers(code: str) -> str:
    """
    Prefix every line with its right-aligned line number.

    Args:
        code: Source code

    Returns:
        Code with ``"<n> | "`` prefixes
    """
    lines = code.split("\n")
    width = len(str(len(lines)))
    return "\n".join(f"{str(number).rjust(width)} | {line}" for number, line in enumerate(lines, 1))


def cleanup_code(code: str) -> str:
    """Collapse runs of blank lines to a single blank line and trim the ends."""
    return _EXCESS_BLANK_LINES.sub("\n\n", code).strip()
