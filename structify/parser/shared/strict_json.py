"""
Strict JSON loading.
"""

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def load_strict_json(text: str) -> Any:
    """
    Parse JSON text, rejecting the NaN/Infinity extensions ``json`` accepts by default.

    Raises:
        ValueError: If the text is not valid JSON
    """
    return json.loads(text, parse_constant=_reject_constant)
