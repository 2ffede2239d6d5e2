"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import logging
import sys
from pathlib import Path

STDIN_MARKER = "-"


def read_input(input_path: str | None) -> str:
    """
    Read command input from a file or from stdin.

    Args:
        input_path: Path to read, or None / ``"-"`` for stdin

    Returns:
        The input text

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the input is empty
    """
    if input_path is None or input_path == STDIN_MARKER:
        text = sys.stdin.read()
    else:
        path = Path(input_path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {input_path}")
        text = path.read_text(encoding="utf-8")

    if not text.strip():
        raise ValueError("Input is empty")

    return text


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG, otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")
