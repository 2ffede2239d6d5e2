"""
Detect command implementation.
"""

import typer

from structify.cli.context import CommandContext
from structify.parser.detector import detect_input_type
from structify.typing.schema import Dialect


def cmd_detect(input_path: str | None = None, verbose: bool = False) -> None:
    """Print the detected input dialect; exits with status 1 when it is unknown."""
    ctx = CommandContext(verbose=verbose)

    try:
        text = ctx.read_input(input_path)
    except (OSError, ValueError) as e:
        ctx.handle_error(e)

    dialect = detect_input_type(text)
    typer.echo(dialect.value)

    if dialect is Dialect.UNKNOWN:
        raise typer.Exit(1)
