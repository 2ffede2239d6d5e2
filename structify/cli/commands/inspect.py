"""
Inspect command implementation.
"""

import json
from typing import Literal

import typer
import yaml

from structify.cli.context import CommandContext
from structify.converter import parse_schema
from structify.parser.shared.exceptions import ConversionError, StructifyError

OutputFormat = Literal["json", "yaml"]


def cmd_inspect(
    input_path: str | None = None,
    dialect: str = "auto",
    format: OutputFormat = "json",
    verbose: bool = False,
) -> None:
    """
    Print the parsed schema of the input as JSON or YAML.

    Args:
        input_path: Input file, or None / "-" for stdin
        dialect: Input dialect or "auto"
        format: Output format ("json" or "yaml")
        verbose: Enable verbose output
    """
    ctx = CommandContext(verbose=verbose)

    try:
        text = ctx.read_input(input_path)
        resolved, schema = parse_schema(
            text, dialect, default_struct_name=ctx.settings.default_json_struct_name
        )
        if schema.error:
            raise ConversionError(schema.error)

        data = {"dialect": resolved.value, **schema.to_dict()}
        if format == "yaml":
            output = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            output = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        typer.echo(output, nl=False)

    except (StructifyError, OSError, ValueError) as e:
        ctx.handle_error(e)
