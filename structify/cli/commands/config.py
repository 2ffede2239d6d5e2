"""
Config command implementation.
"""

import typer
import yaml

from structify.cli.context import CommandContext
from structify.parser.shared.exceptions import ConfigError


def cmd_config(project_root: str | None = None, verbose: bool = False) -> None:
    """Print the effective settings as YAML."""
    ctx = CommandContext(verbose=verbose, project_root=project_root)

    try:
        settings = ctx.settings
    except ConfigError as e:
        ctx.handle_error(e)

    typer.echo(
        yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True),
        nl=False,
    )
