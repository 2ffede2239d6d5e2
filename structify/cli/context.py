"""
Command context for shared setup across CLI commands.
"""

import traceback

import typer

from structify.config import Settings, load_settings

from .utils import read_input, setup_logging


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: loading settings, setting up logging and reading input.
    """

    def __init__(self, verbose: bool = False, project_root: str | None = None):
        """
        Initialize command context.

        Args:
            verbose: Enable verbose output
            project_root: Directory to load settings from (defaults to the working directory)
        """
        self.verbose = verbose
        setup_logging(self.verbose)
        self.project_root = project_root
        self._settings: Settings | None = None

    @property
    def settings(self) -> Settings:
        """Settings, loaded on first access."""
        if self._settings is None:
            self._settings = load_settings(self.project_root)
        return self._settings

    def read_input(self, input_path: str | None) -> str:
        return read_input(input_path)

    def handle_error(self, error: Exception, show_traceback: bool | None = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{error}", err=True)
        if show_traceback:
            traceback.print_exc()
        raise typer.Exit(1)
