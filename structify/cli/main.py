"""
structify CLI Main Module

Command-line interface for converting SQL DDL and JSON documents to Go structs.
"""

import typer

from structify.cli.commands import cmd_config, cmd_convert, cmd_detect, cmd_inspect
from structify.converter import AUTO_DIALECT
from structify.parser.parsers import ParserFactory

OUTPUT_FORMATS = ("json", "yaml")


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def _error_message(message: str) -> str:
    return typer.style("Error: ", fg=typer.colors.RED, bold=True) + message


def validate_format(value: str) -> str:
    """Validate format option (json or yaml)."""
    if value not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            _error_message(f"Invalid format '{value}'. Must be 'json' or 'yaml'.")
        )
    return value


def validate_dialect(value: str) -> str:
    """Validate dialect option."""
    dialect = value.lower()
    if dialect != AUTO_DIALECT and not ParserFactory.is_supported(dialect):
        available = ", ".join([AUTO_DIALECT, *ParserFactory.supported_dialects()])
        raise typer.BadParameter(
            _error_message(f"Unsupported dialect '{value}'. Supported: {available}")
        )
    return dialect


# Create Typer app with alphabetical command ordering
app = typer.Typer(
    name="structify",
    help="structify - turn CREATE TABLE statements and JSON documents into Go structs",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Common option definitions to reduce duplication
INPUT_ARG = typer.Argument(None, help="Input file (reads stdin when omitted or '-')")
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
DIALECT_OPTION = typer.Option(
    AUTO_DIALECT,
    "-d",
    "--dialect",
    help="Input dialect: auto, mysql, postgresql, sqlite or json",
    callback=validate_dialect,
)


@app.command()
def convert(
    input_path: str | None = INPUT_ARG,
    dialect: str = DIALECT_OPTION,
    struct_name: str | None = typer.Option(
        None, "-n", "--struct-name", help="Struct name (default: derived from the table name)"
    ),
    package_name: str | None = typer.Option(
        None, "-p", "--package", help="Go package name used for file output"
    ),
    table_name: bool | None = typer.Option(
        None, "--table-name/--no-table-name", help="Emit the TableName method for DDL input"
    ),
    inline: bool | None = typer.Option(
        None, "--inline/--no-inline", help="Inline nested JSON types as anonymous structs"
    ),
    as_file: bool = typer.Option(
        False, "--file", help="Print a complete Go file with package header and imports"
    ),
    output_dir: str | None = typer.Option(
        None, "-o", "--output-dir", help="Write the Go file to this directory"
    ),
    line_numbers: bool = typer.Option(False, "--line-numbers", help="Prefix output lines with numbers"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Convert a CREATE TABLE statement or JSON document to a Go struct."""
    cmd_convert(
        input_path=input_path,
        dialect=dialect,
        struct_name=struct_name,
        package_name=package_name,
        table_name=table_name,
        inline=inline,
        as_file=as_file,
        output_dir=output_dir,
        line_numbers=line_numbers,
        verbose=verbose,
    )


@app.command()
def detect(
    input_path: str | None = INPUT_ARG,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Detect the input type (mysql, postgresql, sqlite, json or unknown)."""
    cmd_detect(input_path=input_path, verbose=verbose)


@app.command()
def inspect(
    input_path: str | None = INPUT_ARG,
    dialect: str = DIALECT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    format: str = typer.Option(
        "json", "-f", "--format", help="Output format: json or yaml", callback=validate_format
    ),
) -> None:
    """Show the parsed schema without generating code."""
    cmd_inspect(input_path=input_path, dialect=dialect, format=format, verbose=verbose)


@app.command()
def config(
    project_root: str | None = typer.Argument(
        None, help="Directory holding pyproject.toml or structify.toml (default: current)"
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the effective settings."""
    cmd_config(project_root=project_root, verbose=verbose)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
