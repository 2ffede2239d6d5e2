"""
Convert command implementation.
"""

import typer

from structify.cli.context import CommandContext
from structify.converter import convert
from structify.generator import add_line_numbers, cleanup_code, export_go_file
from structify.parser.shared.exceptions import StructifyError


def cmd_convert(
    input_path: str | None = None,
    dialect: str = "auto",
    struct_name: str | None = None,
    package_name: str | None = None,
    table_name: bool | None = None,
    inline: bool | None = None,
    as_file: bool = False,
    output_dir: str | None = None,
    line_numbers: bool = False,
    verbose: bool = False,
) -> None:
    """
    Convert DDL or JSON input to a Go struct.

    Command-line flags override the loaded settings. With ``output_dir`` the
    complete Go file is written there instead of being printed.

    Args:
        input_path: Input file, or None / "-" for stdin
        dialect: Input dialect or "auto"
        struct_name: Struct name override
        package_name: Go package name
        table_name: Whether to emit the TableName method
        inline: Whether to inline nested JSON types
        as_file: Print a complete Go file (package header and imports)
        output_dir: Directory to write the Go file to
        line_numbers: Prefix printed lines with line numbers
        verbose: Enable verbose output
    """
    ctx = CommandContext(verbose=verbose)

    try:
        text = ctx.read_input(input_path)
        settings = ctx.settings

        options = settings.to_options()
        if struct_name:
            options.struct_name = struct_name
        if package_name:
            options.package_name = package_name
        if table_name is not None:
            options.emit_storage_accessor = table_name
        if inline is not None:
            options.inline_nested_types = inline

        result = convert(
            text,
            dialect=dialect,
            options=options,
            default_struct_name=options.struct_name or settings.default_json_struct_name,
        )

        if output_dir:
            output_file = export_go_file(
                result.code,
                result.struct_name,
                output_dir,
                package_name=result.package_name,
                imports=result.imports,
            )
            typer.echo(f"✅ Go file saved to {output_file}")
            return

        code = cleanup_code(result.to_go_file() if as_file else result.code)
        if line_numbers:
            code = add_line_numbers(code)
        typer.echo(code)

    except (StructifyError, OSError, ValueError) as e:
        ctx.handle_error(e)
