"""
Go source file rendering and export.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from structify.parser.shared.constants import GO_FILE_EXTENSION
from structify.parser.shared.exceptions import OutputGenerationError
from structify.parser.shared.naming import to_snake_case

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
GO_FILE_TEMPLATE = "go_file.go.j2"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,  # Go source, not HTML
        trim_blocks=True,
        undefined=StrictUndefined,
    )


def render_go_file(struct_code: str, package_name: str = "model", imports: list[str] | None = None) -> str:
    """
    Wrap struct declarations in a complete Go source file.

    A single import is written as ``import "x"``, several as a parenthesized block.

    Args:
        struct_code: Generated declarations
        package_name: Go package name
        imports: Import paths

    Returns:
        Go file content
    """
    template = _environment().get_template(GO_FILE_TEMPLATE)
    return template.render(
        package_name=package_name,
        imports=imports or [],
        struct_code=struct_code,
    )


def generate_filename(struct_name: str) -> str:
    """File name for a struct: lower snake case plus the ``.go`` extension."""
    return f"{to_snake_case(struct_name)}{GO_FILE_EXTENSION}"


def export_go_file(
    struct_code: str,
    struct_name: str,
    output_dir: str | Path,
    package_name: str = "model",
    imports: list[str] | None = None,
) -> Path:
    """
    Write a complete Go file for the struct into a directory.

    Args:
        struct_code: Generated declarations
        struct_name: Struct name, used for the file name
        output_dir: Target directory (created when missing)
        package_name: Go package name
        imports: Import paths

    Returns:
        Path to the written file

    Raises:
        OutputGenerationError: If the file cannot be written
    """
    output_file = Path(output_dir) / generate_filename(struct_name)
    content = render_go_file(struct_code, package_name, imports)

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputGenerationError(f"Failed to write {output_file}: {e}") from e

    logger.info(f"Go file saved to {output_file}")
    return output_file
