"""
Conversion pipeline: detect, parse, generate.
"""

import logging
from dataclasses import dataclass

from structify.generator import (
    StructGenerator,
    get_required_imports,
    render_go_file,
    resolve_struct_name,
)
from structify.parser.detector import detect_input_type
from structify.parser.parsers import ParserFactory
from structify.parser.shared.constants import DEFAULT_JSON_STRUCT_NAME
from structify.parser.shared.exceptions import ConversionError
from structify.typing.schema import Dialect, GenerateOptions, ParsedSchema

logger = logging.getLogger(__name__)

AUTO_DIALECT = "auto"


@dataclass
class ConversionResult:
    """Outcome of a successful conversion."""

    dialect: Dialect
    schema: ParsedSchema
    struct_name: str
    code: str
    imports: list[str]
    package_name: str = "model"

    def to_go_file(self) -> str:
        """Complete Go file with package header and imports."""
        return render_go_file(self.code, self.package_name, self.imports)


def resolve_dialect(text: str, dialect: Dialect | str | None = None) -> Dialect:
    """Use the given dialect, or detect it when None or ``"auto"``."""
    if dialect is None or dialect == AUTO_DIALECT:
        detected = detect_input_type(text)
        logger.debug(f"Detected input type: {detected.value}")
        return detected
    if isinstance(dialect, Dialect):
        return dialect
    try:
        return Dialect(dialect.lower())
    except ValueError:
        raise ConversionError(f"Unsupported dialect: {dialect}") from None


def parse_schema(
    text: str,
    dialect: Dialect | str | None = None,
    default_struct_name: str = DEFAULT_JSON_STRUCT_NAME,
) -> tuple[Dialect, ParsedSchema]:
    """
    Parse input text without generating code.

    Structural failures are left on ``ParsedSchema.error`` for the caller.

    Raises:
        ConversionError: If the dialect cannot be determined
    """
    resolved = resolve_dialect(text, dialect)
    if resolved is Dialect.UNKNOWN:
        raise ConversionError(
            "Could not detect input type: expected a CREATE TABLE statement or a JSON object"
        )

    parser = ParserFactory.create_parser(resolved, default_struct_name)
    return resolved, parser.parse(text)


def convert(
    text: str,
    dialect: Dialect | str | None = None,
    options: GenerateOptions | None = None,
    default_struct_name: str | None = None,
) -> ConversionResult:
    """
    Convert DDL or JSON text to a Go struct.

    Args:
        text: Raw input
        dialect: Input dialect; detected when None or ``"auto"``
        options: Generation options
        default_struct_name: Struct name for JSON input (falls back to the
            struct name override, then ``Response``)

    Returns:
        ConversionResult with generated code and required imports

    Raises:
        ConversionError: If the input type is unknown or parsing fails
    """
    options = options or GenerateOptions()
    json_struct_name = default_struct_name or options.struct_name or DEFAULT_JSON_STRUCT_NAME

    resolved, schema = parse_schema(text, dialect, json_struct_name)
    if schema.error:
        raise ConversionError(schema.error)

    code = StructGenerator(options).generate(schema)
    struct_name = resolve_struct_name(schema, options)
    logger.info(f"Converted {resolved.value} input to struct {struct_name} ({len(schema.fields)} fields)")

    return ConversionResult(
        dialect=resolved,
        schema=schema,
        struct_name=struct_name,
        code=code,
        imports=get_required_imports(schema),
        package_name=options.package_name,
    )
