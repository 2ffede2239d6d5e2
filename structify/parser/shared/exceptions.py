"""
Custom exceptions for structify.
"""


class StructifyError(Exception):
    """Base exception for all structify errors."""

    pass


class ParserError(StructifyError):
    """Base exception for parser-related errors."""

    pass


class TableNameError(ParserError):
    """Raised when the table name of a CREATE TABLE statement cannot be found."""

    pass


class FieldDefinitionsError(ParserError):
    """Raised when the parenthesized field definitions cannot be found."""

    pass


class JSONInputError(ParserError):
    """Raised when JSON input cannot be parsed or is not an object."""

    pass


class UnsupportedDialectError(ParserError):
    """Raised when no parser is available for a dialect."""

    def __init__(self, dialect: str, *args: object) -> None:
        super().__init__(*args)
        self.dialect = dialect

    def __str__(self) -> str:
        return f"No parser available for dialect: {self.dialect}"


class ConversionError(StructifyError):
    """Raised when an input cannot be converted to a struct."""

    pass


class ConfigError(StructifyError):
    """Raised when configuration values are invalid."""

    pass


class OutputGenerationError(StructifyError):
    """Raised when writing generated output fails."""

    pass
