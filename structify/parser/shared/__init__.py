"""
Shared utilities and definitions for the parser module.
"""

from .exceptions import (
    ConfigError,
    ConversionError,
    FieldDefinitionsError,
    JSONInputError,
    OutputGenerationError,
    ParserError,
    StructifyError,
    TableNameError,
    UnsupportedDialectError,
)
from .naming import to_camel_case, to_snake_case

__all__ = [
    "StructifyError",
    "ParserError",
    "TableNameError",
    "FieldDefinitionsError",
    "JSONInputError",
    "UnsupportedDialectError",
    "ConversionError",
    "ConfigError",
    "OutputGenerationError",
    "to_camel_case",
    "to_snake_case",
]
