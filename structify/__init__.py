"""
structify - convert CREATE TABLE statements and JSON documents to Go structs.
"""

from .config import Settings, load_settings
from .converter import ConversionResult, convert, parse_schema
from .generator import StructGenerator, export_go_file, generate_struct, get_required_imports
from .parser import detect_input_type
from .parser.shared.exceptions import ConversionError, ParserError, StructifyError
from .typing import Dialect, Field, GenerateOptions, NestedType, ParsedSchema

__version__ = "0.1.0"

__all__ = [
    "convert",
    "parse_schema",
    "ConversionResult",
    "detect_input_type",
    "generate_struct",
    "get_required_imports",
    "export_go_file",
    "StructGenerator",
    "Settings",
    "load_settings",
    "Dialect",
    "Field",
    "NestedType",
    "ParsedSchema",
    "GenerateOptions",
    "StructifyError",
    "ParserError",
    "ConversionError",
]
