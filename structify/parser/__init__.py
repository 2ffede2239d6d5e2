"""
Parsing layer: dialect detection, type mapping and schema parsers.
"""

from .detector import detect_input_type
from .parsers import JSONParser, MySQLParser, ParserFactory, PostgreSQLParser, SQLiteParser
from .type_mapper import map_json_kind, map_sql_type

__all__ = [
    "detect_input_type",
    "map_sql_type",
    "map_json_kind",
    "ParserFactory",
    "MySQLParser",
    "PostgreSQLParser",
    "SQLiteParser",
    "JSONParser",
]
