"""
Parsers layer for DDL and JSON inputs.
"""

from .base import BaseParser
from .ddl_parser import DDLParser, MySQLParser, PostgreSQLParser, SQLiteParser
from .json_parser import JSONParser
from .parser_factory import ParserFactory

__all__ = [
    "BaseParser",
    "DDLParser",
    "MySQLParser",
    "PostgreSQLParser",
    "SQLiteParser",
    "JSONParser",
    "ParserFactory",
]
