"""
Factory for creating parsers based on the input dialect.
"""

from structify.typing.schema import Dialect

from ..shared.constants import DEFAULT_JSON_STRUCT_NAME
from ..shared.exceptions import UnsupportedDialectError
from .base import BaseParser
from .ddl_parser import DDLParser, MySQLParser, PostgreSQLParser, SQLiteParser
from .json_parser import JSONParser


class ParserFactory:
    """Factory for creating the appropriate parser for a dialect."""

    # Registry of DDL parsers by dialect
    _parsers: dict[Dialect, type[DDLParser]] = {
        Dialect.MYSQL: MySQLParser,
        Dialect.POSTGRESQL: PostgreSQLParser,
        Dialect.SQLITE: SQLiteParser,
    }

    @classmethod
    def create_parser(
        cls, dialect: Dialect | str, default_struct_name: str = DEFAULT_JSON_STRUCT_NAME
    ) -> BaseParser:
        """
        Create a parser for the given dialect.

        Args:
            dialect: Dialect enum value or its string name
            default_struct_name: Struct name used by the JSON parser

        Returns:
            Parser instance

        Raises:
            UnsupportedDialectError: If the dialect is unknown or has no parser
        """
        dialect = cls._coerce(dialect)

        if dialect in cls._parsers:
            return cls._parsers[dialect]()

        # JSON parser needs the default struct name
        if dialect is Dialect.JSON:
            return JSONParser(default_struct_name)

        raise UnsupportedDialectError(dialect.value)

    @classmethod
    def is_supported(cls, dialect: Dialect | str) -> bool:
        """Check whether a parser exists for the dialect."""
        try:
            dialect = cls._coerce(dialect)
        except UnsupportedDialectError:
            return False
        return dialect in cls._parsers or dialect is Dialect.JSON

    @classmethod
    def supported_dialects(cls) -> list[str]:
        """Names of all dialects with a parser."""
        return [dialect.value for dialect in (*cls._parsers, Dialect.JSON)]

    @staticmethod
    def _coerce(dialect: Dialect | str) -> Dialect:
        if isinstance(dialect, Dialect):
            return dialect
        try:
            return Dialect(dialect.lower())
        except ValueError:
            raise UnsupportedDialectError(dialect) from None
