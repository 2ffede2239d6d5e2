"""
CREATE TABLE parser shared by the MySQL, PostgreSQL and SQLite dialects.

The parser is heuristic rather than a SQL grammar: the body
between the outermost parentheses is split on a comma followed by a newline,
each piece is split again on top-level commas, constraint lines are skipped
and every remaining line is matched against ``<name> <type> <rest>``. Lines
that do not look like a column are dropped without an error.
"""

import logging
import re

from structify.typing.schema import Field, ParsedSchema

from ..shared.constants import FIELD_DEFINITIONS_ERROR, TABLE_NAME_ERROR
from ..shared.exceptions import FieldDefinitionsError, ParserError, TableNameError
from ..shared.naming import to_camel_case
from ..type_mapper import map_sql_type
from .base import BaseParser
from .dialects import MYSQL, POSTGRESQL, SQLITE, DialectDescriptor

logger = logging.getLogger(__name__)

FIELDS_SECTION_PATTERN = re.compile(r"\(([\s\S]+)\)")
LINE_SEPARATOR_PATTERN = re.compile(r",\s*\n")
NOT_NULL_PATTERN = re.compile(r"\bNOT\s+NULL\b", re.IGNORECASE)
PRIMARY_KEY_PATTERN = re.compile(r"\bPRIMARY\s+KEY\b", re.IGNORECASE)

_QUOTES = "'\"`"


def split_top_level(line: str) -> list[str]:
    """
    Split a line on commas that are outside parentheses and quotes.

    Args:
        line: One candidate line of a field definitions section

    Returns:
        List of pieces (untrimmed)
    """
    parts = []
    current = ""
    depth = 0
    quote = None
    escaped = False

    for char in line:
        if quote:
            current += char
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char in _QUOTES:
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth <= 0:
            parts.append(current)
            current = ""
            continue
        current += char

    if current:
        parts.append(current)

    return parts


def split_field_lines(fields_section: str) -> list[str]:
    """Split a field definitions section into trimmed, non-empty candidate lines."""
    lines = []
    for chunk in LINE_SEPARATOR_PATTERN.split(fields_section):
        for piece in split_top_level(chunk):
            piece = piece.strip()
            if piece:
                lines.append(piece)
    return lines


class DDLParser(BaseParser):
    """Parses CREATE TABLE statements of one SQL dialect."""

    def __init__(self, descriptor: DialectDescriptor):
        """
        Initialize the parser.

        Args:
            descriptor: Lexical rules of the dialect to parse
        """
        self.descriptor = descriptor

    @property
    def dialect(self):
        return self.descriptor.dialect

    def parse(self, content: str) -> ParsedSchema:
        """
        Parse a CREATE TABLE statement.

        Args:
            content: DDL text

        Returns:
            ParsedSchema with table name and fields, or with ``error`` set
        """
        try:
            table_name, fields_section = self._split_statement(content)
        except ParserError as e:
            logger.debug(f"{self.dialect.value} DDL rejected: {e}")
            return ParsedSchema.failed(str(e))

        fields = []
        for line in split_field_lines(fields_section):
            if self.descriptor.constraint_regex.match(line):
                logger.debug(f"Skipping constraint line: {line}")
                continue

            field = self._parse_column(line)
            if field is None:
                logger.debug(f"Skipping unrecognized line: {line}")
                continue
            fields.append(field)

        logger.debug(f"Parsed {len(fields)} fields from {self.dialect.value} table '{table_name}'")
        return ParsedSchema(table_name=table_name, fields=fields)

    def _split_statement(self, content: str) -> tuple[str, str]:
        """Locate the table name and the parenthesized field definitions."""
        table_match = self.descriptor.table_name_regex.search(content)
        if not table_match:
            raise TableNameError(TABLE_NAME_ERROR)

        fields_match = FIELDS_SECTION_PATTERN.search(content, table_match.end())
        if not fields_match:
            raise FieldDefinitionsError(FIELD_DEFINITIONS_ERROR)

        return table_match.group(1), fields_match.group(1)

    def _parse_column(self, line: str) -> Field | None:
        """Build a Field from a column definition line, or None if it is not one."""
        match = self.descriptor.column_regex.match(line)
        if not match:
            return None

        column_name, source_type, rest = match.group(1), match.group(2).strip(), match.group(3)

        is_auto_increment = bool(
            self.descriptor.auto_increment_pattern.search(f"{source_type} {rest}")
        )
        is_primary_key = bool(PRIMARY_KEY_PATTERN.search(rest)) or (
            is_auto_increment and self.descriptor.auto_increment_implies_primary_key
        )

        return Field(
            source_name=column_name,
            target_name=to_camel_case(column_name),
            source_type=source_type,
            target_type=map_sql_type(self.dialect, source_type),
            # Primary keys are implicitly NOT NULL
            nullable=not (is_primary_key or NOT_NULL_PATTERN.search(rest)),
            is_primary_key=is_primary_key,
            is_auto_increment=is_auto_increment,
            comment=self.descriptor.extract_comment(column_name, rest),
            serialized_name=column_name,
            storage_column=column_name,
        )


class MySQLParser(DDLParser):
    """Parses MySQL CREATE TABLE statements."""

    def __init__(self):
        super().__init__(MYSQL)


class PostgreSQLParser(DDLParser):
    """Parses PostgreSQL CREATE TABLE statements."""

    def __init__(self):
        super().__init__(POSTGRESQL)


class SQLiteParser(DDLParser):
    """Parses SQLite CREATE TABLE statements."""

    def __init__(self):
        super().__init__(SQLITE)
