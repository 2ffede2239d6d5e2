"""
Input type detector.

Detects whether raw input is MySQL, PostgreSQL or SQLite DDL, or a JSON document.
"""

import logging
import re

from structify.typing.schema import Dialect

from .shared.strict_json import load_strict_json

logger = logging.getLogger(__name__)

CREATE_TABLE_PATTERN = re.compile(r"CREATE\s+TABLE", re.IGNORECASE)

# Signature tokens, checked in this order
POSTGRESQL_MARKERS = re.compile(
    r"\b(?:SERIAL|BIGSERIAL|SMALLSERIAL|UUID|JSONB|TIMESTAMPTZ)\b"
    r"|\bTEXT\s*\[\]"
    r"|\bTIMESTAMP\s+WITH\s+TIME\s+ZONE\b",
    re.IGNORECASE,
)
MYSQL_MARKERS = re.compile(r"\b(?:AUTO_INCREMENT|TINYINT)\b|\bCOMMENT\s*'", re.IGNORECASE)
SQLITE_MARKERS = re.compile(r"\bAUTOINCREMENT\b", re.IGNORECASE)

_SQL_SIGNATURES = (
    (POSTGRESQL_MARKERS, Dialect.POSTGRESQL),
    (MYSQL_MARKERS, Dialect.MYSQL),
    (SQLITE_MARKERS, Dialect.SQLITE),
)


def detect_sql_dialect(ddl: str) -> Dialect:
    """
    Pick the SQL dialect of a CREATE TABLE statement from its signature tokens.

    PostgreSQL markers win over MySQL markers, which win over SQLite markers.
    Without any marker the statement is treated as MySQL.
    """
    for pattern, dialect in _SQL_SIGNATURES:
        match = pattern.search(ddl)
        if match:
            logger.debug(f"Detected {dialect.value} from token '{match.group(0)}'")
            return dialect
    return Dialect.MYSQL


def detect_input_type(text: str) -> Dialect:
    """
    Detect the dialect of raw input text.

    Args:
        text: Raw DDL or JSON text

    Returns:
        Dialect enum value; Dialect.UNKNOWN when nothing matches
    """
    trimmed = text.strip()

    if CREATE_TABLE_PATTERN.search(trimmed):
        return detect_sql_dialect(trimmed)

    try:
        parsed = load_strict_json(trimmed)
    except (ValueError, RecursionError):
        return Dialect.UNKNOWN

    if isinstance(parsed, (dict, list)):
        return Dialect.JSON

    return Dialect.UNKNOWN
