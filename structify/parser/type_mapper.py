"""
Database and JSON type to Go type mappings.

Tables are immutable and keyed by dialect. SQL lookups use the longest key that
prefixes the uppercased source type and ends on a non-letter boundary, so
``INTEGER`` resolves through ``INTEGER`` rather than ``INT`` and ``INTERVAL``
does not resolve at all.
"""

import logging
import re
from types import MappingProxyType
from typing import Mapping

from structify.typing.schema import Dialect

from .shared.constants import (
    GO_ANY,
    GO_BOOL,
    GO_BYTES,
    GO_FLOAT64,
    GO_INT,
    GO_INT64,
    GO_RAW_JSON,
    GO_SLICE_PREFIX,
    GO_STRING,
    GO_TIME,
)

logger = logging.getLogger(__name__)

MYSQL_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "TINYINT(1)": GO_BOOL,
        "TINYINT": GO_INT64,
        "SMALLINT": GO_INT64,
        "MEDIUMINT": GO_INT64,
        "INT": GO_INT64,
        "INTEGER": GO_INT64,
        "BIGINT": GO_INT64,
        "VARCHAR": GO_STRING,
        "CHAR": GO_STRING,
        "TEXT": GO_STRING,
        "TINYTEXT": GO_STRING,
        "MEDIUMTEXT": GO_STRING,
        "LONGTEXT": GO_STRING,
        "FLOAT": GO_FLOAT64,
        "DOUBLE": GO_FLOAT64,
        "DECIMAL": GO_FLOAT64,
        "NUMERIC": GO_FLOAT64,
        "DATE": GO_TIME,
        "DATETIME": GO_TIME,
        "TIMESTAMP": GO_TIME,
        "TIME": GO_TIME,
        "YEAR": GO_INT,
        "JSON": GO_RAW_JSON,
        "BLOB": GO_BYTES,
        "TINYBLOB": GO_BYTES,
        "MEDIUMBLOB": GO_BYTES,
        "LONGBLOB": GO_BYTES,
        "BINARY": GO_BYTES,
        "VARBINARY": GO_BYTES,
        "ENUM": GO_STRING,
        "SET": GO_STRING,
    }
)

POSTGRESQL_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "SMALLINT": GO_INT64,
        "INTEGER": GO_INT64,
        "INT": GO_INT64,
        "BIGINT": GO_INT64,
        "SERIAL": GO_INT64,
        "BIGSERIAL": GO_INT64,
        "SMALLSERIAL": GO_INT,
        "BOOLEAN": GO_BOOL,
        "BOOL": GO_BOOL,
        "VARCHAR": GO_STRING,
        "CHAR": GO_STRING,
        "CHARACTER": GO_STRING,
        "TEXT": GO_STRING,
        "UUID": GO_STRING,
        "REAL": GO_FLOAT64,
        "DOUBLE PRECISION": GO_FLOAT64,
        "NUMERIC": GO_FLOAT64,
        "DECIMAL": GO_FLOAT64,
        "DATE": GO_TIME,
        "TIME": GO_TIME,
        "TIMESTAMP": GO_TIME,
        "TIMESTAMPTZ": GO_TIME,
        "JSON": GO_RAW_JSON,
        "JSONB": GO_RAW_JSON,
        "BYTEA": GO_BYTES,
    }
)

# Based on SQLite type affinity names
SQLITE_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "INTEGER": GO_INT64,
        "INT": GO_INT64,
        "TINYINT": GO_INT64,
        "SMALLINT": GO_INT64,
        "MEDIUMINT": GO_INT64,
        "BIGINT": GO_INT64,
        "TEXT": GO_STRING,
        "CHAR": GO_STRING,
        "VARCHAR": GO_STRING,
        "CLOB": GO_STRING,
        "REAL": GO_FLOAT64,
        "FLOAT": GO_FLOAT64,
        "DOUBLE": GO_FLOAT64,
        "NUMERIC": GO_FLOAT64,
        "DECIMAL": GO_FLOAT64,
        "BOOLEAN": GO_BOOL,
        "DATE": GO_STRING,
        "DATETIME": GO_STRING,
        "BLOB": GO_BYTES,
    }
)

# Kinds produced by the JSON inferencer
JSON_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "string": GO_STRING,
        "int": GO_INT,
        "float": GO_FLOAT64,
        "boolean": GO_BOOL,
        "null": GO_ANY,
        "array": GO_SLICE_PREFIX + GO_ANY,
    }
)

TYPE_MAPPINGS: Mapping[Dialect, Mapping[str, str]] = MappingProxyType(
    {
        Dialect.MYSQL: MYSQL_TYPES,
        Dialect.POSTGRESQL: POSTGRESQL_TYPES,
        Dialect.SQLITE: SQLITE_TYPES,
        Dialect.JSON: JSON_TYPES,
    }
)

# SQLite affinity rules, checked in order when the table has no entry
_SQLITE_AFFINITY_RULES = (
    (re.compile(r"INT"), GO_INT64),
    (re.compile(r"CHAR|CLOB|TEXT"), GO_STRING),
    (re.compile(r"BLOB"), GO_BYTES),
    (re.compile(r"REAL|FLOA|DOUB"), GO_FLOAT64),
    (re.compile(r"NUMERIC|DECIMAL|BOOLEAN|DATE"), GO_FLOAT64),
)

_ARRAY_SUFFIX = re.compile(r"\[\d*\]$")
_WHITESPACE = re.compile(r"\s+")


def get_type_mapping(dialect: Dialect) -> Mapping[str, str]:
    """
    Get the type table for a dialect.

    Raises:
        KeyError: If the dialect has no type table
    """
    return TYPE_MAPPINGS[dialect]


def _longest_prefix_match(table: Mapping[str, str], normalized: str) -> str | None:
    best_key = None
    for key in table:
        if not normalized.startswith(key):
            continue
        rest = normalized[len(key):]
        if rest and rest[0].isalpha():
            continue
        if best_key is None or len(key) > len(best_key):
            best_key = key
    return table[best_key] if best_key is not None else None


def _sqlite_affinity(normalized: str) -> str | None:
    for pattern, go_type in _SQLITE_AFFINITY_RULES:
        if pattern.search(normalized):
            return go_type
    return None


def map_sql_type(dialect: Dialect, source_type: str) -> str:
    """
    Map a SQL column type to a Go type.

    Args:
        dialect: One of the SQL dialects
        source_type: Type token as written in the DDL (e.g. ``VARCHAR(255)``, ``TEXT[]``)

    Returns:
        Go type; ``string`` when nothing matches
    """
    normalized = _WHITESPACE.sub(" ", source_type.strip().upper())

    if dialect is Dialect.POSTGRESQL and _ARRAY_SUFFIX.search(normalized):
        base_type = _ARRAY_SUFFIX.sub("", normalized)
        return GO_SLICE_PREFIX + map_sql_type(dialect, base_type)

    go_type = _longest_prefix_match(get_type_mapping(dialect), normalized)

    if go_type is None and dialect is Dialect.SQLITE:
        go_type = _sqlite_affinity(normalized)

    if go_type is None:
        logger.debug(f"No {dialect.value} mapping for type '{source_type}', using {GO_STRING}")
        return GO_STRING

    return go_type


def map_json_kind(kind: str) -> str:
    """Map a JSON value kind (``string``, ``int``, ``float``, ...) to a Go type."""
    return JSON_TYPES.get(kind, GO_ANY)
