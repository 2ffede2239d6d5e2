"""
Pytest configuration and shared fixtures for structify tests.
"""

import re

import pytest

MYSQL_DDL = """
CREATE TABLE `orders` (
  `id` BIGINT UNSIGNED NOT NULL AUTO_INCREMENT,
  `amount` DECIMAL(10,2) NOT NULL DEFAULT '0.00' COMMENT 'Order amount',
  `is_paid` TINYINT(1) NOT NULL DEFAULT 0,
  `payload` JSON,
  `created_at` DATETIME DEFAULT CURRENT_TIMESTAMP,
  PRIMARY KEY (`id`),
  KEY `idx_created` (`created_at`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
"""

POSTGRESQL_DDL = """
CREATE TABLE IF NOT EXISTS "public"."items" (
  id SERIAL PRIMARY KEY,
  tags TEXT[] NOT NULL,
  data JSONB,
  price DOUBLE PRECISION,
  created_at TIMESTAMP WITH TIME ZONE DEFAULT now(),
  name CHARACTER VARYING(100),
  CONSTRAINT items_name_key UNIQUE (name)
);
"""

SQLITE_DDL = """
CREATE TABLE IF NOT EXISTS [notes] (
  "id" INTEGER PRIMARY KEY AUTOINCREMENT,
  'body' TEXT NOT NULL,
  score REAL,
  raw BLOB,
  FOREIGN KEY (id) REFERENCES other(id)
);
"""

SAMPLE_JSON = '{"user_id": 1, "is_active": true, "tags": ["a","b"], "meta": {"created_at": "2020"}}'

_FIELD_LINE = re.compile(r"^(\s*)(\S+)(\s+)(\S+)")


@pytest.fixture
def mysql_ddl():
    """MySQL dump with inline comment, index lines and table options."""
    return MYSQL_DDL


@pytest.fixture
def postgresql_ddl():
    """PostgreSQL DDL with a schema-qualified name, arrays and multi-word types."""
    return POSTGRESQL_DDL


@pytest.fixture
def sqlite_ddl():
    """SQLite DDL with mixed identifier quoting."""
    return SQLITE_DDL


@pytest.fixture
def sample_json():
    """JSON document with primitives, an array and a nested object."""
    return SAMPLE_JSON


def _column_offsets(line: str) -> tuple[int, int]:
    match = _FIELD_LINE.match(line)
    assert match, f"not a field line: {line!r}"
    indent, name, gap, _ = match.groups()
    return len(indent), len(indent) + len(name) + len(gap)


@pytest.fixture
def column_offsets():
    """Helper returning the start offsets of the name and type columns of a field line."""
    return _column_offsets
