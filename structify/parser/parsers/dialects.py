"""
Per-dialect lexical descriptors for the DDL parser.

Each descriptor captures what differs between MySQL, PostgreSQL and SQLite
CREATE TABLE statements: identifier quoting, the column type grammar,
table-level constraint keywords and the comment/auto-increment rules.
"""

import re
from dataclasses import dataclass, field

from structify.typing.schema import Dialect

from ..shared.constants import (
    MYSQL_CONSTRAINT_KEYWORDS,
    POSTGRESQL_CONSTRAINT_KEYWORDS,
    SQLITE_CONSTRAINT_KEYWORDS,
)

_FLAGS = re.IGNORECASE | re.DOTALL


def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(r"\s+".join(kw.split()) for kw in keywords)
    return re.compile(rf"^(?:{alternatives})\b", re.IGNORECASE)


@dataclass(frozen=True)
class DialectDescriptor:
    """Lexical rules of one SQL dialect."""

    dialect: Dialect
    # Characters that may open/close a quoted identifier
    quote_open: str
    quote_close: str
    # Regex for the column type token, including parameters and array suffixes
    type_pattern: str
    constraint_keywords: tuple[str, ...]
    # Matched against "<type> <rest>" of a column definition
    auto_increment_pattern: re.Pattern
    comment_pattern: re.Pattern | None = None
    auto_increment_implies_primary_key: bool = False

    table_name_regex: re.Pattern = field(init=False, repr=False, compare=False)
    column_regex: re.Pattern = field(init=False, repr=False, compare=False)
    constraint_regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        opening = f"[{re.escape(self.quote_open)}]?"
        closing = f"[{re.escape(self.quote_close)}]?"
        identifier = rf"{opening}(\w+){closing}"
        qualifier = rf"(?:{opening}\w+{closing}\.)?"

        # Frozen dataclass: derived patterns are set through object.__setattr__
        object.__setattr__(
            self,
            "table_name_regex",
            re.compile(
                rf"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?{qualifier}{identifier}",
                re.IGNORECASE,
            ),
        )
        object.__setattr__(
            self,
            "column_regex",
            re.compile(rf"^{identifier}\s+({self.type_pattern})\s*(.*)$", _FLAGS),
        )
        object.__setattr__(self, "constraint_regex", _keyword_pattern(self.constraint_keywords))

    def extract_comment(self, column_name: str, rest: str) -> str:
        """
        Inline comment when the dialect supports one, else the column name.

        Whitespace runs, newlines included, collapse to one space so the
        comment always fits on the field's line.
        """
        if self.comment_pattern is not None:
            match = self.comment_pattern.search(rest)
            if match and match.group(2).strip():
                return " ".join(match.group(2).split())
        return column_name


MYSQL = DialectDescriptor(
    dialect=Dialect.MYSQL,
    quote_open="`",
    quote_close="`",
    type_pattern=r"\w+(?:\([^)]*\))?",
    constraint_keywords=MYSQL_CONSTRAINT_KEYWORDS,
    auto_increment_pattern=re.compile(r"\bAUTO_INCREMENT\b", re.IGNORECASE),
    comment_pattern=re.compile(r"\bCOMMENT\s+(['\"])(.*?)(?<!\\)\1", _FLAGS),
    auto_increment_implies_primary_key=True,
)

POSTGRESQL = DialectDescriptor(
    dialect=Dialect.POSTGRESQL,
    quote_open='"',
    quote_close='"',
    type_pattern=(
        r"\w+(?:\s+(?:PRECISION|VARYING))?"
        r"(?:\([^)]*\))?"
        r"(?:\s+WITH(?:OUT)?\s+TIME\s+ZONE)?"
        r"(?:\[\d*\])*"
    ),
    constraint_keywords=POSTGRESQL_CONSTRAINT_KEYWORDS,
    auto_increment_pattern=re.compile(
        r"^\w*SERIAL\b|\bGENERATED\s+(?:ALWAYS|BY\s+DEFAULT)\s+AS\s+IDENTITY\b", re.IGNORECASE
    ),
)

SQLITE = DialectDescriptor(
    dialect=Dialect.SQLITE,
    quote_open="`'\"[",
    quote_close="`'\"]",
    type_pattern=r"\w+(?:\([^)]*\))?",
    constraint_keywords=SQLITE_CONSTRAINT_KEYWORDS,
    auto_increment_pattern=re.compile(r"\bAUTOINCREMENT\b", re.IGNORECASE),
)

DESCRIPTORS: dict[Dialect, DialectDescriptor] = {
    MYSQL.dialect: MYSQL,
    POSTGRESQL.dialect: POSTGRESQL,
    SQLITE.dialect: SQLITE,
}
