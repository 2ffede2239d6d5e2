"""
Type definitions for parsed schemas and generator options.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Dialect(Enum):
    """Input dialects recognized by the detector."""

    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"
    JSON = "json"
    UNKNOWN = "unknown"


@dataclass
class Field:
    """A single column or JSON key and its resolved Go representation."""

    source_name: str
    target_name: str
    source_type: str
    target_type: str
    nullable: bool = True
    is_primary_key: bool = False
    is_auto_increment: bool = False
    comment: str | None = None
    serialized_name: str = ""
    storage_column: str | None = None
    # JSON only: the nested type named by target_type
    nested: "NestedType | None" = None

    def __post_init__(self):
        if not self.target_name:
            raise ValueError(f"Field '{self.source_name}' has no target name")
        if not self.serialized_name:
            self.serialized_name = self.source_name

    def to_dict(self) -> dict[str, Any]:
        """Serializable view of the field (nested types referenced by name)."""
        return {
            "source_name": self.source_name,
            "target_name": self.target_name,
            "source_type": self.source_type,
            "target_type": self.target_type,
            "nullable": self.nullable,
            "is_primary_key": self.is_primary_key,
            "is_auto_increment": self.is_auto_increment,
            "comment": self.comment,
            "serialized_name": self.serialized_name,
            "storage_column": self.storage_column,
        }


@dataclass
class NestedType:
    """A record type discovered inside a JSON document."""

    name: str
    fields: list[Field] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "fields": [f.to_dict() for f in self.fields]}


@dataclass
class ParsedSchema:
    """
    Output of a DDL parser or the JSON inferencer.

    When ``error`` is set the parse failed and ``fields`` must not be used.
    """

    table_name: str | None = None
    struct_name: str | None = None
    fields: list[Field] = field(default_factory=list)
    nested_types: list[NestedType] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, message: str, **kwargs: Any) -> "ParsedSchema":
        """Build a failed result carrying only the error message."""
        return cls(error=message, **kwargs)

    def iter_all_fields(self):
        """Yield top-level fields followed by the fields of every nested type."""
        yield from self.fields
        for nested in self.nested_types:
            yield from nested.fields

    def to_dict(self) -> dict[str, Any]:
        return {
            "table_name": self.table_name,
            "struct_name": self.struct_name,
            "fields": [f.to_dict() for f in self.fields],
            "nested_types": [n.to_dict() for n in self.nested_types],
            "error": self.error,
        }


@dataclass
class GenerateOptions:
    """Options recognized by the struct generator and the file renderer."""

    struct_name: str | None = None
    package_name: str = "model"
    emit_storage_accessor: bool = True
    inline_nested_types: bool = True
