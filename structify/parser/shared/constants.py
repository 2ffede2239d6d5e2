"""
Constants for the parser module.
"""

# Error messages surfaced through ParsedSchema.error
TABLE_NAME_ERROR = "cannot parse table name"
FIELD_DEFINITIONS_ERROR = "cannot parse field definitions"
JSON_NOT_OBJECT_ERROR = "JSON must be an object"
INVALID_JSON_ERROR = "invalid JSON"
JSON_TOO_DEEP_ERROR = "JSON nesting too deep"

# Deepest object/array nesting inferred from a JSON document
MAX_JSON_DEPTH = 64

# Default struct name for JSON documents
DEFAULT_JSON_STRUCT_NAME = "Response"

# Suffix appended to nested types discovered inside arrays
ARRAY_ITEM_SUFFIX = "Item"

# Go types produced by the mappers
GO_STRING = "string"
GO_INT = "int"
GO_INT64 = "int64"
GO_FLOAT64 = "float64"
GO_BOOL = "bool"
GO_BYTES = "[]byte"
GO_ANY = "interface{}"
GO_TIME = "time.Time"
GO_RAW_JSON = "json.RawMessage"
GO_SLICE_PREFIX = "[]"

# Go types that need an import in the generated file
GO_TYPE_IMPORTS = {
    GO_TIME: "time",
    GO_RAW_JSON: "encoding/json",
}

# Table-level constraint keywords, per dialect
MYSQL_CONSTRAINT_KEYWORDS = (
    "PRIMARY KEY",
    "KEY",
    "UNIQUE",
    "INDEX",
    "CONSTRAINT",
    "FOREIGN KEY",
    "FULLTEXT",
    "SPATIAL",
    "CHECK",
)
POSTGRESQL_CONSTRAINT_KEYWORDS = (
    "PRIMARY KEY",
    "UNIQUE",
    "CHECK",
    "CONSTRAINT",
    "FOREIGN KEY",
    "EXCLUDE",
)
SQLITE_CONSTRAINT_KEYWORDS = (
    "PRIMARY KEY",
    "UNIQUE",
    "CHECK",
    "CONSTRAINT",
    "FOREIGN KEY",
)

# Output file extension for exported Go sources
GO_FILE_EXTENSION = ".go"
