"""
Go struct code generation.

Renders a ParsedSchema as a Go struct with ``json`` and ``gorm`` tags. Field
names, types and tags are padded per nesting level so every column lines up.
"""

import logging

from structify.parser.shared.constants import DEFAULT_JSON_STRUCT_NAME
from structify.parser.shared.naming import to_camel_case
from structify.typing.schema import Field, GenerateOptions, NestedType, ParsedSchema

logger = logging.getLogger(__name__)

INDENT = "    "


def build_tag(field: Field, include_persistence: bool = True) -> str:
    """
    Build the struct tag of a field.

    Args:
        field: Field to tag
        include_persistence: Whether to add the gorm tag (only for fields with a storage column)

    Returns:
        Backquoted tag, e.g. ``json:"id" gorm:"column:id;primaryKey"``
    """
    parts = [f'json:"{field.serialized_name}"']

    if include_persistence and field.storage_column is not None:
        gorm_parts = [f"column:{field.storage_column}"]
        if field.is_primary_key:
            gorm_parts.append("primaryKey")
        if field.is_auto_increment:
            gorm_parts.append("autoIncrement")
        if not field.nullable:
            gorm_parts.append("not null")
        parts.append(f'gorm:"{";".join(gorm_parts)}"')

    return "`" + " ".join(parts) + "`"


def resolve_struct_name(schema: ParsedSchema, options: GenerateOptions) -> str:
    """Explicit override, then the schema's struct name, then the camel-cased table name."""
    if options.struct_name:
        return options.struct_name
    if schema.struct_name:
        return schema.struct_name
    if schema.table_name:
        return to_camel_case(schema.table_name)
    return DEFAULT_JSON_STRUCT_NAME


class StructGenerator:
    """Generates Go struct declarations from parsed schemas."""

    def __init__(self, options: GenerateOptions | None = None):
        """
        Initialize the generator.

        Args:
            options: Generation options (defaults when omitted)
        """
        self.options = options or GenerateOptions()

    def generate(self, schema: ParsedSchema) -> str:
        """
        Generate Go source for a parsed schema.

        Args:
            schema: Successfully parsed schema

        Returns:
            Go declarations, newline terminated
        """
        struct_name = resolve_struct_name(schema, self.options)
        nested_by_name = self._index_nested(schema.nested_types)

        if schema.table_name:
            description = f"represents the {schema.table_name} table"
        else:
            description = "represents a JSON document"

        lines = [f"// {struct_name} {description}", f"type {struct_name} struct {{"]
        lines.extend(self._render_fields(schema.fields, 0, True, nested_by_name))
        lines.append("}")

        if self.options.emit_storage_accessor and schema.table_name:
            lines.extend(
                [
                    "",
                    "// TableName returns the table name",
                    f"func ({struct_name}) TableName() string {{",
                    f'{INDENT}return "{schema.table_name}"',
                    "}",
                ]
            )

        if not self.options.inline_nested_types:
            for nested in schema.nested_types:
                lines.append("")
                lines.extend(self._render_nested_declaration(nested))

        logger.debug(f"Generated struct {struct_name} with {len(schema.fields)} fields")
        return "\n".join(lines) + "\n"

    def _render_nested_declaration(self, nested: NestedType) -> list[str]:
        lines = [f"// {nested.name} is a nested type", f"type {nested.name} struct {{"]
        lines.extend(self._render_fields(nested.fields, 0, False, {}))
        lines.append("}")
        return lines

    def _render_fields(
        self,
        fields: list[Field],
        depth: int,
        include_persistence: bool,
        nested_by_name: dict[str, NestedType],
    ) -> list[str]:
        """Render one aligned block of field lines at the given nesting depth."""
        indent = INDENT * (depth + 1)
        rows = [
            (
                field.target_name,
                self._render_type(field, depth, nested_by_name),
                build_tag(field, include_persistence),
                field.comment,
            )
            for field in fields
        ]

        # Multi-line (inline struct) types do not widen the columns
        single_line = [row for row in rows if "\n" not in row[1]]
        name_width = max((len(row[0]) for row in rows), default=0)
        type_width = max((len(row[1]) for row in single_line), default=0)
        tag_width = max((len(row[2]) for row in single_line), default=0)

        lines = []
        for name, go_type, tag, comment in rows:
            if "\n" in go_type:
                line = f"{indent}{name.ljust(name_width)} {go_type} {tag}"
            else:
                line = f"{indent}{name.ljust(name_width)} {go_type.ljust(type_width)} {tag}"
                if comment:
                    line = line.ljust(len(indent) + name_width + type_width + tag_width + 2)
            if comment:
                line += f" // {comment}"
            lines.append(line)

        return lines

    def _render_type(
        self, field: Field, depth: int, nested_by_name: dict[str, NestedType]
    ) -> str:
        if not self.options.inline_nested_types:
            return field.target_type

        nested = self._resolve_nested(field, nested_by_name)
        if nested is None:
            return field.target_type

        # Keep slice prefixes ("[]", "[][]") in front of the inline struct
        prefix = field.target_type.removesuffix(nested.name)
        return prefix + self._render_inline(nested, depth, nested_by_name)

    def _render_inline(
        self, nested: NestedType, depth: int, nested_by_name: dict[str, NestedType]
    ) -> str:
        if not nested.fields:
            return "struct{}"

        inner = self._render_fields(nested.fields, depth + 1, False, nested_by_name)
        closing = INDENT * (depth + 1) + "}"
        return "\n".join(["struct {", *inner, closing])

    @staticmethod
    def _resolve_nested(
        field: Field, nested_by_name: dict[str, NestedType]
    ) -> NestedType | None:
        if field.nested is not None:
            return field.nested
        # Schemas built by hand may only reference nested types by name
        return nested_by_name.get(field.target_type.lstrip("[]"))

    @staticmethod
    def _index_nested(nested_types: list[NestedType]) -> dict[str, NestedType]:
        index: dict[str, NestedType] = {}
        for nested in nested_types:
            index.setdefault(nested.name, nested)
        return index


def generate_struct(schema: ParsedSchema, options: GenerateOptions | None = None) -> str:
    """Generate Go source for a parsed schema."""
    return StructGenerator(options).generate(schema)
