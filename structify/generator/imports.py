"""
Go import derivation for generated structs.
"""

from collections.abc import Iterable

from structify.parser.shared.constants import GO_TYPE_IMPORTS
from structify.typing.schema import Field, ParsedSchema


def get_required_imports(source: ParsedSchema | Iterable[Field]) -> list[str]:
    """
    Determine the imports needed by the field types of a schema.

    Only ``time.Time`` and ``json.RawMessage`` need imports. Each import is
    reported once, in the order its type is first encountered.

    Args:
        source: Parsed schema (top-level and nested fields are scanned) or fields

    Returns:
        Import paths, e.g. ``["time", "encoding/json"]``
    """
    fields = source.iter_all_fields() if isinstance(source, ParsedSchema) else source

    imports: list[str] = []
    for field in fields:
        for go_type, import_path in GO_TYPE_IMPORTS.items():
            if go_type in field.target_type and import_path not in imports:
                imports.append(import_path)
    return imports
