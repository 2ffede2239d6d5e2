"""
Structural inference of Go structs from an example JSON document.
"""

import logging
from typing import Any

from structify.typing.schema import Field, NestedType, ParsedSchema

from ..shared.constants import (
    ARRAY_ITEM_SUFFIX,
    DEFAULT_JSON_STRUCT_NAME,
    GO_ANY,
    GO_SLICE_PREFIX,
    INVALID_JSON_ERROR,
    JSON_NOT_OBJECT_ERROR,
    JSON_TOO_DEEP_ERROR,
    MAX_JSON_DEPTH,
)
from ..shared.exceptions import JSONInputError
from ..shared.naming import to_camel_case
from ..shared.strict_json import load_strict_json
from ..type_mapper import map_json_kind
from .base import BaseParser

logger = logging.getLogger(__name__)


def infer_kind(value: Any) -> str:
    """
    Infer the JSON kind of a decoded value.

    Numbers without a fractional part are ``int`` (``1.0`` included),
    other numbers are ``float``.

    Returns:
        One of ``null``, ``boolean``, ``array``, ``object``, ``int``, ``float``, ``string``
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "int" if value.is_integer() else "float"
    return "string"


class JSONParser(BaseParser):
    """
    Infers fields and nested types from a single JSON document.

    Object values become nested types named after the camel-cased key; arrays
    are typed from their first element, with object elements named
    ``<Key>Item``. Nested types are listed after their own children and are
    never deduplicated, so the same name may appear more than once. Documents
    nested deeper than ``MAX_JSON_DEPTH`` are rejected.
    """

    def __init__(self, default_struct_name: str = DEFAULT_JSON_STRUCT_NAME):
        """
        Initialize the JSON parser.

        Args:
            default_struct_name: Struct name recorded on the parsed schema
        """
        self.default_struct_name = default_struct_name

    def parse(self, content: str) -> ParsedSchema:
        nested_types: list[NestedType] = []
        try:
            document = self._load(content)
            fields = self._parse_object_fields(document, nested_types, 0)
        except JSONInputError as e:
            logger.debug(f"JSON rejected: {e}")
            return ParsedSchema.failed(str(e), struct_name=self.default_struct_name)

        logger.debug(f"Inferred {len(fields)} fields and {len(nested_types)} nested types")
        return ParsedSchema(
            struct_name=self.default_struct_name,
            fields=fields,
            nested_types=nested_types,
        )

    def _load(self, content: str) -> dict[str, Any]:
        try:
            document = load_strict_json(content)
        except RecursionError as e:
            raise JSONInputError(JSON_TOO_DEEP_ERROR) from e
        except ValueError as e:
            raise JSONInputError(f"{INVALID_JSON_ERROR}: {e}") from e

        if not isinstance(document, dict):
            raise JSONInputError(JSON_NOT_OBJECT_ERROR)

        return document

    def _parse_object_fields(
        self, obj: dict[str, Any], nested_types: list[NestedType], depth: int
    ) -> list[Field]:
        fields = []

        for key, value in obj.items():
            kind = infer_kind(value)
            go_name = to_camel_case(key)
            nested = None

            if kind == "object":
                nested = self._register_nested(go_name, value, nested_types, depth + 1)
                go_type = nested.name
            elif kind == "array":
                go_type, nested = self._infer_array_type(go_name, value, nested_types, depth + 1)
            else:
                go_type = map_json_kind(kind)

            fields.append(
                Field(
                    source_name=key,
                    target_name=go_name,
                    source_type=kind,
                    target_type=go_type,
                    nullable=value is None,
                    serialized_name=key,
                    nested=nested,
                )
            )

        return fields

    def _infer_array_type(
        self, go_name: str, values: list[Any], nested_types: list[NestedType], depth: int
    ) -> tuple[str, NestedType | None]:
        """Type an array from its first element only."""
        self._check_depth(depth)
        if not values:
            return GO_SLICE_PREFIX + GO_ANY, None

        first = values[0]
        kind = infer_kind(first)

        if kind == "object":
            nested = self._register_nested(
                go_name + ARRAY_ITEM_SUFFIX, first, nested_types, depth + 1
            )
            return GO_SLICE_PREFIX + nested.name, nested

        if kind == "array":
            element_type, nested = self._infer_array_type(go_name, first, nested_types, depth + 1)
            return GO_SLICE_PREFIX + element_type, nested

        return GO_SLICE_PREFIX + map_json_kind(kind), None

    def _register_nested(
        self, name: str, obj: dict[str, Any], nested_types: list[NestedType], depth: int
    ) -> NestedType:
        self._check_depth(depth)
        nested = NestedType(name=name, fields=self._parse_object_fields(obj, nested_types, depth))
        nested_types.append(nested)
        return nested

    @staticmethod
    def _check_depth(depth: int) -> None:
        # Also bounds the recursion of inline struct rendering
        if depth > MAX_JSON_DEPTH:
            raise JSONInputError(JSON_TOO_DEEP_ERROR)
