"""
Type definitions for structify.
"""

from .schema import Dialect, Field, GenerateOptions, NestedType, ParsedSchema

__all__ = [
    "Dialect",
    "Field",
    "GenerateOptions",
    "NestedType",
    "ParsedSchema",
]
