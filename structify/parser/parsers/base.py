"""
Abstract base parser class for all parsers.
"""

from abc import ABC, abstractmethod

from structify.typing.schema import ParsedSchema


class BaseParser(ABC):
    """Abstract base class for all parsers."""

    @abstractmethod
    def parse(self, content: str) -> ParsedSchema:
        """
        Parse content and return the parsed schema.

        Structural failures are reported through ``ParsedSchema.error``;
        implementations never raise for malformed input.

        Args:
            content: The content to parse

        Returns:
            Parsed schema
        """
        pass
