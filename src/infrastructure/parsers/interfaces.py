"""Protocol interfaces for parsers."""

from typing import Protocol

from domain.models import MathHomework, Operation


class GridParserProtocol(Protocol):
    """Protocol for parsing homework text into a grid."""

    @classmethod
    def parse(cls, text: str) -> MathHomework:
        """Parse full homework text."""
        ...

    @classmethod
    def parse_operators(cls, text: str) -> list[Operation]:
        """Parse a line (or block) of operator symbols."""
        ...


class TranscoderProtocol(Protocol):
    """Protocol for rewriting homework text into another layout."""

    def translate(self, text: str) -> str:
        """Return the re-flowed homework text."""
        ...
