"""Parsers for homework text."""

from .grid_parser import GridParser
from .interfaces import GridParserProtocol, TranscoderProtocol
from .reflow_transcoder import ReflowTranscoder

__all__ = [
    "GridParser",
    "GridParserProtocol",
    "ReflowTranscoder",
    "TranscoderProtocol",
]
