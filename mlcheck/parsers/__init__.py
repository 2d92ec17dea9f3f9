"""Sample parsers for mlcheck."""

from mlcheck.parsers.base import SampleParser
from mlcheck.parsers.text_parser import TextSampleParser

__all__ = [
    "SampleParser",
    "TextSampleParser",
]
