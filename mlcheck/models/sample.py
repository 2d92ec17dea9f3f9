"""Sample text models for mlcheck."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class LineMatch:
    """Classification of a single sample line."""

    index: int
    text: str
    matched: bool

    def to_dict(self) -> dict:
        return {"index": self.index, "matched": self.matched, "text": self.text}


@dataclass
class Sample:
    """Sample content split into lines."""

    source: str
    content: str
    lines: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if the sample has no content at all."""
        return self.content == ""

    @property
    def line_count(self) -> int:
        return len(self.lines)
