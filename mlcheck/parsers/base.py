"""Abstract base class for sample parsers."""

from abc import ABC, abstractmethod
from pathlib import Path

from mlcheck.models import Sample


class SampleParser(ABC):
    """Abstract base class for sample parsers."""

    @abstractmethod
    def parse(self, file_path: Path) -> Sample:
        """Read a sample file into a Sample model.

        Args:
            file_path: Path to the sample file

        Returns:
            Parsed Sample model

        Raises:
            MlcheckParseError: If reading fails
        """
        pass

    @abstractmethod
    def parse_text(self, text: str, source: str = "<string>") -> Sample:
        """Build a Sample from in-memory text.

        Args:
            text: Sample content
            source: Label describing where the text came from

        Returns:
            Sample model
        """
        pass
