"""Plain text sample parser."""

import logging
from pathlib import Path

from mlcheck.models import Sample
from mlcheck.parsers.base import SampleParser
from mlcheck.exceptions import MlcheckParseError

logger = logging.getLogger(__name__)


class TextSampleParser(SampleParser):
    """Parser splitting a text sample into lines on '\\n'."""

    def parse(self, file_path: Path) -> Sample:
        """Read a text file into a Sample model.

        Args:
            file_path: Path to the text file

        Returns:
            Parsed Sample model

        Raises:
            MlcheckParseError: If the file cannot be read
        """
        file_path = Path(file_path)

        if not file_path.is_file():
            raise MlcheckParseError(
                f"Could not read file: {file_path} does not exist",
                file_path=str(file_path),
            )

        # Bytes are decoded directly so '\r' survives; lines split on '\n' only
        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise MlcheckParseError(
                f"Could not read file: {e}",
                file_path=str(file_path),
            )

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError:
            # latin-1 maps every byte, so this fallback cannot fail
            logger.info(f"{file_path} is not valid UTF-8, reading as latin-1")
            content = raw.decode("latin-1")

        return self.parse_text(content, source=str(file_path))

    def parse_text(self, text: str, source: str = "<string>") -> Sample:
        """Split text into lines without trimming.

        Blank and trailing lines are kept as entries, so empty text yields
        a single empty line.
        """
        return Sample(source=source, content=text, lines=text.split("\n"))
