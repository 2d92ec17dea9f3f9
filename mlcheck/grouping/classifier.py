"""Per-line classification against a multiline pattern."""

import logging
import re
from typing import Callable

from mlcheck.exceptions import MlcheckConfigError

logger = logging.getLogger(__name__)

LinePredicate = Callable[[str], bool]


def compile_pattern(pattern: str) -> LinePredicate:
    """Compile a multiline pattern into a line predicate.

    The predicate matches anywhere in the line, the way log shippers apply
    ``multiline.pattern``; anchor with ``^`` to match at the start.

    Args:
        pattern: Regular expression source

    Returns:
        Function returning True when the line matches the pattern

    Raises:
        MlcheckConfigError: If the pattern is empty or does not compile
    """
    if not pattern:
        raise MlcheckConfigError("Must specify a pattern.", "pattern")

    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise MlcheckConfigError(f"Failed to compile pattern: {e}", "pattern")

    logger.debug(f"Compiled multiline pattern: {pattern!r}")

    def predicate(line: str) -> bool:
        return regex.search(line) is not None

    return predicate


def classify(line: str, predicate: LinePredicate, negate: bool) -> bool:
    """Classify one line, inverting the raw match when negate is set."""
    matches = predicate(line)
    if negate:
        return not matches
    return matches
