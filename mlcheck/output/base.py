"""Abstract base class for report formatters."""

from abc import ABC, abstractmethod

from mlcheck.models import CheckResult


class ReportFormatter(ABC):
    """Abstract base class for report formatters."""

    @abstractmethod
    def render(self, result: CheckResult) -> str:
        """Render a check result.

        Args:
            result: Result to render

        Returns:
            Rendered report text
        """
        pass
