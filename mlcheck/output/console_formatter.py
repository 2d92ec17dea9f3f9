"""Console report formatter using rich."""

import io

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mlcheck.models import CheckResult
from mlcheck.output.base import ReportFormatter


class ConsoleFormatter(ReportFormatter):
    """Renders the per-line match table and the group total."""

    def __init__(self, show_line_numbers: bool = False) -> None:
        """Initialize the console formatter.

        Args:
            show_line_numbers: Whether to add a line number column
        """
        self._show_line_numbers = show_line_numbers

    def build_table(self, result: CheckResult) -> Table:
        """Build the match table for a result."""
        table = Table(show_header=True, header_style="bold")
        if self._show_line_numbers:
            table.add_column("#", style="dim", justify="right")
        table.add_column("Pattern Match?", justify="left")
        table.add_column("String", overflow="fold")

        for line in result.lines:
            # Sample text is never interpreted as markup
            row = [
                Text(str(line.matched).lower(), style="green" if line.matched else "red"),
                Text(line.text),
            ]
            if self._show_line_numbers:
                row.insert(0, Text(str(line.index + 1)))
            table.add_row(*row)

        return table

    def build_summary(self, result: CheckResult) -> Panel:
        """Build the total panel for a result."""
        return Panel.fit(
            f"[bold]Total Matches: {result.total_groups}[/bold]",
            border_style="blue",
        )

    def print_to(self, console: Console, result: CheckResult) -> None:
        """Print the report to a rich console."""
        console.print(self.build_table(result))
        console.print()
        console.print(self.build_summary(result))

    def render(self, result: CheckResult) -> str:
        """Render the report to plain text."""
        console = Console(file=io.StringIO(), record=True, width=120, color_system=None)
        self.print_to(console, result)
        return console.export_text()
