"""CLI entry point for mlcheck."""

import sys
import logging
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mlcheck import MultilineChecker, MultilineConfig, CountingMode, __version__
from mlcheck.exceptions import MlcheckError
from mlcheck.output import ConsoleFormatter, YamlFormatter

console = Console()


def setup_logging(verbose: bool) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def exit_with_message(level: str, msg: str, show_usage: bool) -> None:
    """Print a tagged message, optionally the usage text, and exit with status 1."""
    color = "red" if level == "ERROR" else "yellow"
    console.print(f"[{color}]\\[{level}][/{color}] {escape(msg)}")
    if show_usage:
        click.echo(click.get_current_context().get_help())
    sys.exit(1)


@click.command()
@click.option(
    "-p",
    "--pattern",
    default="",
    help="Multi-line regex pattern",
)
@click.option(
    "-n/-N",
    "--negate/--no-negate",
    default=True,
    help="Negate the pattern matching",
)
@click.option(
    "-f",
    "--file",
    "sample_file",
    default="",
    help="File containing multi-line string",
)
@click.option(
    "-y",
    "--yaml",
    "yaml_config",
    type=click.Path(),
    help="Filebeat prospector yaml config file (overrides the pattern/negate/file options)",
)
@click.option(
    "--prospector",
    default=0,
    type=int,
    help="Index of the prospector to read from the yaml config",
)
@click.option(
    "-m",
    "--mode",
    default=CountingMode.CONFIRMED.value,
    type=click.Choice([m.value for m in CountingMode]),
    help="Group counting policy",
)
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "yaml"]),
    help="Report format",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, message="Version %(version)s")
def cli(
    pattern: str,
    negate: bool,
    sample_file: str,
    yaml_config: Optional[str],
    prospector: int,
    mode: str,
    output_format: str,
    verbose: bool,
) -> None:
    """mlcheck: test a multiline pattern against a sample log file.

    Prints whether each line matches the rule and how many complete
    multi-line groups the sample contains.
    """
    setup_logging(verbose)

    # Choose yaml config first if it was specified
    if yaml_config:
        try:
            config = MultilineConfig.from_yaml(yaml_config, prospector_index=prospector)
        except MlcheckError as e:
            exit_with_message("ERROR", f"Problem with yaml config: {e}", True)
        config.counting_mode = CountingMode(mode)
        config.verbose = verbose
    else:
        config = MultilineConfig(
            pattern=pattern,
            negate=negate,
            counting_mode=mode,
            sample_path=sample_file or None,
            verbose=verbose,
        )

    if not config.sample_path:
        exit_with_message("ERROR", "Must specify a file name.", True)

    if not config.pattern:
        exit_with_message("ERROR", "Must specify a pattern.", True)

    result = MultilineChecker(config=config).check()

    if not result.success:
        exit_with_message("ERROR", "; ".join(result.errors), False)

    if output_format == "yaml":
        click.echo(YamlFormatter().render(result), nl=False)
        return

    for warning in result.warnings:
        console.print(f"[yellow]\\[WARNING][/yellow] {warning}")

    console.print(
        Panel.fit(
            f"[bold blue]mlcheck v{__version__}[/bold blue]\n"
            f"Pattern: {escape(config.pattern)}  Negate: {str(config.negate).lower()}",
            border_style="blue",
        )
    )
    console.print()
    ConsoleFormatter(show_line_numbers=verbose).print_to(console, result)

    # Show settings and metrics if verbose
    if verbose:
        console.print()
        settings_table = Table(title="Settings", show_header=True)
        settings_table.add_column("Setting", style="cyan")
        settings_table.add_column("Value", style="green")
        for key, value in config.to_dict().items():
            settings_table.add_row(key, str(value))
        console.print(settings_table)

        metrics_table = Table(title="Metrics", show_header=True)
        metrics_table.add_column("Metric", style="cyan")
        metrics_table.add_column("Value", style="green")
        for key, value in result.metrics.items():
            if isinstance(value, float):
                metrics_table.add_row(key, f"{value:.4f}")
            else:
                metrics_table.add_row(key, str(value))
        console.print(metrics_table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
