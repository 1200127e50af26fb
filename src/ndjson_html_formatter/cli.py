"""CLI entrypoint for converting NDJSON message files to HTML reports."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from .conversion.render import render_batch_summary
from .conversion.service import BatchConversionService

LOGGER = logging.getLogger(__name__)

TYPER_APP = typer.Typer(help="Converts NDJSON files to HTML files.")


@TYPER_APP.command()
def convert_command(
    input_files: list[str] = typer.Argument(
        ...,
        help="The NDJSON files, directories, or glob patterns to convert.",
        show_default=False,
    ),
    output_directory: Path | None = typer.Option(
        None,
        "--outputDirectory",
        "--output-directory",
        "-o",
        help=(
            "The output directory. If not specified, the output files will be created "
            "in the same directory as the input files."
        ),
    ),
    merged_file: str | None = typer.Option(
        None,
        "--mergedFile",
        "--merged-file",
        "-m",
        help="If specified, all input files will be merged into a single output file.",
    ),
    summary: bool = typer.Option(False, "--summary", help="Print a summary table after converting."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info-level logging."),
) -> None:
    """Convert NDJSON message files into HTML reports."""
    _configure_logging(verbose)
    service = BatchConversionService(
        emit=typer.echo,
        output_directory=output_directory,
        merged_file_name=merged_file,
    )
    result = service.run(input_files)

    if summary:
        render_batch_summary(result, Console())
    if result.failed:
        raise typer.Exit(code=result.exit_code)


def _configure_logging(verbose: bool) -> None:
    """Initialize default logging for CLI usage."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s][%(levelname)s][%(name)s] %(message)s",
    )


def module_cli_entry_point() -> None:
    """Console script entrypoint."""
    TYPER_APP()
