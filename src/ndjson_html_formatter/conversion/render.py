"""Rich rendering helpers for batch conversion summaries."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from .schemas import BatchResult

TABLE_ROW_STYLES = ["white", "yellow"]


def render_batch_summary(result: BatchResult, console: Console) -> None:
    """Render one row per input item with its conversion status."""
    table = Table(title="Conversion Summary", show_footer=True, footer_style="bold", title_justify="left")
    table.add_column("Input", footer="Total", justify="left")
    table.add_column("Output", justify="left")
    table.add_column("Envelopes", justify="right")
    table.add_column("Status", justify="left")

    style_index = 0
    for failure in result.resolution_failures:
        table.add_row(failure.specification, "-", "-", "[red]unresolved[/red]", style=TABLE_ROW_STYLES[style_index])
        style_index = (style_index + 1) % len(TABLE_ROW_STYLES)

    if result.merge_failure is not None:
        table.add_row(
            result.merge_failure.specification,
            "-",
            "-",
            "[red]merge failed[/red]",
            style=TABLE_ROW_STYLES[style_index],
        )
        style_index = (style_index + 1) % len(TABLE_ROW_STYLES)

    total_envelopes = 0
    for outcome in result.outcomes:
        total_envelopes += outcome.envelope_count
        status = "[green]converted[/green]" if outcome.succeeded else "[red]failed[/red]"
        table.add_row(
            str(outcome.source_path),
            str(outcome.output_path) if outcome.output_path is not None else "-",
            f"{outcome.envelope_count:,}" if outcome.succeeded else "-",
            status,
            style=TABLE_ROW_STYLES[style_index],
        )
        style_index = (style_index + 1) % len(TABLE_ROW_STYLES)

    table.columns[2].footer = f"{total_envelopes:,}"
    table.columns[3].footer = f"{result.converted_count}/{len(result.outcomes)} converted"
    console.print(table)
