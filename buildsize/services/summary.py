from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from buildsize.models.report import Report, ReportEntry
from buildsize.services.formatting import format_bytes, relative_bar, truncate_path
from buildsize.services.viewport import visible_range


def _entries_table(
    title: str, name_header: str, entries: list[ReportEntry], rows: range, name_width: int = 110
) -> Table:
    table = Table(title=title, header_style="bold yellow")
    table.add_column("#", justify="right", style="#969896")
    table.add_column("Percent", justify="right")
    table.add_column("Size", justify="right")
    table.add_column(name_header)
    table.add_column("Share")
    for i in rows:
        entry = entries[i]
        table.add_row(
            str(entry.original_index),
            entry.percent_text,
            entry.size.display,
            escape(truncate_path(entry.name, name_width)),
            relative_bar(entry.percent),
        )
    return table


def render_report_list(console: Console, labels: list[str]) -> None:
    table = Table(title="Build Reports (most recent first)", header_style="bold cyan")
    table.add_column("Report")
    for label in labels:
        table.add_row(escape(label))
    console.print(table)


def render_report(
    console: Console,
    report: Report,
    *,
    offset: int = 0,
    rows: int = 50,
    show_categories: bool = True,
) -> None:
    totals = Table(title=escape(report.name), header_style="bold cyan", show_header=False)
    totals.add_column("Label")
    totals.add_column("Size", justify="right")
    totals.add_row("Total Compressed Size", report.compressed_size.display)
    totals.add_row("Total Uncompressed Size", report.uncompressed_size.display)
    totals.add_section()
    totals.add_row(f"[bold]{len(report.files):,}[/bold] files", format_bytes(report.total_file_bytes))
    console.print(totals)

    if show_categories:
        console.print(
            _entries_table("Categories", "Category", report.categories, range(len(report.categories)))
        )

    window = visible_range(float(offset), float(rows), 1.0, len(report.files))
    title = "Files"
    if len(window) < len(report.files):
        title = f"Files {window.start + 1:,}-{window.stop:,} of {len(report.files):,}"
    console.print(_entries_table(title, "File Path", report.files, window))
