from __future__ import annotations

import logging
from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from result import Err

from buildsize.config.defaults import default_config
from buildsize.config.loader import load_config, sample_config_json
from buildsize.config.schema import clamp_log_count
from buildsize.models.enums import SortKey
from buildsize.models.report import report_labels
from buildsize.services.aggregator import read_all
from buildsize.services.locator import default_log_paths, existing_log_paths
from buildsize.services.ordering import sort_entries
from buildsize.services.summary import render_report, render_report_list

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run(
    log_paths: Annotated[
        list[str] | None,
        typer.Argument(help="Build logs to read, least recent first. Defaults to the editor logs."),
    ] = None,
    max_logs: Annotated[int | None, typer.Option("--max-logs", "-m", help="Most recent reports to keep.")] = None,
    select: Annotated[int, typer.Option("--select", "-s", help="Report to show, 0 is the most recent.")] = 0,
    sort: Annotated[SortKey | None, typer.Option("--sort", help="Reorder categories and files.")] = None,
    offset: Annotated[int, typer.Option("--offset", help="First file row to show.")] = 0,
    rows: Annotated[int | None, typer.Option("--rows", "-n", help="Number of file rows to show.")] = None,
    hide_categories: Annotated[bool, typer.Option("--hide-categories", help="Do not show the category table.")] = False,
    list_reports: Annotated[bool, typer.Option("--list", "-l", help="List the reports that were read.")] = False,
    interactive: Annotated[bool, typer.Option("--interactive", "-i", help="Launch interactive TUI.")] = False,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug diagnostics.")] = False,
) -> None:
    _configure_logging(verbose)

    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)

    config_result = load_config()
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    overrides: dict[str, object] = {}
    if max_logs is not None:
        overrides["max_log_count"] = clamp_log_count(max_logs)
    if rows is not None:
        overrides["top_count"] = max(1, rows)
    if hide_categories:
        overrides["show_categories"] = False
    if overrides:
        config = replace(config, **overrides)

    sources = log_paths or config.log_paths or existing_log_paths(default_log_paths())
    if not sources:
        console.print("[yellow]No build logs found.[/]")
        raise typer.Exit(0)

    with console.status("[bold #8abeb7]Reading build logs...[/]"):
        result = read_all(sources, config.max_log_count)

    for error in result.errors:
        console.print(f"[yellow]Skipped {escape(error.path)}: {escape(error.message)}[/]")

    if not result.reports:
        console.print("[yellow]No build reports found.[/]")
        raise typer.Exit(1 if result.errors else 0)

    if list_reports:
        render_report_list(console, report_labels(result.reports))
        raise typer.Exit(0)

    if interactive:
        from buildsize.ui.app import BuildSizeApp

        BuildSizeApp(reports=result.reports, config=config, initial_index=select).run()
        raise typer.Exit(0)

    if not 0 <= select < len(result.reports):
        console.print(f"[red]No report at index {select}; {len(result.reports)} report(s) were read.[/]")
        raise typer.Exit(1)

    report = result.reports[select]
    if sort is not None:
        sort_entries(report.categories, sort)
        sort_entries(report.files, sort)

    render_report(
        console,
        report,
        offset=max(0, offset),
        rows=config.top_count,
        show_categories=config.show_categories,
    )


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
