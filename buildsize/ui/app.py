from __future__ import annotations

from typing import override

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import DataTable, Static

from buildsize.config.schema import AppConfig
from buildsize.models.enums import SortKey
from buildsize.models.report import Report, ReportEntry, report_labels
from buildsize.services.formatting import format_bytes, relative_bar, truncate_path
from buildsize.services.ordering import sort_entries
from buildsize.services.viewport import page_count, page_range

_SORT_KEYS: dict[str, SortKey] = {
    "s": SortKey.SIZE,
    "a": SortKey.NAME,
    "e": SortKey.EXTENSION,
    "o": SortKey.INDEX,
}

_COL_PERCENT = 8
_COL_SIZE = 12
_COL_BAR = 18


class HelpOverlay(ModalScreen[None]):
    CSS = """
    HelpOverlay {
        align: center middle;
        background: rgba(0,0,0,0.45);
    }
    #help-box {
        width: 70%;
        height: auto;
        background: #282a2e;
        border: solid #81a2be;
        padding: 1 2;
        color: #c5c8c6;
    }
    """

    @override
    def compose(self) -> ComposeResult:
        content = "\n".join(
            [
                "[b #81a2be]Reports[/]",
                "  n / p: Next/Previous report (most recent first)",
                "",
                "[b #81a2be]Sorting[/]",
                "  s: Size (largest first)",
                "  a: Name",
                "  e: Extension",
                "  o: Original order",
                "",
                "[b #81a2be]Files[/]",
                "  [ / ]: Previous/Next page",
                "  c: Show/hide categories",
                "",
                "[b #81a2be]Other[/]",
                "  ?: Toggle help",
                "  q / Ctrl+C: Quit",
            ]
        )
        yield Static(content, id="help-box")

    def key_escape(self) -> None:
        self.dismiss()

    def key_q(self) -> None:
        self.dismiss()

    def key_question_mark(self) -> None:
        self.dismiss()


class BuildSizeApp(App[None]):
    CSS = """
    #app-grid {
        padding: 0 1;
    }
    #title-row, #totals-row, #status-row {
        height: 1;
    }
    #category-table {
        height: auto;
        max-height: 14;
    }
    #file-table {
        height: 1fr;
    }
    """

    def __init__(self, reports: list[Report], config: AppConfig, initial_index: int = 0) -> None:
        super().__init__()
        self.reports = reports
        self.config = config
        self.report_index = max(0, min(initial_index, len(reports) - 1))
        self.page_index = 0
        self.show_categories = config.show_categories
        self._page_size = config.page_size
        self._labels = report_labels(reports)

    @property
    def current_report(self) -> Report:
        return self.reports[self.report_index]

    @override
    def compose(self) -> ComposeResult:
        yield Container(
            Static(id="title-row"),
            Static(id="totals-row"),
            DataTable(id="category-table"),
            DataTable(id="file-table"),
            Static(id="status-row"),
            id="app-grid",
        )

    def on_mount(self) -> None:
        for table_id in ("#category-table", "#file-table"):
            table = self.query_one(table_id, DataTable)
            table.cursor_type = "row"
            table.zebra_stripes = True
        self.query_one("#file-table", DataTable).focus()
        self._refresh_all()

    def on_resize(self) -> None:
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._render_header_rows()
        self._render_categories()
        self._render_files()
        self._render_footer_row()

    def _render_header_rows(self) -> None:
        label = self._labels[self.report_index]
        self.query_one("#title-row", Static).update(
            Text.from_markup(f"[#81a2be]Report {self.report_index + 1}/{len(self.reports)}:[/] {escape(label)}")
        )
        report = self.current_report
        self.query_one("#totals-row", Static).update(
            Text.from_markup(
                f"[#b5bd68]Compressed:[/] {report.compressed_size.display}"
                + f"    [#f0c674]Uncompressed:[/] {report.uncompressed_size.display}"
                + f"    [#de935f]Files:[/] {len(report.files):,} ({format_bytes(report.total_file_bytes)})"
            )
        )

    def _name_width(self) -> int:
        return max(20, self.size.width - _COL_PERCENT - _COL_SIZE - _COL_BAR - 12)

    def _fill_table(self, table: DataTable, name_header: str, entries: list[ReportEntry], rows: range) -> None:
        name_width = self._name_width()
        table.clear(columns=True)
        table.add_column("PERCENT", width=_COL_PERCENT)
        table.add_column("SIZE", width=_COL_SIZE)
        table.add_column(name_header, width=name_width)
        table.add_column("SHARE", width=_COL_BAR)
        for i in rows:
            entry = entries[i]
            table.add_row(
                entry.percent_text,
                entry.size.display,
                Text(truncate_path(entry.name, name_width)),
                relative_bar(entry.percent, _COL_BAR - 2),
            )

    def _render_categories(self) -> None:
        table = self.query_one("#category-table", DataTable)
        table.display = self.show_categories
        if self.show_categories:
            categories = self.current_report.categories
            self._fill_table(table, "CATEGORY", categories, range(len(categories)))

    def _render_files(self) -> None:
        files = self.current_report.files
        self.page_index = max(0, min(self.page_index, page_count(self._page_size, len(files)) - 1))
        rows = page_range(self.page_index, self._page_size, len(files))
        self._fill_table(self.query_one("#file-table", DataTable), "FILE PATH", files, rows)

    def _render_footer_row(self) -> None:
        total_pages = page_count(self._page_size, len(self.current_report.files))
        left = f"Page {self.page_index + 1}/{total_pages}"
        hints = "q quit | ? help | n/p report | s/a/e/o sort | c categories | \\[/] page"
        self.query_one("#status-row", Static).update(Text.from_markup(f"[#969896]{left}    {hints}[/]"))

    def _select_report(self, delta: int) -> None:
        new_index = max(0, min(len(self.reports) - 1, self.report_index + delta))
        if new_index == self.report_index:
            return
        self.report_index = new_index
        self.page_index = 0
        self._refresh_all()

    def _change_page(self, delta: int) -> None:
        total_pages = page_count(self._page_size, len(self.current_report.files))
        new_page = max(0, min(total_pages - 1, self.page_index + delta))
        if new_page == self.page_index:
            return
        self.page_index = new_page
        self._refresh_all()

    def _sort(self, key: SortKey) -> None:
        sort_entries(self.current_report.categories, key)
        sort_entries(self.current_report.files, key)
        self._refresh_all()

    @override
    def on_key(self, event) -> None:  # type: ignore[override]
        key = event.key
        char = event.character or ""

        if key in {"q", "ctrl+c"}:
            self.exit()
            return
        if key == "question_mark" or char == "?":
            self.push_screen(HelpOverlay())
            return
        if key == "n":
            self._select_report(1)
            return
        if key == "p":
            self._select_report(-1)
            return
        if key == "c":
            self.show_categories = not self.show_categories
            self._refresh_all()
            return
        if key in _SORT_KEYS:
            self._sort(_SORT_KEYS[key])
            return
        if key == "left_square_bracket" or char == "[":
            self._change_page(-1)
            return
        if key == "right_square_bracket" or char == "]":
            self._change_page(1)
            return
