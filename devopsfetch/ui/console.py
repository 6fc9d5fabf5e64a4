"""
devopsfetch UI - Console implementation.

Rich-based console for report tables, detail blocks and verbatim passthrough
of external tool output. Markup is never interpreted in data coming from the
host: addresses like ``[::]:80`` would otherwise be read as style tags.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.measure import Measurement
from rich.segment import Segments
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# Tables are rendered at their natural width, up to this many columns.
MAX_TABLE_WIDTH = 4096

DEVOPSFETCH_THEME = Theme(
    {
        "heading": "bold cyan",
        "banner": "bold",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "muted": "dim",
    }
)


class ConsoleUI:
    """
    Console user interface.

    Reports go to ``console`` (stdout); errors go to ``err_console`` (stderr).
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        theme: Theme | None = None,
    ) -> None:
        """Initialize consoles."""
        theme = theme or DEVOPSFETCH_THEME
        self.console = console or Console(theme=theme, highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(
            theme=theme, highlight=False, soft_wrap=True, stderr=True
        )

    def heading(self, title: str) -> None:
        """Display a section heading."""
        self.console.print(Text(f"--- {title} ---", style="heading"))

    def banner(self, title: str, width: int = 58) -> None:
        """Display a title framed by rules."""
        rule = "=" * width
        self.console.print(Text(rule, style="banner"))
        self.console.print(Text(title, style="banner"))
        self.console.print(Text(rule, style="banner"))

    def table(self, headers: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        """
        Display an aligned, borderless table.

        Column widths come from the content alone; cells are never wrapped or
        truncated to the terminal width.
        """
        table = Table(
            box=None,
            show_header=True,
            header_style="bold",
            show_edge=False,
            pad_edge=False,
            padding=(0, 2, 0, 0),
        )
        for header in headers:
            table.add_column(header, no_wrap=True, overflow="ignore")
        for row in rows:
            table.add_row(*(Text("" if cell is None else str(cell)) for cell in row))
        self._print_unbounded(table)

    def tsv_table(self, lines: Iterable[str]) -> None:
        """Display tab-separated lines as a table; the first line is the header."""
        rows = [line.split("\t") for line in lines if line.strip()]
        if not rows:
            return
        header, body = rows[0], rows[1:]
        width = len(header)
        self.table(header, [(row + [""] * width)[:width] for row in body])

    def details(self, fields: Iterable[tuple[str, str]]) -> None:
        """Display a key/value block with aligned values."""
        grid = Table.grid(padding=(0, 1))
        grid.add_column(no_wrap=True)
        grid.add_column(no_wrap=True, overflow="ignore")
        for key, value in fields:
            grid.add_row(Text(f"{key}:", style="bold"), Text(value or ""))
        self._print_unbounded(grid)

    def verbatim(self, lines: Iterable[str]) -> None:
        """Print external output exactly as received."""
        for line in lines:
            self.console.out(line, highlight=False)

    def text(self, message: str, style: str | None = None) -> None:
        """Print one line of plain text."""
        self.console.print(Text(message, style=style or ""))

    def muted(self, message: str) -> None:
        """Display muted message."""
        self.text(message, style="muted")

    def newline(self) -> None:
        """Print empty line."""
        self.console.print()

    def error(self, message: str) -> None:
        """Display error message on stderr."""
        if not message.lower().startswith("error"):
            message = f"Error: {message}"
        self.err_console.print(Text(message, style="error"))

    def _print_unbounded(self, renderable: Table) -> None:
        options = self.console.options.update_width(MAX_TABLE_WIDTH)
        width = Measurement.get(self.console, options, renderable).maximum
        segments = list(self.console.render(renderable, options.update_width(max(width, 1))))
        self.console.print(Segments(segments), crop=False)
