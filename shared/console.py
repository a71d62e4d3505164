"""
valpass Console Interface
==========================

Rich-powered console abstraction providing a consistent presentation
layer for the valpass command-line tools.

The class wraps :class:`rich.console.Console` and adds convenience methods
for section headers, severity-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

_VALPASS_THEME = Theme(
    {
        "valpass.section": "bold bright_magenta",
        "valpass.success": "bold green",
        "valpass.warning": "bold yellow",
        "valpass.error": "bold red",
        "valpass.dim": "dim white",
        "valpass.pass": "bold bright_green",
        "valpass.fail": "bold white on red",
    }
)


class ValpassConsole:
    """Unified console interface for the valpass tools.

    Usage::

        con = ValpassConsole()
        con.section("Passphrase Quality")
        con.success("Passphrase accepted")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for later export.
        """
        self._console = Console(
            theme=_VALPASS_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="valpass.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[valpass.success][✔] SUCCESS:[/valpass.success] {message}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[valpass.warning][⚠] WARNING:[/valpass.warning] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[valpass.error][✘] ERROR:[/valpass.error] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        justify: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; plain values are stringified, markup is kept.
            caption:  Optional footer caption.
            justify:  Optional per-column justification (``left``/``right``).
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            how = justify[idx] if justify and idx < len(justify) else "left"
            tbl.add_column(col_name, justify=how)  # type: ignore[arg-type]

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
