"""Console presentation helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich import box
from rich.table import Table

from multilang.core.content import ContentUnit

from .state import get_cli_state


def _format_path(path: Path) -> str:
    """Format a path relative to the current working directory for display."""
    resolved = path.resolve()
    try:
        return str(resolved.relative_to(Path.cwd()))
    except ValueError:
        return str(resolved)


def present_build_summary(units: Sequence[ContentUnit], output_dir: Path) -> None:
    """Print the generated pages with their language and alternates."""
    state = get_cli_state()
    table = Table(
        title=f"Pages written to {_format_path(output_dir)}",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("URL")
    table.add_column("Lang")
    table.add_column("Alternates")

    for unit in units:
        lang = unit.data.get("lang")
        alternates = unit.alternates or {}
        others = [code for code in alternates if code != lang]
        table.add_row(
            unit.url or "",
            lang if isinstance(lang, str) else "",
            ", ".join(others),
        )

    state.console.print(table)


__all__ = ["present_build_summary"]
