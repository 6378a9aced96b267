"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
RENDERING_PANEL = "Rendering"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

SourceDirArgument = Annotated[
    Path,
    typer.Argument(
        metavar="SOURCE",
        help="Directory holding the Markdown (.md) and HTML (.html) pages of the site.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        resolve_path=True,
    ),
]

OutputDirOption = Annotated[
    Path,
    typer.Option(
        "--output-dir",
        "-o",
        help="Directory receiving the generated pages.",
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

PrettyUrlsOption = Annotated[
    bool,
    typer.Option(
        "--pretty-urls/--no-pretty-urls",
        help="Publish pages as directory URLs (/about/) instead of files (/about.html).",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ExtensionOption = Annotated[
    list[str] | None,
    typer.Option(
        "--extension",
        "-x",
        help="Output extension expanded and annotated by the multilingual plugin (repeatable).",
        rich_help_panel=RENDERING_PANEL,
    ),
]

ParserOption = Annotated[
    str,
    typer.Option(
        "--parser",
        help="BeautifulSoup parser used for rendered documents.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
