"""Implementation of the `multilang` build command."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import typer

from multilang.config import DEFAULT_EXTENSIONS, MultilanguageConfig, SiteConfig
from multilang.core.exceptions import MultilangError
from multilang.loader import load_site
from multilang.plugin import MultilanguagePlugin
from multilang.site import iter_units

from .._options import (
    DebugOption,
    ExtensionOption,
    OutputDirOption,
    ParserOption,
    PrettyUrlsOption,
    SourceDirArgument,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_build_summary
from ..state import emit_error, set_cli_state


def build(
    ctx: typer.Context,
    source: SourceDirArgument,
    output_dir: OutputDirOption = Path("_site"),
    pretty_urls: PrettyUrlsOption = True,
    extensions: ExtensionOption = None,
    parser: ParserOption = "html.parser",
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Split multilingual pages, link their alternates and write the site."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)

    try:
        config = SiteConfig(
            pretty_urls=pretty_urls,
            parser=parser,
            multilanguage=MultilanguageConfig(
                extensions=list(extensions or DEFAULT_EXTENSIONS),
            ),
        )
    except ValidationError as exc:
        emit_error("Invalid configuration.", exception=exc)
        raise typer.Exit(code=1) from exc

    emitter = CliEmitter(state)
    try:
        site = load_site(source, config, emitter=emitter)
        site.use(MultilanguagePlugin(config.multilanguage))
        site.build()
        site.write(output_dir)
    except MultilangError as exc:
        if debug:
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    present_build_summary(list(iter_units(site)), output_dir)


__all__ = ["build"]
