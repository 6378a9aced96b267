"""Typer application wiring for the multilang CLI."""

from __future__ import annotations

from rich.traceback import Traceback
import typer

from multilang.ui.cli.commands.build import build

from .state import debug_enabled, emit_error, get_cli_state


app = typer.Typer(
    help="Build multilingual static pages with cross-language alternates.",
    context_settings={"help_option_names": ["--help"]},
)


app.command()(build)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except Exception as exc:
        if not debug_enabled():
            emit_error(str(exc), exception=exc)
        else:
            state = get_cli_state()
            state.err_console.print(
                Traceback.from_exception(type(exc), exc, exc.__traceback__)
            )
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
