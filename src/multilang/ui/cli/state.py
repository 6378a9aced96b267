"""Per-invocation CLI settings and stderr reporting helpers."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys

from rich.console import Console
from rich.text import Text
import typer


__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "set_cli_state",
]


@dataclass(slots=True)
class CLIState:
    """Verbosity and traceback settings of the running command."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _console: Console | None = field(default=None, init=False, repr=False)
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def console(self) -> Console:
        # Rebind when the test runner swaps sys.stdout between invocations.
        if self._console is None or self._console.file is not sys.stdout:
            self._console = Console(file=sys.stdout)
        return self._console

    @property
    def err_console(self) -> Console:
        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("multilang_cli_state", default=None)


def get_cli_state(ctx: typer.Context | None = None) -> CLIState:
    """Return the state stored on *ctx*, or the one of the current invocation."""
    if ctx is None:
        state = _STATE_VAR.get() or CLIState()
    else:
        state = ctx.obj if isinstance(ctx.obj, CLIState) else None
        if state is None:
            state = CLIState()
            ctx.obj = state
    _STATE_VAR.set(state)
    return state


def set_cli_state(
    *,
    ctx: typer.Context | None = None,
    verbosity: int | None = None,
    debug: bool | None = None,
) -> CLIState:
    """Update the CLI state, returning the current instance."""
    state = get_cli_state(ctx)
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def _report(level: str, message: str, exception: BaseException | None) -> None:
    state = get_cli_state()
    style = "red" if level == "error" else "yellow"
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None and state.verbosity >= 1:
        detail = str(exception).strip()
        if detail and detail not in message:
            text.append(f"\n{detail}", style=style)
        text.append(f"\ntype: {type(exception).__name__}", style=style)
    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    """Print a warning to stderr."""
    _report("warning", message, exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    """Print an error to stderr, with exception details when verbose."""
    _report("error", message, exception)


def debug_enabled() -> bool:
    """Return whether ``--debug`` was requested for the current invocation."""
    state = _STATE_VAR.get()
    return state is not None and state.show_tracebacks
