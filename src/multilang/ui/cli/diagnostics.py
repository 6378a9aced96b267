"""Route pipeline diagnostics to the Rich consoles of the CLI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from multilang.core.diagnostics import format_event_message

from .state import CLIState, emit_warning, get_cli_state


class CliEmitter:
    """Print content warnings to stderr and progress events when verbose."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()

    def warning(self, message: str) -> None:
        emit_warning(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        if self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            self._state.console.log(message)


__all__ = ["CliEmitter"]
