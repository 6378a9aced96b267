"""Diagnostics raised while expanding and linking language variants."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Receives content warnings and pipeline progress events."""

    def warning(self, message: str) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(self, *, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
        else:
            self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a one-line summary for the events emitted by the pipeline."""
    languages = ", ".join(payload.get("languages") or [])

    if name == "units_expanded":
        return f"Expanded {payload.get('source') or '<unknown>'} into {languages}"
    if name == "siblings_linked":
        return f"Linked '{payload.get('slug') or '<unknown>'}' variants: {languages}"
    if name == "page_written":
        return f"Wrote {payload.get('url') or '<unknown>'}"
    return None


__all__ = ["DiagnosticEmitter", "LoggingEmitter", "format_event_message"]
