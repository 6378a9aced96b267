import logging

import pytest

from multilang.core.diagnostics import LoggingEmitter, format_event_message
from multilang.site import Site


def test_site_logs_diagnostics_by_default(caplog: pytest.LogCaptureFixture) -> None:
    site = Site()
    assert isinstance(site.emitter, LoggingEmitter)

    with caplog.at_level(logging.INFO, logger="multilang.core.diagnostics"):
        site.emitter.warning("Ignoring malformed language list.")
        site.emitter.event("siblings_linked", {"slug": "about", "languages": ["en", "gl"]})

    assert [(record.levelno, record.getMessage()) for record in caplog.records] == [
        (logging.WARNING, "Ignoring malformed language list."),
        (logging.INFO, "Linked 'about' variants: en, gl"),
    ]


def test_format_event_message() -> None:
    assert format_event_message("page_written", {"url": "/gl/"}) == "Wrote /gl/"
    assert (
        format_event_message("units_expanded", {"source": "/about", "languages": ["en"]})
        == "Expanded /about into en"
    )
    assert format_event_message("unknown", {}) is None
