"""Trace logging setup tests."""

from __future__ import annotations

import io
import logging

import pytest

from zcw.log import configure_logging, resolve_level


@pytest.mark.parametrize(
    "name,expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warn", logging.WARNING),
        ("warning", logging.WARNING),
        ("error", logging.ERROR),
        ("verbose", logging.INFO),
    ],
)
def test_resolve_level(name, expected) -> None:
    assert resolve_level(name) == expected


def test_resolve_level_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("ZCW_LOG_LEVEL", "error")

    assert resolve_level(None) == logging.ERROR


def test_configure_logging_writes_formatted_lines(zcw_logger) -> None:
    stream = io.StringIO()

    configure_logging("info", stream=stream)
    logging.getLogger("zcw.runtime.interpreter").info("Calling core.visit(%s)", '"u"')

    line = stream.getvalue().strip()
    assert line.endswith('zcw.runtime.interpreter - INFO - Calling core.visit("u")')
    assert zcw_logger.propagate is False


def test_configure_logging_is_idempotent(zcw_logger) -> None:
    configure_logging("info", stream=io.StringIO())
    configure_logging("debug", stream=io.StringIO())

    assert len(zcw_logger.handlers) == 1
    assert zcw_logger.level == logging.DEBUG


def test_level_filters_records(zcw_logger) -> None:
    stream = io.StringIO()

    configure_logging("warn", stream=stream)
    logging.getLogger("zcw.runner").info("hidden")
    logging.getLogger("zcw.runner").error("shown")

    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()
