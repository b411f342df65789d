"""Tests for CLI logging configuration."""

import logging

from rich.logging import RichHandler

from core.logging_setup import configure_logging


def _rich_handlers():
    return [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]


def test_configure_is_idempotent():
    configure_logging("INFO")
    configure_logging("DEBUG")
    assert len(_rich_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG


def test_httpx_is_quiet_outside_debug():
    configure_logging("info")
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING
