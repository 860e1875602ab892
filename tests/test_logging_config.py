"""Tests for the shared loguru setup."""

from __future__ import annotations

import logging
import sys

import pytest
from click.testing import CliRunner
from loguru import logger

from shared.logging_config import InterceptHandler, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    """Put loguru and the stdlib root logger back the way they were."""
    root_handlers = logging.root.handlers[:]
    root_level = logging.root.level
    yield
    logger.remove()
    logger.add(sys.stderr)
    logging.root.handlers = root_handlers
    logging.root.setLevel(root_level)


@pytest.mark.parametrize("level", ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING"])
def test_accepts_loguru_levels(level):
    setup_logging(level=level)
    assert isinstance(logging.root.handlers[0], InterceptHandler)
    assert logging.root.level == logging.DEBUG


def test_json_sink():
    setup_logging(level="INFO", json=True)
    assert isinstance(logging.root.handlers[0], InterceptHandler)


def test_stdlib_records_reach_loguru():
    setup_logging(level="INFO")
    messages: list[str] = []
    logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")

    logging.getLogger("third_party").info("hello from stdlib")

    assert "hello from stdlib" in messages


def test_car_service_cli_starts_with_trace_level(monkeypatch):
    from car_service.main import cli

    monkeypatch.setenv("LOG_LEVEL", "TRACE")
    result = CliRunner().invoke(cli, ["quote"])
    assert result.exit_code == 0, result.output
    assert "Total: 25" in result.output


def test_reading_cli_starts_with_success_level(monkeypatch):
    from reading.main import cli

    monkeypatch.setenv("LOG_LEVEL", "SUCCESS")
    result = CliRunner().invoke(cli, ["read", "--pages", "0"])
    assert result.exit_code == 0, result.output
