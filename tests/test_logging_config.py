"""Tests for the package logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from realm_codegen import logging_config
from realm_codegen.logging_config import LOGGER_NAMESPACE, get_logger, setup_logging


@pytest.fixture
def clean_logger(monkeypatch: pytest.MonkeyPatch):
    """Give each test an unconfigured package logger."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    monkeypatch.setattr(logging_config, "_configured", False)
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_get_logger_namespaces_plain_names() -> None:
    assert get_logger("cli").name == "realm_codegen.cli"


def test_get_logger_keeps_package_names() -> None:
    assert get_logger("realm_codegen.utils").name == "realm_codegen.utils"
    assert get_logger("realm_codegen").name == "realm_codegen"


def test_setup_logging_installs_rich_handler(clean_logger: logging.Logger) -> None:
    setup_logging("debug")

    assert clean_logger.level == logging.DEBUG
    assert len(clean_logger.handlers) == 1
    assert isinstance(clean_logger.handlers[0], RichHandler)


def test_setup_logging_plain_handler(clean_logger: logging.Logger) -> None:
    setup_logging(logging.INFO, use_rich=False)

    handler = clean_logger.handlers[0]
    assert not isinstance(handler, RichHandler)
    assert isinstance(handler, logging.StreamHandler)


def test_setup_logging_twice_only_updates_level(clean_logger: logging.Logger) -> None:
    setup_logging("WARNING")
    setup_logging("ERROR")

    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.ERROR
    assert clean_logger.handlers[0].level == logging.ERROR
