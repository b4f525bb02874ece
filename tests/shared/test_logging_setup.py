"""Tests for logging configuration."""

import logging
import logging.handlers

import pytest
import structlog
from shared.config import CheckoutSettings
from shared.logging import add_context, clear_context, configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_console_only_by_default(self):
        configure_logging(CheckoutSettings(_env_file=None, environment="development"))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handlers(self, tmp_path):
        settings = CheckoutSettings(_env_file=None, environment="production", log_to_file=True, log_dir=str(tmp_path / "logs"))
        configure_logging(settings)
        root = logging.getLogger()
        rotating = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(rotating) == 2
        assert (tmp_path / "logs").is_dir()
        assert root.level == logging.INFO

    def test_production_renders_json(self):
        configure_logging(CheckoutSettings(_env_file=None, environment="production"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        configure_logging(CheckoutSettings(_env_file=None, environment="development"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestContext:
    def test_add_and_clear_context(self):
        add_context(request_id="req-1")
        assert structlog.contextvars.get_contextvars() == {"request_id": "req-1"}
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
