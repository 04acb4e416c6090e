"""Unit tests for structured logging configuration."""

import json
import logging
import sys

from github_rest.logging_config import (
    LOGGER_NAMESPACE,
    StructuredFormatter,
    TextFormatter,
    configure_logging,
)


def _record(msg="github_request", name="github_rest.client", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="client.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test JSON output."""

    def test_required_fields(self):
        log_data = json.loads(StructuredFormatter().format(_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "github_rest.client"
        assert log_data["message"] == "github_request"
        assert log_data["timestamp"].endswith("Z")

    def test_extras_in_context(self):
        output = StructuredFormatter().format(_record(method="GET", status_code=200))
        context = json.loads(output)["context"]

        assert context["method"] == "GET"
        assert context["status_code"] == 200

    def test_sensitive_keys_redacted(self):
        output = StructuredFormatter().format(_record(token="ghp_abc", authorization="Bearer x"))

        assert "ghp_abc" not in output
        assert "Bearer x" not in output
        context = json.loads(output)["context"]
        assert context["token"] == "[REDACTED]"

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        log_data = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in log_data["exception"]


class TestTextFormatter:
    """Test the terminal format."""

    def test_extras_appended_and_redacted(self):
        output = TextFormatter().format(_record(method="GET", token="ghp_abc"))

        assert "github_rest.client: github_request" in output
        assert "method=GET" in output
        assert "token=[REDACTED]" in output
        assert "ghp_abc" not in output

    def test_no_extras(self):
        assert TextFormatter().format(_record()).endswith("github_rest.client: github_request")


class TestConfigureLogging:
    """Test configure_logging()."""

    def test_json_by_default(self):
        logger = configure_logging()

        assert logger.name == LOGGER_NAMESPACE
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        assert logger.propagate is False

    def test_env_controls_level_and_format(self, monkeypatch):
        monkeypatch.setenv("GITHUB_REST_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("GITHUB_REST_LOG_FORMAT", "text")

        logger = configure_logging()

        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0].formatter, TextFormatter)

    def test_idempotent(self):
        configure_logging()
        logger = configure_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_importing_package_does_not_configure(self):
        import github_rest  # noqa: F401

        assert logging.getLogger(LOGGER_NAMESPACE).handlers == []

    def test_explicit_arguments_override_settings(self, monkeypatch):
        monkeypatch.setenv("GITHUB_REST_LOG_FORMAT", "text")

        logger = configure_logging("error", "json")

        assert logger.level == logging.ERROR
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
