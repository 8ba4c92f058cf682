"""
Tests for the logging module.

Tests verify:
- Decorated errors in events are rendered as detailed text (console)
- Decorated errors are rendered as dicts (JSON)
- Other values pass through untouched
- configure_logging wires the processor into structlog
"""

import json

import pytest
import structlog

from errdetails.factory import ErrorFactory
from errdetails.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    render_decorated_errors,
)
from errdetails.settings import ErrdetailsSettings


@pytest.fixture
def err():
    return ErrorFactory().new("upload failed", ("bucket", "reports"))


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestRenderDecoratedErrors:
    def test_console_renders_detailed_text(self, err):
        processor = render_decorated_errors(json_format=False)
        event = processor(None, "error", {"event": "x", "error": err})
        assert event["error"] == "upload failed\nbucket : reports"

    def test_json_renders_dict(self, err):
        processor = render_decorated_errors(json_format=True)
        event = processor(None, "error", {"event": "x", "error": err})
        assert event["error"] == {
            "error_type": "DecoratedError",
            "message": "upload failed",
            "details": ["bucket : reports"],
        }

    def test_other_values_untouched(self):
        processor = render_decorated_errors()
        exc = ValueError("plain")
        event = processor(None, "info", {"event": "x", "count": 3, "exc": exc})
        assert event == {"event": "x", "count": 3, "exc": exc}


class TestConfigureLogging:
    def test_json_output(self, err, capsys):
        configure_logging(level="INFO", json_format=True, service="billing", add_timestamp=False)
        get_logger("tests").error("upload_failed", error=err)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "upload_failed"
        assert payload["service"] == "billing"
        assert payload["error"]["message"] == "upload failed"

    def test_level_filters_debug(self, capsys):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger("tests").debug("hidden")
        assert "hidden" not in capsys.readouterr().out

    def test_configure_from_settings(self, capsys):
        configure_from_settings(ErrdetailsSettings(log_level="WARNING", log_format="json"))
        logger = get_logger("tests")
        logger.info("hidden")
        logger.warning("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert json.loads(out.strip().splitlines()[-1])["event"] == "shown"
