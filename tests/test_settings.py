"""Tests for errdetails.settings module.

Covers:
- ErrdetailsSettings defaults
- Environment variable override
- Validation of numeric fields and log format
- get_settings caching
"""

import pytest
from pydantic import ValidationError

from errdetails.settings import ErrdetailsSettings, get_settings


class TestErrdetailsSettingsDefaults:
    def test_detalizers_disabled(self):
        s = ErrdetailsSettings()
        assert s.with_callstack is False
        assert s.with_timestamp is False

    def test_callstack_defaults(self):
        s = ErrdetailsSettings()
        assert s.callstack_skip_frames == 0
        assert s.callstack_depth == 1024

    def test_logging_defaults(self):
        s = ErrdetailsSettings()
        assert s.log_level == "INFO"
        assert s.log_format == "console"


class TestErrdetailsSettingsEnvOverride:
    def test_with_callstack_from_env(self, monkeypatch):
        monkeypatch.setenv("ERRDETAILS_WITH_CALLSTACK", "true")
        assert ErrdetailsSettings().with_callstack is True

    def test_depth_from_env(self, monkeypatch):
        monkeypatch.setenv("ERRDETAILS_CALLSTACK_DEPTH", "16")
        assert ErrdetailsSettings().callstack_depth == 16

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("ERRDETAILS_LOG_FORMAT", "json")
        assert ErrdetailsSettings().log_format == "json"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("WITH_CALLSTACK", "true")
        assert ErrdetailsSettings().with_callstack is False


class TestErrdetailsSettingsValidation:
    def test_depth_must_be_positive(self):
        with pytest.raises(ValidationError):
            ErrdetailsSettings(callstack_depth=0)

    def test_skip_frames_not_negative(self):
        with pytest.raises(ValidationError):
            ErrdetailsSettings(callstack_skip_frames=-1)

    def test_unknown_log_format(self, monkeypatch):
        monkeypatch.setenv("ERRDETAILS_LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            ErrdetailsSettings()


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload_reads_env(self, monkeypatch):
        assert get_settings().with_timestamp is False
        monkeypatch.setenv("ERRDETAILS_WITH_TIMESTAMP", "true")
        assert get_settings().with_timestamp is False
        assert get_settings(_force_reload=True).with_timestamp is True
