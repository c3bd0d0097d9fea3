"""Unit tests for RequestLoggerSettings."""

from __future__ import annotations

import sys

import pytest

from reqlog.config.settings import EnvSettingsLoader
from reqlog.config.validation import InvalidSettingValueError
from reqlog.middleware import RequestLoggerSettings, build_options
from reqlog.observability.logging import LogLevel

_KEYS = (
    "REQLOG_LEVEL",
    "REQLOG_LOG_WITH_REQUEST_ID",
    "REQLOG_REQUEST_LOG_ENABLE",
    "REQLOG_REQUEST_ID_HEADER_NAME",
    "REQLOG_RESPONSE_TIME_HEADER_NAME",
    "REQLOG_IP_HEADERS",
    "REQLOG_LOG_FORMAT",
    "REQLOG_COLORS",
    "REQLOG_COMPLETE_ON_ERROR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoading:
    def test_defaults_match_option_defaults(self) -> None:
        settings = EnvSettingsLoader().load(RequestLoggerSettings)
        resolved = build_options(settings.to_options())
        assert resolved.level is LogLevel.INFO
        assert resolved.get_ip_from_headers == ("X-Real-Ip", "X-Forwarded-For")
        assert resolved.stream is None
        assert resolved.pretty_options is not None
        assert resolved.pretty_options.colors is True

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQLOG_LEVEL", "debug")
        monkeypatch.setenv("REQLOG_LOG_WITH_REQUEST_ID", "false")
        monkeypatch.setenv("REQLOG_REQUEST_ID_HEADER_NAME", "X-Correlation-Id")
        monkeypatch.setenv("REQLOG_IP_HEADERS", "CF-Connecting-IP, X-Forwarded-For")
        monkeypatch.setenv("REQLOG_COMPLETE_ON_ERROR", "0")

        resolved = build_options(EnvSettingsLoader().load(RequestLoggerSettings).to_options())

        assert resolved.level is LogLevel.DEBUG
        assert resolved.log_with_request_id is False
        assert resolved.request_id_header_name == "X-Correlation-Id"
        assert resolved.get_ip_from_headers == ("CF-Connecting-IP", "X-Forwarded-For")
        assert resolved.complete_on_error is False

    def test_json_format_writes_to_stdout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQLOG_LOG_FORMAT", "JSON")
        options = EnvSettingsLoader().load(RequestLoggerSettings).to_options()
        assert options.stream is sys.stdout
        assert options.pretty_options is None

    def test_colors_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQLOG_COLORS", "no")
        options = EnvSettingsLoader().load(RequestLoggerSettings).to_options()
        assert options.pretty_options is not None
        assert options.pretty_options.colors is False


class TestValidation:
    def test_bad_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQLOG_LEVEL", "chatty")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(RequestLoggerSettings)

    def test_bad_format(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            RequestLoggerSettings(log_format="xml")
        assert exc_info.value.setting_name == "log_format"
