"""Unit tests for the structured logger factory."""

from __future__ import annotations

import contextvars
import io
import json
from typing import Any

import pytest
import structlog

from reqlog.config.validation import InvalidSettingValueError
from reqlog.observability.correlation import CorrelationContext, RequestContext
from reqlog.observability.logging import (
    CorrelationProcessor,
    LevelFilter,
    Logger,
    LogLevel,
    PrettyOptions,
    StructuredLogger,
    add_level,
    create_logger,
)


def _records(stream: io.StringIO) -> list[dict[str, Any]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


# ---------------------------------------------------------------------------
# LogLevel
# ---------------------------------------------------------------------------


class TestLogLevel:
    def test_parse_names_case_insensitive(self) -> None:
        assert LogLevel.parse("DEBUG") is LogLevel.DEBUG
        assert LogLevel.parse(" trace ") is LogLevel.TRACE

    def test_parse_warning_alias(self) -> None:
        assert LogLevel.parse("warning") is LogLevel.WARN

    def test_parse_member_passthrough(self) -> None:
        assert LogLevel.parse(LogLevel.ERROR) is LogLevel.ERROR

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            LogLevel.parse("loud")

    def test_parse_non_string_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            LogLevel.parse(30)  # type: ignore[arg-type]

    def test_severity_order(self) -> None:
        ordered = [LogLevel.ERROR, LogLevel.WARN, LogLevel.INFO, LogLevel.DEBUG, LogLevel.TRACE]
        severities = [level.severity for level in ordered]
        assert severities == sorted(severities, reverse=True)


# ---------------------------------------------------------------------------
# Processors
# ---------------------------------------------------------------------------


class TestProcessors:
    def test_level_filter_drops_below_threshold(self) -> None:
        with pytest.raises(structlog.DropEvent):
            LevelFilter("warn")(None, "info", {})

    def test_level_filter_keeps_at_threshold(self) -> None:
        assert LevelFilter("warn")(None, "warning", {"a": 1}) == {"a": 1}

    def test_add_level_canonical_warn(self) -> None:
        assert add_level(None, "warning", {})["level"] == "warn"
        assert add_level(None, "trace", {})["level"] == "trace"

    def test_correlation_processor_injects_request_id(self) -> None:
        token = CorrelationContext.set(RequestContext(request_id="rid-1"))
        try:
            event = CorrelationProcessor()(None, "info", {"event": "x"})
        finally:
            CorrelationContext.reset(token)
        assert event["reqId"] == "rid-1"

    def test_correlation_processor_keeps_existing_field(self) -> None:
        token = CorrelationContext.set(RequestContext(request_id="rid-1"))
        try:
            event = CorrelationProcessor()(None, "info", {"reqId": "explicit"})
        finally:
            CorrelationContext.reset(token)
        assert event["reqId"] == "explicit"

    def test_correlation_processor_without_context(self) -> None:
        processor = CorrelationProcessor(field_name="rid")
        assert contextvars.Context().run(processor, None, "info", {}) == {}


# ---------------------------------------------------------------------------
# create_logger
# ---------------------------------------------------------------------------


class TestCreateLogger:
    def test_json_record_shape(self) -> None:
        stream = io.StringIO()
        log = create_logger("info", stream)
        log.info("request incoming", path="/a", ip="1.2.3.4")
        [record] = _records(stream)
        assert record["event"] == "request incoming"
        assert record["path"] == "/a"
        assert record["ip"] == "1.2.3.4"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self) -> None:
        stream = io.StringIO()
        log = create_logger(LogLevel.WARN, stream)
        log.trace("t")
        log.debug("d")
        log.info("i")
        log.warn("w")
        log.warning("w2")
        log.error("e")
        assert [r["event"] for r in _records(stream)] == ["w", "w2", "e"]
        assert {r["level"] for r in _records(stream)} == {"warn", "error"}

    def test_trace_level_emits_everything(self) -> None:
        stream = io.StringIO()
        log = create_logger("trace", stream)
        for method in ("trace", "debug", "info", "warn", "error"):
            getattr(log, method)(method)
        assert [r["level"] for r in _records(stream)] == [
            "trace",
            "debug",
            "info",
            "warn",
            "error",
        ]

    def test_bind_creates_child_without_mutating_parent(self) -> None:
        stream = io.StringIO()
        root = create_logger("info", stream)
        child = root.bind(reqId="abc")
        assert isinstance(child, StructuredLogger)
        child.info("from child")
        root.info("from root")
        child_record, root_record = _records(stream)
        assert child_record["reqId"] == "abc"
        assert "reqId" not in root_record
        assert root.context == {}
        assert child.context == {"reqId": "abc"}

    def test_children_share_level_and_stream(self) -> None:
        stream = io.StringIO()
        child = create_logger("error", stream).bind(reqId="x")
        child.info("dropped")
        child.error("kept")
        assert [r["event"] for r in _records(stream)] == ["kept"]

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            create_logger("verbose", io.StringIO())

    def test_pretty_output_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        log = create_logger("info", pretty_options=PrettyOptions(colors=False))
        log.info("hello pretty", answer=42)
        out = capsys.readouterr().out
        assert "hello pretty" in out
        assert "answer=42" in out
        assert out.count("\n") == 1

    def test_satisfies_logger_protocol(self) -> None:
        log = create_logger("info", io.StringIO())
        assert isinstance(log, Logger)
        assert isinstance(log.bind(k="v"), Logger)
