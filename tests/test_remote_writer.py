"""Tests for the remote HTTP writer"""

import json
import threading
import time
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from async_logger import LogLevel
from async_logger.core.log_entry import LogEntry
from async_logger.formatters import default_formatter, plain_formatter
from async_logger.writers.remote_writer import RemoteWriter


ENDPOINT = "http://logs.example.test/ingest"


class CapturingTransport:
    """Build an httpx.MockTransport that records requests."""

    def __init__(self, status_code: int = 200, delay: float = 0.0, error: bool = False):
        self.requests = []
        self.received = threading.Event()
        self.status_code = status_code
        self.delay = delay
        self.error = error
        self.transport = httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        if self.delay:
            time.sleep(self.delay)
        self.requests.append(request)
        self.received.set()
        if self.error:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(self.status_code)


def make_entry(level: LogLevel = LogLevel.WARN) -> LogEntry:
    ts = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone(timedelta(hours=9)))
    return LogEntry(timestamp=ts, level=level, template="disk %d%% full", args=(93,))


class TestPayload:
    """Test the wire format."""

    def test_json_body(self):
        capture = CapturingTransport()
        writer = RemoteWriter(ENDPOINT, plain_formatter, transport=capture.transport)

        writer.write(make_entry())
        assert capture.received.wait(2.0)
        writer.close()

        request = capture.requests[0]
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        assert json.loads(request.content) == {
            "time": "2024-05-01T12:30:45.123000+09:00",
            "level": "WARN",
            "message": "disk 93% full",
        }

    def test_message_uses_formatter(self):
        writer = RemoteWriter(ENDPOINT, default_formatter, transport=CapturingTransport().transport)
        body = json.loads(writer.build_payload(make_entry(LogLevel.ERROR)))
        writer.close()

        assert body["message"].endswith("[ERROR] disk 93% full")
        assert body["level"] == "ERROR"

    def test_default_content_type(self):
        writer = RemoteWriter(ENDPOINT, plain_formatter, transport=CapturingTransport().transport)
        request = writer.build_request(make_entry())
        writer.close()

        assert request.headers["Content-Type"] == "application/json"

    def test_caller_headers_take_precedence(self):
        writer = RemoteWriter(
            ENDPOINT,
            plain_formatter,
            method="put",
            headers={"content-type": "application/x-ndjson", "X-Api-Key": "secret"},
            transport=CapturingTransport().transport,
        )
        request = writer.build_request(make_entry())
        writer.close()

        assert request.method == "PUT"
        assert request.headers["Content-Type"] == "application/x-ndjson"
        assert request.headers["X-Api-Key"] == "secret"


class TestFireAndForget:
    """Test the non-blocking delivery contract."""

    def test_write_returns_before_transport_finishes(self):
        """Test that a slow endpoint does not slow down write()."""
        capture = CapturingTransport(delay=0.5)
        writer = RemoteWriter(ENDPOINT, plain_formatter, transport=capture.transport)

        start = time.monotonic()
        n = writer.write(make_entry())
        elapsed = time.monotonic() - start

        assert elapsed < 0.2
        assert n > 0
        assert not capture.received.is_set()
        assert capture.received.wait(2.0)
        writer.close()

    def test_transport_error_is_discarded(self):
        """Test that network failures never reach the caller."""
        capture = CapturingTransport(error=True)
        writer = RemoteWriter(ENDPOINT, plain_formatter, transport=capture.transport)

        writer.write(make_entry())
        writer.write(make_entry())

        assert capture.received.wait(2.0)
        writer.close()

    def test_http_error_status_is_ignored(self):
        capture = CapturingTransport(status_code=503)
        writer = RemoteWriter(ENDPOINT, plain_formatter, transport=capture.transport)

        writer.write(make_entry())

        assert capture.received.wait(2.0)
        writer.close()

    def test_close_does_not_wait_for_sends(self):
        capture = CapturingTransport(delay=0.5)
        writer = RemoteWriter(ENDPOINT, plain_formatter, transport=capture.transport)
        writer.write(make_entry())

        start = time.monotonic()
        writer.close()

        assert time.monotonic() - start < 0.4
