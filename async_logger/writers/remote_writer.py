"""
Remote writer for centralized logging

Ships each entry as a JSON document over HTTP, fire-and-forget.
"""

from __future__ import annotations

import json
import threading
from typing import Dict, Optional

import httpx

from async_logger.core.log_entry import LogEntry
from async_logger.formatters.base_formatter import Formatter
from async_logger.writers.base_writer import BaseWriter


class RemoteWriter(BaseWriter):
    """
    HTTP log writer with fire-and-forget delivery.

    ``write`` serializes the entry and hands the request to a detached
    daemon thread, then returns without waiting for the network. There is
    no retry, no ordering between sends, and failures are dropped inside
    the sending thread.

    Body:
        {"time": "<ISO-8601>", "level": "<LEVEL>", "message": "<rendered>"}

    Example:
        writer = RemoteWriter(
            endpoint="https://logs.example.com/ingest",
            formatter=plain_formatter,
            headers={"Authorization": "Bearer <token>"},
        )
    """

    DEFAULT_HEADERS = {"Content-Type": "application/json"}

    def __init__(
        self,
        endpoint: str,
        formatter: Formatter,
        method: str = "POST",
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = 5.0,
    ):
        """
        Initialize remote writer.

        Args:
            endpoint: Target URL
            formatter: Renders the ``message`` field
            method: HTTP method (default: POST)
            headers: Extra headers; they win over the defaults
            transport: Custom httpx transport (proxy, TLS, mock)
            timeout: Per-request timeout in seconds
        """
        super().__init__(formatter)
        self.endpoint = endpoint
        self.method = (method or "POST").upper()
        self.headers = httpx.Headers(self.DEFAULT_HEADERS)
        if headers:
            self.headers.update(headers)
        self.timeout = timeout
        self._client = httpx.Client(transport=transport, timeout=timeout)

    def build_payload(self, entry: LogEntry) -> bytes:
        """Serialize an entry into the request body."""
        document = {
            "time": entry.timestamp.isoformat(),
            "level": entry.level_name,
            "message": entry.render(self.formatter).rstrip("\n"),
        }
        return json.dumps(document, ensure_ascii=False, default=str).encode("utf-8")

    def build_request(self, entry: LogEntry) -> httpx.Request:
        """Build the HTTP request for one entry."""
        return self._client.build_request(
            self.method,
            self.endpoint,
            content=self.build_payload(entry),
            headers=self.headers,
        )

    def write(self, entry: LogEntry) -> int:
        """Queue one entry for delivery and return immediately."""
        request = self.build_request(entry)
        threading.Thread(
            target=self._send,
            args=(request,),
            name="async-logger-remote",
            daemon=True,
        ).start()
        return len(request.content)

    def _send(self, request: httpx.Request) -> None:
        """Deliver one request; runs on a detached thread."""
        try:
            response = self._client.send(request)
            response.close()
        except Exception:
            pass  # fire-and-forget: delivery failures never reach the caller

    def close(self) -> None:
        """Close the HTTP client. In-flight sends are not awaited."""
        self._client.close()
