"""
Asynchronous dispatcher

Decouples logging callers from writer I/O: producers put entries into a
bounded queue and a single worker thread fans each one out to every
writer.
"""

from __future__ import annotations

import queue
import threading
import time
from typing import Dict, List, Optional, Sequence, Tuple

from async_logger.core.errors import LoggerClosedError
from async_logger.core.log_entry import LogEntry
from async_logger.core.log_level import OutputMode
from async_logger.writers.base_writer import BaseWriter


class Dispatcher:
    """
    Bounded queue drained by one worker thread.

    ``enqueue`` blocks while the queue is full; slow writers therefore
    stall producers instead of losing entries. Writers are fixed at
    construction and always called from a single thread.

    Thread Safety:
        ``enqueue`` may be called from any number of threads. ``close``
        must be called once, and not concurrently with itself.
    """

    # How often the idle worker re-checks the cancel event (seconds)
    POLL_INTERVAL = 0.05

    def __init__(
        self,
        writers: Sequence[Tuple[OutputMode, BaseWriter]],
        capacity: int = 4096,
        name: str = "logger",
    ):
        """
        Initialize dispatcher. The worker is not started yet.

        Args:
            writers: (mode, writer) pairs, called in this order per entry
            capacity: Maximum number of queued entries
            name: Used to name the worker thread
        """
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.name = name
        self._writers: List[Tuple[OutputMode, BaseWriter]] = list(writers)
        self._queue: "queue.Queue[LogEntry]" = queue.Queue(maxsize=capacity)
        self._cancel = threading.Event()
        self._worker: Optional[threading.Thread] = None
        self._closed = False
        self._pending = 0
        self._admission_lock = threading.Lock()
        self._metrics = {"enqueued": 0, "dispatched": 0, "sink_errors": 0}
        self._metrics_lock = threading.Lock()

    @property
    def writers(self) -> List[Tuple[OutputMode, BaseWriter]]:
        return list(self._writers)

    @property
    def capacity(self) -> int:
        return self._queue.maxsize

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        """Start the worker thread. Calling it again is a no-op."""
        if self._worker is not None or self._closed:
            return
        self._worker = threading.Thread(
            target=self._run,
            name=f"{self.name}-worker",
            daemon=True
        )
        self._worker.start()

    def enqueue(self, entry: LogEntry) -> None:
        """
        Put an entry on the queue, blocking while it is full.

        Raises:
            LoggerClosedError: If the dispatcher has been closed
        """
        with self._admission_lock:
            if self._closed:
                raise LoggerClosedError()
            self._pending += 1
        try:
            while True:
                try:
                    self._queue.put(entry, timeout=self.POLL_INTERVAL)
                    break
                except queue.Full:
                    if self._closed:
                        raise LoggerClosedError()
        finally:
            with self._admission_lock:
                self._pending -= 1
        with self._metrics_lock:
            self._metrics["enqueued"] += 1

    def _run(self) -> None:
        """Worker loop: deliver entries until cancelled."""
        while not self._cancel.is_set():
            try:
                entry = self._queue.get(timeout=self.POLL_INTERVAL)
            except queue.Empty:
                continue
            self.dispatch(entry)

    def dispatch(self, entry: LogEntry) -> None:
        """Hand one entry to every writer. A failing writer is skipped."""
        errors = 0
        for _, writer in self._writers:
            try:
                writer.write(entry)
            except Exception:
                errors += 1
        with self._metrics_lock:
            self._metrics["dispatched"] += 1
            self._metrics["sink_errors"] += errors

    def close(self) -> None:
        """
        Stop the worker and deliver everything still queued.

        Admission stops first, then the worker is joined, then the
        remaining entries are written on the calling thread, and finally
        every writer is closed.
        """
        with self._admission_lock:
            if self._closed:
                return
            self._closed = True

        self._cancel.set()
        if self._worker is not None:
            self._worker.join()

        # Producers blocked on a full queue either land an entry while
        # slots are freed here or give up with LoggerClosedError.
        while True:
            try:
                entry = self._queue.get_nowait()
            except queue.Empty:
                with self._admission_lock:
                    if self._pending == 0 and self._queue.empty():
                        break
                time.sleep(self.POLL_INTERVAL / 10)
                continue
            self.dispatch(entry)

        for _, writer in self._writers:
            try:
                writer.close()
            except Exception:
                with self._metrics_lock:
                    self._metrics["sink_errors"] += 1

    def get_metrics(self) -> Dict[str, int]:
        """Get dispatch counters."""
        with self._metrics_lock:
            return self._metrics.copy()
