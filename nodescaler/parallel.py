"""A rate-limited runner of concurrent tasks."""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future
from typing import Callable, TypeVar

T = TypeVar("T")


class _TokenBucket:
    """Token bucket that starts full and refills at a steady rate."""

    def __init__(self, rate: float, burst: int) -> None:
        self._rate = float(rate)
        self._burst = burst
        self._tokens = float(burst)
        self._last = time.monotonic()
        self._lock = threading.Lock()

    def reserve(self) -> float:
        """Take one token and return how long to wait before using it."""
        with self._lock:
            current = time.monotonic()
            elapsed = current - self._last
            self._tokens = min(self._burst, self._tokens + elapsed * self._rate)
            self._last = current
            self._tokens -= 1
            if self._tokens >= 0:
                return 0.0
            return -self._tokens / self._rate


class WorkQueue:
    """Thread-safe task runner limited to qps starts per second with a burst."""

    def __init__(self, qps: float, burst: int) -> None:
        if qps <= 0:
            raise ValueError("qps must be positive")
        if burst < 1:
            raise ValueError("burst must be at least 1")
        self._bucket = _TokenBucket(qps, burst)
        self._lock = threading.Lock()
        self._pending: dict[threading.Timer, Future] = {}
        self._closed = False

    def add(self, do: Callable[[], T]) -> Future[T]:
        """Schedule do; the returned future resolves with its result or error."""
        future: Future[T] = Future()

        def fire() -> None:
            with self._lock:
                self._pending.pop(timer, None)
            self._run(do, future)

        with self._lock:
            if self._closed:
                raise RuntimeError("work queue is shut down")
            timer = threading.Timer(self._bucket.reserve(), fire)
            timer.daemon = True
            self._pending[timer] = future
            timer.start()
        return future

    @staticmethod
    def _run(do: Callable[[], T], future: Future[T]) -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = do()
        except Exception as err:
            future.set_exception(err)
        else:
            future.set_result(result)

    def shutdown(self) -> None:
        """Stop accepting work and cancel tasks that have not started."""
        with self._lock:
            self._closed = True
            pending = dict(self._pending)
            self._pending.clear()
        for timer, future in pending.items():
            timer.cancel()
            future.cancel()

    def __enter__(self) -> WorkQueue:
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()