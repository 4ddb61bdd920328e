"""The application: a thread-safe event loop run by a pool of worker threads."""

from __future__ import annotations

import enum
import heapq
import itertools
import threading
import time
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from beauty.utils import thread_set_name

if TYPE_CHECKING:
    from beauty.timer import Timer

_WAIT_POLL = 0.025


class State(enum.Enum):
    WAITING = "waiting"
    STARTED = "started"
    STOPPED = "stopped"


class Handle:
    """A callback scheduled for later; ``cancel()`` keeps it from running."""

    __slots__ = ("_callback", "cancelled")

    def __init__(self, callback: Callable[[], Any]) -> None:
        self._callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def _run(self) -> None:
        if not self.cancelled:
            self._callback()


class _Loop:
    """Queue of ready callbacks and of callbacks due at a given time.

    Stopping the loop makes every runner return but keeps pending work, which
    runs once the loop is restarted and run again.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._ready: deque[Callable[[], Any]] = deque()
        self._scheduled: list[tuple[float, int, Handle]] = []
        self._sequence = itertools.count()
        self._stopped = False

    def restart(self) -> None:
        with self._cond:
            self._stopped = False

    def stop(self) -> None:
        with self._cond:
            self._stopped = True
            self._cond.notify_all()

    def post(self, callback: Callable[[], Any]) -> None:
        with self._cond:
            self._ready.append(callback)
            self._cond.notify()

    def call_later(self, delay: float, callback: Callable[[], Any]) -> Handle:
        handle = Handle(callback)
        deadline = time.monotonic() + max(0.0, delay)
        with self._cond:
            heapq.heappush(self._scheduled, (deadline, next(self._sequence), handle))
            self._cond.notify_all()
        return handle

    def _next(self) -> Callable[[], Any] | None:
        with self._cond:
            while True:
                if self._stopped:
                    return None
                now = time.monotonic()
                while self._scheduled and (
                    self._scheduled[0][2].cancelled or self._scheduled[0][0] <= now
                ):
                    _, _, handle = heapq.heappop(self._scheduled)
                    if not handle.cancelled:
                        self._ready.append(handle._run)
                if self._ready:
                    return self._ready.popleft()
                timeout = self._scheduled[0][0] - now if self._scheduled else None
                self._cond.wait(timeout)

    def run(self) -> None:
        while (callback := self._next()) is not None:
            try:
                callback()
            except Exception as ex:  # a failing handler must not kill the worker
                print(f"worker error: {ex}", flush=True)


class Application:
    """Owns the event loop, its worker threads and the registered timers.

    Usable as a context manager: entering starts it, leaving stops it.
    """

    def __init__(self, thread_name_prefix: str = "beauty-") -> None:
        self._loop = _Loop()
        self._state = State.WAITING
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()
        self.thread_name_prefix = thread_name_prefix
        self.timers: list[Timer] = []

    @property
    def state(self) -> State:
        return self._state

    def is_started(self) -> bool:
        return self._state is State.STARTED

    def is_stopped(self) -> bool:
        return self._state is State.STOPPED

    def start(self, concurrency: int = 1) -> None:
        """Run the loop on ``concurrency`` worker threads (at least one)."""
        with self._lock:
            if self.is_started():
                return
            if self.is_stopped():
                self._loop.restart()
            self._state = State.STARTED

            self._threads = [
                threading.Thread(
                    target=self._worker,
                    args=(f"{self.thread_name_prefix}{index}",),
                    name=f"{self.thread_name_prefix}{index}",
                    daemon=True,
                )
                for index in range(1, max(1, concurrency) + 1)
            ]
            for thread in self._threads:
                thread.start()

    def _worker(self, name: str) -> None:
        thread_set_name(name)
        self._loop.run()

    def stop(self, reset: bool = True) -> None:
        """Stop the loop and wait for the workers; ``reset`` also drops the timers."""
        with self._lock:
            if self.is_stopped():
                return
            self._state = State.STOPPED

            if reset:
                for timer in self.timers:
                    timer.stop()
                self.timers.clear()

            self._loop.stop()
            threads, self._threads = self._threads, []

        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()

    def run(self) -> None:
        """Run the loop in the calling thread until the application is stopped."""
        with self._lock:
            if self.is_stopped():
                self._loop.restart()
            self._state = State.STARTED
        self._loop.run()

    def wait(self) -> None:
        """Block until the application is stopped."""
        while not self.is_stopped():
            time.sleep(_WAIT_POLL)

    def post(self, fct: Callable[[], Any]) -> None:
        """Queue ``fct`` to run on the loop."""
        self._loop.post(fct)

    def call_later(self, delay: float, fct: Callable[[], Any]) -> Handle:
        """Queue ``fct`` to run on the loop after ``delay`` seconds."""
        return self._loop.call_later(delay, fct)

    def __enter__(self) -> Application:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"Application(state={self._state.value})"


_instance: Application | None = None
_instance_lock = threading.Lock()


def instance() -> Application:
    """Return the process-wide application, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Application()
        return _instance


def start(concurrency: int = 1) -> None:
    instance().start(concurrency)


def run() -> None:
    instance().run()


def wait() -> None:
    instance().wait()


def stop() -> None:
    instance().stop()


def post(fct: Callable[[], Any]) -> None:
    instance().post(fct)


def is_started() -> bool:
    return instance().is_started()