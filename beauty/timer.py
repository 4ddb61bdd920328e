"""One-shot and repeating timers run on an application's loop."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from beauty.application import Application, Handle, instance

Delay = float | timedelta


def _seconds(delay: Delay) -> float:
    return delay.total_seconds() if isinstance(delay, timedelta) else float(delay)


class Timer:
    """Calls ``callback`` after ``delay``.

    When the callback returns a bool, that value decides whether the timer
    fires again; otherwise ``repeat`` decides.
    """

    def __init__(
        self,
        delay: Delay,
        callback: Callable[[], Any],
        repeat: bool = False,
        app: Application | None = None,
    ) -> None:
        self.app = app if app is not None else instance()
        self.delay = _seconds(delay)
        self.callback = callback
        self.repeat = repeat
        self._handle: Handle | None = None
        self._stopped = False
        self._lock = threading.Lock()

    def start(self) -> None:
        """Start the application if needed, register the timer and arm it."""
        if not self.app.is_stopped() and not self.app.is_started():
            self.app.start()

        if not any(timer is self for timer in self.app.timers):
            self.app.timers.append(self)

        with self._lock:
            self._stopped = False
        self._rearm()

    def stop(self) -> None:
        """Cancel the pending expiry; the callback is not called again."""
        with self._lock:
            self._stopped = True
            if self._handle is not None:
                self._handle.cancel()

    def _rearm(self) -> None:
        with self._lock:
            if self._stopped:
                return
            self._handle = self.app.call_later(self.delay, self._fire)

    def _fire(self) -> None:
        if self._stopped:
            return
        result = self.callback()
        again = result if isinstance(result, bool) else self.repeat
        if again:
            self._rearm()

    def __repr__(self) -> str:
        return f"Timer(delay={self.delay}, repeat={self.repeat})"


def after(
    delay: Delay,
    callback: Callable[[], Any],
    repeat: bool = False,
    app: Application | None = None,
) -> Timer:
    """Create and start a timer that fires after ``delay``."""
    timer = Timer(delay, callback, repeat, app)
    timer.start()
    return timer


def repeat(delay: Delay, callback: Callable[[], Any], app: Application | None = None) -> Timer:
    """Create and start a timer that fires every ``delay``."""
    return after(delay, callback, True, app)