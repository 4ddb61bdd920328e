"""Run callbacks on the application's loop when the process gets a signal."""

from __future__ import annotations

import signal
from collections.abc import Callable, Iterable
from functools import partial
from typing import Any

from beauty.application import Application, instance

SignalCallback = Callable[[int], Any]


class SignalSet:
    """A set of signals whose delivery posts ``callback(signum)`` to the loop.

    Handlers stay installed, so every delivery is reported. Installing them
    must happen in the main thread.
    """

    def __init__(self, callback: SignalCallback, app: Application | None = None) -> None:
        self.app = app if app is not None else instance()
        self.callback = callback
        self.signals: list[int] = []

    def add(self, signum: int) -> SignalSet:
        if signum not in self.signals:
            self.signals.append(signum)
        return self

    def run(self) -> None:
        """Start the application if needed and install the handlers.

        Does nothing once the application has been stopped.
        """
        if self.app.is_stopped():
            return
        if not self.app.is_started():
            self.app.start()
        for signum in self.signals:
            signal.signal(signum, self._handle)

    def _handle(self, signum: int, frame: object) -> None:
        self.app.post(partial(self.callback, signum))

    def __repr__(self) -> str:
        return f"SignalSet({self.signals!r})"


def on_signal(signals: int | Iterable[int], callback: SignalCallback) -> SignalSet:
    """Watch one signal or several with the global application."""
    watched = [signals] if isinstance(signals, int) else list(signals)
    signal_set = SignalSet(callback)
    for signum in watched:
        signal_set.add(signum)
    signal_set.run()
    return signal_set