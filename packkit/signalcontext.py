"""Cancellation tied to interrupt signals."""

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

_POLL_SECONDS = 0.05


def _follow(parent: threading.Event, done: threading.Event) -> None:
    while not done.is_set():
        if parent.wait(_POLL_SECONDS):
            done.set()
            return


@contextmanager
def with_interrupt(parent: Optional[threading.Event] = None) -> Iterator[threading.Event]:
    """Yield an event that is set on SIGINT, when ``parent`` is set, or on exit.

    The previous SIGINT handler is restored when the block is left.
    """
    done = threading.Event()
    installed = threading.current_thread() is threading.main_thread()
    previous = None
    if installed:
        previous = signal.getsignal(signal.SIGINT)
        signal.signal(signal.SIGINT, lambda signum, frame: done.set())

    watcher = None
    if parent is not None:
        watcher = threading.Thread(target=_follow, args=(parent, done), daemon=True)
        watcher.start()

    try:
        yield done
    finally:
        if installed:
            signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)
        done.set()
        if watcher is not None:
            watcher.join()