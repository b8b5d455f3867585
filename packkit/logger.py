"""A small logging interface that keeps lower layers independent of the UI."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Logger(ABC):
    """Levelled logging interface consumed by library code."""

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log at the DEBUG level."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Log at the ERROR level."""

    @abstractmethod
    def error_with_context(self, err: object, sub: str, *args: str) -> None:
        """Log an error at the ERROR level along with extra context lines."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Log at the INFO level."""

    @abstractmethod
    def trace(self, message: str) -> None:
        """Log at the TRACE level."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log at the WARN level."""


class FmtLogger(Logger):
    """Logger that prints every message to standard output."""

    def debug(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(message)

    def error_with_context(self, err: object, sub: str, *args: str) -> None:
        print(f"err: {err}")
        print(sub)
        for entry in args:
            print(entry)

    def info(self, message: str) -> None:
        print(message)

    def trace(self, message: str) -> None:
        print(message)

    def warning(self, message: str) -> None:
        print(message)


class TestLogger(Logger):
    """Logger that forwards every message to a supplied callable."""

    __test__ = False

    def __init__(self, log: Callable[..., Any]) -> None:
        self._log = log

    def debug(self, message: str) -> None:
        self._log(message)

    def error(self, message: str) -> None:
        self._log(message)

    def error_with_context(self, err: object, sub: str, *args: str) -> None:
        self._log(f"err: {err}")
        self._log(sub)
        for entry in args:
            self._log(entry)

    def info(self, message: str) -> None:
        self._log(message)

    def trace(self, message: str) -> None:
        self._log(message)

    def warning(self, message: str) -> None:
        self._log(message)


def default() -> FmtLogger:
    """Return a logger that prints to standard output."""
    return FmtLogger()


def new_test_logger(log: Callable[..., Any]) -> TestLogger:
    """Return a logger that hands every message to ``log``."""
    return TestLogger(log)