"""API call logging for the SkySync dashboard data and service layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("skysync_dashboard.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _summarise_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _count_items(result: Any) -> int:
    if result is None:
        return 0
    if isinstance(result, (list, tuple)):
        return len(result)
    return 1


def log_api_call(fn: F) -> F:
    """Decorator that logs data-layer method calls to the API log file.

    Works on plain and ``async def`` methods alike.
    """

    def _ok(arg_str: str, result: Any, start: float) -> None:
        _get_logger().info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, _count_items(result), time.monotonic() - start,
        )

    def _fail(arg_str: str, exc: Exception, start: float) -> None:
        _get_logger().error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _summarise_args(args, kwargs)
            _get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(arg_str, exc, start)
                raise
            _ok(arg_str, result, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _summarise_args(args, kwargs)
        _get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(arg_str, exc, start)
            raise
        _ok(arg_str, result, start)
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Decorator that logs service-layer method calls to the API log file."""

    def _ok(start: float) -> None:
        _get_logger().info(
            "SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start,
        )

    def _fail(exc: Exception, start: float) -> None:
        _get_logger().error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _get_logger().info(
                "SERVICE CALL: %s(%s)", fn.__qualname__, _summarise_args(args, kwargs),
            )
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(exc, start)
                raise
            _ok(start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _get_logger().info(
            "SERVICE CALL: %s(%s)", fn.__qualname__, _summarise_args(args, kwargs),
        )
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(exc, start)
            raise
        _ok(start)
        return result

    return wrapper  # type: ignore[return-value]
