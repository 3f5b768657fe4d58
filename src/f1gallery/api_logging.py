"""API call logging for the gateway and service layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.environ.get("F1GALLERY_LOG_DIR", os.path.join(os.getcwd(), "logs"))
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _has_file_handler(logger: logging.Logger) -> bool:
    """Whether *logger* already writes to the current log file.

    Other handlers (test capture, app-level sinks) may be attached too.
    """
    target = os.path.abspath(_LOG_FILE)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("f1gallery.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _has_file_handler(_logger):
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _format_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _result_count(result: Any) -> int:
    if result is None:
        return 0
    return len(result) if isinstance(result, list) else 1


def log_api_call(fn: F) -> F:
    """Decorator that logs gateway calls, with result counts, to the API log file.

    Works for both plain and ``async def`` methods.
    """

    def _ok(arg_str: str, result: Any, start: float) -> None:
        _get_logger().info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, _result_count(result), time.monotonic() - start,
        )

    def _fail(arg_str: str, exc: Exception, start: float) -> None:
        _get_logger().error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _format_args(args, kwargs)
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
        arg_str = _format_args(args, kwargs)
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
    """Decorator that logs service-layer calls to the API log file."""

    def _fail(exc: Exception, start: float) -> None:
        _get_logger().error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _get_logger().info(
                "SERVICE CALL: %s(%s)", fn.__qualname__, _format_args(args, kwargs),
            )
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(exc, start)
                raise
            _get_logger().info(
                "SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start,
            )
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _get_logger().info(
            "SERVICE CALL: %s(%s)", fn.__qualname__, _format_args(args, kwargs),
        )
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(exc, start)
            raise
        _get_logger().info(
            "SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]
