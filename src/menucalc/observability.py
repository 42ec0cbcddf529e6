"""Observability utilities.

Provides leveled stderr logging and timing for calculator calls.
"""

import functools
import sys
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOG_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}
DEFAULT_LOG_LEVEL = "warning"

_threshold = LOG_LEVELS[DEFAULT_LOG_LEVEL]


def set_log_level(level: str) -> None:
    """Set the minimum level that reaches stderr.

    Raises:
        ValueError: If the level name is unknown.
    """
    global _threshold
    try:
        _threshold = LOG_LEVELS[level.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown log level: {level}. Choose from {', '.join(LOG_LEVELS)}"
        ) from None


def _log(message: str, level: str = "info", scope: str = "menucalc") -> None:
    """Log message to stderr if it passes the threshold."""
    severity = {
        "debug": "debug",
        "start": "debug",
        "info": "info",
        "success": "info",
        "warning": "warning",
        "error": "error",
    }.get(level, "info")
    if LOG_LEVELS[severity] < _threshold:
        return

    prefix = {
        "debug": "🔍",
        "start": "🚀",
        "info": "ℹ️",
        "success": "✅",
        "warning": "⚠️",
        "error": "❌",
    }.get(level, "")
    print(f"{prefix} [{scope}] {message}", file=sys.stderr, flush=True)


def traced(name: str, *, log_result: bool = True) -> Callable[[F], F]:
    """Decorator to add timing and logging to a call.

    Args:
        name: Scope tag for the log lines (e.g., "evaluate").
        log_result: Whether to log the returned value.

    Example:
        @traced("evaluate")
        def evaluate(selector, operands):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            _log(f"Starting with {args!r}", "start", name)
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                _log(f"Failed after {_format_elapsed(elapsed)}: {e}", "error", name)
                raise

            elapsed = time.perf_counter() - start_time
            if log_result:
                _log(
                    f"Completed in {_format_elapsed(elapsed)}, result: {result!r}",
                    "success",
                    name,
                )
            else:
                _log(f"Completed in {_format_elapsed(elapsed)}", "success", name)
            return result

        return wrapper  # type: ignore

    return decorator


def _format_elapsed(elapsed: float) -> str:
    if elapsed >= 1:
        return f"{elapsed:.2f}s"
    return f"{elapsed * 1000:.0f}ms"


def log_event(scope: str, event: str, level: str = "info", **data: Any) -> None:
    """Log a custom event.

    Args:
        scope: Component name.
        event: Event description.
        level: Log level (debug, info, success, warning, error).
        **data: Additional data to log.

    Example:
        log_event("session", "unknown selector", level="warning", selector="x")
    """
    if data:
        data_str = ", ".join(f"{k}={v}" for k, v in data.items())
        _log(f"{event} ({data_str})", level, scope)
    else:
        _log(event, level, scope)
