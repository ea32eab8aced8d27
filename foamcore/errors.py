"""Error reporting, assertions and informational output."""

from __future__ import annotations

import inspect
import os
import sys
import traceback
from typing import Any

_DEBUG_VARIABLES = ("NF_DEBUG", "NF_DEBUG_INFO")


class NeoFOAMException(Exception):
    """Exception raised for failed checks and reported errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def debug_enabled() -> bool:
    """Return True when debug messaging is switched on via the environment."""
    return any(os.environ.get(name) for name in _DEBUG_VARIABLES)


def _compose(message: Any, level: int) -> str:
    """Build an error text naming the frame ``level`` steps above this one."""
    stack = inspect.stack(context=0)
    try:
        caller = stack[min(level, len(stack) - 1)]
        text = f"Error: {message}\nFile: {caller.filename}\nLine: {caller.lineno}\n"
    finally:
        del stack
    if debug_enabled():
        frames = traceback.format_stack()[: -(level + 1)] or traceback.format_stack()
        text += "".join(frames) + "\n"
    return text


def error_message(message: Any) -> str:
    """Return an error text with the caller's file and line."""
    return _compose(message, 2)


def error_exit(message: Any) -> None:
    """Write an error text with the caller's location to standard error."""
    sys.stderr.write(_compose(message, 2))
    sys.stderr.flush()


def _check(condition: Any, message: Any, level: int) -> None:
    if not condition:
        raise NeoFOAMException(
            _compose(f"Assertion failed.\n       {message}", level + 1)
        )


def check(condition: Any, message: Any) -> None:
    """Raise NeoFOAMException carrying ``message`` when ``condition`` is false."""
    _check(condition, message, 2)


def check_equal(actual: Any, expected: Any) -> None:
    """Raise NeoFOAMException when ``actual`` differs from ``expected``."""
    _check(actual == expected, f"Expected {expected}, got {actual}", 2)


def info(message: Any) -> None:
    """Print a message to standard output."""
    print(message, flush=True)


def debug_info(message: Any) -> None:
    """Print a message only when debug messaging is enabled."""
    if debug_enabled():
        info(message)