"""Loops and reductions over index ranges and fields."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from foamcore.executors import Executor

T = TypeVar("T")


def _require_executor(exec: Any) -> None:
    if not isinstance(exec, Executor):
        raise TypeError(f"expected an Executor, not {type(exec).__qualname__}")


def _indices(range_: tuple[int, int]) -> range:
    start, end = range_
    return range(start, end)


def parallel_for(exec: Executor, range_: tuple[int, int], kernel: Callable[[int], None]) -> None:
    """Call ``kernel(i)`` for every ``i`` in the half-open ``range_``."""
    _require_executor(exec)
    for i in _indices(range_):
        kernel(i)


def parallel_for_field(field: Any, kernel: Callable[[int], Any]) -> None:
    """Set every element ``i`` of ``field`` to ``kernel(i)``, in index order."""
    span = field.span()
    for i in range(len(span)):
        span[i] = kernel(i)


def parallel_reduce(
    exec: Executor,
    range_: tuple[int, int],
    kernel: Callable[[int, T], T],
    initial: T,
) -> T:
    """Fold ``kernel(i, acc)`` over the half-open ``range_`` and return the result."""
    _require_executor(exec)
    value = initial
    for i in _indices(range_):
        value = kernel(i, value)
    return value


def parallel_reduce_field(field: Any, kernel: Callable[[int, T], T], initial: T) -> T:
    """Fold ``kernel(i, acc)`` over every index of ``field`` and return the result."""
    value = initial
    for i in range(len(field)):
        value = kernel(i, value)
    return value