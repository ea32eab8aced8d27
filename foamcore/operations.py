"""Element-wise operations, comparisons and reductions on fields."""

from __future__ import annotations

import copy
import operator
from collections.abc import Callable, Iterable
from functools import reduce
from numbers import Number
from typing import TYPE_CHECKING, Any

from foamcore.errors import check
from foamcore.parallel import parallel_for_field
from foamcore.primitives import Vector

if TYPE_CHECKING:
    from foamcore.field import Field, FieldSpan


def map_field(field: Field, inner: Callable[[int], Any]) -> None:
    """Set every element ``i`` of ``field`` to ``inner(i)``."""
    parallel_for_field(field, inner)


def fill(field: Field, value: Any) -> None:
    """Set every element of ``field`` to an independent copy of ``value``."""
    parallel_for_field(field, lambda _i: copy.copy(value))


def set_field(field: Field, values: Any) -> None:
    """Copy the leading ``len(field)`` elements of ``values`` into ``field``."""
    if len(values) < len(field):
        raise IndexError(
            f"source has {len(values)} elements, field needs {len(field)}"
        )
    parallel_for_field(field, lambda i: copy.copy(values[i]))


def scalar_mul(field: Field, value: Any) -> None:
    """Multiply every element of ``field`` by ``value`` in place."""
    span = field.span()
    parallel_for_field(field, lambda i: span[i] * value)


def _binary_op(a: Field, b: Field, op: Callable[[Any, Any], Any]) -> None:
    check(len(a) == len(b), f"Fields have different lengths: {len(a)} vs {len(b)}")
    span_a = a.span()
    span_b = b.span()
    parallel_for_field(a, lambda i: op(span_a[i], span_b[i]))


def add(a: Field, b: Field) -> None:
    """Add ``b`` to ``a`` element-wise, in place."""
    _binary_op(a, b, operator.add)


def sub(a: Field, b: Field) -> None:
    """Subtract ``b`` from ``a`` element-wise, in place."""
    _binary_op(a, b, operator.sub)


def mul(a: Field, b: Field) -> None:
    """Multiply ``a`` by ``b`` element-wise, in place."""
    _binary_op(a, b, operator.mul)


def spans(*args: Field) -> tuple[FieldSpan, ...]:
    """Return the full span of each given field."""
    return tuple(field.span() for field in args)


def copy_to_hosts(*args: Field) -> tuple[Field, ...]:
    """Return a host copy of each given field."""
    return tuple(field.copy_to_host() for field in args)


def equal(field: Field, other: Any) -> bool:
    """Compare a field with another field, a sequence, or a single value.

    A single value matches when every element equals it; a field or sequence
    matches when it has the same length and equal elements.
    """
    host = field.copy_to_host()
    if hasattr(other, "copy_to_host"):
        other = list(other.copy_to_host())
    elif isinstance(other, (Number, Vector, str)) or not isinstance(other, Iterable):
        return all(value == other for value in host)
    else:
        other = list(other)
    if len(host) != len(other):
        return False
    return all(x == y for x, y in zip(host, other))


def sum_field(field: Field) -> Any:
    """Sum of all elements, starting from the element type's zero value."""
    values = list(field.copy_to_host())
    if not values:
        return 0.0
    return reduce(operator.add, values, type(values[0])())