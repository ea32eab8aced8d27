"""Fields: sized arrays of values bound to an executor."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from itertools import islice
from numbers import Real
from typing import Any, Generic, TypeVar

from foamcore.errors import check, debug_enabled
from foamcore.executors import Executor, SerialExecutor
from foamcore.operations import add, fill, map_field, mul, scalar_mul, set_field, sub
from foamcore.primitives import Vector

T = TypeVar("T")


class FieldSpan(Generic[T]):
    """A live view of a contiguous part of a field's storage."""

    __slots__ = ("_data", "_start", "_stop")

    def __init__(self, data: list[T], start: int = 0, stop: int | None = None) -> None:
        self._data = data
        self._start = start
        self._stop = len(data) if stop is None else stop

    def _index(self, i: int) -> int:
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"span index out of range for size {n}")
        return self._start + i

    def __getitem__(self, i: int) -> T:
        return self._data[self._index(i)]

    def __setitem__(self, i: int, value: T) -> None:
        self._data[self._index(i)] = value

    def __len__(self) -> int:
        return self._stop - self._start

    def __iter__(self) -> Iterator[T]:
        return islice(self._data, self._start, self._stop)

    def __repr__(self) -> str:
        return f"FieldSpan({list(self)!r})"


def _blank_like(sample: list[Any]) -> Any:
    return type(sample[0])() if sample else 0.0


class Field(Generic[T]):
    """Values stored on an executor, with element-wise arithmetic.

    ``data`` is either a size (elements start as 0.0, or as copies of
    ``fill_value`` when given), another field, or an iterable of values.
    """

    def __init__(self, exec: Executor, data: Any = 0, fill_value: Any = None) -> None:
        if not isinstance(exec, Executor):
            raise TypeError(f"expected an Executor, not {type(exec).__qualname__}")
        self._exec = exec
        if isinstance(data, int) and not isinstance(data, bool):
            if data < 0:
                raise ValueError(f"field size must not be negative, got {data}")
            self._data: list[Any] = [0.0] * data
            if fill_value is not None:
                fill(self, fill_value)
        else:
            if fill_value is not None:
                raise TypeError("fill_value is only allowed together with a size")
            self._data = [copy.copy(value) for value in data]

    @property
    def exec(self) -> Executor:
        """The executor the field lives on."""
        return self._exec

    def apply(self, func: Callable[[int], T]) -> None:
        """Set every element ``i`` to ``func(i)``."""
        map_field(self, func)

    def copy_to_executor(self, exec: Executor) -> Field[T]:
        """Return a copy of this field on ``exec``."""
        return Field(exec, self)

    def copy_to_host(self) -> Field[T]:
        """Return a copy of this field on the serial host executor."""
        return self.copy_to_executor(SerialExecutor())

    def __getitem__(self, i: int) -> T:
        return self._data[i]

    def __setitem__(self, i: int, value: T) -> None:
        self._data[i] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Field({self._exec!r}, {self._data!r})"

    def assign(self, other: Any) -> None:
        """Take the contents of another field, or set every element to a value.

        A field must be on the same executor; this field is resized to match it.
        """
        if isinstance(other, Field):
            check(self._exec == other._exec, "Executors are not the same")
            if len(self) != len(other):
                self.resize(len(other))
            set_field(self, other.span())
        else:
            fill(self, other)

    def _validate(self, other: Field) -> None:
        check(len(self) == len(other), "Fields are not the same size.")
        if debug_enabled():
            check(self._exec == other._exec, "Executors are not the same.")

    def __iadd__(self, other: Field[T]) -> Field[T]:
        if not isinstance(other, Field):
            return NotImplemented
        self._validate(other)
        add(self, other)
        return self

    def __isub__(self, other: Field[T]) -> Field[T]:
        if not isinstance(other, Field):
            return NotImplemented
        self._validate(other)
        sub(self, other)
        return self

    def __add__(self, other: Field[T]) -> Field[T]:
        if not isinstance(other, Field):
            return NotImplemented
        result = Field(self._exec, self)
        result += other
        return result

    def __sub__(self, other: Field[T]) -> Field[T]:
        if not isinstance(other, Field):
            return NotImplemented
        result = Field(self._exec, self)
        result -= other
        return result

    def __mul__(self, other: Any) -> Field[T]:
        if isinstance(other, Field):
            self._validate(other)
            result = Field(self._exec, self)
            mul(result, other)
            return result
        if isinstance(other, Real):
            result = Field(self._exec, self)
            scalar_mul(result, other)
            return result
        return NotImplemented

    def __rmul__(self, other: Any) -> Field[T]:
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented

    def resize(self, size: int) -> None:
        """Change the number of elements, keeping the leading ones."""
        if size < 0:
            raise ValueError(f"field size must not be negative, got {size}")
        current = len(self._data)
        if size < current:
            del self._data[size:]
        else:
            sample = self._data[:1]
            self._data.extend(_blank_like(sample) for _ in range(size - current))

    def size(self) -> int:
        """Number of elements."""
        return len(self._data)

    def empty(self) -> bool:
        """Return True if the field has no elements."""
        return not self._data

    def span(self, range_: tuple[int, int] | None = None) -> FieldSpan[T]:
        """A live view of the whole field or of the half-open ``range_``."""
        if range_ is None:
            return FieldSpan(self._data, 0, len(self._data))
        start, stop = range_
        if not 0 <= start <= stop <= len(self._data):
            raise IndexError(f"range {range_} outside field of size {len(self._data)}")
        return FieldSpan(self._data, start, stop)

    def range(self) -> tuple[int, int]:
        """The index range ``(0, size)``."""
        return (0, len(self._data))

    def data(self) -> list[T]:
        """The live list holding the elements."""
        return self._data


LabelField = Field[int]
ScalarField = Field[float]
VectorField = Field[Vector]