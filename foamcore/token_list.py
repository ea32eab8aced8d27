"""An ordered list of tokens of any type."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")


def _type_name(value_type: Any) -> str:
    if isinstance(value_type, tuple):
        return " | ".join(_type_name(t) for t in value_type)
    return getattr(value_type, "__qualname__", repr(value_type))


class TokenList:
    """Stores tokens of arbitrary type and retrieves them with a type check."""

    def __init__(self, tokens: Iterable[Any] | None = None) -> None:
        self._data: list[Any] = list(tokens) if tokens is not None else []

    def insert(self, value: Any) -> None:
        """Append a token."""
        self._data.append(value)

    def remove(self, index: int) -> None:
        """Remove the token at ``index``; raises IndexError if out of range."""
        self._data.pop(self._checked(index))

    def empty(self) -> bool:
        """Return True if there are no tokens."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenList):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenList({self._data!r})"

    def _checked(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError(f"token index {index} out of range for size {len(self._data)}")
        return index

    def get(self, index: int, value_type: type[T]) -> T:
        """Return the token at ``index``, which must be of ``value_type``.

        Raises IndexError when out of range and TypeError for a token of another type.
        """
        value = self._data[self._checked(index)]
        if not isinstance(value, value_type):
            reason = f"token {index} is not of the requested type"
            sys.stderr.write(
                "Caught a bad_any_cast exception: \n"
                f"requested type {_type_name(value_type)}\n"
                f"actual type {type(value).__qualname__}\n"
                f"{reason}\n"
            )
            sys.stderr.flush()
            raise TypeError(reason)
        return value

    def __getitem__(self, index: int) -> Any:
        return self._data[self._checked(index)]

    def tokens(self) -> list[Any]:
        """Return the underlying list of tokens."""
        return self._data