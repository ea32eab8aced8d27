"""A string-keyed store of values of any type, with nested dictionaries."""

from __future__ import annotations

import sys
from collections.abc import ItemsView, Iterable, Mapping
from typing import Any, TypeVar, Union

T = TypeVar("T")

_Entries = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def _type_name(value_type: Any) -> str:
    if isinstance(value_type, tuple):
        return " | ".join(_type_name(t) for t in value_type)
    return getattr(value_type, "__qualname__", repr(value_type))


def _log_bad_cast(value_type: Any, actual: Any, reason: str) -> None:
    sys.stderr.write(
        "Caught a bad_any_cast exception: \n"
        f"requested type {_type_name(value_type)}\n"
        f"actual type {type(actual).__qualname__}\n"
        f"{reason}\n"
    )
    sys.stderr.flush()


class Dictionary:
    """Key-value store whose values may be of any type, including sub-dictionaries."""

    def __init__(self, entries: _Entries = None) -> None:
        self._data: dict[str, Any] = {}
        if entries is None:
            return
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self._data[key] = value

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._data[key] = value

    def contains(self, key: str) -> bool:
        """Return True if ``key`` is present."""
        return key in self._data

    def remove(self, key: str) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        self._data.pop(key, None)

    def __getitem__(self, key: str) -> Any:
        try:
            return self._data[key]
        except KeyError:
            sys.stderr.write(
                f"Key not found: {key} \navailable keys are: \n"
                + "".join(f" - {k}\n" for k in self._data)
            )
            raise

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Dictionary({self._data!r})"

    def get(self, key: str, value_type: type[T]) -> T:
        """Return the value under ``key``, which must be of ``value_type``.

        Raises KeyError for a missing key and TypeError for a value of another type.
        """
        value = self[key]
        if not isinstance(value, value_type):
            reason = f"value of key '{key}' is not of the requested type"
            _log_bad_cast(value_type, value, reason)
            raise TypeError(reason)
        return value

    def is_dict(self, key: str) -> bool:
        """Return True if ``key`` holds a sub-dictionary."""
        return isinstance(self._data.get(key), Dictionary)

    def sub_dict(self, key: str) -> Dictionary:
        """Return the sub-dictionary stored under ``key``."""
        return self.get(key, Dictionary)

    def keys(self) -> list[str]:
        """Return the keys as a list."""
        return list(self._data)

    def items(self) -> ItemsView[str, Any]:
        """Return a live view of the key-value pairs."""
        return self._data.items()