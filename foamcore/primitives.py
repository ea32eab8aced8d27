"""Basic numeric types and a three-component vector."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real

label = int
local_idx = int
global_idx = int
scalar = float

ROOTVSMALL: float = 1e-18


class Vector:
    """A mutable 3D vector of scalars."""

    __slots__ = ("_cmpts",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._cmpts = [float(x), float(y), float(z)]

    def __getitem__(self, i: int) -> float:
        return self._cmpts[i]

    def __setitem__(self, i: int, value: float) -> None:
        self._cmpts[i] = float(value)

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        return iter(self._cmpts)

    def __repr__(self) -> str:
        x, y, z = self._cmpts
        return f"Vector({x}, {y}, {z})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._cmpts == other._cmpts

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a + b for a, b in zip(self, other)))

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._cmpts = [a + b for a, b in zip(self, other)]
        return self

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a - b for a, b in zip(self, other)))

    def __isub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._cmpts = [a - b for a, b in zip(self, other)]
        return self

    def __mul__(self, other: float) -> Vector:
        if not isinstance(other, Real):
            return NotImplemented
        return Vector(*(a * other for a in self))

    def __rmul__(self, other: float) -> Vector:
        return self.__mul__(other)

    def __imul__(self, other: float) -> Vector:
        if not isinstance(other, Real):
            return NotImplemented
        self._cmpts = [a * other for a in self]
        return self

    def __and__(self, other: Vector) -> Vector:
        """Component-wise product."""
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a * b for a, b in zip(self, other)))


def mag(vec: Vector) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(sum(c * c for c in vec))