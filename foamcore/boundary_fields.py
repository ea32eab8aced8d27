"""Boundary values and boundary-condition data of a computational domain."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from foamcore.executors import Executor
from foamcore.field import Field

T = TypeVar("T")


class BoundaryFields(Generic[T]):
    """Per-face boundary values, condition data and per-patch offsets.

    ``value`` holds the values computed by the boundary conditions,
    ``ref_value`` the Dirichlet values, ``value_fraction`` the blending
    fraction, ``ref_grad`` the Neumann values, ``boundary_types`` one entry
    per boundary and ``offset`` the ``n_boundaries + 1`` start indices of the
    boundaries' faces.
    """

    def __init__(self, exec: Executor, n_boundary_faces: int, n_boundaries: int) -> None:
        if n_boundary_faces < 0 or n_boundaries < 0:
            raise ValueError(
                "boundary sizes must not be negative, got "
                f"{n_boundary_faces} faces and {n_boundaries} boundaries"
            )
        self._exec = exec
        self._value: Field[T] = Field(exec, n_boundary_faces)
        self._ref_value: Field[T] = Field(exec, n_boundary_faces)
        self._value_fraction: Field[float] = Field(exec, n_boundary_faces)
        self._ref_grad: Field[T] = Field(exec, n_boundary_faces)
        self._boundary_types: Field[int] = Field(exec, [0] * n_boundaries)
        self._offset: Field[int] = Field(exec, [0] * (n_boundaries + 1))
        self._n_boundaries = n_boundaries
        self._n_boundary_faces = n_boundary_faces

    @property
    def exec(self) -> Executor:
        """The executor the fields are stored on."""
        return self._exec

    @property
    def value(self) -> Field[T]:
        """Values computed by the boundary conditions."""
        return self._value

    @property
    def ref_value(self) -> Field[T]:
        """Dirichlet boundary values."""
        return self._ref_value

    @property
    def value_fraction(self) -> Field[float]:
        """Fraction of the boundary value."""
        return self._value_fraction

    @property
    def ref_grad(self) -> Field[T]:
        """Neumann boundary values."""
        return self._ref_grad

    @property
    def boundary_types(self) -> Field[int]:
        """The type of each boundary."""
        return self._boundary_types

    @property
    def offset(self) -> Field[int]:
        """Start index of each boundary's faces, plus the end of the last."""
        return self._offset

    @property
    def n_boundaries(self) -> int:
        """Number of boundaries."""
        return self._n_boundaries

    @property
    def n_boundary_faces(self) -> int:
        """Number of boundary faces."""
        return self._n_boundary_faces

    def copy_to(self, exec: Executor) -> BoundaryFields[T]:
        """Return an independent copy with every field placed on ``exec``."""
        result: BoundaryFields[T] = BoundaryFields.__new__(BoundaryFields)
        result._exec = exec
        result._value = Field(exec, self._value)
        result._ref_value = Field(exec, self._ref_value)
        result._value_fraction = Field(exec, self._value_fraction)
        result._ref_grad = Field(exec, self._ref_grad)
        result._boundary_types = Field(exec, self._boundary_types)
        result._offset = Field(exec, self._offset)
        result._n_boundaries = self._n_boundaries
        result._n_boundary_faces = self._n_boundary_faces
        return result

    def range(self, patch_id: int) -> tuple[int, int]:
        """The half-open face index range of boundary ``patch_id``."""
        if not 0 <= patch_id < self._n_boundaries:
            raise IndexError(
                f"patch {patch_id} out of range for {self._n_boundaries} boundaries"
            )
        return (self._offset[patch_id], self._offset[patch_id + 1])

    def __repr__(self) -> str:
        return (
            f"BoundaryFields({self._exec!r}, n_boundary_faces={self._n_boundary_faces}, "
            f"n_boundaries={self._n_boundaries})"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BoundaryFields):
            return NotImplemented
        return (
            self._n_boundaries == other._n_boundaries
            and self._n_boundary_faces == other._n_boundary_faces
            and list(self._value) == list(other._value)
            and list(self._ref_value) == list(other._ref_value)
            and list(self._value_fraction) == list(other._value_fraction)
            and list(self._ref_grad) == list(other._ref_grad)
            and list(self._boundary_types) == list(other._boundary_types)
            and list(self._offset) == list(other._offset)
        )

    __hash__ = None  # type: ignore[assignment]