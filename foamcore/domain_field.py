"""A field over a whole domain: internal values plus boundary data."""

from __future__ import annotations

from typing import Generic, TypeVar

from foamcore.boundary_fields import BoundaryFields
from foamcore.errors import check
from foamcore.executors import Executor
from foamcore.field import Field

T = TypeVar("T")


class DomainField(Generic[T]):
    """Internal cell values together with the boundary fields of a domain.

    Given fields are copied onto ``exec``; when omitted they start empty.
    """

    def __init__(
        self,
        exec: Executor,
        internal_field: Field[T] | None = None,
        boundary_fields: BoundaryFields[T] | None = None,
    ) -> None:
        self._exec = exec
        self._internal_field: Field[T] = (
            Field(exec, 0) if internal_field is None else Field(exec, internal_field)
        )
        self._boundary_fields: BoundaryFields[T] = (
            BoundaryFields(exec, 0, 0)
            if boundary_fields is None
            else boundary_fields.copy_to(exec)
        )

    @classmethod
    def from_sizes(
        cls, exec: Executor, n_cells: int, n_boundary_faces: int, n_boundaries: int
    ) -> DomainField[T]:
        """Create a domain field with the given numbers of cells, faces and boundaries."""
        result = cls(exec)
        result._internal_field = Field(exec, n_cells)
        result._boundary_fields = BoundaryFields(exec, n_boundary_faces, n_boundaries)
        return result

    @property
    def exec(self) -> Executor:
        """The executor the field is stored on."""
        return self._exec

    @property
    def internal_field(self) -> Field[T]:
        """Values in the cells."""
        return self._internal_field

    @property
    def boundary_field(self) -> BoundaryFields[T]:
        """Values and condition data on the boundaries."""
        return self._boundary_fields

    def assign(self, other: DomainField[T]) -> None:
        """Take the contents of another domain field on the same executor."""
        check(self._exec == other._exec, "Executors are not the same")
        self._internal_field.assign(other._internal_field)
        self._boundary_fields = other._boundary_fields.copy_to(self._exec)

    def copy(self) -> DomainField[T]:
        """Return an independent copy on the same executor."""
        return DomainField(self._exec, self._internal_field, self._boundary_fields)

    def __repr__(self) -> str:
        return (
            f"DomainField({self._exec!r}, {self._internal_field!r}, "
            f"{self._boundary_fields!r})"
        )