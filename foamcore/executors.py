"""Executors describing where field operations run."""

from __future__ import annotations


class Executor:
    """Base of all executors; two executors are equal when of the same kind."""

    name = "Executor"
    space = "Host"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Executor):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def describe(self) -> str:
        """Return the name of the execution space."""
        return self.space

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SerialExecutor(Executor):
    """Reference executor running serially on the host."""

    name = "SerialExecutor"
    space = "Serial"


class CPUExecutor(Executor):
    """Executor for multicore host execution."""

    name = "CPUExecutor"
    space = "Host"


class GPUExecutor(Executor):
    """Executor for offloaded execution on the default device."""

    name = "GPUExecutor"
    space = "Device"