"""Minimal run-time control: argument list and a time loop."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

NL = "\n"


class ArgList:
    """Command-line arguments of a case."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        self.argv = list(argv) if argv is not None else []

    def check_root_case(self) -> bool:
        """Return whether the case root is valid; always True."""
        return True


class Time:
    """A simple time counter running from 1 to 10 in unit steps."""

    END_TIME = 10.0

    def __init__(self, control_dict_name: str = "", args: ArgList | None = None) -> None:
        self.control_dict_name = control_dict_name
        self.args = args
        self._time = 0.0

    def time_name(self) -> str:
        """Current time formatted with six decimals."""
        return f"{self._time:f}"

    def loop(self) -> bool:
        """Advance by one step and report whether the end time is not passed."""
        self._time += 1.0
        return self.END_TIME >= self._time

    def print_execution_time(self, stream: TextIO) -> TextIO:
        """Flush the stream and return it; no timing text is written."""
        stream.flush()
        return stream