"""Reporting capability injected into the resolver.

The resolver never looks up a global shell; callers pass whichever
implementation suits them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from gencomposer.utils import console


@runtime_checkable
class GenShell(Protocol):
    """What the resolver needs from its host."""

    def write_status(self, message: str) -> None: ...

    def write_output(self, message: str) -> None: ...


class NullShell:
    """Discards everything."""

    def write_status(self, message: str) -> None:
        pass

    def write_output(self, message: str) -> None:
        pass


class ConsoleShell:
    """Prints through the shared Rich console."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def write_status(self, message: str) -> None:
        if self.verbose:
            console.print(f"  [dim]{message}[/dim]")

    def write_output(self, message: str) -> None:
        console.print(f"  {message}")


class RecordingShell:
    """Keeps every message, for tests and dry runs."""

    def __init__(self) -> None:
        self.status: list[str] = []
        self.output: list[str] = []

    def write_status(self, message: str) -> None:
        self.status.append(message)

    def write_output(self, message: str) -> None:
        self.output.append(message)
