"""Configuration logging — a small buffer for loader warnings.

Loading configuration is the first thing a process does, often before
any real logging is wired up.  The loader therefore talks to a tiny
collaborator: anything with a ``warn(message)`` method.

This module provides:

- **WarnSink** — the protocol the loader depends on.
- **LogEntry** — a single recorded warning (message, source).
- **Logger** — an append-only buffer that satisfies ``WarnSink``, so
  it can be handed straight to the loader and inspected afterwards.

If no sink is supplied, the loader reports through Python's standard
``warnings`` channel instead.
"""

from dataclasses import dataclass
from typing import Protocol


class WarnSink(Protocol):
    """Anything that can receive a warning message."""

    def warn(self, message: str) -> None:
        """Record a warning."""
        ...  # pragma: no cover


@dataclass(frozen=True)
class LogEntry:
    """A single recorded warning.

    Attributes:
        message: What went wrong, usually the error's own message.
        source: The component that reported it (e.g. "dotenv").

    """

    message: str
    source: str


class Logger:
    """Append-only warning buffer."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all warnings in the order they were reported."""
        return list(self._entries)

    def warn(self, message: str, *, source: str = "dotenv") -> None:
        """Record a warning from *source*."""
        self._entries.append(LogEntry(message=message, source=source))
