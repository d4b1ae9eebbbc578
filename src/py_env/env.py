"""Environment store — the key/value map every accessor reads and writes.

A process environment is a set of ``KEY=VALUE`` string pairs.  The host
owns it (``os.environ`` in CPython); configuration code reads it and,
occasionally, writes defaults back into it.

Key design properties:
    - **Strings only** — both keys and values are strings (no types).
      Typing happens later, in the accessors.
    - **Convention over enforcement** — uppercase names are expected
      but never checked.
    - **Injectable** — the store is an object you pass around, not a
      global.  Tests build a fresh one per case; production code wraps
      ``os.environ``.

Two ways to build one:
    - ``Environment(initial)`` — an independent copy.  Changes stay local.
    - ``Environment.wrap(mapping)`` — a live view.  Reads and writes go
      straight through to the wrapped mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping


class Environment:
    """A key-value store for environment variables.

    The store never clears or replaces the mapping it holds; it only
    gets and sets single keys.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: MutableMapping[str, str] = dict(initial) if initial else {}

    @classmethod
    def wrap(cls, mapping: MutableMapping[str, str]) -> Environment:
        """Return an environment that reads and writes *mapping* in place.

        Use this for ``os.environ`` so values merged from a file are
        visible to child processes and other libraries.
        """
        env = cls()
        env._vars = mapping
        return env

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs in store order."""
        return list(self._vars.items())

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set, even to an empty string."""
        return key in self._vars
