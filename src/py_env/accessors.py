"""Typed accessors — read configuration values with types and defaults.

``Env`` is the object application code talks to::

    env = create_env()
    port = env.number("PORT", 8000)
    debug = env.boolean("DEBUG")
    db = env.collection("DB_", remove_prefix=True)
    level = env.utils.select("VERBOSE", "debug", "info")

Every getter is total: for valid argument types it never raises, it
returns a value or the caller's default.

Reading an absent key **writes the default back** into the store.  This
is deliberate: the first read pins the value, so later reads of the
same key agree with it even if they pass a different default (or none
at all).  Other code looking at the store, including child processes
when the store wraps ``os.environ``, sees the same value.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from py_env.coerce import format_boolean, parse_boolean, parse_number
from py_env.dotenv import DEFAULT_PATH, load_dotenv, merge_into
from py_env.env import Environment

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from py_env.logging import WarnSink

T = TypeVar("T")
F = TypeVar("F")

DEFAULT_MODE_KEY = "APP_ENV"
PRODUCTION = "production"


@dataclass(frozen=True)
class Env:
    """Typed, defaulting view over an ``Environment``.

    Attributes:
        store: The environment every accessor reads and writes.
        file_values: The pairs parsed from the dotenv file at load time.
        mode_key: The variable that names the deployment mode.

    """

    store: Environment
    file_values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    mode_key: str = DEFAULT_MODE_KEY

    def string(self, key: str, default: str | None = None) -> str:
        """Return the stored string for *key*.

        An absent key is first set to *default* (``""`` if None).
        """
        if key not in self.store:
            self.store.set(key, "" if default is None else default)
        return self.store.get(key) or ""

    def number(self, key: str, default: float = 0) -> int | float:
        """Return *key* parsed as a finite number.

        Args:
            key: Variable name.
            default: Returned, and written as text, when *key* is absent.
                Also returned when the stored text is not a number; the
                stored text is left as it is.

        Returns:
            The parsed number or *default*.

        """
        raw = self.store.get(key)
        if raw is None:
            self.store.set(key, str(default))
            return default
        return parse_number(raw).value_or(default)

    def boolean(self, key: str, default: bool = False) -> bool:  # noqa: FBT001, FBT002
        """Return True if *key* holds ``"true"`` or ``"1"`` (any case).

        *default* only matters on the first read of an absent key: it is
        returned and written as ``"true"`` / ``"false"``.
        """
        raw = self.store.get(key)
        if raw is None:
            self.store.set(key, format_boolean(default))
            return default
        return parse_boolean(raw).value_or(default)

    def has(self, key: str) -> bool:
        """Return True if *key* exists, even with an empty value."""
        return key in self.store

    def defined(self, key: str) -> bool:
        """Return True if *key* exists and holds a value."""
        return self.has(key) and self.store.get(key) is not None

    @property
    def dev(self) -> bool:
        """Return True unless the mode variable is exactly ``production``."""
        return self.store.get(self.mode_key) != PRODUCTION

    def collection(
        self,
        prefix: str,
        *,
        reviver: Callable[[str, str], Any] | None = None,
        remove_prefix: bool = False,
    ) -> dict[str, Any]:
        """Gather every variable whose name starts with *prefix*.

        Args:
            prefix: Name prefix to match, e.g. ``"DB_"``.
            reviver: Called as ``reviver(value, key)`` to transform each
                value.  The original key is passed even when
                *remove_prefix* is set.
            remove_prefix: Strip *prefix* from the returned keys.

        Returns:
            The matching variables, in store order.

        """
        result: dict[str, Any] = {}
        for key, value in self.store.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix) :] if remove_prefix else key
            result[name] = reviver(value, key) if reviver is not None else value
        return result

    @property
    def utils(self) -> EnvUtils:
        """Return the helper namespace bound to this environment."""
        return EnvUtils(env=self)

    @property
    def raw(self) -> Mapping[str, str]:
        """Return the read-only pairs parsed from the dotenv file."""
        return MappingProxyType(dict(self.file_values))


@dataclass(frozen=True)
class EnvUtils:
    """Convenience helpers built on top of the typed accessors."""

    env: Env

    def select(
        self,
        key: str,
        when_true: T,
        when_false: F,
        predicate: Callable[[str, str | None], bool] | None = None,
    ) -> T | F:
        """Pick between two values based on a variable.

        Args:
            key: Variable name.
            when_true: Returned when the predicate holds.
            when_false: Returned otherwise.
            predicate: Called as ``predicate(key, raw_value)`` with the
                stored string, or None if the key is absent.  Defaults
                to ``env.boolean(key)``, which also writes ``"false"``
                for an absent key.

        """
        if predicate is None:
            chosen = self.env.boolean(key)
        else:
            chosen = predicate(key, self.env.store.get(key))
        return when_true if chosen else when_false


def create_env(
    store: Environment | None = None,
    *,
    path: str | Path = DEFAULT_PATH,
    logger: WarnSink | None = None,
    mode_key: str = DEFAULT_MODE_KEY,
) -> Env:
    """Load a dotenv file into *store* and return accessors over it.

    Args:
        store: The environment to populate.  Defaults to a live view of
            ``os.environ``.
        path: The dotenv file.  A missing file is not an error.
        logger: Receives a warning if the file cannot be read.
        mode_key: The variable ``Env.dev`` checks.

    Returns:
        An ``Env`` bound to *store*.

    """
    if store is None:
        store = Environment.wrap(os.environ)
    values = load_dotenv(path, logger=logger)
    merge_into(store, values)
    return Env(store=store, file_values=values, mode_key=mode_key)
