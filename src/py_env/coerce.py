"""Coercion of raw environment strings into typed values.

Environment values are always strings.  Turning them into numbers or
booleans can fail, and the accessors must never raise, so each parser
returns a tagged ``Coercion`` instead of a bare value.  The caller then
collapses it with ``value_or(default)``.

Number rules (the same ones JavaScript's ``Number()`` applies to
strings, minus the non-finite results):

    - surrounding whitespace is ignored; an empty string is ``0``;
    - ``42``, ``-7``, ``+3`` parse to ``int``;
    - ``0x1F``, ``0o17``, ``0b101`` parse to ``int`` (no sign allowed);
    - ``1.5``, ``.5``, ``2.``, ``1e3`` parse to ``float``;
    - ``inf``, ``nan``, ``1e999``, ``1_000``, integers too large for a
      float, non-ASCII digits and everything else fail.

Boolean rules: ``"true"`` and ``"1"`` (any case) are true, everything
else is false.  Boolean parsing never fails.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)

TRUE_VALUES = frozenset({"true", "1"})


@dataclass(frozen=True)
class Coercion(Generic[T]):
    """The outcome of parsing one raw string.

    Attributes:
        ok: True if parsing succeeded.
        value: The parsed value (None on failure).

    """

    ok: bool
    value: T | None = None

    @classmethod
    def success(cls, value: T) -> Coercion[T]:
        """Wrap a successfully parsed value."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls) -> Coercion[T]:
        """Return a failed result."""
        return cls(ok=False)

    def value_or(self, default: T) -> T:
        """Return the parsed value, or *default* if parsing failed."""
        if self.ok and self.value is not None:
            return self.value
        return default


def parse_number(raw: str) -> Coercion[int | float]:
    """Parse *raw* as a finite number.

    Args:
        raw: The stored string.

    Returns:
        ``int`` for integer literals, ``float`` otherwise, or a failure
        if the text is not a finite number.

    """
    text = raw.strip()
    if not text:
        return Coercion.success(0)
    if _PREFIXED.fullmatch(text):
        value = int(text, 0)
        try:
            float(value)
        except OverflowError:
            return Coercion.failure()
        return Coercion.success(value)
    if not _DECIMAL.fullmatch(text):
        return Coercion.failure()
    approx = float(text)
    if not math.isfinite(approx):
        return Coercion.failure()
    if _INTEGER.fullmatch(text):
        return Coercion.success(int(text))
    return Coercion.success(approx)


def parse_boolean(raw: str) -> Coercion[bool]:
    """Parse *raw* as a flag: ``"true"`` or ``"1"`` in any case."""
    return Coercion.success(raw.lower() in TRUE_VALUES)


def format_boolean(value: bool) -> str:  # noqa: FBT001
    """Render a boolean the way ``parse_boolean`` reads it back."""
    return "true" if value else "false"
