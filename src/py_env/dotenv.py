"""Dotenv loader — read ``KEY=VALUE`` lines from a local file.

A ``.env`` file keeps per-checkout settings next to the code without
exporting them in every shell.  The format is deliberately tiny::

    # comment
    DATABASE_URL=postgres://localhost/app
    GREETING="hello world"
    TOKEN='a=b=c'

Rules:
    - One assignment per line; ``\\n`` and ``\\r\\n`` both end a line.
    - Blank lines, ``#`` comments and lines without ``=`` are skipped.
    - The first ``=`` splits key from value; the value may contain more.
    - Key and value are trimmed, then one layer of matching ``"`` or
      ``'`` quotes is removed from the value.
    - No escapes, no multi-line values, no ``${VAR}`` expansion.

Loading never raises.  A missing file is simply empty; a file that
cannot be read or decoded is reported as a warning and treated as
empty too.  Merging into a store is first-writer-wins: anything the
store already holds beats the file.
"""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from py_env.env import Environment
    from py_env.logging import WarnSink

DEFAULT_PATH = ".env"
FALLBACK_MESSAGE = "Failed to load .env"

_LINE_BREAK = re.compile(r"\r?\n")
_QUOTES = ('"', "'")


@dataclass(frozen=True)
class ParsedLine:
    """One ``KEY=VALUE`` assignment pulled out of a file line."""

    key: str
    value: str


def unquote(value: str) -> str:
    """Strip exactly one layer of matching quotes from *value*.

    ``'"abc"'`` becomes ``'abc'``; ``'""abc""'`` becomes ``'"abc"'``.
    Mismatched or lone quote characters are left alone.
    """
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:  # noqa: PLR2004
        return value[1:-1]
    return value


def parse_line(line: str) -> ParsedLine | None:
    """Parse a single line, or return None if it carries no assignment.

    Args:
        line: One line of the file, without its line break.

    Returns:
        The parsed pair, or None for blank lines, comments, lines
        without ``=`` and lines whose key is empty.

    """
    if not line or line.strip().startswith("#") or "=" not in line:
        return None
    key, _, rest = line.partition("=")
    key = key.strip()
    if not key:
        return None
    return ParsedLine(key=key, value=unquote(rest.strip()))


def parse_dotenv(text: str) -> dict[str, str]:
    """Parse the full text of a dotenv file.

    Later assignments to the same key overwrite earlier ones.
    """
    values: dict[str, str] = {}
    for line in _LINE_BREAK.split(text):
        parsed = parse_line(line)
        if parsed is not None:
            values[parsed.key] = parsed.value
    return values


def _report(message: str, logger: WarnSink | None) -> None:
    if logger is not None:
        logger.warn(message)
    else:
        warnings.warn(message, stacklevel=3)


def load_dotenv(
    path: str | Path = DEFAULT_PATH,
    *,
    logger: WarnSink | None = None,
) -> Mapping[str, str]:
    """Load a dotenv file into a read-only mapping.

    Args:
        path: File to read.  Relative paths resolve against the
            current working directory.
        logger: Where read failures are reported.  Defaults to the
            standard ``warnings`` channel.

    Returns:
        The parsed pairs.  Empty if the file is missing or unreadable.

    """
    file = Path(path)
    try:
        if not file.exists():
            return MappingProxyType({})
        text = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _report(str(exc) or FALLBACK_MESSAGE, logger)
        return MappingProxyType({})

    return MappingProxyType(parse_dotenv(text))


def merge_into(store: Environment, values: Mapping[str, str]) -> list[str]:
    """Copy *values* into *store* without overwriting existing keys.

    Returns:
        The keys that were actually inserted, in file order.

    """
    inserted: list[str] = []
    for key, value in values.items():
        if key not in store:
            store.set(key, value)
            inserted.append(key)
    return inserted
