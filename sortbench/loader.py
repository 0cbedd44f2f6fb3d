"""Reading whitespace-separated integers from text and files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _iter_ints(text: str) -> Iterator[int]:
    position = 0
    while (match := _INT_PATTERN.match(text, position)) is not None:
        yield int(match.group(1))
        position = match.end()


def parse_ints(text: str) -> list[int]:
    """Return the leading integers of ``text``, stopping at the first non-integer."""
    return list(_iter_ints(text))


def load_ints(path: str | os.PathLike[str]) -> list[int]:
    """Read integers from the file at ``path``; raises ``OSError`` if it cannot be read."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_ints(text)