"""Fixed-width alignment and sequence slicing primitives.

Widths are counted in code points (``len(str)``), never in encoded bytes, so
multi-byte text lines up the same way ASCII does.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TypeVar

from plaintext_filters.lib.errors import InvalidArgument

T = TypeVar("T")

_FILL = " "


class Alignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise InvalidArgument(f"`{name}` must be non-negative, got {value}")


def align_text(text: str, width: int, mode: Alignment) -> str:
    """Pad or truncate ``text`` to exactly ``width`` characters.

    >>> align_text("1", 4, Alignment.LEFT)
    '1   '
    >>> align_text("3000", 10, Alignment.RIGHT)
    '      3000'
    >>> align_text("ab", 5, Alignment.CENTER)
    ' ab  '
    >>> align_text("Alexander", 4, Alignment.CENTER)
    'Alex'
    """
    _require_non_negative("width", width)
    pad = width - len(text)
    if pad <= 0:
        return text[:width]
    if mode is Alignment.LEFT:
        return text + _FILL * pad
    if mode is Alignment.RIGHT:
        return _FILL * pad + text
    # Odd remainder goes on the right; str.center() does not guarantee this.
    left = pad // 2
    return _FILL * left + text + _FILL * (pad - left)


def slice_end(items: Sequence[T], end: int) -> Sequence[T]:
    """Return a copy of the first ``min(end, len(items))`` elements.

    >>> slice_end([1, 2, 3, 4, 5], 3)
    [1, 2, 3]
    """
    _require_non_negative("end", end)
    return items[:end]
