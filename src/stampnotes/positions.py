"""Translate anchors between line-index space and character-offset space.

Offsets count characters in the document joined with single ``\\n``
separators. Line ``i`` owns the half-open range ``[start_i, start_{i+1})``,
so an offset sitting on a line boundary belongs to the line that starts
there. The last line also owns the end-of-document offset.

Everything here is recomputed from the lines passed in; nothing is cached.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from itertools import accumulate
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


def _line_starts(lines: Sequence[str]) -> list[int]:
    return [0, *accumulate(len(line) + 1 for line in lines[:-1])]


def line_to_offset(lines: Sequence[str], index: int) -> int:
    """Offset of the first character of line *index*."""
    if not 0 <= index < len(lines):
        raise IndexError(f"Line {index} out of range (document has {len(lines)} lines)")
    return sum(len(line) + 1 for line in lines[:index])


def offset_to_line(lines: Sequence[str], offset: int) -> int | None:
    """Index of the line containing *offset*, or ``None`` when out of range."""
    if not lines:
        return None
    starts = _line_starts(lines)
    doc_length = starts[-1] + len(lines[-1])
    if offset < 0 or offset > doc_length:
        return None
    return bisect_right(starts, offset) - 1


def to_offset_space(lines: Sequence[str], line_map: Mapping[int, int]) -> dict[int, int]:
    """Re-key a line-indexed timestamp map by line start offsets."""
    result: dict[int, int] = {}
    for index, time_ms in sorted(line_map.items()):
        if not 0 <= index < len(lines):
            continue
        result[line_to_offset(lines, index)] = time_ms
    return result


def from_offset_space(lines: Sequence[str], offset_map: Mapping[int, int]) -> dict[int, int]:
    """Re-key an offset-indexed timestamp map by line index.

    Offsets outside the document are dropped. When several offsets land on
    the same line the lowest one wins.
    """
    result: dict[int, int] = {}
    for offset, time_ms in sorted(offset_map.items()):
        index = offset_to_line(lines, offset)
        if index is None:
            logger.debug("Dropping anchor at offset %d: outside document", offset)
            continue
        result.setdefault(index, time_ms)
    return result
