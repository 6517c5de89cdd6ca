"""Candidate split units produced by the chunking strategies."""

import re
from typing import NamedTuple


class ChunkUnit(NamedTuple):
    """An atomic piece of a document. start/end are offsets into the text it came from."""

    text: str
    start: int
    end: int

    def shifted(self, offset: int) -> "ChunkUnit":
        return ChunkUnit(self.text, self.start + offset, self.end + offset)


def spans_between(text: str, separator: re.Pattern[str]) -> list[ChunkUnit]:
    """
    Units for the text between separator matches, trimmed of surrounding whitespace.

    Whitespace-only pieces yield no unit. Offsets point at the trimmed content,
    so the text between two consecutive units is separator whitespace only.
    """
    units: list[ChunkUnit] = []
    last = 0
    for match in separator.finditer(text):
        _append_trimmed(units, text, last, match.start())
        last = match.end()
    _append_trimmed(units, text, last, len(text))
    return units


def _append_trimmed(units: list[ChunkUnit], text: str, start: int, end: int) -> None:
    piece = text[start:end]
    stripped = piece.strip()
    if not stripped:
        return
    content_start = start + (len(piece) - len(piece.lstrip()))
    units.append(ChunkUnit(stripped, content_start, content_start + len(stripped)))
