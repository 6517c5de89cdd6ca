"""
Virtual offset space over an ordered document set.

All documents are addressed as one concatenated sequence of characters:
offset 0 is the first character of the first document and ``total_length``
is the position just past the last character of the last document.
"""

import bisect
import operator
from collections.abc import Sequence
from itertools import accumulate

from chunksplit.exceptions import OutOfRange

Documents = Sequence[str]


def as_documents(documents: Documents | str) -> list[str]:
    """Normalize the documents argument. A bare string is one document."""
    if isinstance(documents, str):
        return [documents]
    return list(documents)


class VirtualDocument:
    """Prefix-sum index over document lengths."""

    def __init__(self, documents: Documents | str):
        self.documents = as_documents(documents)
        # offsets[k] is where document k starts; offsets[-1] is the total length
        self.offsets = list(accumulate((len(d) for d in self.documents), initial=0))

    @property
    def total_length(self) -> int:
        return self.offsets[-1]

    def locate(self, offset: int) -> int:
        """Index of the document holding offset (the last document for offset == total_length)."""
        index = bisect.bisect_right(self.offsets, offset) - 1
        return min(index, len(self.documents) - 1)

    def slice(self, start: int, end: int) -> str:
        """Text in [start, end). Offsets are assumed valid; only intersecting documents are read."""
        if start >= end or not self.documents:
            return ""
        parts: list[str] = []
        index = self.locate(start)
        while index < len(self.documents) and self.offsets[index] < end:
            doc_start = self.offsets[index]
            doc_end = self.offsets[index + 1]
            if doc_end > start:
                parts.append(self.documents[index][max(start, doc_start) - doc_start : min(end, doc_end) - doc_start])
            index += 1
        return "".join(parts)


def get_chunk(documents: Documents | str, start: int | None = None, end: int | None = None) -> str:
    """
    Return the substring [start, end) of the concatenation of documents.

    start defaults to 0 and end to the total length. end is clamped to the
    total length; start is never adjusted. Raises OutOfRange when either
    offset is negative, start is past the end of the documents, or
    start > end.
    """
    virtual = VirtualDocument(documents)
    total = virtual.total_length
    start_value = 0 if start is None else operator.index(start)
    end_value = total if end is None else operator.index(end)

    if start_value < 0 or end_value < 0:
        raise OutOfRange(
            f"Offsets must be non-negative, got start={start_value}, end={end_value}",
            start=start_value,
            end=end_value,
            total_length=total,
        )
    if start_value > total:
        raise OutOfRange(
            f"start={start_value} is past the end of the documents (total length {total})",
            start=start_value,
            end=end_value,
            total_length=total,
        )
    if start_value > end_value:
        raise OutOfRange(
            f"start={start_value} is greater than end={end_value}",
            start=start_value,
            end=end_value,
            total_length=total,
        )
    return virtual.slice(start_value, min(end_value, total))
