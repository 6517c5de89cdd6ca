"""Paragraph-aware units. Paragraphs are separated by one or more blank lines."""

import re

from chunksplit.services.chunking.units import ChunkUnit, spans_between

# A newline, optional whitespace-only lines, another newline
PARAGRAPH_SEPARATOR = re.compile(r"\n\s*\n")


def paragraph_units(text: str) -> list[ChunkUnit]:
    """One unit per paragraph; a document without blank lines is a single unit."""
    if not text or not text.strip():
        return []
    return spans_between(text, PARAGRAPH_SEPARATOR)
