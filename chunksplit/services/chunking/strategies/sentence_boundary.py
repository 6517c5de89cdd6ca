"""Sentence-aware units. Splits after terminal punctuation followed by whitespace."""

import re

from chunksplit.services.chunking.units import ChunkUnit, spans_between

# Whitespace following ., ! or ? ends a sentence; the punctuation stays with it
SENTENCE_SEPARATOR = re.compile(r"(?<=[.!?])\s+")


def sentence_units(text: str) -> list[ChunkUnit]:
    """
    One unit per sentence.

    A run of terminal punctuation (``?!``, ``...``) ends the sentence when followed
    by whitespace or the end of the text. Text after the last terminator is a
    sentence of its own.
    """
    if not text or not text.strip():
        return []
    return spans_between(text, SENTENCE_SEPARATOR)
