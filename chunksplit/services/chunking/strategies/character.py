"""Character-level units: every character is a candidate split point."""

from chunksplit.services.chunking.units import ChunkUnit


def character_units(text: str) -> list[ChunkUnit]:
    """One unit per character. Units tile the text with no gaps."""
    return [ChunkUnit(char, i, i + 1) for i, char in enumerate(text)]
