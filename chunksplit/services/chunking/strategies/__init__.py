"""Chunking strategy implementations: each maps a document to its candidate split units."""

from typing import Callable

from chunksplit.config.chunking.models import ChunkStrategy
from chunksplit.exceptions import InvalidConfiguration
from chunksplit.services.chunking.strategies.character import character_units
from chunksplit.services.chunking.strategies.paragraph import paragraph_units
from chunksplit.services.chunking.strategies.sentence_boundary import sentence_units
from chunksplit.services.chunking.units import ChunkUnit

STRATEGY_REGISTRY: dict[ChunkStrategy, Callable[[str], list[ChunkUnit]]] = {
    ChunkStrategy.CHARACTER: character_units,
    ChunkStrategy.SENTENCE: sentence_units,
    ChunkStrategy.PARAGRAPH: paragraph_units,
}


def get_units_fn(strategy: ChunkStrategy | str) -> Callable[[str], list[ChunkUnit]]:
    """Return the unit function for the given strategy or its string value."""
    try:
        return STRATEGY_REGISTRY[ChunkStrategy(strategy)]
    except ValueError as e:
        raise InvalidConfiguration(f"Unknown chunking strategy: {strategy!r}", cause=e) from e
