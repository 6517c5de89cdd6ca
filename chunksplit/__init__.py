"""Split text documents into bounded-size chunks and read back any virtual offset range."""

from chunksplit.config.chunking.models import ChunkConfig, ChunkStrategy, LengthFunction
from chunksplit.config.chunking.static import resolve_chunk_config
from chunksplit.config.logging import configure_logging
from chunksplit.exceptions import ChunkingError, InvalidConfiguration, LengthFunctionError, OutOfRange
from chunksplit.schema.chunk import ChunkResult
from chunksplit.services.chunking.chunker import iterate_chunks, split, split_with_offsets
from chunksplit.services.chunking.offsets import get_chunk

__all__ = [
    "ChunkConfig",
    "ChunkResult",
    "ChunkStrategy",
    "ChunkingError",
    "InvalidConfiguration",
    "LengthFunction",
    "LengthFunctionError",
    "OutOfRange",
    "configure_logging",
    "get_chunk",
    "iterate_chunks",
    "resolve_chunk_config",
    "split",
    "split_with_offsets",
]

__version__ = "0.1.0"
