"""
Chunker: takes an ordered document set + config and returns bounded-size chunks.

Units from every document are laid out in one virtual offset space and
accumulated greedily into chunks whose measured length stays within
chunk_size. With chunk_overlap, each chunk after the first is seeded with the
longest unit suffix of the previous chunk whose length fits the overlap.
"""

from collections.abc import Iterator
from typing import Any, Callable

from chunksplit.config.chunking.models import ChunkConfig
from chunksplit.config.chunking.static import ConfigInput, resolve_chunk_config
from chunksplit.config.logging import get_logger
from chunksplit.schema.chunk import ChunkResult
from chunksplit.services.chunking.length import measure
from chunksplit.services.chunking.offsets import Documents, VirtualDocument
from chunksplit.services.chunking.strategies import get_units_fn
from chunksplit.services.chunking.units import ChunkUnit

logger = get_logger(__name__)


def furthest_fit(limit: int, fits: Callable[[int], bool]) -> int:
    """
    Largest n in [0, limit] with fits(n), for a predicate that holds up to some n and fails after.

    Probes 1, 2, 4, ... and then bisects between the last success and the
    first failure, so long windows cost O(log n) measurements.
    """
    if limit <= 0:
        return 0
    good, probe = 0, 1
    while probe <= limit and fits(probe):
        good = probe
        probe *= 2
    bad = min(probe, limit + 1)
    while bad - good > 1:
        mid = (good + bad) // 2
        if fits(mid):
            good = mid
        else:
            bad = mid
    return good


def collect_units(virtual: VirtualDocument, config: ChunkConfig) -> list[ChunkUnit]:
    """Units of every non-empty document, shifted into virtual offsets, in document order."""
    units_fn = get_units_fn(config.chunk_strategy)
    stream: list[ChunkUnit] = []
    for document, offset in zip(virtual.documents, virtual.offsets):
        if not document:
            continue
        stream.extend(unit.shifted(offset) for unit in units_fn(document))
    return stream


class _Window:
    """Text and length of unit windows [i, j) over one virtual document."""

    def __init__(self, virtual: VirtualDocument, units: list[ChunkUnit], config: ChunkConfig):
        self.virtual = virtual
        self.units = units
        self.length_function = config.length_function

    def text(self, i: int, j: int) -> str:
        return self.virtual.slice(self.units[i].start, self.units[j - 1].end)

    def length(self, i: int, j: int) -> float:
        return measure(self.text(i, j), self.length_function)


def _generate(virtual: VirtualDocument, config: ChunkConfig) -> Iterator[ChunkResult]:
    units = collect_units(virtual, config)
    total = len(units)
    window = _Window(virtual, units, config)
    size = config.chunk_size
    overlap = config.chunk_overlap

    start = 0  # first unit of the chunk being built, seed included
    fresh = 0  # first unit no earlier chunk has emitted
    previous_end: int | None = None
    index = 0
    while fresh < total:
        if start < fresh:
            # Shorten the seed from the front until the first fresh unit fits beside it
            keep = furthest_fit(fresh - start, lambda n: window.length(fresh - n, fresh + 1) <= size)
            start = fresh - keep
        taken = furthest_fit(total - start, lambda n: window.length(start, start + n) <= size)
        # A unit longer than chunk_size on its own is emitted whole
        end = max(start + taken, fresh + 1)

        chunk_start = units[start].start
        chunk_end = units[end - 1].end
        shared = max(0, previous_end - chunk_start) if previous_end is not None else 0
        yield ChunkResult(
            text=window.text(start, end),
            start=chunk_start,
            end=chunk_end,
            index=index,
            overlap=shared,
        )
        index += 1
        previous_end = chunk_end

        if end >= total:
            break
        fresh = end
        if overlap > 0:
            seed = furthest_fit(end - start - 1, lambda n: window.length(end - n, end) <= overlap)
            start = end - seed
        else:
            start = end


def iterate_chunks(documents: Documents | str, config: ConfigInput = None, **overrides: Any) -> Iterator[ChunkResult]:
    """
    Lazily yield chunks of documents.

    The configuration is validated immediately, before any chunk is produced;
    InvalidConfiguration is raised from this call rather than from iteration.
    """
    resolved = resolve_chunk_config(config, **overrides)
    virtual = VirtualDocument(documents)
    logger.debug(
        "Chunking documents",
        extra={
            "documents": len(virtual.documents),
            "total_length": virtual.total_length,
            "strategy": resolved.chunk_strategy.value,
            "chunk_size": resolved.chunk_size,
            "chunk_overlap": resolved.chunk_overlap,
        },
    )
    return _generate(virtual, resolved)


def split_with_offsets(documents: Documents | str, config: ConfigInput = None, **overrides: Any) -> list[ChunkResult]:
    """All chunks with their virtual offsets. Nothing is returned if any step fails."""
    chunks = list(iterate_chunks(documents, config, **overrides))
    logger.debug("Chunked documents", extra={"chunks": len(chunks)})
    return chunks


def split(documents: Documents | str, config: ConfigInput = None, **overrides: Any) -> list[str]:
    """
    Split an ordered document set into chunk strings.

    config is a ChunkConfig, a mapping of its fields, a profile name or None
    for the settings defaults; keyword overrides replace single fields, e.g.
    ``split(docs, chunk_size=256, chunk_overlap=32)``.
    """
    return [chunk.text for chunk in split_with_offsets(documents, config, **overrides)]
