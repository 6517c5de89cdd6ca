"""Chunking configuration models. Read-only; no business logic."""

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, model_validator

from chunksplit.exceptions import InvalidConfiguration

LengthFunction = Callable[[str], float]


class ChunkStrategy(str, Enum):
    """Where candidate split points may fall. Members compare equal to their string values."""

    CHARACTER = "character"
    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"


def describe_validation_error(e: ValidationError) -> str:
    """One-line summary of a pydantic ValidationError: 'field: message; ...'."""
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}" for err in e.errors()
    )


class ChunkConfig(BaseModel):
    """Chunk size, overlap, length policy and boundary strategy for one split call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # StrictInt: True/False are not sizes
    chunk_size: StrictInt = Field(..., gt=0, description="Maximum chunk length per length_function")
    chunk_overlap: StrictInt = Field(default=0, ge=0, description="Trailing length repeated at the next chunk's start")
    length_function: LengthFunction | None = Field(
        default=None, exclude=True, description="Maps a fragment to its length; character count when unset"
    )
    chunk_strategy: ChunkStrategy = Field(default=ChunkStrategy.CHARACTER)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfiguration(
                f"Invalid chunking configuration: {describe_validation_error(e)}", cause=e
            ) from e

    @model_validator(mode="after")
    def _overlap_below_size(self) -> "ChunkConfig":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be less than chunk_size ({self.chunk_size})"
            )
        return self
