"""Result model for one emitted chunk."""

from pydantic import BaseModel, ConfigDict, Field


class ChunkResult(BaseModel):
    """A chunk plus its place in the virtual offset space of the input documents."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Chunk text; equals get_chunk(documents, start, end)")
    start: int = Field(..., ge=0, description="Virtual offset of the first character")
    end: int = Field(..., ge=0, description="Virtual offset just past the last character")
    index: int = Field(..., ge=0, description="Position of this chunk in the output")
    overlap: int = Field(default=0, ge=0, description="Leading characters repeated from the previous chunk")

    @property
    def fresh_text(self) -> str:
        """Text with the overlapping prefix removed."""
        return self.text[self.overlap :]
