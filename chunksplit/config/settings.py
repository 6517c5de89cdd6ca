"""Environment-based library settings. Read-only; no business logic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chunksplit.config.chunking.models import ChunkStrategy


class Settings(BaseSettings):
    """Settings loaded from CHUNKSPLIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKSPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Log level name")

    # Used when split() is called without a configuration
    default_chunk_size: int = Field(default=512, ge=1, description="Default maximum chunk length")
    default_chunk_overlap: int = Field(default=0, ge=0, description="Default overlap between chunks")
    default_chunk_strategy: ChunkStrategy = Field(
        default=ChunkStrategy.CHARACTER, description="character|sentence|paragraph"
    )

    chunking_profile: str | None = Field(
        default=None, description="Profile selected by the name 'active'; static.json decides when unset"
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
