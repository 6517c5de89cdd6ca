"""Static chunking profiles and config resolution. Read-only; no business logic."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chunksplit.config.chunking.models import ChunkConfig, describe_validation_error
from chunksplit.config.logging import get_logger
from chunksplit.config.settings import get_settings
from chunksplit.exceptions import InvalidConfiguration

logger = get_logger(__name__)

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkConfig] | None = None

ConfigInput = ChunkConfig | Mapping[str, Any] | str | None


def _load_raw_data() -> dict:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_chunking_profiles() -> dict[str, ChunkConfig]:
    """Load chunking profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    profiles = _load_raw_data().get("profiles", {})
    _cached = {name: _validate(values, context=f"profile {name!r}") for name, values in profiles.items()}
    return _cached


def get_chunking_config(profile_name: str) -> ChunkConfig | None:
    """Return chunking config for the given profile, or None if missing."""
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Profile named by CHUNKSPLIT_CHUNKING_PROFILE, else the one marked active in static.json."""
    configured = get_settings().chunking_profile
    if configured:
        return configured
    return _load_raw_data().get("active", "default")


def default_chunk_config() -> ChunkConfig:
    """Config used when a caller passes none: the CHUNKSPLIT_DEFAULT_* settings."""
    settings = get_settings()
    return _validate(
        {
            "chunk_size": settings.default_chunk_size,
            "chunk_overlap": settings.default_chunk_overlap,
            "chunk_strategy": settings.default_chunk_strategy,
        },
        context="settings defaults",
    )


def _validate(values: Mapping[str, Any], context: str) -> ChunkConfig:
    try:
        return ChunkConfig.model_validate(dict(values))
    except ValidationError as e:
        logger.warning(
            "Rejected chunking configuration",
            extra={"context": context, "errors": e.error_count()},
        )
        raise InvalidConfiguration(
            f"Invalid chunking configuration ({context}): {describe_validation_error(e)}", cause=e
        ) from e


def resolve_chunk_config(config: ConfigInput = None, **overrides: Any) -> ChunkConfig:
    """
    Turn any accepted configuration input into a validated ChunkConfig.

    ``config`` may be a ChunkConfig, a mapping of its fields, a profile name from
    static.json ("active" selects the active profile) or None for the settings
    defaults. Keyword overrides replace individual fields. Raises
    InvalidConfiguration for unknown profiles, unknown fields and values that
    break the size/overlap rules.
    """
    if isinstance(config, ChunkConfig):
        if not overrides:
            return config
        base: dict[str, Any] = dict(config)
    elif isinstance(config, str):
        name = get_active_profile_name() if config == "active" else config
        profile = get_chunking_config(name)
        if profile is None:
            raise InvalidConfiguration(f"Unknown chunking profile: {name!r}")
        if not overrides:
            return profile
        base = dict(profile)
    elif isinstance(config, Mapping):
        base = dict(config)
    elif config is None:
        if not overrides:
            return default_chunk_config()
        base = dict(default_chunk_config())
    else:
        raise InvalidConfiguration(
            f"Chunking configuration must be a ChunkConfig, mapping or profile name, got {type(config).__name__}"
        )
    return _validate({**base, **overrides}, context="inline")
