"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
transformation engines.

Usage:
    from objkit.config import TransformSettings, get_settings

    # Load from environment variables (OBJKIT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = TransformSettings(detect_cycles=False, max_depth=64)
    clone(data, settings=settings)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RESERVED_KEYS = frozenset({"__proto__", "constructor", "prototype"})


class TransformSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for clone, merge, readonly and traverse.

    Attributes:
        reserved_keys: Keys never copied or merged (prototype-pollution guard).
        detect_cycles: Fail fast with CyclicStructureError on reference cycles.
        max_depth: Maximum container nesting depth (None for unlimited).

    Environment Variables:
        OBJKIT_RESERVED_KEYS (JSON list)
        OBJKIT_DETECT_CYCLES
        OBJKIT_MAX_DEPTH
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    reserved_keys: frozenset[str] = DEFAULT_RESERVED_KEYS
    detect_cycles: bool = True
    max_depth: int | None = Field(default=None, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> TransformSettings:
    """Return the process-wide settings, loaded once from the environment."""
    return TransformSettings()
