"""Configuration module using Pydantic Settings.

Usage:
    from objkit.config import TransformSettings, get_settings

    settings = TransformSettings(max_depth=32)
"""

from objkit.config.settings import DEFAULT_RESERVED_KEYS, TransformSettings, get_settings

__all__ = [
    "TransformSettings",
    "DEFAULT_RESERVED_KEYS",
    "get_settings",
]
