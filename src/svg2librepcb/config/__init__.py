"""Configuration management for svg2librepcb.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MetadataConfig: Name, author, version and friends
- UuidConfig: Element and category UUIDs
- LayerConfig: Footprint layers to generate
- EntityConfig: Library elements to generate
- ParametersConfig: Flattening tolerance and alignment
- LoggingConfig: Logging settings
- Svg2LibrePcbSettings: Main application settings
"""

from svg2librepcb.config.settings import (
    EntityConfig,
    LayerConfig,
    LoggingConfig,
    MetadataConfig,
    ParametersConfig,
    Svg2LibrePcbSettings,
    UuidConfig,
    build_settings,
)

__all__ = [
    "EntityConfig",
    "LayerConfig",
    "LoggingConfig",
    "MetadataConfig",
    "ParametersConfig",
    "Svg2LibrePcbSettings",
    "UuidConfig",
    "build_settings",
]
