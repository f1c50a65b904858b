"""Utility functions for svg2librepcb.

This module provides utility functions including:

- Logging setup and configuration
- Generation statistics for the run summary
"""

from svg2librepcb.utils.logging import GenerationStats, configure_logging

__all__ = [
    "GenerationStats",
    "configure_logging",
]
