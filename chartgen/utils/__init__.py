"""
Shared utilities for the chartgen project.

Chart-facing helpers (vis_types, chart_generators, data_processors, vis_util)
are imported from their modules directly.
"""

from .error_handler import (
    ConfigurationError,
    ErrorHandler,
    ImageGenerationError,
    InvalidChartKindError,
    ServiceError,
)

__all__ = [
    # Utility classes
    "ErrorHandler",
    # Exception classes
    "ConfigurationError",
    "ImageGenerationError",
    "InvalidChartKindError",
    "ServiceError",
]
