"""
Configuration module for chartgen.

Settings are read from the environment (and a ``.env`` file when present)
once at import time.
"""

from .settings import FLASK_CONFIG, IMAGEGEN_CONFIG, PIPELINE_CONFIG

__all__ = [
    "FLASK_CONFIG",
    "IMAGEGEN_CONFIG",
    "PIPELINE_CONFIG",
]
