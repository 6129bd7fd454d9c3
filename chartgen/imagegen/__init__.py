"""AI chart image generation, kept outside the parsing/rendering core."""

from .client import ImageGenerationClient, extract_inline_image

__all__ = ["ImageGenerationClient", "extract_inline_image"]
