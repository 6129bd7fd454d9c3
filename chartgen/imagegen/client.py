"""
AI chart image generation client.

Calls the Google Generative Language REST API. The multimodal model is tried
first; when it returns no candidates, no inline image, or fails outright, a
single request is made to the image model with a short fixed prompt before
giving up.
"""

from typing import Any

import requests
from loguru import logger

from ..config.settings import IMAGEGEN_CONFIG
from ..utils.error_handler import (
    ConfigurationError,
    ErrorHandler,
    ImageGenerationError,
)
from .prompts import build_fallback_prompt, build_primary_prompt


class ImageGenerationClient:
    """Generates chart images as data URLs."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        primary_model: str | None = None,
        fallback_model: str | None = None,
        timeout_seconds: float | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Google Generative AI API key
            base_url: API base URL
            primary_model: Multimodal model asked first
            fallback_model: Image model used as the single fallback
            timeout_seconds: Per-request timeout
            session: HTTP session (one is created when omitted)

        """
        config = IMAGEGEN_CONFIG

        self.api_key = api_key or config["api_key"]
        self.base_url = (base_url or config["base_url"]).rstrip("/")
        self.primary_model = primary_model or config["primary_model"]
        self.fallback_model = fallback_model or config["fallback_model"]
        self.timeout_seconds = timeout_seconds or config["timeout_seconds"]
        self.fallback_prompt_chars = config["fallback_prompt_chars"]
        self.session = session or requests.Session()

    def generate(self, data: str, chart_type: str) -> str:
        """
        Generate a chart image for pasted data.

        Args:
            data: Raw CSV or JSON text
            chart_type: Chart kind name used in the prompt

        Returns:
            Image as a ``data:<mime>;base64,...`` URL

        Raises:
            ValueError: If data or chart_type is empty
            ConfigurationError: If no API key is configured
            ImageGenerationError: If both models fail

        """
        if not data or not chart_type:
            raise ValueError("Data and chartType are required")
        if not self.api_key:
            raise ConfigurationError("API key not configured")

        image, error = ErrorHandler.safe_provider_operation(
            self._generate_primary,
            data,
            chart_type,
            provider_name=self.primary_model,
        )
        if image:
            return image

        logger.info(
            f"Falling back to {self.fallback_model}"
            + (f" after error: {error}" if error else "")
        )
        return self._generate_fallback(data, chart_type)

    def _generate_primary(self, data: str, chart_type: str) -> str | None:
        body = {
            "contents": [{"parts": [{"text": build_primary_prompt(data, chart_type)}]}],
            "generationConfig": {"responseModalities": ["IMAGE", "TEXT"]},
        }
        result = self._post(f"models/{self.primary_model}:generateContent", body)
        return extract_inline_image(result)

    def _generate_fallback(self, data: str, chart_type: str) -> str:
        prompt = build_fallback_prompt(data, chart_type, self.fallback_prompt_chars)
        body = {
            "instances": [{"prompt": prompt}],
            "parameters": {"sampleCount": 1, "aspectRatio": "16:9"},
        }

        try:
            result = self._post(f"models/{self.fallback_model}:predict", body)
        except requests.RequestException as e:
            logger.error(f"Imagen API error: {e}")
            raise ImageGenerationError("Image generation failed") from e

        predictions = result.get("predictions") or []
        if predictions and predictions[0].get("bytesBase64Encoded"):
            encoded = predictions[0]["bytesBase64Encoded"]
            mime_type = predictions[0].get("mimeType", "image/png")
            return f"data:{mime_type};base64,{encoded}"

        raise ImageGenerationError("No image generated")

    def _post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        response = self.session.post(
            f"{self.base_url}/{path}",
            params={"key": self.api_key},
            json=body,
            timeout=self.timeout_seconds,
        )
        if not response.ok:
            logger.warning(f"{path} returned {response.status_code}: {response.text}")
        response.raise_for_status()
        return response.json()


def extract_inline_image(result: dict[str, Any]) -> str | None:
    """
    Pull the first inline image out of a generateContent response.

    Args:
        result: Decoded generateContent response

    Returns:
        Data URL, or None when there are no candidates or no inline image

    """
    candidates = result.get("candidates") or []
    if not candidates:
        return None

    parts = (candidates[0].get("content") or {}).get("parts") or []
    for part in parts:
        inline = part.get("inlineData") or part.get("inline_data")
        if inline and inline.get("data"):
            mime_type = inline.get("mimeType") or inline.get("mime_type", "image/png")
            return f"data:{mime_type};base64,{inline['data']}"
    return None
