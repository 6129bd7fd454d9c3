"""Tests for the AI chart image generation client."""

import pytest
import requests

from chartgen.config.settings import IMAGEGEN_CONFIG
from chartgen.imagegen import ImageGenerationClient, extract_inline_image
from chartgen.imagegen.prompts import build_fallback_prompt, build_primary_prompt
from chartgen.utils.error_handler import ConfigurationError, ImageGenerationError

GEMINI_IMAGE = {
    "candidates": [
        {
            "content": {
                "parts": [
                    {"text": "Here is your chart"},
                    {"inlineData": {"mimeType": "image/jpeg", "data": "AAAA"}},
                ]
            }
        }
    ]
}

GEMINI_TEXT_ONLY = {"candidates": [{"content": {"parts": [{"text": "no image"}]}}]}

IMAGEN_IMAGE = {"predictions": [{"bytesBase64Encoded": "BBBB"}]}


class TestExtractInlineImage:
    """Parsing generateContent responses."""

    def test_inline_image(self):
        """The first inline image part becomes a data URL."""
        assert extract_inline_image(GEMINI_IMAGE) == "data:image/jpeg;base64,AAAA"

    def test_no_candidates(self):
        """Missing or empty candidates yield None."""
        assert extract_inline_image({}) is None
        assert extract_inline_image({"candidates": []}) is None

    def test_text_only(self):
        """Candidates without inline data yield None."""
        assert extract_inline_image(GEMINI_TEXT_ONLY) is None


class TestGenerate:
    """Primary request with a single fallback."""

    def test_primary_success(self, image_client, mock_session, make_response):
        """A primary image is returned without calling the fallback."""
        mock_session.post.return_value = make_response(GEMINI_IMAGE)

        image = image_client.generate("a,b\n1,2", "bar")

        assert image == "data:image/jpeg;base64,AAAA"
        assert mock_session.post.call_count == 1
        url = mock_session.post.call_args.args[0]
        assert url == "https://example.test/v1beta/models/primary-model:generateContent"
        kwargs = mock_session.post.call_args.kwargs
        assert kwargs["params"] == {"key": "test-key"}
        assert kwargs["timeout"] == 5
        assert kwargs["json"]["generationConfig"]["responseModalities"] == [
            "IMAGE",
            "TEXT",
        ]

    def test_fallback_when_no_candidates(
        self, image_client, mock_session, make_response
    ):
        """No candidates triggers one fallback request."""
        mock_session.post.side_effect = [
            make_response({"candidates": []}),
            make_response(IMAGEN_IMAGE),
        ]

        image = image_client.generate("a,b\n1,2", "pie")

        assert image == "data:image/png;base64,BBBB"
        assert mock_session.post.call_count == 2
        fallback_call = mock_session.post.call_args_list[1]
        assert fallback_call.args[0].endswith("models/fallback-model:predict")
        assert fallback_call.kwargs["json"]["parameters"] == {
            "sampleCount": 1,
            "aspectRatio": "16:9",
        }

    def test_fallback_when_text_only(self, image_client, mock_session, make_response):
        """Candidates without inline image data trigger the fallback."""
        mock_session.post.side_effect = [
            make_response(GEMINI_TEXT_ONLY),
            make_response(IMAGEN_IMAGE),
        ]

        assert image_client.generate("x", "line") == "data:image/png;base64,BBBB"

    def test_fallback_when_primary_errors(
        self, image_client, mock_session, make_response
    ):
        """HTTP and network failures of the primary also fall back once."""
        mock_session.post.side_effect = [
            make_response({"error": "overloaded"}, status_code=503),
            make_response(IMAGEN_IMAGE),
        ]

        assert image_client.generate("x", "area") == "data:image/png;base64,BBBB"

    def test_fallback_after_connection_error(
        self, image_client, mock_session, make_response
    ):
        """A connection error on the primary is a provider failure."""
        mock_session.post.side_effect = [
            requests.ConnectionError("down"),
            make_response(IMAGEN_IMAGE),
        ]

        assert image_client.generate("x", "bar").endswith("BBBB")

    def test_fallback_http_error(self, image_client, mock_session, make_response):
        """A failing fallback surfaces a generic failure."""
        mock_session.post.side_effect = [
            make_response({"candidates": []}),
            make_response({"error": "bad"}, status_code=400),
        ]

        with pytest.raises(ImageGenerationError, match="Image generation failed"):
            image_client.generate("x", "bar")

    def test_fallback_without_predictions(
        self, image_client, mock_session, make_response
    ):
        """A fallback response without image bytes is a failure."""
        mock_session.post.side_effect = [
            make_response({"candidates": []}),
            make_response({"predictions": []}),
        ]

        with pytest.raises(ImageGenerationError, match="No image generated"):
            image_client.generate("x", "bar")

    def test_missing_api_key(self, mock_session, monkeypatch):
        """A missing key is reported before any request."""
        monkeypatch.setitem(IMAGEGEN_CONFIG, "api_key", None)
        client = ImageGenerationClient(session=mock_session)

        with pytest.raises(ConfigurationError, match="API key not configured"):
            client.generate("a,b\n1,2", "bar")
        mock_session.post.assert_not_called()

    @pytest.mark.parametrize("data,chart_type", [("", "bar"), ("a,b\n1,2", "")])
    def test_required_fields(self, image_client, data, chart_type):
        """Data and chart type are both required."""
        with pytest.raises(ValueError):
            image_client.generate(data, chart_type)


class TestPrompts:
    """Prompt templates."""

    def test_primary_prompt_mentions_data_and_style(self):
        """The primary prompt quotes all the data and the dark theme."""
        prompt = build_primary_prompt("a,b\n1,2", "bar")

        assert "professional bar chart" in prompt
        assert "a,b\n1,2" in prompt
        assert "#1e293b" in prompt

    def test_fallback_prompt_truncates_data(self):
        """The fallback prompt quotes only the start of the data."""
        prompt = build_fallback_prompt("x" * 500, "pie", max_chars=200)

        assert "x" * 200 in prompt
        assert "x" * 201 not in prompt
        assert prompt.startswith("A professional pie chart showing:")
