from unittest.mock import MagicMock, patch

import httpx
import pytest
from google.genai import errors

from app.extraction.exceptions import ExtractionError, ExtractionNetworkError
from app.extraction.gemini_client_adapter import GeminiClientAdapter

_PATCH_TARGET = "app.extraction.gemini_client_adapter.genai.Client"


def _make_adapter(mock_client: MagicMock) -> GeminiClientAdapter:
    with patch(_PATCH_TARGET, return_value=mock_client):
        return GeminiClientAdapter(api_key="k", timeout_seconds=60)


def _generate(adapter: GeminiClientAdapter) -> str:
    return adapter.generate_json(
        model="gemini-2.5-flash",
        temperature=0.0,
        prompt="extract",
        document=b"%PDF-1.7",
        media_type="application/pdf",
        file_name="letter.pdf",
        json_schema={"type": "object"},
    )


class TestGeminiClientAdapter:
    def test_returns_response_text(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value = MagicMock(text='{"subject": "x"}')
        adapter = _make_adapter(mock_client)

        assert _generate(adapter) == '{"subject": "x"}'

    def test_requests_json_with_schema(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value = MagicMock(text="{}")
        adapter = _make_adapter(mock_client)

        _generate(adapter)

        kwargs = mock_client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert len(kwargs["contents"]) == 2
        config = kwargs["config"]
        assert config.response_mime_type == "application/json"
        assert config.response_json_schema == {"type": "object"}
        assert config.temperature == 0.0

    def test_timeout_is_passed_in_milliseconds(self) -> None:
        with patch(_PATCH_TARGET) as mock_genai:
            GeminiClientAdapter(api_key="k", timeout_seconds=60)
        assert mock_genai.call_args.kwargs["http_options"].timeout == 60000

    def test_raises_error_for_empty_text(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value = MagicMock(text=None)
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionError, match="empty response"):
            _generate(adapter)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.side_effect = httpx.ReadTimeout("timeout")
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionNetworkError, match="network error"):
            _generate(adapter)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.models.generate_content.side_effect = errors.ClientError(
            429,
            {"error": {"code": 429, "message": "Resource exhausted", "status": "RESOURCE_EXHAUSTED"}},
        )
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionNetworkError, match="Resource exhausted"):
            _generate(adapter)
