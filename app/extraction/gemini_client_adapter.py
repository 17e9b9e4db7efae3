import httpx
from google import genai
from google.genai import errors, types

from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionError, ExtractionNetworkError


class GeminiClientAdapter(BaseExtractionClient):
    """Extraction client built on the Gemini API with an inline document part."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    def generate_json(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        document: bytes,
        media_type: str,
        file_name: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = file_name
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=[
                    types.Part.from_text(text=prompt),
                    types.Part.from_bytes(data=document, mime_type=media_type),
                ],
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    response_mime_type="application/json",
                    response_json_schema=json_schema,
                ),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc.message or exc}") from exc

        text = response.text
        if not text:
            raise ExtractionError("AI returned empty response")
        return text
