import base64
from typing import Any

import httpx
import openai

from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionError, ExtractionNetworkError

SCHEMA_NAME = "document_metadata"


class OpenAIClientAdapter(BaseExtractionClient):
    """Chat-completions client that attaches the PDF as a base64 file part.

    Works against OpenAI itself or any server exposing the same API when
    ``base_url`` is given.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
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
        request: dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "messages": [_user_message(prompt, document, media_type, file_name)],
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": SCHEMA_NAME, "strict": True, "schema": json_schema},
            },
        }
        try:
            completion = self._client.chat.completions.create(**request)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.RateLimitError as exc:
            raise ExtractionNetworkError(f"AI provider rate limit reached: {exc.message}") from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc.message}") from exc

        choices = completion.choices
        if not choices:
            raise ExtractionError("AI returned no choices")
        text = choices[0].message.content
        if text is None:
            raise ExtractionError("AI returned empty response")
        return text


def _user_message(prompt: str, document: bytes, media_type: str, file_name: str) -> dict[str, Any]:
    data_url = f"data:{media_type};base64,{base64.b64encode(document).decode('ascii')}"
    return {
        "role": "user",
        "content": [
            {"type": "text", "text": prompt},
            {"type": "file", "file": {"filename": file_name, "file_data": data_url}},
        ],
    }
