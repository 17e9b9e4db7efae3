"""Document metadata extraction backed by a multimodal AI provider."""

import json
from pathlib import Path

from app.extraction.base import BaseExtractor
from app.extraction.client_base import BaseExtractionClient
from app.extraction.models import ExtractedFields
from app.extraction.prompt_loader import load_json_schema, load_prompt_template
from app.extraction.validator import parse_response, validate_and_build
from app.logging.logger import Log

MAX_TEMPERATURE = 0.2


class Extractor(BaseExtractor):
    """Sends each PDF to the configured provider and shapes the reply.

    The prompt and response schema are read once at construction so a
    missing resource fails at startup instead of on the first document.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = min(max(temperature, 0.0), MAX_TEMPERATURE)
        self._template = load_prompt_template(prompt_template_path)
        self._schema_text = load_json_schema(json_schema_path)
        self._schema = json.loads(self._schema_text)

    def extract(self, document: bytes, media_type: str, file_name: str) -> ExtractedFields:
        prompt = self._template.format(file_name=file_name, json_schema=self._schema_text)
        Log.debug("Sending document to AI provider", file=file_name, model=self._model)

        reply = self._client.generate_json(
            model=self._model,
            temperature=self._temperature,
            prompt=prompt,
            document=document,
            media_type=media_type,
            file_name=file_name,
            json_schema=self._schema,
        )
        Log.debug("AI provider replied", file=file_name, chars=len(reply))

        fields = validate_and_build(parse_response(reply))
        Log.info("Metadata extracted", file=file_name, document_type=fields.document_type or "?")
        return fields
