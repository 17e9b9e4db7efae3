"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from app.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed valid extraction JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "documentType": "Official letter",
        "documentNumber": "",
        "issueDate": "",
        "subject": "",
        "signer": "",
        "recipients": "",
    }

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
        _ = model, temperature, prompt, document, media_type, file_name, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
