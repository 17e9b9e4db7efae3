from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Contract for provider-specific extraction AI clients."""

    @abstractmethod
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
        """Send the prompt and the attached document, return the raw JSON text."""
