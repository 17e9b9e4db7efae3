from app.config.settings import Settings
from app.extraction.base import BaseExtractor
from app.extraction.example_client_adapter import ExampleClientAdapter
from app.extraction.extractor import Extractor
from app.extraction.gemini_client_adapter import GeminiClientAdapter
from app.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractorFactory:
    """Creates the configured extractor adapter."""

    PROVIDERS: tuple[str, ...] = ("example", "gemini", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return Extractor(client=ExampleClientAdapter(), model="example")
        if provider == "gemini":
            return Extractor(
                client=GeminiClientAdapter(
                    api_key=settings.extraction_gemini_api_key,
                    timeout_seconds=settings.extraction_gemini_timeout_seconds,
                ),
                model=settings.extraction_gemini_model_name,
                temperature=settings.extraction_temperature,
            )
        if provider == "openai":
            return Extractor(
                client=OpenAIClientAdapter(
                    api_key=settings.extraction_openai_api_key,
                    timeout_seconds=settings.extraction_openai_timeout_seconds,
                ),
                model=settings.extraction_openai_model_name,
                temperature=settings.extraction_temperature,
            )
        if provider == "openai_compatible":
            return Extractor(
                client=OpenAIClientAdapter(
                    api_key=settings.extraction_openai_compatible_api_key,
                    timeout_seconds=settings.extraction_openai_compatible_timeout_seconds,
                    base_url=cls._resolve_compatible_base_url(settings),
                ),
                model=settings.extraction_openai_compatible_model_name,
                temperature=settings.extraction_temperature,
            )
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @classmethod
    def _resolve_compatible_base_url(cls, settings: Settings) -> str:
        url = settings.extraction_openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "extraction_openai_compatible_base_url is required for "
                "extraction_provider=openai_compatible"
            )
        return url
