from abc import ABC, abstractmethod

from app.extraction.models import ExtractedFields


class BaseExtractor(ABC):
    """Contract for all extraction adapters."""

    @abstractmethod
    def extract(self, document: bytes, media_type: str, file_name: str) -> ExtractedFields:
        """Extract document metadata from a binary document.

        Args:
            document: Raw file content.
            media_type: Declared media type of the content, e.g. application/pdf.
            file_name: Original file name, passed along to providers that need one.

        Returns:
            ExtractedFields with the six metadata fields.

        Raises:
            ExtractionError: on any failure.
        """
