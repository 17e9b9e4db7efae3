from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractedFields

__all__ = ["BaseExtractor", "ExtractedFields", "ExtractionError"]
