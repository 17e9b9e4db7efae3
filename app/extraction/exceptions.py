class ExtractionError(Exception):
    """Raised when metadata extraction fails."""


class ExtractionValidationError(ExtractionError):
    """Raised when the model response cannot be shaped into the six fields."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
