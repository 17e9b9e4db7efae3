class PipelineError(Exception):
    """Base exception for all pipeline-related errors."""


class ValidationError(PipelineError):
    """Raised before any remote call when a request cannot be carried out."""


class EmptyBatchError(ValidationError):
    """Raised when a run is requested for a batch with no submissions."""


class MissingDestinationError(ValidationError):
    """Raised when a run is requested without a destination folder."""


class StaleBatchError(ValidationError):
    """Raised when a batch that has already been processed is run again."""


class NoEligibleRowsError(ValidationError):
    """Raised when an export finds no successfully extracted submissions."""


class PipelineBusyError(PipelineError):
    """Raised when a run or export is requested while a run is active."""


class InvalidTransitionError(PipelineError):
    """Raised on an illegal extraction or storage status transition."""


class ExportError(PipelineError):
    """Raised when appending rows to the spreadsheet fails."""
