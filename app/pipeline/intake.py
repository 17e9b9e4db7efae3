from collections.abc import Iterable

from app.logging.logger import Log
from app.pipeline.models import (
    Batch,
    DocumentSubmission,
    IntakeResult,
    SourceFile,
    submission_key,
)

PDF_MEDIA_TYPE = "application/pdf"


def select_files(
    raw_files: Iterable[SourceFile],
    accepted_media_type: str = PDF_MEDIA_TYPE,
) -> IntakeResult:
    """Filter a raw selection down to PDFs and build a fresh batch.

    Files with another declared media type are dropped and counted in
    ``rejected_count``. Nothing is processed here.
    """
    accepted: list[SourceFile] = []
    rejected = 0
    for raw in raw_files:
        if raw.media_type == accepted_media_type:
            accepted.append(raw)
        else:
            rejected += 1
            Log.debug(f"Skipping '{raw.name}': media type '{raw.media_type}' not accepted")

    batch = build_batch(accepted)
    if rejected:
        Log.warning(f"{rejected} file(s) skipped, only {accepted_media_type} is accepted")
    Log.info(f"Selected {len(batch)} file(s) for processing")
    return IntakeResult(batch=batch, rejected_count=rejected)


def build_batch(files: Iterable[SourceFile]) -> Batch:
    """Create a batch of pending submissions from already accepted files."""
    return Batch(
        [
            DocumentSubmission(id=submission_key(f.name, f.last_modified), file=f)
            for f in files
        ]
    )
