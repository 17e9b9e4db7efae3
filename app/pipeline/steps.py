from app.extraction.base import BaseExtractor
from app.logging.logger import Log
from app.pipeline.pipeline import PipelineContext, PipelineStep
from app.storage.base import BaseStorageClient

EXTRACTION_FALLBACK_MESSAGE = "Unknown error while extracting data from the document."
STORAGE_FALLBACK_MESSAGE = "Unknown error while uploading the document to Drive."


def failure_message(exc: Exception, fallback: str) -> str:
    """Upstream failure text, or the fallback when the exception carries none."""
    return str(exc).strip() or fallback


class MarkProcessingStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.submission.start_extraction()
        context.notify(context.submission)
        Log.info("Submission marked as processing", submission=context.submission.id)
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, extractor: BaseExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        submission = context.submission
        try:
            fields = self._extractor.extract(
                submission.file.payload,
                submission.file.media_type,
                submission.file_name,
            )
        except Exception as exc:
            submission.fail_extraction(failure_message(exc, EXTRACTION_FALLBACK_MESSAGE))
            context.halted = True
            context.notify(submission)
            Log.error(
                "Extraction failed", submission=submission.id, error=submission.extraction_error
            )
            return context

        submission.complete_extraction(fields)
        context.notify(submission)
        Log.info("Extracted metadata", submission=submission.id)
        return context


class UploadToStorageStep(PipelineStep):
    def __init__(self, storage: BaseStorageClient) -> None:
        self._storage = storage

    def run(self, context: PipelineContext) -> PipelineContext:
        submission = context.submission
        submission.start_upload()
        context.notify(submission)
        try:
            object_id = self._storage.upload(
                context.folder.id,
                submission.file.payload,
                submission.file_name,
                submission.file.media_type,
            )
        except Exception as exc:
            submission.fail_upload(failure_message(exc, STORAGE_FALLBACK_MESSAGE))
            context.notify(submission)
            Log.error(
                "Upload failed", submission=submission.id, error=submission.storage_error
            )
            return context

        submission.complete_upload(object_id)
        context.notify(submission)
        Log.info(
            "Stored in Drive",
            submission=submission.id,
            folder=context.folder.name,
            file_id=object_id,
        )
        return context
