import threading
from collections.abc import Iterable

from app.logging.logger import Log
from app.pipeline.exceptions import (
    EmptyBatchError,
    ExportError,
    MissingDestinationError,
    NoEligibleRowsError,
    PipelineBusyError,
    StaleBatchError,
)
from app.pipeline.export import build_export_rows, eligible_submissions
from app.pipeline.intake import PDF_MEDIA_TYPE, build_batch, select_files
from app.pipeline.models import (
    Batch,
    Destination,
    DocumentSubmission,
    ExportOutcome,
    ExtractionStatus,
    IntakeResult,
    RunSummary,
    SourceFile,
    StorageStatus,
)
from app.pipeline.pipeline import PipelineContext, StatusListener
from app.pipeline.processor import Processor
from app.pipeline.state import SessionState
from app.sheets.base import BaseSpreadsheetClient

EXPORT_FAILED_MESSAGE = "Saving to the spreadsheet failed. Please try again."


class Orchestrator:
    """Owns the session state and drives batches through the pipeline.

    Submissions are processed strictly one at a time in batch order. Every
    status change is pushed to listeners before the next step starts.
    """

    def __init__(
        self,
        processor: Processor,
        spreadsheet: BaseSpreadsheetClient,
        state: SessionState | None = None,
        accepted_media_type: str = PDF_MEDIA_TYPE,
    ) -> None:
        self._processor = processor
        self._spreadsheet = spreadsheet
        self._state = state if state is not None else SessionState()
        self._accepted_media_type = accepted_media_type
        self._listeners: list[StatusListener] = []
        self._run_lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_processing(self) -> bool:
        return self._state.is_processing

    def add_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def select_files(self, raw_files: Iterable[SourceFile]) -> IntakeResult:
        """Replace the current selection and results with a new batch."""
        self._ensure_idle("select files")
        result = select_files(raw_files, self._accepted_media_type)
        self._state.replace_selection([s.file for s in result.batch], result.batch)
        return result

    def set_destination_folder(self, folder: Destination) -> None:
        self._state.folder = folder
        Log.info(f"Destination folder set to '{folder.name}' ({folder.id})")

    def start(self) -> RunSummary:
        """Run a fresh batch built from the current selection."""
        self._ensure_idle("start processing")
        batch = build_batch(self._state.selected_files)
        self._validate_run(batch, self._state.folder)
        self._state.batch = batch
        return self.run_batch(batch, self._state.folder)

    def run_batch(self, batch: Batch, destination_folder: Destination | None) -> RunSummary:
        """Process every submission in order: extract, then upload on success.

        Raises:
            PipelineBusyError: if a run is already active.
            EmptyBatchError: if the batch has no submissions.
            MissingDestinationError: if no destination folder is chosen.
            StaleBatchError: if the batch has already been processed.
        """
        if not self._run_lock.acquire(blocking=False):
            raise PipelineBusyError("A batch is already being processed")
        try:
            folder = self._validate_run(batch, destination_folder)
            self._state.is_processing = True
            batch.freeze()
            Log.info(f"Processing {len(batch)} file(s) into folder '{folder.name}'")
            for submission in batch:
                self._processor.process(
                    PipelineContext(
                        submission=submission,
                        folder=folder,
                        notify=self._notify,
                    )
                )
        finally:
            self._state.is_processing = False
            self._run_lock.release()

        summary = summarize(batch)
        Log.info(
            f"Run finished: {summary.extracted}/{summary.total} extracted, "
            f"{summary.uploaded} uploaded, {summary.upload_failed} upload error(s)"
        )
        return summary

    def export_successful(self, batch: Batch, destination_sheet: Destination) -> ExportOutcome:
        """Append the successfully extracted rows of a batch to a spreadsheet.

        The batch is only read.

        Raises:
            PipelineBusyError: if a run is active.
            NoEligibleRowsError: if no submission was extracted successfully.
            ExportError: if the spreadsheet append fails.
        """
        self._ensure_idle("save to a spreadsheet")
        eligible = self.eligible(batch)
        rows = build_export_rows(eligible)
        self._state.is_exporting = True
        try:
            self._spreadsheet.append_rows(destination_sheet.id, rows)
        except Exception as exc:
            Log.error("Export failed", sheet=destination_sheet.id, error=exc)
            raise ExportError(EXPORT_FAILED_MESSAGE) from exc
        finally:
            self._state.is_exporting = False

        self._state.sheet = destination_sheet
        Log.info(f"Saved {len(eligible)} row(s) to '{destination_sheet.name}'")
        return ExportOutcome(rows_appended=len(eligible), destination_name=destination_sheet.name)

    def eligible(self, batch: Batch) -> list[DocumentSubmission]:
        """Submissions eligible for export; raises when there are none."""
        eligible = eligible_submissions(batch)
        if not eligible:
            raise NoEligibleRowsError("There is no successfully extracted data to save")
        return eligible

    def results(
        self,
        extraction_status: ExtractionStatus | None = None,
        storage_status: StorageStatus | None = None,
    ) -> list[DocumentSubmission]:
        """Current batch filtered by status, in batch order."""
        return [
            s
            for s in self._state.batch
            if (extraction_status is None or s.extraction_status is extraction_status)
            and (storage_status is None or s.storage_status is storage_status)
        ]

    def has_successful(self) -> bool:
        return bool(self.results(extraction_status=ExtractionStatus.SUCCESS))

    def _validate_run(self, batch: Batch, destination_folder: Destination | None) -> Destination:
        if not batch:
            raise EmptyBatchError("Select at least one PDF file to process")
        if destination_folder is None:
            raise MissingDestinationError("Choose a Google Drive folder to store the files")
        if any(s.extraction_status is not ExtractionStatus.PENDING for s in batch):
            raise StaleBatchError("This batch has already been processed")
        return destination_folder

    def _ensure_idle(self, action: str) -> None:
        if self._state.is_processing:
            raise PipelineBusyError(f"Cannot {action} while files are being processed")

    def _notify(self, submission: DocumentSubmission) -> None:
        for listener in self._listeners:
            try:
                listener(submission)
            except Exception as exc:
                Log.error("Status listener failed", submission=submission.id, error=exc)


def summarize(batch: Batch) -> RunSummary:
    """Count extraction and storage outcomes of a batch."""
    submissions = list(batch)
    return RunSummary(
        total=len(submissions),
        extracted=sum(s.extraction_status is ExtractionStatus.SUCCESS for s in submissions),
        extraction_failed=sum(s.extraction_status is ExtractionStatus.ERROR for s in submissions),
        uploaded=sum(s.storage_status is StorageStatus.SUCCESS for s in submissions),
        upload_failed=sum(s.storage_status is StorageStatus.ERROR for s in submissions),
    )
