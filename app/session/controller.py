from collections.abc import Iterable

from app.auth.gateway import GoogleAuthGateway
from app.auth.models import UserProfile
from app.logging.logger import Log
from app.picker.base import BasePicker
from app.pipeline.exceptions import PipelineBusyError
from app.pipeline.models import (
    Destination,
    DocumentSubmission,
    ExportOutcome,
    ExtractionStatus,
    RunSummary,
    SourceFile,
    StorageStatus,
)
from app.pipeline.orchestrator import Orchestrator
from app.pipeline.state import SessionState

REJECTED_FILES_WARNING = "Some files were skipped. Only PDF files are accepted."


class SessionController:
    """Turns user intents into orchestrator calls.

    Holds no state of its own: everything lives in the orchestrator's
    SessionState.
    """

    def __init__(
        self,
        orchestrator: Orchestrator,
        gateway: GoogleAuthGateway,
        picker: BasePicker,
    ) -> None:
        self._orchestrator = orchestrator
        self._gateway = gateway
        self._picker = picker

    @property
    def state(self) -> SessionState:
        return self._orchestrator.state

    def sign_in(self) -> UserProfile | None:
        """Sign in to Google. Returns None if the user cancelled."""
        result = self._gateway.sign_in()
        if result is None:
            return None
        self.state.profile = result.profile
        return result.profile

    def sign_out(self) -> None:
        """Revoke access and reset the session, including the chosen folder."""
        if self.state.is_processing:
            raise PipelineBusyError("Cannot sign out while files are being processed")
        self._gateway.sign_out()
        self.state.clear()
        Log.info("Signed out, session cleared")

    def select_drive_folder(self) -> Destination | None:
        """Pick the destination folder, signing in first when needed.

        Cancelling sign-in or the picker keeps the previous folder.
        """
        if not self.state.signed_in and self.sign_in() is None:
            Log.info("Sign-in was cancelled, folder selection skipped")
            return None
        folder = self._picker.pick_folder()
        if folder is not None:
            self._orchestrator.set_destination_folder(folder)
        return folder

    def use_drive_folder(self, folder: Destination) -> None:
        self._orchestrator.set_destination_folder(folder)

    def select_files(self, raw_files: Iterable[SourceFile]) -> str | None:
        """Replace the selection. Returns a warning when files were rejected."""
        result = self._orchestrator.select_files(raw_files)
        if result.rejected_count > 0:
            return REJECTED_FILES_WARNING
        return None

    def process(self) -> RunSummary:
        return self._orchestrator.start()

    def results(
        self,
        extraction_status: ExtractionStatus | None = None,
        storage_status: StorageStatus | None = None,
    ) -> list[DocumentSubmission]:
        return self._orchestrator.results(extraction_status, storage_status)

    def save_to_sheet(self, sheet: Destination | None = None) -> ExportOutcome | None:
        """Append extracted rows to a spreadsheet chosen now.

        Eligibility is checked before the picker opens. Returns None if the
        user cancels the picker.
        """
        if self.state.is_processing:
            raise PipelineBusyError("Cannot save to a spreadsheet while files are being processed")
        batch = self.state.batch
        self._orchestrator.eligible(batch)
        if sheet is None:
            sheet = self._picker.pick_spreadsheet()
        if sheet is None:
            Log.info("Spreadsheet selection cancelled")
            return None
        return self._orchestrator.export_successful(batch, sheet)
