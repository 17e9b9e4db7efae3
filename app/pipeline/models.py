from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from app.extraction.models import ExtractedFields
from app.pipeline.exceptions import InvalidTransitionError


class ExtractionStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


class StorageStatus(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    SUCCESS = "success"
    ERROR = "error"


_EXTRACTION_TRANSITIONS: dict[ExtractionStatus, frozenset[ExtractionStatus]] = {
    ExtractionStatus.PENDING: frozenset({ExtractionStatus.PROCESSING}),
    ExtractionStatus.PROCESSING: frozenset({ExtractionStatus.SUCCESS, ExtractionStatus.ERROR}),
    ExtractionStatus.SUCCESS: frozenset(),
    ExtractionStatus.ERROR: frozenset(),
}

_STORAGE_TRANSITIONS: dict[StorageStatus, frozenset[StorageStatus]] = {
    StorageStatus.IDLE: frozenset({StorageStatus.UPLOADING}),
    StorageStatus.UPLOADING: frozenset({StorageStatus.SUCCESS, StorageStatus.ERROR}),
    StorageStatus.SUCCESS: frozenset(),
    StorageStatus.ERROR: frozenset(),
}


@dataclass(frozen=True)
class SourceFile:
    """A raw user-selected file before intake filtering."""

    name: str
    last_modified: int
    media_type: str
    payload: bytes = field(repr=False)


@dataclass(frozen=True)
class Destination:
    """A Drive folder or spreadsheet chosen by the user."""

    id: str
    name: str


@dataclass
class DocumentSubmission:
    """One accepted file moving through extraction and storage.

    The two status fields are independent state machines tied by a single
    guard: an upload can only start once extraction succeeded.
    """

    id: str
    file: SourceFile
    extraction_status: ExtractionStatus = ExtractionStatus.PENDING
    extracted_fields: ExtractedFields | None = None
    extraction_error: str | None = None
    storage_status: StorageStatus = StorageStatus.IDLE
    storage_object_id: str | None = None
    storage_error: str | None = None

    @property
    def file_name(self) -> str:
        return self.file.name

    def start_extraction(self) -> None:
        self._move_extraction(ExtractionStatus.PROCESSING)

    def complete_extraction(self, fields: ExtractedFields) -> None:
        self._move_extraction(ExtractionStatus.SUCCESS)
        self.extracted_fields = fields

    def fail_extraction(self, message: str) -> None:
        self._move_extraction(ExtractionStatus.ERROR)
        self.extraction_error = message

    def start_upload(self) -> None:
        if self.extraction_status is not ExtractionStatus.SUCCESS:
            raise InvalidTransitionError(
                f"Submission {self.id}: upload requires extraction 'success', "
                f"got '{self.extraction_status.value}'"
            )
        self._move_storage(StorageStatus.UPLOADING)

    def complete_upload(self, object_id: str) -> None:
        self._move_storage(StorageStatus.SUCCESS)
        self.storage_object_id = object_id

    def fail_upload(self, message: str) -> None:
        self._move_storage(StorageStatus.ERROR)
        self.storage_error = message

    def _move_extraction(self, target: ExtractionStatus) -> None:
        if target not in _EXTRACTION_TRANSITIONS[self.extraction_status]:
            raise InvalidTransitionError(
                f"Submission {self.id}: extraction cannot move from "
                f"'{self.extraction_status.value}' to '{target.value}'"
            )
        self.extraction_status = target

    def _move_storage(self, target: StorageStatus) -> None:
        if target not in _STORAGE_TRANSITIONS[self.storage_status]:
            raise InvalidTransitionError(
                f"Submission {self.id}: storage cannot move from "
                f"'{self.storage_status.value}' to '{target.value}'"
            )
        self.storage_status = target


def submission_key(name: str, last_modified: int) -> str:
    """Build the identity key of a submission: '{name}-{last_modified}'."""
    return f"{name}-{last_modified}"


class Batch:
    """Ordered submissions keyed by identity.

    Adding a submission whose key already exists replaces the earlier one
    in place (last write wins). Membership is frozen once a run starts.
    """

    def __init__(self, submissions: list[DocumentSubmission] | None = None) -> None:
        self._items: dict[str, DocumentSubmission] = {}
        self._frozen = False
        for submission in submissions or []:
            self.add(submission)

    def add(self, submission: DocumentSubmission) -> None:
        if self._frozen:
            raise InvalidTransitionError("Batch membership is frozen while processing")
        self._items[submission.id] = submission

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, submission_id: str) -> DocumentSubmission | None:
        return self._items.get(submission_id)

    def __iter__(self) -> Iterator[DocumentSubmission]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


@dataclass(frozen=True)
class IntakeResult:
    """Outcome of a file selection."""

    batch: Batch
    rejected_count: int


@dataclass(frozen=True)
class ExportOutcome:
    """Outcome of a successful spreadsheet export."""

    rows_appended: int
    destination_name: str


@dataclass(frozen=True)
class RunSummary:
    """Counts collected after a batch run."""

    total: int
    extracted: int
    extraction_failed: int
    uploaded: int
    upload_failed: int
