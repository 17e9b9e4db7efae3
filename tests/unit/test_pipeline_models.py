import pytest

from app.extraction.models import ExtractedFields
from app.pipeline.exceptions import InvalidTransitionError
from app.pipeline.models import (
    Batch,
    DocumentSubmission,
    ExtractionStatus,
    SourceFile,
    StorageStatus,
    submission_key,
)


def _make_submission(name: str = "a.pdf", last_modified: int = 1) -> DocumentSubmission:
    source = SourceFile(
        name=name,
        last_modified=last_modified,
        media_type="application/pdf",
        payload=b"%PDF-fake",
    )
    return DocumentSubmission(id=submission_key(name, last_modified), file=source)


class TestSubmissionKey:
    def test_combines_name_and_timestamp(self) -> None:
        assert submission_key("letter.pdf", 1700000000000) == "letter.pdf-1700000000000"

    def test_is_deterministic(self) -> None:
        assert submission_key("x.pdf", 5) == submission_key("x.pdf", 5)


class TestInitialState:
    def test_starts_pending_and_idle(self) -> None:
        submission = _make_submission()
        assert submission.extraction_status is ExtractionStatus.PENDING
        assert submission.storage_status is StorageStatus.IDLE
        assert submission.extracted_fields is None
        assert submission.storage_object_id is None


class TestExtractionTransitions:
    def test_success_path_sets_fields(self) -> None:
        submission = _make_submission()
        fields = ExtractedFields(document_type="Decision")

        submission.start_extraction()
        submission.complete_extraction(fields)

        assert submission.extraction_status is ExtractionStatus.SUCCESS
        assert submission.extracted_fields == fields
        assert submission.extraction_error is None

    def test_error_path_sets_message_without_fields(self) -> None:
        submission = _make_submission()

        submission.start_extraction()
        submission.fail_extraction("rate limited")

        assert submission.extraction_status is ExtractionStatus.ERROR
        assert submission.extraction_error == "rate limited"
        assert submission.extracted_fields is None

    def test_cannot_complete_without_processing(self) -> None:
        submission = _make_submission()
        with pytest.raises(InvalidTransitionError, match="pending"):
            submission.complete_extraction(ExtractedFields())

    def test_cannot_start_twice(self) -> None:
        submission = _make_submission()
        submission.start_extraction()
        with pytest.raises(InvalidTransitionError):
            submission.start_extraction()

    def test_error_is_terminal(self) -> None:
        submission = _make_submission()
        submission.start_extraction()
        submission.fail_extraction("boom")
        with pytest.raises(InvalidTransitionError):
            submission.start_extraction()

    def test_success_is_terminal(self) -> None:
        submission = _make_submission()
        submission.start_extraction()
        submission.complete_extraction(ExtractedFields())
        with pytest.raises(InvalidTransitionError):
            submission.fail_extraction("late failure")


class TestStorageTransitions:
    def test_upload_requires_extraction_success(self) -> None:
        submission = _make_submission()
        submission.start_extraction()
        with pytest.raises(InvalidTransitionError, match="requires extraction 'success'"):
            submission.start_upload()
        assert submission.storage_status is StorageStatus.IDLE

    def test_upload_success_records_object_id(self) -> None:
        submission = _make_submission()
        submission.start_extraction()
        submission.complete_extraction(ExtractedFields())

        submission.start_upload()
        submission.complete_upload("drive-1")

        assert submission.storage_status is StorageStatus.SUCCESS
        assert submission.storage_object_id == "drive-1"

    def test_upload_failure_keeps_extraction_success(self) -> None:
        submission = _make_submission()
        submission.start_extraction()
        submission.complete_extraction(ExtractedFields(subject="Budget"))

        submission.start_upload()
        submission.fail_upload("quota exceeded")

        assert submission.storage_status is StorageStatus.ERROR
        assert submission.storage_error == "quota exceeded"
        assert submission.extraction_status is ExtractionStatus.SUCCESS
        assert submission.extracted_fields == ExtractedFields(subject="Budget")

    def test_cannot_complete_upload_from_idle(self) -> None:
        submission = _make_submission()
        with pytest.raises(InvalidTransitionError, match="idle"):
            submission.complete_upload("x")


class TestBatch:
    def test_keeps_insertion_order(self) -> None:
        batch = Batch([_make_submission("b.pdf"), _make_submission("a.pdf")])
        assert [s.file_name for s in batch] == ["b.pdf", "a.pdf"]

    def test_duplicate_key_last_write_wins(self) -> None:
        first = _make_submission("same.pdf", 10)
        other = _make_submission("other.pdf", 10)
        second = _make_submission("same.pdf", 10)

        batch = Batch([first, other, second])

        assert len(batch) == 2
        assert batch.get("same.pdf-10") is second
        assert [s.id for s in batch] == ["same.pdf-10", "other.pdf-10"]

    def test_frozen_batch_rejects_new_members(self) -> None:
        batch = Batch([_make_submission()])
        batch.freeze()
        with pytest.raises(InvalidTransitionError, match="frozen"):
            batch.add(_make_submission("late.pdf"))
        assert len(batch) == 1

    def test_empty_batch_is_falsy(self) -> None:
        assert not Batch()
