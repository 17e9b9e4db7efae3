from app.pipeline.intake import build_batch, select_files
from app.pipeline.models import ExtractionStatus, SourceFile, StorageStatus


def _file(name: str, media_type: str = "application/pdf", last_modified: int = 1) -> SourceFile:
    return SourceFile(
        name=name,
        last_modified=last_modified,
        media_type=media_type,
        payload=b"data",
    )


class TestSelectFiles:
    def test_rejects_non_pdf(self) -> None:
        result = select_files(
            [_file("a.pdf"), _file("b.docx", media_type="application/msword"), _file("c.pdf")]
        )

        assert len(result.batch) == 2
        assert result.rejected_count == 1
        assert [s.file_name for s in result.batch] == ["a.pdf", "c.pdf"]

    def test_all_pdf_has_no_rejections(self) -> None:
        result = select_files([_file("a.pdf"), _file("b.pdf")])
        assert result.rejected_count == 0

    def test_media_type_check_ignores_extension(self) -> None:
        result = select_files([_file("scan.pdf", media_type="image/png")])
        assert len(result.batch) == 0
        assert result.rejected_count == 1

    def test_submissions_start_pending_and_idle(self) -> None:
        result = select_files([_file("a.pdf", last_modified=42)])
        submission = next(iter(result.batch))

        assert submission.id == "a.pdf-42"
        assert submission.extraction_status is ExtractionStatus.PENDING
        assert submission.storage_status is StorageStatus.IDLE

    def test_empty_selection(self) -> None:
        result = select_files([])
        assert len(result.batch) == 0
        assert result.rejected_count == 0

    def test_custom_accepted_media_type(self) -> None:
        result = select_files(
            [_file("a.pdf"), _file("b.png", media_type="image/png")],
            accepted_media_type="image/png",
        )
        assert [s.file_name for s in result.batch] == ["b.png"]
        assert result.rejected_count == 1


class TestBuildBatch:
    def test_builds_fresh_submissions_each_time(self) -> None:
        files = [_file("a.pdf")]
        first = build_batch(files)
        second = build_batch(files)

        assert next(iter(first)) is not next(iter(second))
        assert next(iter(first)).id == next(iter(second)).id
