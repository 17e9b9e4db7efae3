from pathlib import Path

import pytest

from app.pipeline.file_loader import FileLoader


class TestLoad:
    def test_reads_pdf(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        path = tmp_path / "letter.pdf"
        path.write_bytes(sample_pdf_bytes)

        result = FileLoader().load(path)

        assert result.name == "letter.pdf"
        assert result.media_type == "application/pdf"
        assert result.payload == sample_pdf_bytes

    def test_last_modified_in_milliseconds(self, tmp_path: Path) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"%PDF")

        result = FileLoader().load(path)

        assert result.last_modified == int(path.stat().st_mtime * 1000)

    def test_media_type_from_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        assert FileLoader().load(path).media_type == "text/plain"

    def test_unknown_extension_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.zzzunknown"
        path.write_bytes(b"\x00")

        assert FileLoader().load(path).media_type == "application/octet-stream"


class TestLoadRaisesWhenFileMissing:
    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="File not found"):
            FileLoader().load(tmp_path / "missing.pdf")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileLoader().load(tmp_path)


class TestLoadAll:
    def test_keeps_order(self, pdf_dir: Path) -> None:
        paths = [pdf_dir / "decision.pdf", pdf_dir / "notes.txt", pdf_dir / "letter.pdf"]

        result = FileLoader().load_all(paths)

        assert [f.name for f in result] == ["decision.pdf", "notes.txt", "letter.pdf"]
