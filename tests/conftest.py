import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def make_pdf_bytes(*lines: str) -> bytes:
    """Generate a single-page PDF with the given text lines."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    y = 780
    for line in lines:
        c.drawString(72, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """A minimal official letter."""
    return make_pdf_bytes(
        "OFFICIAL LETTER No. 125/CV-UBND",
        "Date: 12 March 2025",
        "Subject: Annual inventory schedule",
        "Signed: Nguyen Van A",
    )


@pytest.fixture()
def pdf_dir(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    """Directory with two PDFs and one text file."""
    (tmp_path / "letter.pdf").write_bytes(sample_pdf_bytes)
    (tmp_path / "decision.pdf").write_bytes(make_pdf_bytes("DECISION No. 7/QD"))
    (tmp_path / "notes.txt").write_text("not a pdf", encoding="utf-8")
    return tmp_path
