"""Tests for uploaded-file text extraction."""

import io

import docx
import pytest

import extractor
from errors import DocumentParseError, FileReadError
from extractor import FileKind, extract_text, file_kind


class FakePage:
    def __init__(self, words):
        self.words = words

    def extract_words(self):
        return [{"text": w, "x0": 0.0, "top": 0.0} for w in self.words]


class FakePdf:
    def __init__(self, pages):
        self.pages = pages
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


def _docx_bytes(*paragraphs):
    document = docx.Document()
    for p in paragraphs:
        document.add_paragraph(p)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.mark.parametrize(
    "name, kind",
    [
        ("cv.pdf", FileKind.PDF),
        ("CV.PDF", FileKind.PDF),
        ("resume.docx", FileKind.DOCX),
        ("notes.txt", FileKind.TEXT),
        ("bio.md", FileKind.TEXT),
        ("data.csv", FileKind.TEXT),
        ("README", FileKind.TEXT),
        ("old.doc", FileKind.TEXT),
    ],
)
def test_file_kind(name, kind):
    assert file_kind(name) is kind


class TestPlainText:

    def test_decoded_verbatim(self):
        raw = "Jane Doe\n  Engineer at Acme\n\n• Built things"
        assert extract_text(raw.encode("utf-8"), "bio.txt") == raw

    def test_unknown_extension_is_text(self):
        assert extract_text(b"hello", "bio") == "hello"

    def test_bom_dropped(self):
        assert extract_text("\ufeffJané".encode("utf-8"), "bio.md") == "Jané"

    def test_undecodable_bytes(self):
        with pytest.raises(FileReadError, match="Error reading file"):
            extract_text(b"\xff\xfe\xfa\x00", "bio.txt")


class TestDocx:

    def test_paragraphs_joined(self):
        data = _docx_bytes("Jane Doe", "Software Engineer", "Acme Corp")
        assert extract_text(data, "cv.docx") == "Jane Doe\nSoftware Engineer\nAcme Corp"

    def test_table_cells_kept_in_order(self):
        document = docx.Document()
        document.add_paragraph("Jane Doe")
        table = document.add_table(rows=1, cols=2)
        table.cell(0, 0).text = "Acme Corp"
        table.cell(0, 1).text = "2019 -- Present"
        document.add_paragraph("Skills: Python")
        buf = io.BytesIO()
        document.save(buf)
        text = extract_text(buf.getvalue(), "cv.docx")
        assert text == "Jane Doe\nAcme Corp\t2019 -- Present\nSkills: Python"

    def test_merged_cell_read_once(self):
        document = docx.Document()
        table = document.add_table(rows=2, cols=2)
        table.cell(0, 0).merge(table.cell(0, 1)).text = "Experience"
        table.cell(1, 0).text = "Acme Corp"
        table.cell(1, 1).text = "Engineer"
        buf = io.BytesIO()
        document.save(buf)
        assert extract_text(buf.getvalue(), "cv.docx") == "Experience\nAcme Corp\tEngineer"

    def test_corrupt_docx(self):
        with pytest.raises(DocumentParseError, match="copy-pasting"):
            extract_text(b"not a zip archive", "cv.docx")


class TestPdf:

    def test_pages_and_items_joined(self, monkeypatch):
        fake = FakePdf([FakePage(["Jane", "Doe"]), FakePage(["Engineer"])])
        monkeypatch.setattr(extractor.pdfplumber, "open", lambda _stream: fake)
        assert extract_text(b"%PDF-1.7", "cv.pdf") == "Jane Doe \nEngineer \n"
        assert fake.closed

    def test_empty_page(self, monkeypatch):
        fake = FakePdf([FakePage([]), FakePage(["Engineer"])])
        monkeypatch.setattr(extractor.pdfplumber, "open", lambda _stream: fake)
        assert extract_text(b"%PDF-1.7", "cv.pdf") == "\nEngineer \n"

    def test_page_failure(self, monkeypatch):
        class BrokenPage:
            def extract_words(self):
                raise ValueError("bad content stream")

        fake = FakePdf([FakePage(["ok"]), BrokenPage()])
        monkeypatch.setattr(extractor.pdfplumber, "open", lambda _stream: fake)
        with pytest.raises(DocumentParseError, match=r"Could not read \.pdf file"):
            extract_text(b"%PDF-1.7", "cv.pdf")

    def test_not_a_pdf(self):
        with pytest.raises(DocumentParseError):
            extract_text(b"plain words", "cv.pdf")
