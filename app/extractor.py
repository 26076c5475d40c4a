"""
Uploaded file ➜ raw text
– .txt / .md / anything unrecognised is decoded as UTF-8
– .docx goes through python-docx, .pdf through pdfplumber
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from __future__ import annotations
import enum, io, logging, warnings
from pathlib import PurePath
from typing import Protocol

import docx
import pdfplumber
from docx.table import Table

from errors import DocumentParseError, FileReadError

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

log = logging.getLogger(__name__)

ACCEPTED_TYPES = ["txt", "md", "docx", "pdf"]


class FileKind(enum.Enum):
    TEXT = "text"
    DOCX = "docx"
    PDF = "pdf"


def file_kind(filename: str) -> FileKind:
    suffix = PurePath(filename).suffix.lower()
    if suffix == ".docx":
        return FileKind.DOCX
    if suffix == ".pdf":
        return FileKind.PDF
    return FileKind.TEXT


class DocumentTextExtractor(Protocol):
    label: str

    def extract(self, data: bytes) -> str: ...


class DocxTextExtractor:
    label = ".docx"

    def extract(self, data: bytes) -> str:
        document = docx.Document(io.BytesIO(data))
        lines = []
        # body paragraphs and tables, in document order
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                lines.extend(_table_lines(block))
            else:
                lines.append(block.text)
        return "\n".join(lines)


def _table_lines(table: Table) -> list[str]:
    """One line per row, cells separated by tabs."""
    lines = []
    for row in table.rows:
        cells = []
        for cell in row.cells:
            # a merged cell comes back once for every grid column it spans
            if cells and cell._tc is cells[-1]._tc:
                continue
            cells.append(cell)
        lines.append("\t".join(c.text for c in cells))
    return lines


class PdfTextExtractor:
    label = ".pdf"

    def extract(self, data: bytes) -> str:
        text = ""
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for page in pdf.pages:
                items = [w["text"] for w in page.extract_words()]
                # every page run ends with a separator before its newline
                text += " ".join(items + [""]) + "\n"
        return text


_EXTRACTORS: dict[FileKind, DocumentTextExtractor] = {
    FileKind.DOCX: DocxTextExtractor(),
    FileKind.PDF: PdfTextExtractor(),
}


def extract_text(data: bytes, filename: str) -> str:
    """Turn an uploaded file's bytes into plain text for the LLM."""
    kind = file_kind(filename)
    if kind is FileKind.TEXT:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            log.warning("could not decode %s: %s", filename, e)
            raise FileReadError("Error reading file.") from e

    extractor = _EXTRACTORS[kind]
    try:
        return extractor.extract(data)
    except Exception as e:
        log.warning("%s extraction failed for %s: %s", extractor.label, filename, e)
        raise DocumentParseError(
            f"Could not read {extractor.label} file. Try copy-pasting the text instead."
        ) from e
