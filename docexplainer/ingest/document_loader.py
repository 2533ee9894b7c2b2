from __future__ import annotations
import io
import re
from typing import List
import docx
from pypdf import PdfReader
from docexplainer.utils.exceptions import ExtractionError, UnsupportedDocumentError
from docexplainer.utils.logger import logger
from docexplainer.utils.types import ParsedDocument

PDF = "application/pdf"
TEXT = "text/plain"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
SUPPORTED_TYPES = (PDF, TEXT, DOC, DOCX)

WHITESPACE_RE = re.compile(r"[ \t\r\f\v]+")


def clean_text(text: str) -> str:
    text = text.replace("\x00", " ")
    text = WHITESPACE_RE.sub(" ", text)
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())


def load_pdf(data: bytes) -> ParsedDocument:
    try:
        reader = PdfReader(io.BytesIO(data))
    except Exception as e:
        raise ExtractionError(
            "Failed to extract text from PDF. The file may be corrupted or password-protected."
        ) from e
    if reader.is_encrypted:
        try:
            decrypted = reader.decrypt("")
        except Exception:
            decrypted = 0
        if not decrypted:
            raise ExtractionError("This PDF is password-protected. Please upload an unlocked copy.")
    pages_text: List[str] = []
    try:
        for page in reader.pages:
            pages_text.append(clean_text(page.extract_text() or ""))
    except Exception as e:
        raise ExtractionError(
            "Failed to extract text from PDF. The file may be corrupted or password-protected."
        ) from e
    content = "\n".join(p for p in pages_text if p)
    if not content.strip():
        raise ExtractionError(
            "No text content could be extracted from this PDF. The document may be scanned or image-based."
        )
    title = None
    try:
        if reader.metadata and reader.metadata.title:
            title = str(reader.metadata.title)
    except Exception:  # broken info dictionary; title is optional
        title = None
    return ParsedDocument(content=content, pages=len(pages_text), title=title)


def load_docx(data: bytes) -> ParsedDocument:
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as e:
        raise ExtractionError("Unable to read this Word document. The file may be corrupted.") from e
    blocks = [p.text for p in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            blocks.append(" | ".join(cell.text for cell in row.cells))
    content = clean_text("\n".join(blocks))
    if not content:
        raise ExtractionError("No text content could be extracted from this Word document.")
    page_breaks = document.element.body.xpath('.//w:br[@w:type="page"]')
    title = document.core_properties.title or None
    return ParsedDocument(content=content, pages=len(page_breaks) + 1, title=title)


def load_text(data: bytes) -> ParsedDocument:
    content = data.decode("utf-8", errors="replace").strip()
    if not content:
        raise ExtractionError("The uploaded text file is empty.")
    return ParsedDocument(content=content, pages=1)


def load_document(data: bytes, content_type: str) -> ParsedDocument:
    """Extract text from uploaded bytes according to the declared MIME type.

    Raises UnsupportedDocumentError for types we cannot read and
    ExtractionError when nothing usable comes out of the file.
    """
    if content_type == PDF:
        parsed = load_pdf(data)
    elif content_type == TEXT:
        parsed = load_text(data)
    elif content_type == DOCX:
        parsed = load_docx(data)
    elif content_type == DOC:
        raise UnsupportedDocumentError(
            "Legacy .doc files cannot be read. Please save the document as DOCX or PDF and upload again."
        )
    else:
        raise UnsupportedDocumentError("Unsupported file type. Please upload PDF, DOCX or text files only.")
    logger.debug("Extracted %d chars from %d page(s) (%s)", len(parsed.content), parsed.pages, content_type)
    return parsed
