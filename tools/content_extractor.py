from pathlib import Path
from typing import Union
import io
import fitz  # PyMuPDF
import docx
from docx.table import Table
from schemas.submission import FileSubmission, PDF_MIME_TYPE, DOCX_MIME_TYPE, ALLOWED_MIME_TYPES
from tools.exceptions import UnsupportedFormat, ReadError, ParseError
from logger.logger import log_debug, log_info, log_error

UNSUPPORTED_FORMAT_MESSAGE = "Unsupported file type. Please upload a PDF or DOCX file."


def read_payload(file: FileSubmission) -> bytes:
    """Read the whole upload into memory, rewinding streams so every call sees all of it"""
    source = file.source
    try:
        if isinstance(source, (bytes, bytearray)):
            return bytes(source)
        if isinstance(source, Path):
            return source.read_bytes()
        if hasattr(source, "seek"):
            source.seek(0)
        data = source.read()
    except (OSError, ValueError) as e:
        log_error("Error reading file", filename=file.filename, error=str(e))
        raise ReadError("Error reading file.", cause=e) from e

    if not isinstance(data, (bytes, bytearray)):
        raise ReadError("Failed to read file content.")
    return bytes(data)


def extract_pdf_text(data: bytes) -> str:
    """Visit pages 1..N in order, joining each page's words with single spaces"""
    page_texts = []
    with fitz.open(stream=data, filetype="pdf") as doc:
        log_debug(f"PDF opened with {doc.page_count} pages")
        for page_number in range(1, doc.page_count + 1):
            page = doc.load_page(page_number - 1)
            words = page.get_text("words")
            page_texts.append(" ".join(word[4] for word in words))
    return " ".join(page_texts)


def _table_lines(table):
    seen = set()
    for row in table.rows:
        for cell in row.cells:
            # Merged cells show up once per grid column they span
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            yield cell.text


def extract_docx_text(data: bytes) -> str:
    """Raw text of paragraphs and table cells in document order, formatting discarded"""
    document = docx.Document(io.BytesIO(data))
    lines = []
    for block in document.iter_inner_content():
        if isinstance(block, Table):
            lines.extend(_table_lines(block))
        else:
            lines.append(block.text)
    return "\n".join(lines)


_EXTRACTORS = {
    PDF_MIME_TYPE: extract_pdf_text,
    DOCX_MIME_TYPE: extract_docx_text,
}


def extract(file: FileSubmission) -> str:
    """Turn an uploaded PDF or DOCX into plain text.

    Raises UnsupportedFormat before touching the payload when the MIME type
    is not allowed, ReadError when the payload cannot be read and ParseError
    when the document itself is broken.
    """
    if file.mime_type not in ALLOWED_MIME_TYPES:
        log_error("Unsupported file type", filename=file.filename, mime_type=file.mime_type)
        raise UnsupportedFormat(UNSUPPORTED_FORMAT_MESSAGE)

    data = read_payload(file)
    log_debug(f"Read {len(data)} bytes from {file.filename}")

    try:
        text = _EXTRACTORS[file.mime_type](data)
    except Exception as e:
        log_error("Error parsing file content", filename=file.filename, error=str(e))
        raise ParseError(f"Error parsing file content: {e}", cause=e) from e

    log_info("Extracted job description text", filename=file.filename, characters=len(text))
    return text


def extract_path(path: Union[str, Path]) -> str:
    """Extract a document from disk, inferring its MIME type from the suffix"""
    return extract(FileSubmission.from_path(path))
