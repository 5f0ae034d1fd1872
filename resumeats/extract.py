"""
Document ➜ raw text.

Two binary formats are supported (PDF via pypdf, DOCX via python-docx)
plus a pass-through for already-decoded plain text. Extraction is
all-or-nothing: either the whole document becomes text or an error is
raised. Everything happens in memory.
"""

import io
import warnings
from typing import Optional, Union

from docx import Document
from pypdf import PdfReader

from .errors import ExtractionFailed, UnsupportedFormat
from .logger import get_logger
from .normalize import (
    DOCX_MIME,
    PDF_MIME,
    TEXT_MIME,
    normalize_document_text,
    normalize_mime_type,
)

FORMAT_NAMES = {
    PDF_MIME: "pdf",
    DOCX_MIME: "docx",
    TEXT_MIME: "text",
}
SUPPORTED_MIME_TYPES = tuple(FORMAT_NAMES)


def _pdf_to_text(data: bytes) -> str:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            raise ExtractionFailed(PDF_MIME, "document is encrypted")
        pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


def _docx_to_text(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    parts = [paragraph.text for paragraph in doc.paragraphs]
    # Résumé templates often lay out skills or dates in tables
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n".join(parts)


def _plain_to_text(data: Union[bytes, str]) -> str:
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="ignore")


_DECODERS = {
    PDF_MIME: _pdf_to_text,
    DOCX_MIME: _docx_to_text,
}


def extract(data: Union[bytes, str], mime_type: Optional[str]) -> str:
    """Convert a document into normalised Unicode text.

    Args:
        data: Raw document bytes (or an already-decoded string for plain text)
        mime_type: MIME type of ``data``; ``None`` means plain text

    Returns:
        The document text, normalised by ``normalize_document_text``

    Raises:
        UnsupportedFormat: ``mime_type`` is not PDF, DOCX or plain text
        ExtractionFailed: the decoder could not produce any text
    """
    logger = get_logger()
    mt = normalize_mime_type(mime_type) or TEXT_MIME

    if mt not in FORMAT_NAMES:
        logger.warning("Unsupported document format", mime_type=mime_type)
        raise UnsupportedFormat(mime_type)

    doc_format = FORMAT_NAMES[mt]
    logger.record_extraction_attempt(doc_format)

    if mt == TEXT_MIME:
        text = normalize_document_text(_plain_to_text(data))
        logger.record_extraction_success(doc_format)
        return text

    if isinstance(data, str):
        logger.record_extraction_failure(doc_format, "TypeError")
        raise ExtractionFailed(mt, "binary format given as text")

    logger.debug("Extracting document", format=doc_format, size=len(data))
    try:
        raw = _DECODERS[mt](data)
    except ExtractionFailed:
        logger.record_extraction_failure(doc_format, "Encrypted")
        logger.warning("Document is encrypted", format=doc_format)
        raise
    except Exception as e:
        logger.record_extraction_failure(doc_format, type(e).__name__)
        logger.warning(
            "Document could not be decoded", format=doc_format, error=str(e)
        )
        raise ExtractionFailed(mt, str(e) or type(e).__name__) from e

    text = normalize_document_text(raw)
    if not text:
        logger.record_extraction_failure(doc_format, "NoText")
        logger.warning("Document contains no extractable text", format=doc_format)
        raise ExtractionFailed(mt, "document contains no extractable text")

    logger.record_extraction_success(doc_format)
    logger.debug("Extracted document", format=doc_format, chars=len(text))
    return text
