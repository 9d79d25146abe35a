# frontend/extraction.py
from __future__ import annotations

from io import BytesIO

import pdfplumber

TEXT_PLAIN = "text/plain"
APPLICATION_PDF = "application/pdf"
SUPPORTED_TYPES = (TEXT_PLAIN, APPLICATION_PDF)


class UnsupportedFileType(ValueError):
    """Raised for uploads that are neither plain text nor PDF."""


class ExtractionError(RuntimeError):
    """Raised when a supported file cannot be read."""


def extract_pdf_text(data: bytes) -> str:
    """
    Return the text of a PDF, page by page.

    Words on a page are joined with a single space, pages with a blank line.
    """
    pages: list[str] = []
    try:
        with pdfplumber.open(BytesIO(data)) as pdf:
            for page in pdf.pages:
                words = page.extract_words()
                pages.append(" ".join(w["text"] for w in words))
    except Exception as exc:  # noqa: BLE001 - pdfminer raises a zoo of types
        raise ExtractionError(f"could not parse PDF: {exc}") from exc
    return "\n\n".join(pages)


def extract_text(data: bytes, mime_type: str | None) -> str:
    if mime_type == TEXT_PLAIN:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"file is not valid UTF-8: {exc}") from exc
    if mime_type == APPLICATION_PDF:
        return extract_pdf_text(data)
    raise UnsupportedFileType(f"unsupported file type: {mime_type or 'unknown'}")
