from __future__ import annotations
import logging
from typing import Optional

import fitz  # PyMuPDF

from .errors import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = ("txt", "md")
PDF_EXTENSION = "pdf"
SUPPORTED_EXTENSIONS = TEXT_EXTENSIONS + (PDF_EXTENSION,)

def file_extension(filename: str) -> str:
    return filename.lower().rsplit('.', 1)[-1] if '.' in filename else ''

def upload_fingerprint(uploaded_file) -> str:
    """Identity of an upload; two different files with the same name differ."""
    file_id = getattr(uploaded_file, "file_id", None)
    if file_id:
        return str(file_id)
    size = getattr(uploaded_file, "size", None)
    if size is None:
        size = len(uploaded_file.getvalue())
    return f"{uploaded_file.name}:{size}"

def decode_text(data: bytes) -> str:
    # utf-8-sig drops a leading BOM; bad bytes become U+FFFD instead of failing
    return data.decode("utf-8-sig", errors="replace")

def extract_text_from_pdf(data: bytes) -> str:
    """
    Extract text page by page with PyMuPDF.
    Each page contributes its words joined by spaces, followed by a blank line.
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        logger.exception("Could not open PDF")
        raise ExtractionError("Impossible de lire le PDF.") from e

    parts = []
    try:
        for page in doc:
            words = page.get_text("words")  # (x0, y0, x1, y1, word, block, line, word_no)
            parts.append(" ".join(w[4] for w in words) + "\n\n")
        logger.info("Extracted text from %d PDF page(s)", doc.page_count)
    except Exception as e:
        logger.exception("PDF text extraction failed")
        raise ExtractionError("Erreur pendant l'extraction du texte du PDF.") from e
    finally:
        doc.close()
    return "".join(parts)

def load_text_from_file(uploaded_file, max_bytes: Optional[int] = None) -> str:
    """Load text content from an uploaded file (anything with .name and .read())."""
    name = uploaded_file.name
    ext = file_extension(name)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(name)

    data = uploaded_file.read()
    if max_bytes is not None and len(data) > max_bytes:
        raise ExtractionError(f"Fichier trop volumineux ({len(data) // 1024} Ko) : {name}")
    logger.info("Loading %s (%d bytes)", name, len(data))

    if ext == PDF_EXTENSION:
        return extract_text_from_pdf(data)
    # Markdown is kept as-is so '#' headings stay detectable
    return decode_text(data)
