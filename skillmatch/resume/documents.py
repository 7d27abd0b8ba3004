"""
Document to text conversion.

This module turns an uploaded résumé or job description (raw bytes
plus the declared filename) into plain text for the skill extractor.
PDF files are read with ``pdfplumber`` and Word files with
``python‑docx``; everything else is decoded as UTF‑8.

Any problem (missing library, corrupt file, undecodable bytes) is
raised as `ExtractionFailure`.  A failed conversion is never reported
as an empty string.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Union

from ..errors import ExtractionFailure

logger = logging.getLogger(__name__)

# pdfplumber and python-docx are only needed for their formats; a missing
# install is reported per document rather than at import time.
try:
    import pdfplumber  # type: ignore
except ImportError:
    pdfplumber = None  # type: ignore
try:
    import docx  # type: ignore
except ImportError:
    docx = None  # type: ignore


def _pdf_to_text(data: bytes, filename: str) -> str:
    if pdfplumber is None:
        raise ExtractionFailure(filename, "pdfplumber is required to read PDF files; install it via pip")
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:  # noqa: BLE001
        raise ExtractionFailure(filename, f"unreadable PDF ({exc})") from exc
    text = "\n".join(pages).strip()
    if not text:
        raise ExtractionFailure(filename, "PDF contains no extractable text")
    return text


def _docx_to_text(data: bytes, filename: str) -> str:
    if docx is None:
        raise ExtractionFailure(filename, "python-docx is required to read Word files; install it via pip")
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as exc:  # noqa: BLE001
        raise ExtractionFailure(filename, f"unreadable Word document ({exc})") from exc
    return "\n".join(p.text for p in document.paragraphs)


def extract_text(data: bytes, filename: str) -> str:
    """Convert a document into plain text.

    Args:
        data: Raw document bytes.
        filename: Declared file name; only its extension is used to pick
            the conversion.

    Returns:
        The document text.

    Raises:
        ExtractionFailure: If the document cannot be converted.
    """
    ext = os.path.splitext(filename)[1].lower()
    if ext == ".pdf":
        text = _pdf_to_text(data, filename)
    elif ext == ".docx":
        text = _docx_to_text(data, filename)
    elif ext == ".doc":
        raise ExtractionFailure(filename, "legacy .doc files are not supported; convert to .docx or PDF")
    else:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionFailure(filename, f"not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc
    logger.debug("Extracted %d characters from %s", len(text), filename)
    return text


def extract_text_from_file(path: Union[str, Path]) -> str:
    """Read ``path`` from disk and convert it with `extract_text`."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ExtractionFailure(str(path), exc.strerror or str(exc)) from exc
    return extract_text(data, path.name)
