"""PDF inspection helpers for compiled résumés."""

import io
from typing import Optional

from loguru import logger
from PyPDF2 import PdfReader


def page_count(pdf_bytes: bytes) -> Optional[int]:
    """Get page count from in-memory PDF bytes, or None if unreadable."""
    if not pdf_bytes:
        return None
    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        return len(reader.pages)
    except Exception as e:
        logger.debug(f"Cannot read page count from PDF ({len(pdf_bytes)} bytes): {e}")
        return None
