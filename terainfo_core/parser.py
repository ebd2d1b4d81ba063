"""
Field Parser - turn a located fragment into duration / file size fields

Expected input looks like "00:08:50 | 55.3MB" but the order and the
delimiter may vary. Parsing never raises: unresolved fields are "N/A" and
the raw text is always kept.
"""

import logging
import re

from .models import NOT_AVAILABLE, ExtractedRecord

logger = logging.getLogger(__name__)

DELIMITER_RE = re.compile(r"\s*[|·•]\s*")
DURATION_PART_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")
SIZE_PART_RE = re.compile(r"\d+(?:\.\d+)?\s*(?:KB|MB|GB)", re.IGNORECASE)
DURATION_RE = re.compile(r"(\d{1,2}:\d{2}(?::\d{2})?)")
SIZE_RE = re.compile(r"(\d+(?:\.\d+)?\s*(?:KB|MB|GB))", re.IGNORECASE)


def _classify_parts(text: str):
    duration = None
    file_size = None
    for part in DELIMITER_RE.split(text):
        part = part.strip()
        if not part:
            continue
        if DURATION_PART_RE.match(part):
            duration = part
        elif SIZE_PART_RE.search(part):
            file_size = part
    return duration, file_size


def parse_fragment(text: str) -> ExtractedRecord:
    """Split and classify a fragment. Never raises."""
    try:
        duration, file_size = _classify_parts(text)

        # Not delimiter separated, or a token was missed: whole-text matches
        # take precedence for both fields
        if not duration or not file_size:
            m = DURATION_RE.search(text)
            if m:
                duration = m.group(1)
            m = SIZE_RE.search(text)
            if m:
                file_size = m.group(1)

        return ExtractedRecord(
            duration=duration or NOT_AVAILABLE,
            file_size=file_size or NOT_AVAILABLE,
            raw_text=text,
        )
    except Exception as e:
        logger.error(f"Error parsing file info from {text!r}: {e}")
        return ExtractedRecord(
            duration=NOT_AVAILABLE,
            file_size=NOT_AVAILABLE,
            raw_text=text,
        )
