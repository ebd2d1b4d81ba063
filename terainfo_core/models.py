"""Data structures passed between the extraction stages"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

NOT_AVAILABLE = "N/A"


class SourceStrategy(Enum):
    """Which discovery strategy produced a fragment"""
    STRUCTURAL = "structural"
    ATTRIBUTE_PATTERN = "attribute_pattern"
    REGEX_FALLBACK = "regex_fallback"


class ExtractionState(Enum):
    VALIDATING = "validating"
    SESSION_ACQUIRED = "session_acquired"
    NAVIGATED = "navigated"
    LOCATING = "locating"
    PARSED = "parsed"
    RELEASED = "released"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractionRequest:
    url: str


@dataclass(frozen=True)
class CandidateFragment:
    """Short page text believed to encode duration and size"""
    text: str
    source_strategy: SourceStrategy
    selector: Optional[str] = None

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValueError("CandidateFragment text must not be empty")


@dataclass
class ExtractedRecord:
    duration: str
    file_size: str
    raw_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "duration": self.duration,
            "fileSize": self.file_size,
            "rawText": self.raw_text,
        }


@dataclass
class BatchItem:
    """Outcome of one URL in a batch run"""
    url: Any
    success: bool
    record: Optional[ExtractedRecord] = None
    error: Optional[Exception] = None
