"""
terainfo_core - extraction engine for TeraBox share pages

Drives a headless mobile Chromium through Playwright, locates the
"duration | size" text on the rendered page and parses it.

Usage:
    from terainfo_core import Extractor

    extractor = Extractor.create()
    record = await extractor.extract("https://1024terabox.com/s/1abc")
    print(record.to_dict())
"""
from .errors import (
    ExtractionError,
    InvalidInput,
    SessionError,
    NavigationTimeout,
    InvalidPage,
    NotFoundError,
)
from .models import (
    BatchItem,
    CandidateFragment,
    ExtractedRecord,
    ExtractionRequest,
    ExtractionState,
    SourceStrategy,
)
from .options import (
    LaunchOptions,
    LocateBudget,
    MobileIdentity,
    NavigationOptions,
    TargetSite,
)
from .parser import parse_fragment
from .locator import ContentLocator
from .session import BrowserSession, SessionProvisioner
from .orchestrator import Extractor, MAX_BATCH_URLS

__all__ = [
    # Errors
    "ExtractionError",
    "InvalidInput",
    "SessionError",
    "NavigationTimeout",
    "InvalidPage",
    "NotFoundError",
    # Models
    "BatchItem",
    "CandidateFragment",
    "ExtractedRecord",
    "ExtractionRequest",
    "ExtractionState",
    "SourceStrategy",
    # Options
    "LaunchOptions",
    "LocateBudget",
    "MobileIdentity",
    "NavigationOptions",
    "TargetSite",
    # Stages
    "parse_fragment",
    "ContentLocator",
    "BrowserSession",
    "SessionProvisioner",
    "Extractor",
    "MAX_BATCH_URLS",
]
