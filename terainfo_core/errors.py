"""
Extraction error taxonomy.

Every failure surfaced by the extraction engine is one of these kinds.
Parse degradation is not an error: it shows up as "N/A" fields.

Usage:
    from terainfo_core.errors import ExtractionError, NotFoundError

    try:
        record = await extractor.extract(url)
    except ExtractionError as e:
        print(e.kind, e.status_code, e)
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for extraction failures"""

    kind = "extraction_error"
    status_code = 500
    error_type = "Internal server error"

    def __init__(self, message: str, state: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.state = state


class InvalidInput(ExtractionError):
    """Missing, malformed or non-target URL (checked before any browser work)"""

    kind = "invalid_input"
    status_code = 400
    error_type = "Invalid request"


class SessionError(ExtractionError):
    """Browser process or page could not be created"""

    kind = "session_error"
    status_code = 500
    error_type = "Browser session error"


class NavigationTimeout(ExtractionError):
    """Page did not reach the readiness condition within budget"""

    kind = "navigation_timeout"
    status_code = 408
    error_type = "Request timeout"


class InvalidPage(ExtractionError):
    """Loaded content does not look like the target site"""

    kind = "invalid_page"
    status_code = 404
    error_type = "Content not found"


class NotFoundError(ExtractionError):
    """All locate strategies exhausted without a fragment"""

    kind = "not_found"
    status_code = 404
    error_type = "Content not found"
