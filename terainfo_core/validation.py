#!/usr/bin/env python3
from typing import Any, Optional
from urllib.parse import urlparse

from .errors import InvalidInput
from .models import ExtractionRequest
from .options import TargetSite


def validate_request(url: Any, site: Optional[TargetSite] = None) -> ExtractionRequest:
    """Check url before any browser resource is spent. Raises InvalidInput."""
    site = site or TargetSite()
    if not url or not isinstance(url, str):
        raise InvalidInput("Invalid URL provided")

    url = url.strip()
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError as e:
        raise InvalidInput(f"The provided URL is not valid: {e}") from e

    if parsed.scheme not in ("http", "https") or not host:
        raise InvalidInput("The provided URL is not valid")
    if not site.matches_host(host):
        raise InvalidInput(f"URL must be a valid {site.name_token.capitalize()} link")
    return ExtractionRequest(url=url)
