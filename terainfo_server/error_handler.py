"""
Maps extraction errors to HTTP responses.

Taxonomy errors carry their own status code; anything else is a 500.
"""

from typing import Any, Dict, Tuple

from terainfo_core import ExtractionError


def status_for(error: Exception) -> int:
    if isinstance(error, ExtractionError):
        return error.status_code
    return 500


def create_error_response(error: Exception, url: Any = None) -> Tuple[Dict[str, Any], int]:
    """
    Build the JSON error envelope and its status code.

    Returns:
        ({"success": False, "error": str, "message": str, "url": str}, status)
    """
    if isinstance(error, ExtractionError):
        error_type = error.error_type
        message = error.message
    else:
        error_type = "Internal server error"
        message = str(error)

    response = {
        "success": False,
        "error": error_type,
        "message": message,
        "url": url if url else "N/A",
    }
    return response, status_for(error)


def batch_entry_for(url: Any, error: Exception) -> Dict[str, Any]:
    body, _ = create_error_response(error, url)
    return {
        "url": url,
        "success": False,
        "error": body["error"],
        "message": body["message"],
    }
