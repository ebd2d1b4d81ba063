"""API documentation and route smoke-test endpoints"""

from datetime import datetime, timezone

from flask import Blueprint, jsonify

from terainfo_core import MAX_BATCH_URLS
from terainfo_server import __version__

docs_bp = Blueprint('docs', __name__)

EXAMPLE_URL = "https://1024terabox.com/s/1Pc4wBeMRpG-ePB1DI_kkPw"


@docs_bp.route('/api/test', methods=['GET'])
def api_test():
    return jsonify({
        "success": True,
        "message": "API routes are working correctly",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "availableEndpoints": [
            "GET /api?url=<terabox_url> - Extract file info",
            "POST /api/batch - Batch processing",
            "GET /api/docs - API documentation",
            "GET /health - Health check",
            "GET /api/test - This test endpoint",
        ],
    })


@docs_bp.route('/api/docs', methods=['GET'])
def api_docs():
    return jsonify({
        "title": "TeraBox File Info Extractor API",
        "version": __version__,
        "description": "Extract file size and duration from TeraBox links using mobile browser simulation",
        "endpoints": {
            "GET /api": {
                "description": "Extract file information from a single TeraBox URL",
                "parameters": {"url": "Required query parameter containing the TeraBox link"},
                "example": f"/api?url={EXAMPLE_URL}",
            },
            "POST /api/batch": {
                "description": f"Extract file information from multiple TeraBox URLs (max {MAX_BATCH_URLS})",
                "body": {"urls": "Array of TeraBox URLs"},
                "example": '{"urls": ["https://1024terabox.com/s/url1", "https://1024terabox.com/s/url2"]}',
            },
            "GET /health": {"description": "Health check endpoint"},
            "GET /api/docs": {"description": "API documentation"},
        },
        "responseFormat": {
            "success": "Boolean indicating if the request was successful",
            "data": {
                "duration": "Video duration in HH:MM:SS or MM:SS format",
                "fileSize": "File size with unit (KB, MB, GB)",
                "rawText": "Original extracted text for reference",
            },
            "error": "Error message if request failed",
        },
    })
