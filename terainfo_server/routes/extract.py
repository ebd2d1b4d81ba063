"""Extraction endpoints: single URL and batch"""

import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from terainfo_core import MAX_BATCH_URLS, ExtractionError
from terainfo_server.error_handler import batch_entry_for, create_error_response
from terainfo_server.runner import run_in_new_loop

logger = logging.getLogger(__name__)

extract_bp = Blueprint('extract', __name__)

EXTRACTOR_KEY = "TERAINFO_EXTRACTOR"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_extractor():
    return current_app.config[EXTRACTOR_KEY]


@extract_bp.route('/api', methods=['GET'])
@extract_bp.route('/api/', methods=['GET'])
def extract():
    """Extract file information from one share URL (?url=...)"""
    url = request.args.get('url')
    if not url:
        return jsonify({
            "success": False,
            "error": "Missing required parameter",
            "message": 'Please provide a "url" query parameter with the TeraBox link',
        }), 400

    logger.info(f"Processing request for URL: {url}")
    try:
        record = run_in_new_loop(get_extractor().extract(url))
    except ExtractionError as e:
        body, status = create_error_response(e, url)
        return jsonify(body), status
    except Exception as e:
        logger.error(f"API Error: {e}", exc_info=True)
        body, status = create_error_response(e, url)
        return jsonify(body), status

    return jsonify({
        "success": True,
        "url": url,
        "extractedAt": _now(),
        "data": record.to_dict(),
    })


@extract_bp.route('/api/batch', methods=['POST'])
def extract_batch():
    """Extract file information for up to MAX_BATCH_URLS URLs, in order"""
    data = request.get_json(silent=True) or {}
    urls = data.get('urls') if isinstance(data, dict) else None

    if not urls or not isinstance(urls, list):
        return jsonify({
            "success": False,
            "error": "Invalid input",
            "message": "Please provide an array of URLs in the request body",
        }), 400
    if len(urls) > MAX_BATCH_URLS:
        return jsonify({
            "success": False,
            "error": "Too many URLs",
            "message": f"Maximum {MAX_BATCH_URLS} URLs allowed per batch request",
        }), 400

    logger.info(f"Processing batch request for {len(urls)} URLs")
    try:
        items = run_in_new_loop(get_extractor().extract_batch(urls))
    except Exception as e:
        logger.error(f"Batch API Error: {e}", exc_info=True)
        return jsonify({
            "success": False,
            "error": "Internal server error",
            "message": str(e),
        }), 500

    results = []
    for item in items:
        if item.success:
            results.append({"url": item.url, "success": True, "data": item.record.to_dict()})
        else:
            results.append(batch_entry_for(item.url, item.error))

    return jsonify({
        "success": True,
        "processedAt": _now(),
        "totalRequests": len(urls),
        "results": results,
    })
