"""Routes module for Flask endpoints"""

from terainfo_server.routes.health import health_bp
from terainfo_server.routes.extract import extract_bp
from terainfo_server.routes.docs import docs_bp

__all__ = ['health_bp', 'extract_bp', 'docs_bp']
