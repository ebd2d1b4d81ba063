"""
terainfo_server - HTTP API for TeraBox file info extraction
"""

__version__ = "1.0.0"

from terainfo_server.config import Config, config
from terainfo_server.app import app

__all__ = [
    'Config',
    'config',
    'app',
]
