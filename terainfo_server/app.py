"""Flask application setup for terainfo server"""

import logging

from flask import Flask
from flask_cors import CORS

from terainfo_server.config import config
from terainfo_server.routes.health import health_bp
from terainfo_server.routes.extract import extract_bp, EXTRACTOR_KEY
from terainfo_server.routes.docs import docs_bp

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = Flask(__name__)
CORS(app)
app.config[EXTRACTOR_KEY] = config.build_extractor()

# Register blueprints
app.register_blueprint(health_bp)
app.register_blueprint(extract_bp)
app.register_blueprint(docs_bp)
