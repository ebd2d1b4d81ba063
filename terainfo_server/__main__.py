"""Main entry point for terainfo server"""

import argparse
import logging

from terainfo_server.config import config, find_browser_executable
from terainfo_server.app import app

logger = logging.getLogger(__name__)


def main(argv=None):
    """Run the terainfo API server"""
    parser = argparse.ArgumentParser(prog="terainfo_server", description=main.__doc__)
    parser.add_argument("--port", type=int, default=config.api_port)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument(
        "--check-browser",
        action="store_true",
        help="Print the Chromium executable found on PATH and exit",
    )
    args = parser.parse_args(argv)

    if args.check_browser:
        path = find_browser_executable()
        if path:
            print(f"Browser found: {path}")
            return 0
        print("No chromium-browser, chromium or google-chrome on PATH; Playwright's bundled Chromium will be used")
        return 1

    launch = config.launch_options()
    logger.info(f"Starting terainfo API server on port {args.port}...")
    logger.info(f"Browser: {launch.executable_path or 'Playwright bundled Chromium'} (headless={launch.headless})")
    logger.info(f"Navigation: wait_until={config.wait_until}, timeout={config.nav_timeout_ms}ms")
    logger.info(f"Locate budget: {config.max_attempts} attempts, {config.retry_delay_ms}ms apart")
    app.run(host=args.host, port=args.port, debug=False, use_reloader=False)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
