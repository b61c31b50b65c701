"""
Main entry point for the web UI demo server.
"""
import logging
import signal
import sys
import threading
from typing import Optional

from werkzeug.serving import make_server

from api.server import create_app
from config.env import load_config
from config.log import setup_logging

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _install_shutdown_handlers(stop_event: threading.Event) -> dict:
    """Route shutdown signals to stop_event; return the handlers replaced."""
    def _handle(signum, frame):
        stop_event.set()

    previous = {}
    for sig in SHUTDOWN_SIGNALS:
        previous[sig] = signal.signal(sig, _handle)
    return previous


def _restore_handlers(previous: dict) -> None:
    for sig, handler in previous.items():
        signal.signal(sig, handler)


def main(stop_event: Optional[threading.Event] = None) -> int:
    config = load_config()
    setup_logging(config.log_level, config.log_format)
    # The startup banner is part of the CLI output and shows at any LOG_LEVEL.
    logger.setLevel(logging.INFO)

    app = create_app(config)
    server = make_server(config.host, config.port, app, threaded=True)
    port = server.server_port

    stop_event = stop_event or threading.Event()
    previous = {}
    serving = None
    try:
        previous = _install_shutdown_handlers(stop_event)
        serving = threading.Thread(target=server.serve_forever, name="http-server", daemon=True)
        serving.start()

        logger.info(f"Server running at http://localhost:{port}/")
        logger.info("Try these endpoints in your browser:")
        logger.info(f"- http://localhost:{port}/ (Main UI)")
        logger.info(f"- http://localhost:{port}/api/data (API endpoint)")

        stop_event.wait()
    finally:
        logger.info("Shutting down server...")
        # shutdown() blocks until serve_forever returns, so only call it once serving
        if serving is not None and serving.ident is not None:
            server.shutdown()
            serving.join()
        server.server_close()
        _restore_handlers(previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())
