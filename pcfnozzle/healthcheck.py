"""HTTP endpoint answering liveness checks on /health."""

from __future__ import annotations

import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

HEALTH_MESSAGE = "I'm alive and well!"

_log = logging.getLogger(__name__)


class _HealthHandler(BaseHTTPRequestHandler):
    def _respond(self) -> None:
        if self.path.split("?", 1)[0] != "/health":
            self.send_error(404)
            return
        body = HEALTH_MESSAGE.encode()
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    do_GET = _respond
    do_POST = _respond

    def log_message(self, format: str, *args: object) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)


def start(port: int | str) -> ThreadingHTTPServer:
    """Serve /health on ``port`` in a background thread; return the server."""
    server = ThreadingHTTPServer(("", int(port)), _HealthHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server