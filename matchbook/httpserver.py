"""HTTP front end exposing the health check, with graceful shutdown."""

from __future__ import annotations

import argparse
import json
import logging
import signal
import threading
import time
from dataclasses import dataclass
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

log = logging.getLogger(__name__)

DEFAULT_PORT = 8080
SHUTDOWN_TIMEOUT = 5.0


@dataclass
class Response:
    """A status, content type and body ready to be written to the client."""

    status: int
    content_type: str
    body: bytes


def ping() -> dict[str, str]:
    """Health check payload."""
    return {"message": "pong"}


_ROUTES = {("GET", "/health/ping"): ping}


def dispatch(method: str, path: str) -> Response:
    """Route a request to its handler and build the response."""
    handler = _ROUTES.get((method.upper(), urlsplit(path).path))
    if handler is None:
        return Response(int(HTTPStatus.NOT_FOUND), "text/plain", b"404 page not found")
    body = json.dumps(handler(), separators=(",", ":")).encode()
    return Response(int(HTTPStatus.OK), "application/json; charset=utf-8", body)


class _Handler(BaseHTTPRequestHandler):
    def _handle(self) -> None:
        response = dispatch(self.command, self.path)
        self.send_response(response.status)
        self.send_header("Content-Type", response.content_type)
        self.send_header("Content-Length", str(len(response.body)))
        self.end_headers()
        self.wfile.write(response.body)

    do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _handle

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        log.info("%s - %s", self.address_string(), format % args)


class HttpServer:
    """HTTP server bound to ``host``:``port`` that serves the routes above."""

    cleanup_delay = 2.0

    def __init__(self, host: str = "", port: int = DEFAULT_PORT) -> None:
        self._server = ThreadingHTTPServer((host, port), _Handler)
        self._server.daemon_threads = True
        self.host, self.port = self._server.server_address[:2]
        self._serving = threading.Event()

    def start(self) -> None:
        """Serve requests until :meth:`stop` is called. Blocks."""
        log.info("HTTP server listening on :%d", self.port)
        self._serving.set()
        try:
            self._server.serve_forever()
        finally:
            self._serving.clear()

    def stop(self) -> None:
        """Run cleanup, then shut down, waiting up to the shutdown timeout."""
        log.info("Shutting down HTTP server...")
        log.info("Start cleanup tasks...")
        time.sleep(self.cleanup_delay)
        log.info("Cleanup finished.")
        if self._serving.is_set():
            closer = threading.Thread(target=self._server.shutdown, daemon=True)
            closer.start()
            closer.join(SHUTDOWN_TIMEOUT)
            if closer.is_alive():
                log.error("HTTP server shutdown error: timed out")
        self._server.server_close()


def main(argv: list[str] | None = None) -> int:
    """Run the HTTP server until SIGINT or SIGTERM arrives."""
    parser = argparse.ArgumentParser(description="Run the health-check HTTP server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    server = HttpServer(args.host, args.port)
    done = threading.Event()
    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, lambda signum, frame: done.set())

    worker = threading.Thread(target=server.start, daemon=True)
    worker.start()
    while not done.wait(0.5):
        if not worker.is_alive():
            log.error("HTTP server stopped unexpectedly")
            return 1

    log.info("Main: shutdown signal received")
    server.stop()
    worker.join(SHUTDOWN_TIMEOUT)
    log.info("Main: all servers shutdown cleanly")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())