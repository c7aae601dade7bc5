"""Main HTTP server entry point and connection lifecycle orchestration."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
import time
from collections.abc import Sequence

from config import ACCEPT_TIMEOUT_SECS, BASE_DIR, HOST, LISTEN_BACKLOG, PORT, ServerConfig
from handlers.file_handlers import serve_file
from request import HTTPRequestParseError, RequestLine
from response import HTTPResponse, error_response
from socket_handler import HTTPReadError, read_http_request, write_http_response_message
from utils import build_file_path

logger = logging.getLogger(__name__)


class HTTPServer:
    def __init__(self, config: ServerConfig | None = None, host: str = HOST) -> None:
        self.config = config or ServerConfig()
        self.host = host
        self.port = self.config.port

        self._server_socket: socket.socket | None = None
        self._running = False

    def start(self) -> None:
        """Listen and handle clients one at a time until stopped.

        Socket setup errors propagate as ``OSError``.
        """
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server_socket:
            self._server_socket = server_socket
            server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server_socket.bind((self.host, self.port))
            server_socket.listen(LISTEN_BACKLOG)
            server_socket.settimeout(ACCEPT_TIMEOUT_SECS)
            self.port = server_socket.getsockname()[1]
            logger.info("Serving directory: %s", self.config.base_dir)
            logger.info("Listening on http://%s:%d", self.host, self.port)

            self._running = True
            while self._running:
                try:
                    client_socket, address = server_socket.accept()
                except socket.timeout:
                    continue
                except OSError:
                    if not self._running:
                        break
                    logger.exception("Failed to accept connection")
                    continue

                with client_socket:
                    self.handle_client(client_socket, address)

    def stop(self) -> None:
        self._running = False
        if self._server_socket is not None:
            self._server_socket.close()
            self._server_socket = None

    def handle_client(self, client_socket: socket.socket, address: tuple[str, int]) -> None:
        """Read one request, answer it, and return; closing is the caller's job."""
        started_at = time.perf_counter()
        try:
            raw_request = read_http_request(client_socket)
        except HTTPReadError:
            logger.debug("Read failed for client %s", address[0], exc_info=True)
            return

        if not raw_request:
            return

        try:
            request_line = RequestLine.from_bytes(raw_request)
        except HTTPRequestParseError as exc:
            logger.debug("Rejected request from %s: %s", address[0], exc)
            self._send_error(client_socket, address, exc.status_code, "-", "-", started_at)
            return

        method = request_line.method
        path = request_line.path
        if method != "GET":
            self._send_error(client_socket, address, 405, method, path or "-", started_at)
            return

        if path is None:
            self._send_error(client_socket, address, 400, method, "-", started_at)
            return

        if path == "/":
            path = "/index.html"

        file_path = build_file_path(self.config.base_dir, path)
        try:
            response, bytes_sent = serve_file(client_socket, file_path)
        except OSError:
            logger.debug("Client %s went away during response", address[0], exc_info=True)
            return
        self._record_and_log(
            address=address,
            method=method,
            path=path,
            response=response,
            payload_size=bytes_sent,
            started_at=started_at,
        )

    def _send_error(
        self,
        client_socket: socket.socket,
        address: tuple[str, int],
        status_code: int,
        method: str,
        path: str,
        started_at: float,
    ) -> None:
        response = error_response(status_code)
        try:
            bytes_sent = write_http_response_message(client_socket, response)
        except OSError:
            logger.debug("Client %s went away during response", address[0], exc_info=True)
            return
        self._record_and_log(
            address=address,
            method=method,
            path=path,
            response=response,
            payload_size=bytes_sent,
            started_at=started_at,
        )

    def _record_and_log(
        self,
        *,
        address: tuple[str, int],
        method: str,
        path: str,
        response: HTTPResponse,
        payload_size: int,
        started_at: float,
    ) -> None:
        duration_ms = (time.perf_counter() - started_at) * 1000
        logger.info(
            "client=%s method=%s path=%s status=%s bytes_out=%s duration_ms=%.2f",
            address[0],
            method,
            path,
            response.status_code,
            payload_size,
            duration_ms,
        )


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from exc
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve files from a directory over HTTP")
    parser.add_argument("port", nargs="?", type=_port, default=PORT)
    parser.add_argument("directory", nargs="?", default=BASE_DIR)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    server = HTTPServer(ServerConfig(port=args.port, base_dir=args.directory))
    try:
        server.start()
    except KeyboardInterrupt:
        server.stop()
    except OSError as exc:
        logger.error("Failed to start server on port %d: %s", args.port, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
