"""File-serving handlers."""

from __future__ import annotations

import logging
import os
import socket

from response import HTTPResponse, error_response
from socket_handler import write_http_response_message
from utils import get_content_type

logger = logging.getLogger(__name__)


class FileReadError(OSError):
    """Raised when a file yields fewer bytes than its reported size."""


def _allocate_buffer(size: int) -> bytearray:
    return bytearray(size)


def load_file_response(file_path: str) -> HTTPResponse:
    """Load ``file_path`` fully into memory and build the matching response."""
    try:
        with open(file_path, "rb") as file_obj:
            file_size = os.fstat(file_obj.fileno()).st_size
            try:
                buffer = _allocate_buffer(file_size)
            except MemoryError:
                logger.warning("Could not allocate %d bytes for %s", file_size, file_path)
                return error_response(500)

            bytes_read = file_obj.readinto(buffer)
            if bytes_read != file_size:
                raise FileReadError(
                    f"Short read: expected {file_size} bytes, got {bytes_read}"
                )
    except OSError as exc:
        logger.debug("Cannot serve %s: %s", file_path, exc)
        return error_response(404)

    return HTTPResponse(
        status_code=200,
        content_type=get_content_type(file_path),
        body=buffer,
    )


def serve_file(client_socket: socket.socket, file_path: str) -> tuple[HTTPResponse, int]:
    """Send ``file_path`` to the client; returns the response and bytes written."""
    response = load_file_response(file_path)
    bytes_sent = write_http_response_message(client_socket, response)
    return response, bytes_sent
