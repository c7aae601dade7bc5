"""Low-level socket read/write utilities."""

from __future__ import annotations

import socket

from config import BUFFER_SIZE
from response import HTTPResponse, prepare_response


class HTTPReadError(Exception):
    """Raised when request bytes cannot be read from the client socket."""


def read_http_request(client_socket: socket.socket, buffer_size: int = BUFFER_SIZE) -> bytes:
    """Read one buffer of request bytes with a single recv call.

    Returns ``b""`` when the peer closed the connection before sending.
    """
    try:
        return client_socket.recv(buffer_size)
    except OSError as exc:
        raise HTTPReadError("Failed to read request bytes") from exc


def write_http_response(client_socket: socket.socket, payload: bytes | bytearray) -> None:
    """Write the complete response payload to a client socket."""
    client_socket.sendall(payload)


def write_http_response_message(client_socket: socket.socket, response: HTTPResponse) -> int:
    """Write header block then body; the socket is left open for the caller."""
    prepared = prepare_response(response)
    write_http_response(client_socket, prepared.head)
    bytes_sent = len(prepared.head)
    if prepared.body:
        write_http_response(client_socket, prepared.body)
        bytes_sent += len(prepared.body)
    return bytes_sent
