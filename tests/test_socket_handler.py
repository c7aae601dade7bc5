"""Unit tests for socket read/write helpers."""

import socket

import pytest

from response import HTTPResponse
from socket_handler import HTTPReadError, read_http_request, write_http_response_message


def test_read_returns_at_most_one_buffer() -> None:
    server_side, client_side = socket.socketpair()
    with server_side, client_side:
        client_side.sendall(b"GET / HTTP/1.1\r\n\r\n" + b"x" * 8192)

        raw = read_http_request(server_side)

    assert raw.startswith(b"GET / HTTP/1.1\r\n")
    assert len(raw) <= 4096


def test_read_returns_empty_bytes_when_peer_closed() -> None:
    server_side, client_side = socket.socketpair()
    with server_side:
        client_side.close()

        assert read_http_request(server_side) == b""


def test_read_error_is_wrapped() -> None:
    server_side, client_side = socket.socketpair()
    client_side.close()
    server_side.close()

    with pytest.raises(HTTPReadError):
        read_http_request(server_side)


def test_write_sends_header_then_body_and_leaves_socket_open() -> None:
    response = HTTPResponse(status_code=200, content_type="image/gif", body=b"GIF89a")
    server_side, client_side = socket.socketpair()
    with server_side, client_side:
        bytes_sent = write_http_response_message(server_side, response)
        server_side.sendall(b"!")
        server_side.shutdown(socket.SHUT_WR)
        chunks = []
        while chunk := client_side.recv(4096):
            chunks.append(chunk)

    raw = b"".join(chunks)
    assert raw == response.to_bytes() + b"!"
    assert bytes_sent == len(response.to_bytes())
