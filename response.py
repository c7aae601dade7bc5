"""HTTP response model and serializer."""

from dataclasses import dataclass

REASON_PHRASES: dict[int, str] = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


@dataclass(slots=True)
class PreparedResponse:
    head: bytes
    body: bytes | bytearray


@dataclass(slots=True)
class HTTPResponse:
    status_code: int
    content_type: str = "text/html"
    body: bytes | bytearray | str = b""

    def __post_init__(self) -> None:
        if isinstance(self.body, str):
            self.body = self.body.encode("utf-8")

    @property
    def status_line(self) -> str:
        reason = REASON_PHRASES.get(self.status_code, "Unknown")
        return f"{self.status_code} {reason}"

    def to_bytes(self) -> bytes:
        """Serialize the response into HTTP/1.1 wire format bytes."""
        prepared = prepare_response(self)
        return prepared.head + bytes(prepared.body)


def prepare_response(response: HTTPResponse) -> PreparedResponse:
    header_lines = [
        f"HTTP/1.1 {response.status_line}",
        f"Content-Type: {response.content_type}",
        f"Content-Length: {len(response.body)}",
        "Connection: close",
    ]
    head = "\r\n".join(header_lines).encode("iso-8859-1") + b"\r\n\r\n"
    return PreparedResponse(head=head, body=response.body)


def error_response(status_code: int) -> HTTPResponse:
    """Build the HTML error page used for every non-200 status."""
    reason = REASON_PHRASES.get(status_code, "Unknown")
    return HTTPResponse(
        status_code=status_code,
        content_type="text/html",
        body=f"<h1>{status_code} {reason}</h1>",
    )
