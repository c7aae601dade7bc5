"""Request-line model and parser."""

import os
from dataclasses import dataclass

from config import MAX_METHOD_LENGTH, MAX_PATH_LENGTH


class HTTPRequestParseError(ValueError):
    """Request parse error carrying an HTTP status code."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class RequestLine:
    method: str
    path: str | None = None

    @classmethod
    def from_bytes(cls, raw: bytes) -> "RequestLine":
        """Extract method and path from the first two whitespace-delimited tokens.

        Bytes after the first NUL are ignored and only ASCII whitespace
        separates tokens. Tokens are decoded with the filesystem encoding so
        the path opens the exact bytes the client sent. ``path`` is ``None``
        when the request carries a single token.
        """
        tokens = raw.split(b"\x00", 1)[0].split(None, 2)
        if not tokens:
            raise HTTPRequestParseError("Request line is missing method")

        if len(tokens[0]) > MAX_METHOD_LENGTH:
            raise HTTPRequestParseError("Request method too long")
        method = os.fsdecode(tokens[0])
        if len(tokens) < 2:
            return cls(method=method)

        if len(tokens[1]) > MAX_PATH_LENGTH:
            raise HTTPRequestParseError("Request path too long")
        return cls(method=method, path=os.fsdecode(tokens[1]))
