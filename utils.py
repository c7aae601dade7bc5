"""Utility helpers shared across server modules."""

CONTENT_TYPES: dict[str, str] = {
    "html": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "png": "image/png",
    "jpg": "image/jpeg",
    "gif": "image/gif",
}
DEFAULT_CONTENT_TYPE: str = "text/plain"


def get_content_type(file_path: str) -> str:
    # Uses the last "." anywhere in the path, not only in the final component.
    _head, dot, extension = file_path.rpartition(".")
    if not dot:
        return DEFAULT_CONTENT_TYPE
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def build_file_path(base_dir: str, request_path: str) -> str:
    """Join base directory and request path verbatim, with no normalization."""
    return f"{base_dir}{request_path}"
