"""Configuration constants for the file server."""

from dataclasses import dataclass

HOST: str = "0.0.0.0"
PORT: int = 8080
BASE_DIR: str = "."
BUFFER_SIZE: int = 4096
LISTEN_BACKLOG: int = 10
MAX_METHOD_LENGTH: int = 7
MAX_PATH_LENGTH: int = 1023
ACCEPT_TIMEOUT_SECS: float = 0.2


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Startup values shared read-only by every request."""

    port: int = PORT
    base_dir: str = BASE_DIR
