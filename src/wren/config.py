"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, static_dir="assets")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 1
    log_level: str = "info"

    # Static files
    static_dir: str | Path | None = "public"  # None disables static serving
    index_file: str = "index.html"

    # Liveness probe, answered before any parsing or routing
    health_path: str = "/_health"
    health_body: str = "I'm feeling fine!"

    # Limits
    max_body_size: int = 100_000  # bytes
    request_timeout: float | None = None  # seconds, body read + handler
