"""Static file serving.

Every request is first looked up under a fixed directory; when a regular
file exists at the mapped path it is served as-is and routing is skipped.

Security: the mapped path is resolved (symlinks and ``..`` included) and
must stay inside the configured directory, otherwise it counts as a miss.
"""

import logging
import re
from pathlib import Path
from urllib.parse import unquote

import anyio

from wren.errors import DEFAULT_ERROR_MESSAGE
from wren.http.response import Response

logger = logging.getLogger("wren.server")

MIME_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".png": "image/png",
    ".jpg": "image/jpg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

_LEADING = re.compile(r"^[./\\]+")


def content_type_for(path: str | Path) -> str:
    """Content type from the file extension; unknown -> octet-stream."""
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


class StaticFiles:
    """Serves files from one directory.

    Usage::

        static = StaticFiles("./public")
        file_path = await static.lookup(request.url)
        if file_path is not None:
            response = await static.serve(file_path)

    A request path ending in ``/`` maps to the index file of that
    directory (``/`` -> ``index.html``, ``/docs/`` -> ``docs/index.html``).
    """

    __slots__ = ("_directory", "_index")

    def __init__(self, directory: str | Path, *, index: str = "index.html") -> None:
        self._directory = Path(directory).resolve()
        self._index = index

    @property
    def directory(self) -> Path:
        return self._directory

    async def lookup(self, path: str) -> Path | None:
        """Map a request path to a file under the root, or ``None`` on a miss.

        *path* is the raw request path; percent-escapes are decoded here.
        Resolving and the file check run off the event loop.
        """
        relative = _LEADING.sub("", unquote(path))
        if not relative or relative.endswith("/"):
            relative += self._index

        try:
            candidate = Path(await anyio.Path(self._directory / relative).resolve())
        except (OSError, ValueError):
            return None
        if not candidate.is_relative_to(self._directory):
            logger.warning("Static path escapes root: %r", path)
            return None
        if not await anyio.Path(candidate).is_file():
            return None
        return candidate

    async def serve(self, file_path: Path) -> Response:
        """Read a file and build a response.

        The file may vanish between lookup and read; that answers 404
        ``File not found``. Any other read failure answers a bare 500.
        """
        try:
            content = await anyio.Path(file_path).read_bytes()
        except FileNotFoundError:
            return Response(body="File not found", status=404, content_type="text/plain")
        except OSError:
            logger.exception("Failed to read static file %s", file_path)
            return Response(body=DEFAULT_ERROR_MESSAGE, status=500)

        return Response(body=content, content_type=content_type_for(file_path))

    async def __call__(self, path: str) -> Response | None:
        """Serve *path* if it maps to a file, else ``None``."""
        file_path = await self.lookup(path)
        if file_path is None:
            return None
        return await self.serve(file_path)
