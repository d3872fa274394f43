"""HTTP upload sink.

Publishes each chunklist rendition with a single ``POST`` to an ingest
server: ``<scheme>://<host>/<chunklist file name>``. The body is streamed
(chunked transfer encoding, no Content-Length) over HTTP/1.1. There is no
retry; a failed upload is logged and, unless disabled, raised as SinkError.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterator
from urllib.parse import quote

import httpx

from hlschunklist.constants import DEFAULT_HTTP_TIMEOUT_S, M3U8_CONTENT_TYPE, M3U8_EXTENSION
from hlschunklist.core.errors import SinkError

logger = logging.getLogger(__name__)


def upload_url(scheme: str, host: str, file_name: str) -> str:
    """Return the POST target for `file_name`, with its path percent-encoded."""
    return f"{scheme}://{host}{quote('/' + file_name.lstrip('/'))}"


def upload_headers(file_name: str) -> dict[str, str]:
    """Content-Type is only set for .m3u8 names (case-insensitive)."""
    if posixpath.splitext(file_name)[1].lower() == M3U8_EXTENSION:
        return {"Content-Type": M3U8_CONTENT_TYPE}
    return {}


def _stream(data: bytes) -> Iterator[bytes]:
    yield data


class HttpSink:
    """Synchronous httpx-based uploader.

    Parameters
    ----------
    file_name : str
        Chunklist name, used as the request path. Empty disables uploads.
    host : str
        Ingest host (``host[:port]``).
    scheme : str
        ``http`` or ``https``.
    client : httpx.Client | None
        Shared client; when omitted the sink owns one and closes it in `close`.
    timeout_s : float
        Per-operation timeout for an owned client.
    propagate_errors : bool
        When False, upload failures are only logged.
    """

    def __init__(
        self,
        file_name: str,
        *,
        host: str,
        scheme: str = "http",
        client: httpx.Client | None = None,
        timeout_s: float = DEFAULT_HTTP_TIMEOUT_S,
        propagate_errors: bool = True,
    ) -> None:
        self.file_name = file_name
        self.host = host
        self.scheme = scheme
        self.propagate_errors = propagate_errors
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=httpx.Timeout(connect=timeout_s, read=timeout_s, write=timeout_s, pool=timeout_s),
            http1=True,
            http2=False,
        )

    @property
    def url(self) -> str:
        return upload_url(self.scheme, self.host, self.file_name)

    def save(self, data: bytes) -> None:
        if not self.file_name:
            return
        try:
            r = self.client.post(self.url, content=_stream(data), headers=upload_headers(self.file_name))
            r.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Error uploading %s. Error: %s", self.file_name, e)
            if self.propagate_errors:
                raise SinkError(f"failed to upload {self.url}: {e}", target=self.url) from e
            return
        logger.debug("Upload of %s complete", self.file_name)

    def close(self) -> None:
        """Close the underlying HTTP client if this sink created it."""
        if self._owns_client:
            self.client.close()
