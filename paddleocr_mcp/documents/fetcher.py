import base64
import re

import httpx

from paddleocr_mcp.documents.download_cache import DownloadCache
from paddleocr_mcp.documents.exceptions import (
    DownloadError,
    NetworkError,
    UnknownContentTypeError,
)
from paddleocr_mcp.documents.models import DocumentKind, ResolvedDocument
from paddleocr_mcp.logging.logger import Log

_EXTENSION_RE = re.compile(r"[a-z0-9][a-z0-9.-]*")


def classify_content_type(content_type: str) -> tuple[DocumentKind, str]:
    """Map a Content-Type header to a document kind and cache file extension.

    A structured-syntax suffix is dropped (``image/svg+xml`` -> ``svg``).

    Raises:
        UnknownContentTypeError: if the type is neither PDF nor an image, or
            the image subtype cannot be used as a file extension.
    """
    mime_type = content_type.split(";", 1)[0].strip().lower()
    if "pdf" in mime_type:
        return DocumentKind.PDF, "pdf"
    if mime_type.startswith("image/"):
        extension = mime_type.split("/", 1)[1].split("+", 1)[0]
        if extension == "jpeg":
            extension = "jpg"
        if not _EXTENSION_RE.fullmatch(extension):
            raise UnknownContentTypeError(f"Unsupported content type: {content_type!r}")
        return DocumentKind.IMAGE, extension
    raise UnknownContentTypeError(
        f"Unsupported content type: {content_type or '<missing>'!r}"
    )


def kind_from_extension(extension: str) -> DocumentKind:
    return DocumentKind.PDF if extension == ".pdf" else DocumentKind.IMAGE


class ContentFetcher:
    """Downloads remote documents through the content-addressed cache."""

    def __init__(self, client: httpx.AsyncClient, cache: DownloadCache) -> None:
        self._client = client
        self._cache = cache

    async def fetch(self, url: str) -> ResolvedDocument:
        """Return the document at ``url``, downloading it only on a cache miss.

        Raises:
            DownloadError: on a non-success response status.
            NetworkError: on transport-level failures.
            UnknownContentTypeError: if the response is neither PDF nor image.
        """
        cached = await self._cache.lookup(url)
        if cached is not None:
            Log.info(f"Serving {url} from cache ({cached.file_name})")
            return ResolvedDocument(
                payload=base64.b64encode(cached.data).decode("ascii"),
                kind=kind_from_extension(cached.extension),
                cache_key=cached.file_name,
            )

        data, content_type = await self._download(url)
        kind, extension = classify_content_type(content_type)
        file_name = await self._cache.store(url, extension, data)
        Log.info(f"Downloaded {len(data)} bytes from {url} ({kind.name})")
        return ResolvedDocument(
            payload=base64.b64encode(data).decode("ascii"),
            kind=kind,
            cache_key=file_name,
        )

    async def _download(self, url: str) -> tuple[bytes, str]:
        try:
            response = await self._client.get(url, follow_redirects=True)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise NetworkError(f"Download network error for {url}: {exc}") from exc
        if not response.is_success:
            raise DownloadError(response.status_code, response.text)
        return response.content, response.headers.get("content-type", "")
