from collections.abc import Awaitable
from pathlib import Path

import httpx

from paddleocr_mcp.config.settings import Settings
from paddleocr_mcp.documents.download_cache import DownloadCache
from paddleocr_mcp.documents.fetcher import ContentFetcher
from paddleocr_mcp.documents.file_loader import FileLoader
from paddleocr_mcp.documents.models import ResolvedDocument
from paddleocr_mcp.exceptions import PaddleOcrMcpError
from paddleocr_mcp.logging.logger import Log
from paddleocr_mcp.ocr.base import BaseOcrClient
from paddleocr_mcp.ocr.flattener import flatten
from paddleocr_mcp.ocr.models import ApiCredentials
from paddleocr_mcp.ocr.paddle_client_adapter import PaddleOcrClientAdapter
from paddleocr_mcp.processor.models import ToolResult


class Processor:
    """Runs one OCR tool call end to end.

    Pipeline: resolve (download or local file) -> OCR -> flatten.
    Every failure becomes an error-flagged ToolResult; nothing propagates
    to the protocol layer.
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        file_loader: FileLoader,
        ocr_client: BaseOcrClient,
    ) -> None:
        self._fetcher = fetcher
        self._file_loader = file_loader
        self._ocr_client = ocr_client

    async def process_url(self, file_url: str, credentials: ApiCredentials) -> ToolResult:
        """OCR a remote document by URL."""
        Log.info(f"Processing remote document {file_url}")
        return await self._run(self._fetcher.fetch(file_url), credentials)

    async def process_path(self, path: object, credentials: ApiCredentials) -> ToolResult:
        """OCR a local document by filesystem path."""
        Log.info(f"Processing local document {path!r}")
        return await self._run(self._file_loader.resolve(path), credentials)

    async def _run(
        self,
        resolving: Awaitable[ResolvedDocument],
        credentials: ApiCredentials,
    ) -> ToolResult:
        try:
            document = await resolving
            fragments = await self._ocr_client.invoke(document, credentials)
        except PaddleOcrMcpError as exc:
            Log.error(f"OCR tool call failed: {exc}")
            return ToolResult.error(str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected OCR tool failure: {exc}")
            return ToolResult.error(f"Unexpected error: {exc}")

        blocks = flatten(fragments)
        Log.info(f"Returning {len(blocks)} text blocks")
        return ToolResult(blocks=blocks)


def build_processor(
    settings: Settings,
    client: httpx.AsyncClient,
    cache_dir: Path | None = None,
) -> Processor:
    """Build a Processor with all required adapters sharing one HTTP client."""
    if cache_dir is None and settings.download_cache_dir:
        cache_dir = Path(settings.download_cache_dir)
    return Processor(
        fetcher=ContentFetcher(client, DownloadCache(cache_dir)),
        file_loader=FileLoader(),
        ocr_client=PaddleOcrClientAdapter(client=client),
    )


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.request_timeout_seconds)
