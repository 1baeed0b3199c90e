import httpx

from paddleocr_mcp.documents.models import ResolvedDocument
from paddleocr_mcp.logging.logger import Log
from paddleocr_mcp.ocr.base import BaseOcrClient
from paddleocr_mcp.ocr.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    OcrNetworkError,
    UpstreamError,
)
from paddleocr_mcp.ocr.models import ApiCredentials, LayoutFragment, OcrRequestOptions
from paddleocr_mcp.ocr.validator import validate_and_build


class PaddleOcrClientAdapter(BaseOcrClient):
    """OCR client for the PaddleOCR layout-parsing HTTP API."""

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        options: OcrRequestOptions | None = None,
    ) -> None:
        self._client = client
        self._options = options if options is not None else OcrRequestOptions()

    async def invoke(
        self,
        document: ResolvedDocument,
        credentials: ApiCredentials,
    ) -> list[LayoutFragment]:
        if not credentials.api_url:
            raise ConfigurationError("OCR API URL is not configured")
        if not credentials.token:
            raise ConfigurationError("OCR access token is not configured")

        payload = self._options.to_payload(document)
        Log.debug(
            f"Calling OCR endpoint {credentials.api_url} "
            f"(fileType={payload['fileType']}, {len(document.payload)} base64 chars)"
        )
        try:
            response = await self._client.post(
                credentials.api_url,
                json=payload,
                headers={
                    "Authorization": f"token {credentials.token}",
                    "Content-Type": "application/json",
                },
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise OcrNetworkError(f"OCR API network error: {exc}") from exc

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc

        fragments = validate_and_build(data)
        Log.info(f"OCR complete: {len(fragments)} layout fragments")
        return fragments
