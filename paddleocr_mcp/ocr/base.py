from abc import ABC, abstractmethod

from paddleocr_mcp.documents.models import ResolvedDocument
from paddleocr_mcp.ocr.models import ApiCredentials, LayoutFragment


class BaseOcrClient(ABC):
    """Contract for layout-parsing OCR clients."""

    @abstractmethod
    async def invoke(
        self,
        document: ResolvedDocument,
        credentials: ApiCredentials,
    ) -> list[LayoutFragment]:
        """Send a resolved document to the OCR endpoint.

        Args:
            document: Base64 payload plus its document kind.
            credentials: Endpoint URL and access token for this call.

        Returns:
            Layout fragments in page/region order.

        Raises:
            OcrError: on any failure.
        """
