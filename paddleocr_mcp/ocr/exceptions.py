from paddleocr_mcp.exceptions import PaddleOcrMcpError


class OcrError(PaddleOcrMcpError):
    """Raised when the OCR call fails."""


class ConfigurationError(OcrError):
    """Raised when the OCR endpoint URL or access token is missing."""


class UpstreamError(OcrError):
    """Raised when the OCR endpoint answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Paddle OCR API error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class OcrNetworkError(OcrError):
    """Raised when the OCR call fails due to network/infrastructure issues."""


class MalformedResponseError(OcrError):
    """Raised when the OCR response lacks the expected result envelope."""
