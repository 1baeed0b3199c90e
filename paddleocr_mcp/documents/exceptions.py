from paddleocr_mcp.exceptions import PaddleOcrMcpError


class DocumentError(PaddleOcrMcpError):
    """Base exception for document resolution errors."""


class InvalidPathError(DocumentError):
    """Raised when a local path is empty, malformed, or not a string."""


class DocumentNotFoundError(DocumentError):
    """Raised when a local path does not point to a readable file."""


class UnsupportedTypeError(DocumentError):
    """Raised when a file signature is known but is neither PDF nor image."""


class UnrecognizedTypeError(DocumentError):
    """Raised when no file signature can be determined."""


class UnknownContentTypeError(DocumentError):
    """Raised when a download declares a content type that is neither PDF nor image."""


class DownloadError(DocumentError):
    """Raised when the remote server answers a download with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Failed to download file: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class NetworkError(DocumentError):
    """Raised when a download fails at the transport level."""
