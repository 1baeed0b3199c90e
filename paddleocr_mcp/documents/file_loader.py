import base64
import os
from pathlib import Path

import aiofiles
import aiofiles.os

from paddleocr_mcp.documents.exceptions import (
    DocumentNotFoundError,
    InvalidPathError,
    UnrecognizedTypeError,
    UnsupportedTypeError,
)
from paddleocr_mcp.documents.models import DocumentKind, ResolvedDocument
from paddleocr_mcp.documents.signatures import SNIFF_LENGTH, is_image, is_pdf, sniff_mime
from paddleocr_mcp.logging.logger import Log


def normalize_path(raw_path: object) -> str:
    """Validate a user-supplied path and return it in normalized form.

    Raises:
        InvalidPathError: if the path is not a string, is empty, contains a
            null byte, or normalizes to the current directory.
    """
    if not isinstance(raw_path, str):
        raise InvalidPathError("Path must be a string")
    trimmed = raw_path.strip()
    if trimmed == "":
        raise InvalidPathError("Path cannot be empty")
    if "\0" in trimmed:
        raise InvalidPathError("Path contains null byte")

    # Unify separators before normpath so mixed Windows/Unix input collapses.
    cleaned = trimmed.replace("\\", "/")
    normalized = os.path.normpath(cleaned)
    if normalized in (".", ""):
        raise InvalidPathError("Invalid path")
    return normalized


class FileLoader:
    """Resolves a local file path into a document for the OCR endpoint."""

    async def resolve(self, raw_path: object) -> ResolvedDocument:
        """Validate the path, sniff the file signature, and read its bytes.

        Raises:
            InvalidPathError: if the path fails validation.
            DocumentNotFoundError: if no file exists at the path.
            UnrecognizedTypeError: if the signature cannot be determined.
            UnsupportedTypeError: if the file is neither PDF nor image.
        """
        path = Path(normalize_path(raw_path))
        if not await aiofiles.os.path.isfile(path):
            raise DocumentNotFoundError(f"File not found: {path}")

        kind = await self._detect_kind(path)
        async with aiofiles.open(path, "rb") as f:
            data = await f.read()
        Log.info(f"Loaded {len(data)} bytes from {path} ({kind.name})")
        return ResolvedDocument(
            payload=base64.b64encode(data).decode("ascii"),
            kind=kind,
        )

    @staticmethod
    async def _detect_kind(path: Path) -> DocumentKind:
        async with aiofiles.open(path, "rb") as f:
            head = await f.read(SNIFF_LENGTH)
        mime_type = sniff_mime(head)
        if mime_type is None:
            raise UnrecognizedTypeError(f"Unable to recognize file type: {path}")
        if is_pdf(mime_type):
            return DocumentKind.PDF
        if is_image(mime_type):
            return DocumentKind.IMAGE
        Log.warning(f"Rejected {path}: unsupported type {mime_type}")
        raise UnsupportedTypeError(f"Unsupported file type: {mime_type}")
