from dataclasses import dataclass
from enum import IntEnum


class DocumentKind(IntEnum):
    """Document kind as the OCR endpoint encodes it in ``fileType``."""

    PDF = 0
    IMAGE = 1


@dataclass(frozen=True)
class ResolvedDocument:
    """A document ready to be sent to the OCR endpoint."""

    payload: str  # base64 text
    kind: DocumentKind
    cache_key: str | None = None
