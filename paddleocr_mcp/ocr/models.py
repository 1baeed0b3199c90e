from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paddleocr_mcp.documents.models import ResolvedDocument


DEFAULT_MARKDOWN_IGNORE_LABELS: tuple[str, ...] = (
    "header",
    "header_image",
    "footer",
    "footer_image",
    "number",
    "footnote",
    "aside_text",
)


@dataclass(frozen=True)
class ApiCredentials:
    """OCR endpoint URL and access token."""

    api_url: str = ""
    token: str = ""

    def merged_with(self, fallback: "ApiCredentials") -> "ApiCredentials":
        """Fill empty fields from ``fallback``."""
        return ApiCredentials(
            api_url=self.api_url or fallback.api_url,
            token=self.token or fallback.token,
        )


@dataclass(frozen=True)
class OcrRequestOptions:
    """Fixed layout-parsing parameters sent with every OCR request.

    Defaults favour plain layout OCR: layout detection on, orientation
    classification, unwarping and chart recognition off, deterministic
    sampling (temperature 0, top-p 1, no repetition penalty).
    """

    markdown_ignore_labels: tuple[str, ...] = DEFAULT_MARKDOWN_IGNORE_LABELS
    """Structural labels pruned from the returned markdown."""

    use_doc_orientation_classify: bool = False
    use_doc_unwarping: bool = False
    use_layout_detection: bool = True
    use_chart_recognition: bool = False
    prompt_label: str = "ocr"

    repetition_penalty: float = 1
    temperature: float = 0
    top_p: float = 1

    min_pixels: int = 147384
    """Lower bound on image area after resizing."""

    max_pixels: int = 2822400
    """Upper bound on image area after resizing."""

    layout_nms: bool = True

    def to_payload(self, document: "ResolvedDocument") -> dict[str, object]:
        """Build the JSON request body for ``document``."""
        return {
            "file": document.payload,
            "fileType": int(document.kind),
            "markdownIgnoreLabels": list(self.markdown_ignore_labels),
            "useDocOrientationClassify": self.use_doc_orientation_classify,
            "useDocUnwarping": self.use_doc_unwarping,
            "useLayoutDetection": self.use_layout_detection,
            "useChartRecognition": self.use_chart_recognition,
            "promptLabel": self.prompt_label,
            "repetitionPenalty": self.repetition_penalty,
            "temperature": self.temperature,
            "topP": self.top_p,
            "minPixels": self.min_pixels,
            "maxPixels": self.max_pixels,
            "layoutNms": self.layout_nms,
        }


@dataclass(frozen=True)
class LayoutFragment:
    """One markdown fragment of a layout-parsing result (a page or region)."""

    text: str
    images: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TextBlock:
    """A text content block returned to the tool caller."""

    text: str
    type: str = "text"
