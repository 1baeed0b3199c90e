"""Validates the raw OCR response envelope and builds layout fragments."""

from typing import Any

from paddleocr_mcp.ocr.exceptions import MalformedResponseError
from paddleocr_mcp.ocr.models import LayoutFragment


def validate_and_build(data: Any) -> list[LayoutFragment]:
    """Extract ``result.layoutParsingResults`` as a list of fragments.

    Raises:
        MalformedResponseError: if the envelope or any fragment has the wrong shape.
    """
    if not isinstance(data, dict):
        raise MalformedResponseError("OCR response must be a JSON object")
    result = data.get("result")
    if not isinstance(result, dict):
        raise MalformedResponseError("OCR response is missing 'result'")
    raw_fragments = result.get("layoutParsingResults")
    if not isinstance(raw_fragments, list):
        raise MalformedResponseError(
            "OCR response is missing 'result.layoutParsingResults'"
        )
    return [_build_fragment(item, i) for i, item in enumerate(raw_fragments)]


def _build_fragment(raw: Any, index: int) -> LayoutFragment:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"Layout result at index {index} must be an object")
    markdown = raw.get("markdown")
    if not isinstance(markdown, dict):
        raise MalformedResponseError(
            f"Layout result at index {index}: 'markdown' must be an object"
        )
    text = markdown.get("text")
    if not isinstance(text, str):
        raise MalformedResponseError(
            f"Layout result at index {index}: 'markdown.text' must be a string"
        )
    images = _build_images(markdown.get("images"), index)
    return LayoutFragment(text=text, images=images)


def _build_images(raw: Any, index: int) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise MalformedResponseError(
            f"Layout result at index {index}: 'markdown.images' must be an object"
        )
    images: dict[str, str] = {}
    for key, url in raw.items():
        if not isinstance(url, str):
            raise MalformedResponseError(
                f"Layout result at index {index}: image {key!r} must map to a string"
            )
        images[str(key)] = url
    return images
