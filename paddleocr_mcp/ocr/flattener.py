import re
from collections.abc import Iterable, Mapping

from paddleocr_mcp.ocr.models import LayoutFragment, TextBlock


def replace_images_in_text(text: str, images: Mapping[str, str]) -> str:
    """Replace every literal occurrence of each placeholder key with its URL."""
    result = text
    for key, url in images.items():
        if not key:
            continue
        # A callable replacement keeps backslashes in the URL literal.
        result = re.sub(re.escape(key), lambda _match, url=url: url, result)
    return result


def flatten(fragments: Iterable[LayoutFragment]) -> list[TextBlock]:
    """Emit one text block per fragment, in input order."""
    return [
        TextBlock(text=replace_images_in_text(fragment.text, fragment.images))
        for fragment in fragments
    ]
