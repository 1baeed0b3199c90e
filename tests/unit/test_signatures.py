import pytest

from paddleocr_mcp.documents.signatures import is_image, is_pdf, sniff_mime


class TestSniffMime:
    @pytest.mark.parametrize(
        ("head", "expected"),
        [
            (b"%PDF-1.7\n", "application/pdf"),
            (b"\x89PNG\r\n\x1a\n\x00\x00", "image/png"),
            (b"\xff\xd8\xff\xe0\x00\x10JFIF", "image/jpeg"),
            (b"\xff\xd8\xff\xee\x00\x0e", "image/jpeg"),
            (b"GIF89a\x01\x00", "image/gif"),
            (b"II*\x00\x08\x00\x00\x00", "image/tiff"),
            (b"MM\x00*\x00\x00\x00\x08", "image/tiff"),
            (b"RIFF\x24\x00\x00\x00WEBPVP8 ", "image/webp"),
            (b"BM\x36\x00\x0c\x00\x00\x00\x00\x00\x36\x00\x00\x00", "image/bmp"),
            (b"PK\x03\x04\x14\x00", "application/zip"),
            (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1", "application/x-ole-storage"),
            (b"\x1f\x8b\x08\x00", "application/gzip"),
            (b"RIFF\x24\x00\x00\x00WAVEfmt ", "audio/wav"),
            (b"\x00\x00\x00\x18ftypheic\x00\x00\x00\x00", "image/heic"),
            (b"\x00\x00\x00\x18ftypheix\x00\x00\x00\x00", "image/heic"),
            (b"\x00\x00\x00\x1cftypmif1\x00\x00\x00\x00", "image/heic"),
            (b"\x00\x00\x00\x1cftypavif\x00\x00\x00\x00", "image/avif"),
            (b"\x00\x00\x00\x0cjP  \r\n\x87\n", "image/jp2"),
            (b"\x00\x00\x00\x0cJXL \r\n\x87\n", "image/jxl"),
            (b"\xff\x0a\xfa\x7f", "image/jxl"),
            (b"\x00\x00\x00\x20ftypisom\x00\x00\x02\x00", "video/mp4"),
        ],
    )
    def test_detects_signature(self, head: bytes, expected: str) -> None:
        assert sniff_mime(head) == expected

    def test_returns_none_for_plain_text(self) -> None:
        assert sniff_mime(b"hello world, plain text") is None

    def test_returns_none_for_empty_input(self) -> None:
        assert sniff_mime(b"") is None

    def test_short_bm_prefix_is_not_bmp(self) -> None:
        assert sniff_mime(b"BMW") is None


class TestClassification:
    def test_pdf(self) -> None:
        assert is_pdf("application/pdf")
        assert not is_image("application/pdf")

    def test_image(self) -> None:
        assert is_image("image/webp")
        assert not is_pdf("image/webp")

    def test_container_is_neither(self) -> None:
        assert not is_pdf("application/zip")
        assert not is_image("application/zip")


class TestIsoMediaBrands:
    def test_ftyp_box_sized_like_icon_header_is_not_icon(self) -> None:
        assert sniff_mime(b"\x00\x00\x01\x00ftypavif\x00\x00\x00\x00") == "image/avif"

    def test_ftyp_without_brand_is_unrecognized(self) -> None:
        assert sniff_mime(b"\x00\x00\x00\x18ftyp") is None

    def test_video_brand_is_not_image(self) -> None:
        mime_type = sniff_mime(b"\x00\x00\x00\x14ftypqt  \x00\x00\x00\x00")
        assert mime_type == "video/quicktime"
        assert not is_image(mime_type)
