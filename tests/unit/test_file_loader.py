import base64
from pathlib import Path
from unittest.mock import patch

import pytest

from paddleocr_mcp.documents.exceptions import (
    DocumentNotFoundError,
    InvalidPathError,
    UnrecognizedTypeError,
    UnsupportedTypeError,
)
from paddleocr_mcp.documents.file_loader import FileLoader, normalize_path
from paddleocr_mcp.documents.models import DocumentKind


class TestNormalizePath:
    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidPathError, match="must be a string"):
            normalize_path(42)

    def test_rejects_empty(self) -> None:
        with pytest.raises(InvalidPathError, match="cannot be empty"):
            normalize_path("   ")

    def test_rejects_null_byte(self) -> None:
        with pytest.raises(InvalidPathError, match="null byte"):
            normalize_path("/tmp/file.pdf\0.png")

    def test_rejects_current_directory(self) -> None:
        with pytest.raises(InvalidPathError, match="Invalid path"):
            normalize_path("./a/..")

    def test_unifies_mixed_separators(self) -> None:
        assert normalize_path("docs\\scans/./page.png") == "docs/scans/page.png"

    def test_trims_whitespace(self) -> None:
        assert normalize_path("  /data/file.pdf \n") == "/data/file.pdf"


class TestResolve:
    @pytest.mark.asyncio
    async def test_resolves_pdf(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        path = tmp_path / "report.pdf"
        path.write_bytes(sample_pdf_bytes)

        doc = await FileLoader().resolve(str(path))

        assert doc.kind is DocumentKind.PDF
        assert base64.b64decode(doc.payload) == sample_pdf_bytes
        assert doc.cache_key is None

    @pytest.mark.asyncio
    async def test_signature_wins_over_extension(
        self, tmp_path: Path, sample_jpeg_bytes: bytes
    ) -> None:
        path = tmp_path / "notes.txt"
        path.write_bytes(sample_jpeg_bytes)

        doc = await FileLoader().resolve(str(path))

        assert doc.kind is DocumentKind.IMAGE

    @pytest.mark.asyncio
    async def test_pdf_named_as_image_is_pdf(
        self, tmp_path: Path, sample_pdf_bytes: bytes
    ) -> None:
        path = tmp_path / "scan.png"
        path.write_bytes(sample_pdf_bytes)

        doc = await FileLoader().resolve(str(path))

        assert doc.kind is DocumentKind.PDF

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("name", "head"),
        [
            ("photo.heic", b"\x00\x00\x00\x18ftypheic\x00\x00\x00\x00mif1heic"),
            ("photo.avif", b"\x00\x00\x00\x1cftypavif\x00\x00\x00\x00avifmif1"),
            ("scan.jp2", b"\x00\x00\x00\x0cjP  \r\n\x87\n\x00\x00\x00\x14"),
            ("scan.jxl", b"\xff\x0a\xfa\x7f\x01\x90\x08"),
        ],
    )
    async def test_resolves_modern_image_formats(
        self, tmp_path: Path, name: str, head: bytes
    ) -> None:
        path = tmp_path / name
        path.write_bytes(head + b"\x00" * 64)

        doc = await FileLoader().resolve(str(path))

        assert doc.kind is DocumentKind.IMAGE

    @pytest.mark.asyncio
    async def test_raises_unsupported_for_mp4(self, tmp_path: Path) -> None:
        path = tmp_path / "clip.png"
        path.write_bytes(b"\x00\x00\x00\x20ftypisom\x00\x00\x02\x00" + b"\x00" * 32)

        with pytest.raises(UnsupportedTypeError, match="video/mp4"):
            await FileLoader().resolve(str(path))

    @pytest.mark.asyncio
    async def test_raises_unsupported_for_zip(self, tmp_path: Path) -> None:
        path = tmp_path / "archive.pdf"
        path.write_bytes(b"PK\x03\x04" + b"\x00" * 32)

        with pytest.raises(UnsupportedTypeError, match="application/zip"):
            await FileLoader().resolve(str(path))

    @pytest.mark.asyncio
    async def test_raises_unrecognized_for_text(self, tmp_path: Path) -> None:
        path = tmp_path / "page.png"
        path.write_text("just some text", encoding="utf-8")

        with pytest.raises(UnrecognizedTypeError):
            await FileLoader().resolve(str(path))

    @pytest.mark.asyncio
    async def test_raises_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentNotFoundError, match="missing.pdf"):
            await FileLoader().resolve(str(tmp_path / "missing.pdf"))

    @pytest.mark.asyncio
    async def test_null_byte_rejected_before_filesystem_access(self) -> None:
        with (
            patch("paddleocr_mcp.documents.file_loader.aiofiles.open") as mock_open,
            patch("paddleocr_mcp.documents.file_loader.aiofiles.os.path.isfile") as mock_isfile,
        ):
            with pytest.raises(InvalidPathError, match="null byte"):
                await FileLoader().resolve("/etc/passwd\0.png")

        mock_open.assert_not_called()
        mock_isfile.assert_not_called()

    @pytest.mark.asyncio
    async def test_accepts_backslash_relative_path(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        sample_png_bytes: bytes,
    ) -> None:
        (tmp_path / "scans").mkdir()
        (tmp_path / "scans" / "page.png").write_bytes(sample_png_bytes)
        monkeypatch.chdir(tmp_path)

        doc = await FileLoader().resolve("scans\\page.png")

        assert doc.kind is DocumentKind.IMAGE
