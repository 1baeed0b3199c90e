"""File type detection from magic bytes."""

PDF_SIGNATURE = b"%PDF"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"
GIF_SIGNATURES = (b"GIF87a", b"GIF89a")
BMP_SIGNATURE = b"BM"
TIFF_SIGNATURES = (b"II*\x00", b"MM\x00*")
ICO_SIGNATURE = b"\x00\x00\x01\x00"
RIFF_SIGNATURE = b"RIFF"
JP2_SIGNATURE = b"\x00\x00\x00\x0cjP  \r\n\x87\n"
JXL_CONTAINER_SIGNATURE = b"\x00\x00\x00\x0cJXL \r\n\x87\n"
JXL_CODESTREAM_SIGNATURE = b"\xff\x0a"
FTYP_BOX = b"ftyp"

ZIP_SIGNATURE = b"PK\x03\x04"
OLE_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"  # Legacy Office container
GZIP_SIGNATURE = b"\x1f\x8b"
RAR_SIGNATURE = b"Rar!\x1a\x07"
SEVEN_ZIP_SIGNATURE = b"7z\xbc\xaf\x27\x1c"
MP3_ID3_SIGNATURE = b"ID3"
OGG_SIGNATURE = b"OggS"

# Enough to cover the longest signature plus the RIFF form type at offset 8.
SNIFF_LENGTH = 16

_PREFIX_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (PDF_SIGNATURE, "application/pdf"),
    (PNG_SIGNATURE, "image/png"),
    (JPEG_SIGNATURE, "image/jpeg"),
    (GIF_SIGNATURES[0], "image/gif"),
    (GIF_SIGNATURES[1], "image/gif"),
    (TIFF_SIGNATURES[0], "image/tiff"),
    (TIFF_SIGNATURES[1], "image/tiff"),
    (ICO_SIGNATURE, "image/x-icon"),
    (JP2_SIGNATURE, "image/jp2"),
    (JXL_CONTAINER_SIGNATURE, "image/jxl"),
    (JXL_CODESTREAM_SIGNATURE, "image/jxl"),
    (ZIP_SIGNATURE, "application/zip"),
    (OLE_SIGNATURE, "application/x-ole-storage"),
    (GZIP_SIGNATURE, "application/gzip"),
    (RAR_SIGNATURE, "application/vnd.rar"),
    (SEVEN_ZIP_SIGNATURE, "application/x-7z-compressed"),
    (MP3_ID3_SIGNATURE, "audio/mpeg"),
    (OGG_SIGNATURE, "audio/ogg"),
)

# ISO base media files carry their major brand at offset 8, after the ftyp box.
_FTYP_BRANDS: dict[bytes, str] = {
    b"heic": "image/heic",
    b"heix": "image/heic",
    b"hevc": "image/heic-sequence",
    b"hevx": "image/heic-sequence",
    b"mif1": "image/heic",
    b"msf1": "image/heif-sequence",
    b"avif": "image/avif",
    b"avis": "image/avif",
    b"qt  ": "video/quicktime",
}


def sniff_mime(head: bytes) -> str | None:
    """Detect MIME type from the leading bytes of a file.

    Returns None when no known signature matches.
    """
    if head[4:8] == FTYP_BOX and len(head) >= 12:
        return _FTYP_BRANDS.get(head[8:12], "video/mp4")
    for signature, mime_type in _PREFIX_SIGNATURES:
        if head.startswith(signature):
            return mime_type
    if head.startswith(RIFF_SIGNATURE) and len(head) >= 12:
        form_type = head[8:12]
        if form_type == b"WEBP":
            return "image/webp"
        if form_type == b"WAVE":
            return "audio/wav"
        if form_type == b"AVI ":
            return "video/x-msvideo"
        return None
    # BMP last: a two-byte signature is the weakest match
    if head.startswith(BMP_SIGNATURE) and len(head) >= 14:
        return "image/bmp"
    return None


def is_pdf(mime_type: str) -> bool:
    return mime_type == "application/pdf"


def is_image(mime_type: str) -> bool:
    return mime_type.startswith("image/")
