import io
import zipfile

import pytest


def _zip_bytes(entries: list[tuple[str, str]]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_STORED) as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return buf.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01"


@pytest.fixture
def jpeg_bytes() -> bytes:
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00"


@pytest.fixture
def docx_bytes() -> bytes:
    return _zip_bytes([
        ("[Content_Types].xml", "<Types/>"),
        ("_rels/.rels", "<Relationships/>"),
        ("word/document.xml", "<w:document/>"),
    ])


@pytest.fixture
def xlsx_bytes() -> bytes:
    return _zip_bytes([
        ("[Content_Types].xml", "<Types/>"),
        ("xl/workbook.xml", "<workbook/>"),
    ])


@pytest.fixture
def pptx_bytes() -> bytes:
    return _zip_bytes([
        ("[Content_Types].xml", "<Types/>"),
        ("ppt/presentation.xml", "<p:presentation/>"),
    ])


@pytest.fixture
def plain_zip_bytes() -> bytes:
    return _zip_bytes([("notes.txt", "hello"), ("data/values.csv", "a,b\n1,2\n")])


@pytest.fixture
def epub_bytes() -> bytes:
    # mimetype must be the first, uncompressed entry
    return _zip_bytes([
        ("mimetype", "application/epub+zip"),
        ("META-INF/container.xml", "<container/>"),
    ])
