"""ZIP container refinement for Office Open XML documents."""

CONTENT_TYPES_MARKER = b"[Content_Types].xml"

# Checked in order; the first interior part found decides the document type
OFFICE_MARKERS: list[tuple[bytes, str]] = [
    (b"word/document.xml", "docx"),
    (b"xl/workbook.xml", "xlsx"),
    (b"ppt/presentation.xml", "pptx"),
]

ZIP_CONTAINER_TYPES: tuple[str, ...] = tuple(tag for _, tag in OFFICE_MARKERS) + ("zip",)


def check_zip_based_format(buffer: bytes) -> str:
    """
    Tell an Office Open XML document apart from a plain ZIP archive by
    looking for the part names stored in its local and central headers.
    """
    if CONTENT_TYPES_MARKER in buffer:
        for marker, tag in OFFICE_MARKERS:
            if marker in buffer:
                return tag
    return "zip"
