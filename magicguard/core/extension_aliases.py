"""
Extension -> detected types that also satisfy it.

Entries are one-directional: ``docx`` accepts a plain ``zip`` but a
``.zip`` file holding a Word document does not validate.
"""
from types import MappingProxyType
from typing import Mapping

_TEXT_EXTENSIONS = (
    "csv", "tsv", "log", "json", "psql", "sql", "rtf", "xml", "md", "sh",
    "html", "css", "yml", "yaml", "patch", "diff", "tex", "ps", "php", "js", "ts",
)

_ALIASES: dict[str, tuple[str, ...]] = {
    # Text-based formats (no unique signature)
    **{ext: ("txt",) for ext in _TEXT_EXTENSIONS},
    # Image formats
    "jpg": ("jpeg",),
    "jpeg": ("jpg",),
    "jfif": ("jpg",),
    "tiff": ("tif",),
    "tif": ("tiff",),
    # Microsoft Office binary formats share the OLE compound header
    "xls": ("doc",),
    "ppt": ("doc",),
    "wps": ("doc",),
    "dot": ("doc",),
    "dotx": ("docx",),
    "pps": ("doc",),
    "ppsx": ("pptx",),
    "xlt": ("doc",),  # legacy Excel template
    "xlsm": ("xlsx",),  # macro-enabled workbook
    "xltx": ("xlsx",),
    "xltm": ("xlsx",),
    # Apple & OpenDocument formats (read as zip or plain text)
    "numbers": ("zip", "txt"),
    "pages": ("zip", "txt"),
    "key": ("zip", "txt"),
    "odt": ("zip",),
    "ods": ("zip",),
    "odp": ("zip",),
    # HEIC and related image types
    "heif": ("heic",),
    "heic": ("heif",),
    # ZIP-wrapped formats
    "apk": ("zip",),
    "jar": ("zip",),
    "docx": ("zip",),
    "xlsx": ("zip",),
    "pptx": ("zip",),
    "epub": ("zip",),
    # Audio formats in an ISO-BMFF container
    "m4a": ("mp4",),
    "aac": ("mp4",),
    # Video formats
    "m4v": ("mp4",),
    "mov": ("mp4",),
    "3g2": ("3gp",),
    # Other formats
    "db": ("sqlite",),
    "azw": ("mobi",),
    "azw3": ("mobi",),
    "ai": ("ps", "pdf"),
}

EXTENSION_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(_ALIASES)


def is_accepted(extension: str, actual_type: str) -> bool:
    """True when ``actual_type`` is the extension itself or one of its aliases."""
    return actual_type == extension or actual_type in EXTENSION_ALIASES.get(extension, ())
