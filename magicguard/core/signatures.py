"""
Magic-number detection.
Maps the head of a byte buffer to a canonical lowercase format tag.

Rules are evaluated top to bottom and the first match wins, so a more
specific signature must sit above any broader one that would also match.
"""
import re
from typing import Callable, NamedTuple

# Emitted for a ZIP local file header; always refined by the container check
ZIP_BASED = "zip-based"
UNKNOWN = "unknown"

Predicate = Callable[[bytes], bool]


class SignatureRule(NamedTuple):
    tag: str
    matches: Predicate


def _hex(*signatures: str) -> Predicate:
    """Buffer starts with any of the hex-encoded prefixes."""
    prefixes = tuple(bytes.fromhex(signature) for signature in signatures)
    return lambda buffer: buffer.startswith(prefixes)


def _at(offset: int, token: bytes) -> Predicate:
    """Buffer holds ``token`` at ``offset``. Short buffers never match."""
    return lambda buffer: buffer[offset : offset + len(token)] == token


def _longer_than(size: int) -> Predicate:
    return lambda buffer: len(buffer) > size


def _contains(token: bytes) -> Predicate:
    return lambda buffer: token in buffer


def _all(*predicates: Predicate) -> Predicate:
    return lambda buffer: all(predicate(buffer) for predicate in predicates)


def _riff(kind: bytes) -> Predicate:
    return _all(_hex("52494646"), _at(8, kind))


# Whitespace padding of ISO-BMFF brands; \x1c-\x1f and \x85 are kept
_BRAND_PADDING = " \t\n\r\x0b\x0c\xa0"


def _brand(buffer: bytes) -> str:
    return buffer[8:12].decode("latin-1").strip(_BRAND_PADDING)



def _ftyp_brand(*brands: str) -> Predicate:
    """ISO-BMFF ``ftyp`` box whose major brand is one of ``brands``."""
    return lambda buffer: buffer[4:8] == b"ftyp" and _brand(buffer) in brands


def _is_3gp(buffer: bytes) -> bool:
    return buffer[4:12].lower().startswith((b"ftyp3gp", b"ftyp3g2"))


def _is_heic(buffer: bytes) -> bool:
    if b"ftyp" not in buffer[4:12]:
        return False
    return _brand(buffer).lower() in ("heic", "heix", "mif1", "msf1")


def _is_svg(buffer: bytes) -> bool:
    head = buffer[:100].decode("utf-8", errors="replace").lower()
    return "<svg" in head


_PRINTABLE = re.compile(r"[\x20-\x7E\r\n\t]+")


def _is_plain_text(buffer: bytes) -> bool:
    # Undecodable bytes become U+FFFD, which is outside the printable range
    sample = buffer[:512].decode("utf-8", errors="replace")
    return _PRINTABLE.fullmatch(sample) is not None


SIGNATURE_RULES: list[SignatureRule] = [
    # --- Image formats ---
    SignatureRule("jpg", _hex("FFD8FF")),
    SignatureRule("png", _hex("89504E47")),
    SignatureRule("gif", _hex("47494638")),
    SignatureRule("bmp", _hex("424D")),
    SignatureRule("tiff", _hex("49492A00", "4D4D002A")),
    SignatureRule("ico", _hex("00000100", "00000200")),
    SignatureRule("webp", _riff(b"WEBP")),
    # --- Document formats ---
    SignatureRule("pdf", _hex("25504446")),
    SignatureRule("doc", _hex("D0CF11E0")),  # could also be xls, ppt
    SignatureRule("wpd", _hex("FF575043")),
    # EPUB stores its mimetype entry first; must sit above the generic zip rule
    SignatureRule("epub", _all(_hex("504B0304"), _contains(b"mimetypeapplication/epub+zip"))),
    SignatureRule(ZIP_BASED, _hex("504B0304")),  # docx, xlsx, pptx, jar, apk
    # --- Archive formats ---
    SignatureRule("rar", _hex("52617221")),
    SignatureRule("gz", _hex("1F8B08")),
    SignatureRule("deb", _hex("213C617263683E0A")),
    SignatureRule("tar", _at(257, b"ustar")),
    SignatureRule("iso", _all(_longer_than(32774), _at(32769, b"CD001"))),
    # --- SVG (XML-based image) ---
    SignatureRule("svg", _is_svg),
    # --- Video formats ---
    SignatureRule("wmv", _hex("3026B2758E66CF11")),  # ASF header
    SignatureRule("webm", _hex("1A45DFA3")),
    SignatureRule("avi", _riff(b"AVI ")),
    SignatureRule("wav", _riff(b"WAVE")),
    SignatureRule("3gp", _is_3gp),
    # --- Audio formats ---
    SignatureRule("mp3", _hex("494433", "FFFB")),  # ID3 tag or MPEG-1 Layer III frame
    SignatureRule("ogg", _hex("4F676753")),
    # --- Other formats ---
    SignatureRule("7z", _hex("377ABCAF271C")),
    SignatureRule("exe", _hex("4D5A")),
    SignatureRule("sqlite", _hex("53514C69746520666F726D61")),
    SignatureRule("mdb", _hex("00010000")),
    SignatureRule("mobi", _all(_longer_than(68), _at(60, b"BOOKMOBI"))),
    SignatureRule("psd", _hex("38425053")),
    SignatureRule("ai", _hex("25215053")),  # EPS-based
    # PDF-based; shadowed by the pdf rule above, .ai files pass via the alias table
    SignatureRule("ai", _hex("25504446")),
    SignatureRule("indd", _hex("0606EDF5")),
    # --- ISO Base Media File Format ---
    SignatureRule("mp4", _ftyp_brand("mp42", "isom", "iso2", "avc1")),
    SignatureRule("m4a", _ftyp_brand("M4A", "M4B", "mp71")),
    SignatureRule("mov", _ftyp_brand("qt")),
    SignatureRule("heic", _is_heic),
    # --- Plain text fallback ---
    SignatureRule("txt", _is_plain_text),
]


def detect_content_type(buffer: bytes) -> str:
    """
    Return the canonical tag of the first rule matching ``buffer``,
    or ``"unknown"`` when none does.

    ZIP archives come back as ``"zip-based"`` and need
    ``check_zip_based_format`` to tell Office documents apart.
    """
    for rule in SIGNATURE_RULES:
        if rule.matches(buffer):
            return rule.tag
    return UNKNOWN
