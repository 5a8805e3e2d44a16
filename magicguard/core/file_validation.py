"""
File content validation using magic bytes.
Detects the real format of an upload and checks it against the name's extension.
"""
import logging

from magicguard.core.containers import ZIP_CONTAINER_TYPES, check_zip_based_format
from magicguard.core.extension_aliases import is_accepted
from magicguard.core.signatures import (
    SIGNATURE_RULES,
    ZIP_BASED,
    detect_content_type,
)
from magicguard.schemas.validation import ValidationResult

logger = logging.getLogger(__name__)

# Every final tag validation can report, in detection order
SUPPORTED_TYPES: tuple[str, ...] = tuple(
    dict.fromkeys(
        tag
        for rule in SIGNATURE_RULES
        for tag in (ZIP_CONTAINER_TYPES if rule.tag == ZIP_BASED else (rule.tag,))
    )
)


def get_file_extension(file_name: str) -> str:
    """Lowercased text after the last dot, or "" when the name has none."""
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[-1].lower()


def detect_file_type(contents: bytes) -> str:
    """Detected tag with ZIP containers already refined."""
    actual_type = detect_content_type(contents)
    if actual_type == ZIP_BASED:
        actual_type = check_zip_based_format(contents)
    return actual_type


def validate_file_buffer(contents: bytes, original_name: str) -> ValidationResult:
    """
    Compare the format found in ``contents`` with the one claimed by
    ``original_name``. Never raises: unreadable content is ``"unknown"``.
    """
    extension = get_file_extension(original_name)
    actual_type = detect_file_type(contents)
    is_valid = is_accepted(extension, actual_type)
    logger.debug(
        f"Detected '{actual_type}' for {original_name!r} "
        f"(extension '{extension}', valid={is_valid})"
    )
    return ValidationResult(
        file_name=original_name,
        extension=extension,
        actual_type=actual_type,
        is_valid=is_valid,
    )
