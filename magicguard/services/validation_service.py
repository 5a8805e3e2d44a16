from fastapi import UploadFile, HTTPException
from magicguard.core.extension_aliases import EXTENSION_ALIASES
from magicguard.core.file_validation import (
    SUPPORTED_TYPES,
    get_file_extension,
    validate_file_buffer,
)
from magicguard.schemas.validation import (
    AliasTableResponse,
    SupportedTypesResponse,
    ValidationResult,
)
import asyncio
import logging

logger = logging.getLogger(__name__)


class ValidationService:
    """
    Upload-facing wrapper around the magic-byte validator.

    Limits come in through the constructor so tests can build a
    service with any policy without patching global settings.
    """

    def __init__(
        self,
        allowed_extensions: set[str],
        max_upload_size_mb: float,
        reject_mismatch: bool = False,
    ) -> None:
        self.allowed_extensions = {e.lower() for e in allowed_extensions}
        self.max_upload_size_mb = max_upload_size_mb
        self.reject_mismatch = reject_mismatch

    async def validate_upload(
        self,
        file: UploadFile,
    ) -> ValidationResult:
        # ── Request Checks ────────────────────────────────
        if not file.filename:
            raise HTTPException(
                status_code=400,
                detail="No filename provided",
            )

        ext = get_file_extension(file.filename)
        if self.allowed_extensions and ext not in self.allowed_extensions:
            raise HTTPException(
                status_code=400,
                detail=f"File type '.{ext}' not allowed. "
                f"Allowed: {sorted(self.allowed_extensions)}",
            )

        contents: bytes = await file.read()
        size_mb: float = len(contents) / (1024 * 1024)
        if size_mb > self.max_upload_size_mb:
            raise HTTPException(
                status_code=400,
                detail=f"File too large: {size_mb:.1f}MB. "
                f"Max: {self.max_upload_size_mb}MB",
            )

        if len(contents) == 0:
            raise HTTPException(
                status_code=400,
                detail="File is empty",
            )

        # ── Detection ─────────────────────────────────────
        # The Office marker search scans the whole archive,
        # so keep it off the event loop.
        result = await asyncio.to_thread(
            validate_file_buffer, contents, file.filename
        )

        if not result.is_valid:
            logger.warning(
                f"Extension mismatch for {file.filename!r}: "
                f"claimed '.{result.extension}', detected '{result.actual_type}'"
            )
            if self.reject_mismatch:
                raise HTTPException(
                    status_code=415,
                    detail=f"File content looks like '{result.actual_type}' "
                    f"but the name claims '.{result.extension}'. "
                    "The file may be corrupted or mislabeled.",
                )
        else:
            logger.info(f"Validated {file.filename!r} as {result.actual_type}")

        return result

    def get_aliases(self) -> AliasTableResponse:
        return AliasTableResponse(
            total=len(EXTENSION_ALIASES),
            aliases={ext: list(tags) for ext, tags in EXTENSION_ALIASES.items()},
        )

    def get_supported_types(self) -> SupportedTypesResponse:
        return SupportedTypesResponse(
            total=len(SUPPORTED_TYPES),
            types=list(SUPPORTED_TYPES),
        )
