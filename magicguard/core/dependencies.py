from magicguard.core.config import settings
from magicguard.services.validation_service import ValidationService


def get_validation_service() -> ValidationService:
    return ValidationService(
        allowed_extensions=settings.ALLOWED_EXTENSIONS,
        max_upload_size_mb=settings.MAX_UPLOAD_SIZE_MB,
        reject_mismatch=settings.REJECT_MISMATCHED_UPLOADS,
    )
