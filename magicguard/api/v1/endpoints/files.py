from fastapi import APIRouter, Depends, File, UploadFile
from magicguard.core.dependencies import get_validation_service
from magicguard.schemas.validation import (
    AliasTableResponse,
    SupportedTypesResponse,
    ValidationResult,
)
from magicguard.services.validation_service import ValidationService

router = APIRouter()


@router.post(
    "/validate",
    response_model=ValidationResult,
    summary="Check an uploaded file's content against its extension",
)
async def validate_file(
    file: UploadFile = File(...),
    service: ValidationService = Depends(get_validation_service),
) -> ValidationResult:
    """
    Detect the real format of the upload from its magic bytes and
    report whether it matches the extension in the file name.

    A mismatch is reported with `isValid: false`, or rejected with
    415 when REJECT_MISMATCHED_UPLOADS is enabled.
    """
    return await service.validate_upload(file)


@router.get(
    "/aliases",
    response_model=AliasTableResponse,
    summary="List extension aliases",
)
async def list_aliases(
    service: ValidationService = Depends(get_validation_service),
) -> AliasTableResponse:
    return service.get_aliases()


@router.get(
    "/types",
    response_model=SupportedTypesResponse,
    summary="List detectable file types",
)
async def list_types(
    service: ValidationService = Depends(get_validation_service),
) -> SupportedTypesResponse:
    return service.get_supported_types()
