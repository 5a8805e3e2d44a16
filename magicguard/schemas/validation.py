from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ValidationResult(BaseModel):
    """Outcome of checking a file's content against its name."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    file_name: str
    extension: str
    actual_type: str
    is_valid: bool


class AliasTableResponse(BaseModel):
    total: int = Field(ge=0)
    aliases: dict[str, list[str]]


class SupportedTypesResponse(BaseModel):
    total: int = Field(ge=0)
    types: list[str]
