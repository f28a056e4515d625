from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    field_validator,
)


class GetImageRequest(BaseModel):
    """Validation model for get image requests (JSON and JPEG views)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    image_id: StrictStr = Field(
        ...,
        min_length=1,
        description="Image ID to retrieve",
    )

    size: StrictStr | None = Field(
        default=None,
        description=(
            "Requested representation size, from the 'Size' header or query "
            "parameter. Accepted but currently has no effect."
        ),
    )

    @field_validator("size")
    @classmethod
    def blank_size_is_absent(cls, value: str | None) -> str | None:
        return value or None


class GetImageResponse(BaseModel):
    """Stored image record."""

    id: str
    image: str
