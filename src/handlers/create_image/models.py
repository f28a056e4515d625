"""Pydantic models for image creation request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from core.utils.constants import DATA_URI_IMAGE_MARKER
from core.utils.data_uri import validate_create_payload


class CreateImageRequest(BaseModel):
    """Validation model for image creation request."""

    model_config = ConfigDict(extra="ignore")

    image: StrictStr = Field(
        ...,
        description="Image as a data URI (data:image/<subtype>;base64,<data>)",
    )

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: str) -> str:
        """
        Syntactic gate only:
        - must not be empty
        - must contain the image data-URI marker

        The Base64 tail is not decoded here.
        """
        if not value:
            raise ValueError("Image is required")

        if not validate_create_payload(value):
            raise ValueError(f"Invalid image: expected a '{DATA_URI_IMAGE_MARKER}' data URI")

        return value


class CreateImageResponse(BaseModel):
    """Response model for successful image creation."""

    id: str = Field(..., description="Identifier of the stored image")
