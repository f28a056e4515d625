"""Shared image and session models."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Image(BaseModel):
    """Image record as stored and returned by the Image Store API."""

    id: StrictStr = Field(..., description="Unique, time-ordered image identifier")
    image: StrictStr = Field(
        ...,
        description="Data-URI payload (data:image/<subtype>;base64,<data>)",
    )


class Session(BaseModel):
    """Authenticated caller resolved by the security service."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    token: StrictStr = Field(..., description="Authorization header value used to resolve the session")
    user_id: str = Field(..., alias="id", description="Security service user identifier")
    name: StrictStr | None = Field(None, description="Display name")
    login: StrictStr | None = Field(None, description="Login name")
    permissions: list[StrictStr] = Field(default_factory=list, description="Granted permissions")
