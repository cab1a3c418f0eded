"""Pydantic schemas for API request bodies."""

from flask import request
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    StrictBool,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from models.content import ContentType

_HTTP_URL = TypeAdapter(HttpUrl)


class SignupRequest(BaseModel):
    """Request body for signup."""

    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=100)


class SigninRequest(BaseModel):
    """Request body for signin."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ContentRequest(BaseModel):
    """Request body for saving a content item."""

    link: str
    type: ContentType
    title: str = Field(min_length=1, max_length=200)

    @field_validator("link")
    @classmethod
    def link_must_be_http_url(cls, value):
        # Validate only; the link is stored exactly as sent.
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError:
            raise ValueError("Input should be a valid http or https URL")
        return value


class ShareRequest(BaseModel):
    share: StrictBool


class DeleteContentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content_id: str = Field(alias="contentId", min_length=1)


def parse_body(schema):
    """Validate the JSON body against ``schema``; raises pydantic.ValidationError."""
    return schema.model_validate(request.get_json(silent=True) or {})
