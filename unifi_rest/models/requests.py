"""Request-side models: credentials, request descriptors and upload requests."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HttpMethod(str, Enum):
    """Methods accepted by the controller's REST endpoints."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def carries_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)


class Credentials(BaseModel):
    """Controller login credentials, supplied once at client construction."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., repr=False)

    def login_body(self) -> dict[str, Any]:
        """Build the JSON body for the login endpoint."""
        return {
            "username": self.username,
            "password": self.password,
            "remember": False,
            "strict": True,
        }


class RequestDescriptor(BaseModel):
    """A single envelope request: method, relative url and optional JSON body.

    ``json_body`` is only kept for POST and PUT; it is dropped for GET and DELETE.
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    url: str
    json_body: Any = None

    @model_validator(mode="before")
    @classmethod
    def _drop_body_without_payload_method(cls, values: Any) -> Any:
        if isinstance(values, dict) and values.get("json_body") is not None:
            if not HttpMethod(values.get("method")).carries_body:
                values = {**values, "json_body": None}
        return values


class UploadRequest(BaseModel):
    """A multipart file upload: text field ``name`` plus binary ``filedata``."""

    model_config = ConfigDict(frozen=True)

    url: str
    field_name: str
    file_name: str
    content_type: str
    data: bytes = Field(..., repr=False)
