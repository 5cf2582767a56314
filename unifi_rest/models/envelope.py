"""Generic controller response envelope model.

Every controller response is wrapped in the same envelope:
{ meta: { rc: "ok" | "error", msg: str }, data: [T, ...] }
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

SESSION_EXPIRED_MESSAGE = "api.err.LoginRequired"


class ApiErrorCondition(str, Enum):
    """Classification of an envelope's metadata."""

    OK = "ok"
    SESSION_EXPIRED = "session_expired"
    OTHER_ERROR = "other_error"


class Metadata(BaseModel):
    """Result code and message carried in the envelope's ``meta`` object."""

    model_config = ConfigDict(populate_by_name=True)

    result_code: str = Field(alias="rc")
    message: str = Field(default="", alias="msg")

    @field_validator("message", mode="before")
    @classmethod
    def _none_message(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_ok(self) -> bool:
        return self.result_code.lower() == "ok"

    @property
    def is_error(self) -> bool:
        return self.result_code.lower() == "error"


class Envelope(BaseModel, Generic[T]):
    """JSON envelope for all controller responses."""

    model_config = ConfigDict(populate_by_name=True)

    metadata: Metadata = Field(alias="meta")
    data: list[T] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _none_data(cls, value: Any) -> Any:
        return [] if value is None else value

    def first(self) -> T | None:
        """Return the first data item, or None when data is empty."""
        return self.data[0] if self.data else None

    def condition(self, sentinel: str = SESSION_EXPIRED_MESSAGE) -> ApiErrorCondition:
        if self.metadata.is_ok:
            return ApiErrorCondition.OK
        if self.metadata.message == sentinel:
            return ApiErrorCondition.SESSION_EXPIRED
        return ApiErrorCondition.OTHER_ERROR
