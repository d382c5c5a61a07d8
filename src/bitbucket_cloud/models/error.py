"""Error payloads returned by the Bitbucket Cloud API."""

from typing import Any

from pydantic import Field

from .base import ApiModel


class BitbucketErrorDetail(ApiModel):
    message: str | None = None
    detail: Any = None
    fields: dict[str, Any] | None = None
    id: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketErrorDetail":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            message=data.get("message"),
            detail=data.get("detail"),
            fields=data.get("fields"),
            id=data.get("id"),
        )


class BitbucketErrorResponse(ApiModel):
    """The ``{"type": "error", "error": {...}}`` body of a failed request."""

    type: str = "error"
    error: BitbucketErrorDetail = Field(default_factory=BitbucketErrorDetail)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketErrorResponse":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            type=data.get("type", "error"),
            error=BitbucketErrorDetail.from_api_response(data.get("error") or {}),
        )

    @property
    def message(self) -> str | None:
        return self.error.message
