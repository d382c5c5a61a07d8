"""Rendered text payloads (comment bodies, commit summaries)."""

from typing import Any

from .base import ApiModel
from .constants import EMPTY_STRING


class BitbucketContent(ApiModel):
    """Text rendered by Bitbucket in its raw, markup and html flavours."""

    raw: str = EMPTY_STRING
    markup: str | None = None
    html: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketContent":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            raw=data.get("raw") or EMPTY_STRING,
            markup=data.get("markup"),
            html=data.get("html"),
        )
