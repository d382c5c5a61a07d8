"""
Bitbucket user models.

Users appear embedded in almost every Bitbucket payload (owners, authors,
participants, reviewers, comment authors).
"""

from typing import Any

from .base import ApiModel
from .constants import UNKNOWN


class BitbucketUser(ApiModel):
    """A Bitbucket Cloud account (user or team)."""

    uuid: str | None = None
    account_id: str | None = None
    nickname: str | None = None
    display_name: str = UNKNOWN
    type: str | None = None
    links: dict[str, Any] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "BitbucketUser":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            uuid=data.get("uuid"),
            account_id=data.get("account_id"),
            nickname=data.get("nickname") or data.get("username"),
            display_name=data.get("display_name", UNKNOWN),
            type=data.get("type"),
            links=data.get("links"),
        )

    def matches(self, identifier: str) -> bool:
        """Whether ``identifier`` is this user's nickname, uuid or account id."""
        return identifier in {self.nickname, self.uuid, self.account_id}

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"display_name": self.display_name}
        if self.nickname:
            result["nickname"] = self.nickname
        if self.uuid:
            result["uuid"] = self.uuid
        return result
