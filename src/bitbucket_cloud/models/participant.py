"""Participants of a commit or pull request review."""

from typing import Any

from .base import ApiModel
from .user import BitbucketUser


class BitbucketParticipant(ApiModel):
    """A user taking part in a review, as returned by the approve endpoints."""

    user: BitbucketUser | None = None
    role: str | None = None
    approved: bool = False
    state: str | None = None
    participated_on: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketParticipant":
        if not data or not isinstance(data, dict):
            return cls()

        user = None
        if isinstance(data.get("user"), dict):
            user = BitbucketUser.from_api_response(data["user"])

        return cls(
            user=user,
            role=data.get("role"),
            approved=bool(data.get("approved", False)),
            state=data.get("state"),
            participated_on=data.get("participated_on"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"approved": self.approved}
        if self.user:
            result["user"] = self.user.display_name
        if self.role:
            result["role"] = self.role
        return result
