"""
Bitbucket comment models.

Pull request comments may be inline (anchored to a file and line) and may
reply to another comment through ``parent_id``.
"""

from typing import Any

from .base import ApiModel, get_nested
from .content import BitbucketContent
from .user import BitbucketUser


class BitbucketInlineAnchor(ApiModel):
    """File position an inline comment is attached to."""

    path: str | None = None
    from_line: int | None = None
    to_line: int | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketInlineAnchor":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            path=data.get("path"),
            from_line=data.get("from"),
            to_line=data.get("to"),
        )


class BitbucketComment(ApiModel):
    """
    Model representing a comment on a Bitbucket pull request.

    An instance whose ``id`` is None stands for a comment that does not exist.
    """

    id: int | None = None
    content: BitbucketContent | None = None
    user: BitbucketUser | None = None
    created_on: str | None = None
    updated_on: str | None = None
    deleted: bool = False
    parent_id: int | None = None
    inline: BitbucketInlineAnchor | None = None
    pull_request_id: int | None = None
    links: dict[str, Any] | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketComment":
        if not data or not isinstance(data, dict):
            return cls()

        content = None
        if isinstance(data.get("content"), dict):
            content = BitbucketContent.from_api_response(data["content"])

        user = None
        if isinstance(data.get("user"), dict):
            user = BitbucketUser.from_api_response(data["user"])

        inline = None
        if isinstance(data.get("inline"), dict):
            inline = BitbucketInlineAnchor.from_api_response(data["inline"])

        return cls(
            id=data.get("id"),
            content=content,
            user=user,
            created_on=data.get("created_on"),
            updated_on=data.get("updated_on"),
            deleted=bool(data.get("deleted", False)),
            parent_id=get_nested(data, "parent", "id"),
            inline=inline,
            pull_request_id=get_nested(data, "pullrequest", "id"),
            links=data.get("links"),
        )

    @property
    def exists(self) -> bool:
        return self.id is not None

    @property
    def raw(self) -> str:
        return self.content.raw if self.content else ""

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "content": self.raw}
        if self.user:
            result["author"] = self.user.display_name
        if self.created_on:
            result["created_on"] = self.created_on
        if self.parent_id is not None:
            result["parent_id"] = self.parent_id
        if self.inline and self.inline.path:
            result["inline"] = {
                "path": self.inline.path,
                "from": self.inline.from_line,
                "to": self.inline.to_line,
            }
        if self.deleted:
            result["deleted"] = True
        return result
