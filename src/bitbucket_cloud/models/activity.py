"""
Bitbucket pull request activity models.

The activity endpoint mixes several event kinds in one stream; each entry
carries exactly one of the ``update``, ``approval``, ``comment`` or
``changes_requested`` keys.
"""

from typing import Any, Literal

from .base import ApiModel, get_nested
from .comment import BitbucketComment
from .user import BitbucketUser

ActivityKind = Literal["update", "approval", "comment", "changes_requested", "unknown"]

ACTIVITY_KINDS: tuple[ActivityKind, ...] = (
    "update",
    "approval",
    "comment",
    "changes_requested",
)


class BitbucketPullRequestUpdate(ApiModel):
    """A change of the pull request itself (state, title, branches...)."""

    state: str | None = None
    title: str | None = None
    description: str | None = None
    reason: str | None = None
    date: str | None = None
    author: BitbucketUser | None = None
    source_branch: str | None = None
    destination_branch: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketPullRequestUpdate":
        if not data or not isinstance(data, dict):
            return cls()
        author = None
        if isinstance(data.get("author"), dict):
            author = BitbucketUser.from_api_response(data["author"])
        return cls(
            state=data.get("state"),
            title=data.get("title"),
            description=data.get("description"),
            reason=data.get("reason"),
            date=data.get("date"),
            author=author,
            source_branch=get_nested(data, "source", "branch", "name"),
            destination_branch=get_nested(data, "destination", "branch", "name"),
        )


class BitbucketApproval(ApiModel):
    """An approval (or a change request) given by a reviewer."""

    date: str | None = None
    user: BitbucketUser | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketApproval":
        if not data or not isinstance(data, dict):
            return cls()
        user = None
        if isinstance(data.get("user"), dict):
            user = BitbucketUser.from_api_response(data["user"])
        return cls(date=data.get("date"), user=user)


class BitbucketPullRequestActivity(ApiModel):
    """One entry of a pull request activity stream."""

    kind: ActivityKind = "unknown"
    pull_request_id: int | None = None
    update: BitbucketPullRequestUpdate | None = None
    approval: BitbucketApproval | None = None
    comment: BitbucketComment | None = None
    changes_requested: BitbucketApproval | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketPullRequestActivity":
        if not data or not isinstance(data, dict):
            return cls()

        kind: ActivityKind = next(
            (k for k in ACTIVITY_KINDS if isinstance(data.get(k), dict)), "unknown"
        )
        return cls(
            kind=kind,
            pull_request_id=get_nested(data, "pull_request", "id"),
            update=BitbucketPullRequestUpdate.from_api_response(data["update"])
            if kind == "update"
            else None,
            approval=BitbucketApproval.from_api_response(data["approval"])
            if kind == "approval"
            else None,
            comment=BitbucketComment.from_api_response(data["comment"])
            if kind == "comment"
            else None,
            changes_requested=BitbucketApproval.from_api_response(
                data["changes_requested"]
            )
            if kind == "changes_requested"
            else None,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"kind": self.kind}
        if self.update:
            result["state"] = self.update.state
            if self.update.date:
                result["date"] = self.update.date
        elif self.approval:
            result["date"] = self.approval.date
            if self.approval.user:
                result["user"] = self.approval.user.display_name
        elif self.comment:
            result["comment"] = self.comment.to_simplified_dict()
        elif self.changes_requested and self.changes_requested.user:
            result["user"] = self.changes_requested.user.display_name
        return result
