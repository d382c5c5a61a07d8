"""
Bitbucket pull request models.

This module provides Pydantic models for Bitbucket Cloud pull requests.
"""

import logging
from typing import Any

from .base import ApiModel, get_nested
from .constants import EMPTY_STRING, UNKNOWN
from .participant import BitbucketParticipant
from .user import BitbucketUser

logger = logging.getLogger("bitbucket-cloud.models.pull_request")


class BitbucketPullRequest(ApiModel):
    """
    Model representing a Bitbucket pull request.

    This model contains information about a Bitbucket Cloud pull request,
    with the source and destination flattened to branch names.
    """

    id: int | None = None
    title: str = UNKNOWN
    description: str | None = None
    state: str = EMPTY_STRING
    source_branch: str = EMPTY_STRING
    source_commit: str | None = None
    source_repository: str | None = None
    destination_branch: str = EMPTY_STRING
    destination_commit: str | None = None
    author: BitbucketUser | None = None
    created_on: str | None = None
    updated_on: str | None = None
    close_source_branch: bool = False
    merge_commit: str | None = None
    comment_count: int = 0
    task_count: int = 0
    reviewers: list[BitbucketUser] = []
    participants: list[BitbucketParticipant] = []
    links: dict[str, Any] | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketPullRequest":
        """
        Create a BitbucketPullRequest from a Bitbucket API response.

        Args:
            data: The pull request data from the Bitbucket API

        Returns:
            A BitbucketPullRequest instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        author = None
        if isinstance(data.get("author"), dict):
            author = BitbucketUser.from_api_response(data["author"])

        return cls(
            id=data.get("id"),
            title=data.get("title", UNKNOWN),
            description=data.get("description"),
            state=data.get("state", EMPTY_STRING),
            source_branch=get_nested(data, "source", "branch", "name")
            or EMPTY_STRING,
            source_commit=get_nested(data, "source", "commit", "hash"),
            source_repository=get_nested(data, "source", "repository", "full_name"),
            destination_branch=get_nested(data, "destination", "branch", "name")
            or EMPTY_STRING,
            destination_commit=get_nested(data, "destination", "commit", "hash"),
            author=author,
            created_on=data.get("created_on"),
            updated_on=data.get("updated_on"),
            close_source_branch=bool(data.get("close_source_branch", False)),
            merge_commit=get_nested(data, "merge_commit", "hash"),
            comment_count=data.get("comment_count") or 0,
            task_count=data.get("task_count") or 0,
            reviewers=BitbucketUser.from_api_list(data.get("reviewers")),
            participants=BitbucketParticipant.from_api_list(data.get("participants")),
            links=data.get("links"),
        )

    def is_approved_by(self, user: str) -> bool:
        """Whether ``user`` (nickname, uuid or account id) approved this pull request."""
        return any(
            participant.approved
            and participant.user is not None
            and participant.user.matches(user)
            for participant in self.participants
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for API responses.

        Returns:
            A simplified dictionary representation
        """
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "state": self.state,
            "source_branch": self.source_branch,
            "destination_branch": self.destination_branch,
        }

        if self.description:
            result["description"] = self.description

        if self.author:
            result["author"] = self.author.display_name

        if self.created_on:
            result["created_on"] = self.created_on

        if self.updated_on:
            result["updated_on"] = self.updated_on

        if self.reviewers:
            result["reviewers"] = [r.display_name for r in self.reviewers]

        if self.participants:
            result["participants_count"] = len(self.participants)

        if self.merge_commit:
            result["merge_commit"] = self.merge_commit

        if html_link := get_nested(self.links, "html", "href"):
            result["url"] = html_link

        return result
