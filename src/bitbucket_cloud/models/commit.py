"""
Bitbucket commit models.

This module provides Pydantic models for Bitbucket Cloud commits.
"""

import logging
from typing import Any

from .base import ApiModel, get_nested
from .constants import EMPTY_STRING
from .content import BitbucketContent
from .participant import BitbucketParticipant
from .repository import BitbucketRepository
from .user import BitbucketUser

logger = logging.getLogger("bitbucket-cloud.models.commit")


class BitbucketCommitAuthor(ApiModel):
    """Commit author: the raw ``Name <email>`` string plus the linked account."""

    raw: str = EMPTY_STRING
    user: BitbucketUser | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketCommitAuthor":
        if not data or not isinstance(data, dict):
            return cls()
        user = None
        if isinstance(data.get("user"), dict):
            user = BitbucketUser.from_api_response(data["user"])
        return cls(raw=data.get("raw") or EMPTY_STRING, user=user)


class BitbucketCommit(ApiModel):
    """
    Model representing a Bitbucket Cloud commit.

    ``parents`` holds the hashes of the parent commits, in server order.
    """

    hash: str = EMPTY_STRING
    date: str | None = None
    message: str = EMPTY_STRING
    author: BitbucketCommitAuthor | None = None
    parents: list[str] = []
    repository: BitbucketRepository | None = None
    summary: BitbucketContent | None = None
    participants: list[BitbucketParticipant] = []
    links: dict[str, Any] | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketCommit":
        """
        Create a BitbucketCommit from a Bitbucket API response.

        Args:
            data: The commit data from the Bitbucket API

        Returns:
            A BitbucketCommit instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        parents = [
            parent["hash"]
            for parent in data.get("parents") or []
            if isinstance(parent, dict) and parent.get("hash")
        ]

        author = None
        if isinstance(data.get("author"), dict):
            author = BitbucketCommitAuthor.from_api_response(data["author"])

        repository = None
        if isinstance(data.get("repository"), dict):
            repository = BitbucketRepository.from_api_response(data["repository"])

        summary = None
        if isinstance(data.get("summary"), dict):
            summary = BitbucketContent.from_api_response(data["summary"])

        return cls(
            hash=data.get("hash", EMPTY_STRING),
            date=data.get("date"),
            message=data.get("message") or EMPTY_STRING,
            author=author,
            parents=parents,
            repository=repository,
            summary=summary,
            participants=BitbucketParticipant.from_api_list(data.get("participants")),
            links=data.get("links"),
        )

    @property
    def short_hash(self) -> str:
        return self.hash[:12]

    def is_approved_by(self, user: str) -> bool:
        """Whether ``user`` (nickname, uuid or account id) approved this commit."""
        return any(
            participant.approved
            and participant.user is not None
            and participant.user.matches(user)
            for participant in self.participants
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "hash": self.hash,
            "message": self.message,
        }
        if self.date:
            result["date"] = self.date
        if self.author:
            result["author"] = self.author.raw
        if self.parents:
            result["parents"] = self.parents
        if approvers := [
            p.user.display_name for p in self.participants if p.approved and p.user
        ]:
            result["approved_by"] = approvers
        if html_link := get_nested(self.links, "html", "href"):
            result["url"] = html_link
        return result
