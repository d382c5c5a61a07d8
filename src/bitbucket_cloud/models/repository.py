"""
Bitbucket repository models.

This module provides Pydantic models for Bitbucket Cloud repositories,
including the payload sent when creating one.
"""

import logging
from typing import Any, Optional

from .base import ApiModel, get_nested
from .constants import EMPTY_STRING, UNKNOWN
from .user import BitbucketUser

logger = logging.getLogger("bitbucket-cloud.models.repository")

# Fields accepted by POST /2.0/repositories/{workspace}/{repo_slug}
CREATE_FIELDS = (
    "name",
    "scm",
    "language",
    "description",
    "website",
    "is_private",
    "fork_policy",
    "has_issues",
    "has_wiki",
)


class BitbucketRepository(ApiModel):
    """
    Model representing a Bitbucket Cloud repository.

    ``parent`` is only present on forks and points to the forked repository.
    """

    uuid: str | None = None
    name: str = UNKNOWN
    full_name: str = EMPTY_STRING
    slug: str | None = None
    scm: str | None = None
    language: str | None = None
    description: str | None = None
    website: str | None = None
    is_private: bool | None = None
    fork_policy: str | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    size: int | None = None
    mainbranch: str | None = None
    created_on: str | None = None
    updated_on: str | None = None
    owner: BitbucketUser | None = None
    parent: Optional["BitbucketRepository"] = None
    links: dict[str, Any] | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketRepository":
        """
        Create a BitbucketRepository from a Bitbucket API response.

        Args:
            data: The repository data from the Bitbucket API

        Returns:
            A BitbucketRepository instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        parent = None
        if isinstance(data.get("parent"), dict):
            parent = cls.from_api_response(data["parent"])

        owner = None
        if isinstance(data.get("owner"), dict):
            owner = BitbucketUser.from_api_response(data["owner"])

        return cls(
            uuid=data.get("uuid"),
            name=data.get("name", UNKNOWN),
            full_name=data.get("full_name", EMPTY_STRING),
            slug=data.get("slug"),
            scm=data.get("scm"),
            language=data.get("language"),
            description=data.get("description"),
            website=data.get("website"),
            is_private=data.get("is_private"),
            fork_policy=data.get("fork_policy"),
            has_issues=data.get("has_issues"),
            has_wiki=data.get("has_wiki"),
            size=data.get("size"),
            mainbranch=get_nested(data, "mainbranch", "name"),
            created_on=data.get("created_on"),
            updated_on=data.get("updated_on"),
            owner=owner,
            parent=parent,
            links=data.get("links"),
        )

    def to_api_payload(self) -> dict[str, Any]:
        """Build the JSON body used to create this repository."""
        payload: dict[str, Any] = {"type": "repository"}
        for field in CREATE_FIELDS:
            value = getattr(self, field)
            if value is not None and value != UNKNOWN:
                payload[field] = value
        return payload

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "full_name": self.full_name,
        }
        for field in ("uuid", "scm", "language", "description", "website"):
            if value := getattr(self, field):
                result[field] = value
        if self.is_private is not None:
            result["is_private"] = self.is_private
        if self.mainbranch:
            result["mainbranch"] = self.mainbranch
        if self.owner:
            result["owner"] = self.owner.display_name
        if self.parent:
            result["parent"] = self.parent.full_name
        return result
