"""
Bitbucket build status models.

Build statuses are attached to a commit by CI servers and identified by a
``key`` unique per commit.
"""

from enum import Enum
from typing import Any

from .base import ApiModel
from .constants import EMPTY_STRING


class BuildStatusState(str, Enum):
    """States accepted by the commit build status endpoints."""

    INPROGRESS = "INPROGRESS"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    STOPPED = "STOPPED"


class BitbucketBuildStatus(ApiModel):
    """A build status reported on a commit."""

    key: str = EMPTY_STRING
    state: BuildStatusState | None = None
    name: str | None = None
    url: str | None = None
    description: str | None = None
    refname: str | None = None
    commit_hash: str | None = None
    created_on: str | None = None
    updated_on: str | None = None
    links: dict[str, Any] | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BitbucketBuildStatus":
        if not data or not isinstance(data, dict):
            return cls()

        state = data.get("state")
        commit = data.get("commit")
        return cls(
            key=data.get("key", EMPTY_STRING),
            state=BuildStatusState(state) if state else None,
            name=data.get("name"),
            url=data.get("url"),
            description=data.get("description"),
            refname=data.get("refname"),
            commit_hash=commit.get("hash") if isinstance(commit, dict) else None,
            created_on=data.get("created_on"),
            updated_on=data.get("updated_on"),
            links=data.get("links"),
        )

    def to_api_payload(self) -> dict[str, Any]:
        """Build the JSON body for the create and update endpoints."""
        if not self.key or self.state is None or not self.url:
            raise ValueError("A build status requires a key, a state and a url")

        payload: dict[str, Any] = {
            "key": self.key,
            "state": self.state.value,
            "url": self.url,
        }
        for field in ("name", "description", "refname"):
            if value := getattr(self, field):
                payload[field] = value
        return payload

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "key": self.key,
            "state": self.state.value if self.state else None,
        }
        for field in ("name", "url", "description", "updated_on"):
            if value := getattr(self, field):
                result[field] = value
        return result
