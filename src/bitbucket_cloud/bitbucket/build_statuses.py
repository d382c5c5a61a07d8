"""Module for Bitbucket commit build status operations."""

import logging
from urllib.parse import quote

from ..models.build_status import BitbucketBuildStatus
from ..utils.decorators import soft_not_found
from .client import BitbucketClient
from .commits import commit_endpoint
from .constants import is_soft_not_found

logger = logging.getLogger("bitbucket-cloud.build_statuses")


class BuildStatusesMixin(BitbucketClient):
    """Mixin for the build statuses CI servers attach to commits."""

    def add_build_status(
        self,
        workspace: str,
        repo_slug: str,
        commit: str,
        build_status: BitbucketBuildStatus,
    ) -> BitbucketBuildStatus:
        """
        Report a new build status on a commit.

        Args:
            workspace: Workspace slug or UUID
            repo_slug: Repository slug
            commit: Commit hash
            build_status: Status to report; key, state and url are required

        Returns:
            The build status as stored by Bitbucket
        """
        endpoint = f"{commit_endpoint(workspace, repo_slug, commit)}/statuses/build"
        data = self._post(endpoint, json_data=build_status.to_api_payload())
        logger.debug(
            f"Added build status {build_status.key} on {commit[:12]}: "
            f"{build_status.state}"
        )
        return BitbucketBuildStatus.from_api_response(data)

    @soft_not_found(lambda: None)
    def get_build_status(
        self, workspace: str, repo_slug: str, commit: str, key: str
    ) -> BitbucketBuildStatus:
        """Get the build status identified by ``key`` on a commit."""
        data = self._get(self._build_status_endpoint(workspace, repo_slug, commit, key))
        return BitbucketBuildStatus.from_api_response(data)

    def change_build_status(
        self,
        workspace: str,
        repo_slug: str,
        commit: str,
        key: str,
        build_status: BitbucketBuildStatus,
    ) -> BitbucketBuildStatus:
        """Update the build status identified by ``key`` on a commit."""
        data = self._put(
            self._build_status_endpoint(workspace, repo_slug, commit, key),
            json_data=build_status.to_api_payload(),
        )
        return BitbucketBuildStatus.from_api_response(data)

    def list_build_statuses(
        self,
        workspace: str,
        repo_slug: str,
        commit: str,
        max_items: int | None = None,
    ) -> list[BitbucketBuildStatus]:
        return self._get_paginated(
            f"{commit_endpoint(workspace, repo_slug, commit)}/statuses",
            BitbucketBuildStatus.from_api_response,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_build_statuses"),
        )

    @staticmethod
    def _build_status_endpoint(
        workspace: str, repo_slug: str, commit: str, key: str
    ) -> str:
        if not key:
            raise ValueError("build status key is required")
        return (
            f"{commit_endpoint(workspace, repo_slug, commit)}"
            f"/statuses/build/{quote(key, safe='')}"
        )
