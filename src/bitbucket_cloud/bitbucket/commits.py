"""Module for Bitbucket commit operations."""

import logging

from ..models.commit import BitbucketCommit
from ..models.participant import BitbucketParticipant
from ..utils.decorators import soft_not_found
from .client import BitbucketClient
from .commits_filter import CommitsParameters
from .constants import is_soft_not_found
from .repositories import repository_endpoint

logger = logging.getLogger("bitbucket-cloud.commits")


def commit_endpoint(workspace: str, repo_slug: str, commit: str) -> str:
    if not commit:
        raise ValueError("commit hash is required")
    return f"{repository_endpoint(workspace, repo_slug)}/commit/{commit}"


class CommitsMixin(BitbucketClient):
    """Mixin for Bitbucket commit operations."""

    def list_commits(
        self,
        workspace: str,
        repo_slug: str,
        branch: str | None = None,
        parameters: CommitsParameters | None = None,
        max_items: int | None = None,
    ) -> list[BitbucketCommit]:
        """
        List the commits of a repository, newest first.

        Args:
            workspace: Workspace slug or UUID
            repo_slug: Repository slug
            branch: Only commits reachable from this branch, tag or hash
            parameters: Additional include/exclude/path filters
            max_items: Maximum number of commits to return (None for all)

        Returns:
            List of BitbucketCommit objects

        Examples:
            Commits of ``feature`` that are not yet on ``master``::

                fetcher.list_commits(
                    "team", "repo", "feature", CommitsParameters(excludes=["master"])
                )
        """
        parameters = parameters or CommitsParameters()
        params = parameters.to_query_params(branch=branch, max_items=max_items)
        logger.debug(f"Listing commits of {workspace}/{repo_slug} with {params}")
        return self._get_paginated(
            f"{repository_endpoint(workspace, repo_slug)}/commits",
            BitbucketCommit.from_api_response,
            params=params,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_commits"),
        )

    @soft_not_found(lambda: None)
    def get_commit(
        self, workspace: str, repo_slug: str, commit: str
    ) -> BitbucketCommit:
        """
        Get a single commit.

        Raises:
            BitbucketNotFoundError: If the commit does not exist
        """
        data = self._get(commit_endpoint(workspace, repo_slug, commit))
        return BitbucketCommit.from_api_response(data)

    def approve_commit(
        self, workspace: str, repo_slug: str, commit: str
    ) -> BitbucketParticipant:
        """
        Approve a commit as the authenticated user.

        Returns:
            The participant entry of the authenticated user
        """
        data = self._post(f"{commit_endpoint(workspace, repo_slug, commit)}/approve")
        return BitbucketParticipant.from_api_response(data)

    def delete_commit_approval(
        self, workspace: str, repo_slug: str, commit: str
    ) -> None:
        """Withdraw the approval given to a commit by the authenticated user."""
        self._delete(f"{commit_endpoint(workspace, repo_slug, commit)}/approve")
