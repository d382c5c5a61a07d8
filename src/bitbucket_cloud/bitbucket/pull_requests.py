"""Module for Bitbucket pull request operations."""

import logging
from typing import Any

from ..models.activity import BitbucketPullRequestActivity
from ..models.comment import BitbucketComment
from ..models.commit import BitbucketCommit
from ..models.participant import BitbucketParticipant
from ..models.pull_request import BitbucketPullRequest
from ..utils.decorators import soft_not_found
from .client import BitbucketClient
from .constants import is_soft_not_found
from .repositories import repository_endpoint

logger = logging.getLogger("bitbucket-cloud.pull_requests")

PULL_REQUEST_STATES = ("OPEN", "MERGED", "DECLINED", "SUPERSEDED")


def pull_request_endpoint(workspace: str, repo_slug: str, pr_id: int) -> str:
    return f"{repository_endpoint(workspace, repo_slug)}/pullrequests/{pr_id}"


class PullRequestsMixin(BitbucketClient):
    """Mixin for Bitbucket pull request operations.

    Pull requests that do not exist are reported softly: the pull request
    itself comes back as None, its listings as empty lists, its diff as an
    empty string and its comments as comments without id.
    """

    def create_pull_request(
        self,
        workspace: str,
        repo_slug: str,
        title: str,
        source_branch: str,
        destination_branch: str | None = None,
        description: str | None = None,
        reviewers: list[str] | None = None,
        close_source_branch: bool = False,
    ) -> BitbucketPullRequest:
        """
        Create a new pull request.

        Args:
            workspace: Workspace slug or UUID
            repo_slug: Repository slug
            title: Pull request title
            source_branch: Source branch name
            destination_branch: Destination branch name
                (the repository main branch if not specified)
            description: Pull request description
            reviewers: List of reviewer UUIDs
            close_source_branch: Whether to close source branch after merge

        Returns:
            BitbucketPullRequest object
        """
        payload: dict[str, Any] = {
            "title": title,
            "source": {"branch": {"name": source_branch}},
        }

        if destination_branch:
            payload["destination"] = {"branch": {"name": destination_branch}}

        if description:
            payload["description"] = description

        if close_source_branch:
            payload["close_source_branch"] = True

        if reviewers:
            payload["reviewers"] = [{"uuid": r} for r in reviewers]

        logger.debug(
            f"Creating pull request in {workspace}/{repo_slug}: "
            f"{source_branch} -> {destination_branch or '<main branch>'}"
        )

        response = self._post(
            f"{repository_endpoint(workspace, repo_slug)}/pullrequests",
            json_data=payload,
        )
        return BitbucketPullRequest.from_api_response(response)

    def list_pull_requests(
        self,
        workspace: str,
        repo_slug: str,
        state: str | None = None,
        max_items: int | None = None,
    ) -> list[BitbucketPullRequest]:
        """
        List pull requests for a repository.

        Args:
            workspace: Workspace slug or UUID
            repo_slug: Repository slug
            state: Filter by state (OPEN, MERGED, DECLINED, SUPERSEDED);
                Bitbucket returns only open pull requests when omitted
            max_items: Maximum number of pull requests to return

        Returns:
            List of BitbucketPullRequest objects
        """
        params: dict[str, Any] = {}
        if state:
            state = state.upper()
            if state not in PULL_REQUEST_STATES:
                raise ValueError(
                    f"Invalid pull request state '{state}', "
                    f"expected one of {', '.join(PULL_REQUEST_STATES)}"
                )
            params["state"] = state

        return self._get_paginated(
            f"{repository_endpoint(workspace, repo_slug)}/pullrequests",
            BitbucketPullRequest.from_api_response,
            params=params,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_pull_requests"),
        )

    @soft_not_found(lambda: None)
    def get_pull_request(
        self, workspace: str, repo_slug: str, pr_id: int
    ) -> BitbucketPullRequest | None:
        """
        Get detailed information about a specific pull request.

        Returns:
            BitbucketPullRequest object or None if not found
        """
        data = self._get(pull_request_endpoint(workspace, repo_slug, pr_id))
        return BitbucketPullRequest.from_api_response(data)

    def list_pull_request_activity(
        self,
        workspace: str,
        repo_slug: str,
        pr_id: int,
        max_items: int | None = None,
    ) -> list[BitbucketPullRequestActivity]:
        """List the activity (updates, approvals, comments) of a pull request."""
        return self._get_paginated(
            f"{pull_request_endpoint(workspace, repo_slug, pr_id)}/activity",
            BitbucketPullRequestActivity.from_api_response,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_pull_request_activity"),
        )

    def list_pull_request_comments(
        self,
        workspace: str,
        repo_slug: str,
        pr_id: int,
        max_items: int | None = None,
    ) -> list[BitbucketComment]:
        return self._get_paginated(
            f"{pull_request_endpoint(workspace, repo_slug, pr_id)}/comments",
            BitbucketComment.from_api_response,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_pull_request_comments"),
        )

    @soft_not_found(BitbucketComment)
    def get_pull_request_comment(
        self, workspace: str, repo_slug: str, pr_id: int, comment_id: int
    ) -> BitbucketComment:
        """
        Get one comment of a pull request.

        Returns:
            The comment; a comment whose ``id`` is None if it does not exist
        """
        data = self._get(
            f"{pull_request_endpoint(workspace, repo_slug, pr_id)}"
            f"/comments/{comment_id}"
        )
        return BitbucketComment.from_api_response(data)

    def list_pull_request_commits(
        self,
        workspace: str,
        repo_slug: str,
        pr_id: int,
        max_items: int | None = None,
    ) -> list[BitbucketCommit]:
        return self._get_paginated(
            f"{pull_request_endpoint(workspace, repo_slug, pr_id)}/commits",
            BitbucketCommit.from_api_response,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_pull_request_commits"),
        )

    @soft_not_found(str)
    def get_pull_request_diff(self, workspace: str, repo_slug: str, pr_id: int) -> str:
        """
        Get the unified diff of a pull request.

        Returns:
            The diff text, empty if the pull request does not exist
        """
        return self._get_text(
            f"{pull_request_endpoint(workspace, repo_slug, pr_id)}/diff"
        )

    def approve_pull_request(
        self, workspace: str, repo_slug: str, pr_id: int
    ) -> BitbucketParticipant:
        """Approve a pull request as the authenticated user."""
        data = self._post(f"{pull_request_endpoint(workspace, repo_slug, pr_id)}/approve")
        return BitbucketParticipant.from_api_response(data)

    def remove_pull_request_approval(
        self, workspace: str, repo_slug: str, pr_id: int
    ) -> None:
        """Withdraw the approval given to a pull request by the authenticated user."""
        self._delete(f"{pull_request_endpoint(workspace, repo_slug, pr_id)}/approve")
