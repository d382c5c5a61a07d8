"""Module for Bitbucket repository operations."""

import logging
from typing import Any

from ..models.repository import BitbucketRepository
from ..models.user import BitbucketUser
from ..utils.decorators import soft_not_found
from .client import BitbucketClient
from .constants import is_soft_not_found

logger = logging.getLogger("bitbucket-cloud.repositories")


def repository_endpoint(workspace: str, repo_slug: str) -> str:
    if not workspace or not repo_slug:
        raise ValueError("workspace and repo_slug are required")
    return f"/repositories/{workspace}/{repo_slug}"


class RepositoriesMixin(BitbucketClient):
    """Mixin for Bitbucket repository operations.

    Fetching, creating and deleting a repository, and listing its watchers
    and forks.
    """

    @soft_not_found(lambda: None)
    def get_repository(self, workspace: str, repo_slug: str) -> BitbucketRepository:
        """
        Get a repository.

        Args:
            workspace: Workspace slug or UUID
            repo_slug: Repository slug

        Returns:
            BitbucketRepository object

        Raises:
            BitbucketNotFoundError: If the repository does not exist
        """
        data = self._get(repository_endpoint(workspace, repo_slug))
        return BitbucketRepository.from_api_response(data)

    def create_repository(
        self,
        workspace: str,
        repo_slug: str,
        repository: BitbucketRepository | dict[str, Any] | None = None,
    ) -> BitbucketRepository:
        """
        Create a repository.

        Args:
            workspace: Workspace that will own the repository
            repo_slug: Slug of the new repository
            repository: Repository settings (name, scm, language, ...)

        Returns:
            The repository as created by Bitbucket

        Raises:
            BitbucketAuthenticationError: If the user cannot create
                repositories in this workspace
        """
        if repository is None:
            payload: dict[str, Any] = {"type": "repository", "scm": "git"}
        elif isinstance(repository, BitbucketRepository):
            payload = repository.to_api_payload()
        else:
            payload = dict(repository)

        logger.debug(f"Creating repository {workspace}/{repo_slug}")
        data = self._post(repository_endpoint(workspace, repo_slug), json_data=payload)
        return BitbucketRepository.from_api_response(data)

    def delete_repository(self, workspace: str, repo_slug: str) -> None:
        """Delete a repository. This cannot be undone."""
        logger.info(f"Deleting repository {workspace}/{repo_slug}")
        self._delete(repository_endpoint(workspace, repo_slug))

    def list_watchers(
        self, workspace: str, repo_slug: str, max_items: int | None = None
    ) -> list[BitbucketUser]:
        """
        List the users watching a repository.

        Args:
            workspace: Workspace slug or UUID
            repo_slug: Repository slug
            max_items: Maximum number of watchers to return (None for all)

        Returns:
            List of BitbucketUser objects
        """
        return self._get_paginated(
            f"{repository_endpoint(workspace, repo_slug)}/watchers",
            BitbucketUser.from_api_response,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_watchers"),
        )

    def list_forks(
        self, workspace: str, repo_slug: str, max_items: int | None = None
    ) -> list[BitbucketRepository]:
        """
        List the forks of a repository.

        Each fork carries its ``parent``, the repository it was forked from.
        """
        return self._get_paginated(
            f"{repository_endpoint(workspace, repo_slug)}/forks",
            BitbucketRepository.from_api_response,
            max_items=max_items,
            soft_not_found=is_soft_not_found("list_forks"),
        )
