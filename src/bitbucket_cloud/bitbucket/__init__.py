"""Bitbucket Cloud API module for bitbucket_cloud.

This module provides the Bitbucket Cloud (REST API 2.0) client implementation.
"""

from .build_statuses import BuildStatusesMixin
from .client import BitbucketClient
from .commits import CommitsMixin
from .commits_filter import CommitsParameters
from .config import BitbucketConfig
from .pagination import PagedCollectionWalker, PageResponse
from .pull_requests import PullRequestsMixin
from .repositories import RepositoriesMixin


class BitbucketFetcher(
    RepositoriesMixin,
    CommitsMixin,
    BuildStatusesMixin,
    PullRequestsMixin,
):
    """
    The main Bitbucket client class providing access to all Bitbucket operations.

    This class inherits from multiple mixins that provide specific functionality:
    - RepositoriesMixin: Repositories, watchers and forks
    - CommitsMixin: Commit listing with branch/path filters, commit approvals
    - BuildStatusesMixin: Build statuses attached to commits
    - PullRequestsMixin: Pull requests, their activity, comments, commits and diff
    """

    pass


__all__ = [
    "BitbucketClient",
    "BitbucketConfig",
    "BitbucketFetcher",
    "CommitsParameters",
    "PagedCollectionWalker",
    "PageResponse",
]
