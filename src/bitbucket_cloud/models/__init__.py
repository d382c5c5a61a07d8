"""Bitbucket Cloud data models."""

from .activity import (
    BitbucketApproval,
    BitbucketPullRequestActivity,
    BitbucketPullRequestUpdate,
)
from .base import ApiModel
from .build_status import BitbucketBuildStatus, BuildStatusState
from .comment import BitbucketComment, BitbucketInlineAnchor
from .commit import BitbucketCommit, BitbucketCommitAuthor
from .content import BitbucketContent
from .error import BitbucketErrorDetail, BitbucketErrorResponse
from .participant import BitbucketParticipant
from .pull_request import BitbucketPullRequest
from .repository import BitbucketRepository
from .user import BitbucketUser

__all__ = [
    "ApiModel",
    "BitbucketApproval",
    "BitbucketBuildStatus",
    "BitbucketComment",
    "BitbucketCommit",
    "BitbucketCommitAuthor",
    "BitbucketContent",
    "BitbucketErrorDetail",
    "BitbucketErrorResponse",
    "BitbucketInlineAnchor",
    "BitbucketParticipant",
    "BitbucketPullRequest",
    "BitbucketPullRequestActivity",
    "BitbucketPullRequestUpdate",
    "BitbucketRepository",
    "BitbucketUser",
    "BuildStatusState",
]
