"""Constants for the Bitbucket Cloud API."""

DEFAULT_BITBUCKET_URL = "https://api.bitbucket.org"
API_BASE_PATH = "/2.0"

DEFAULT_PAGE_LEN = 50
MAX_PAGE_LEN = 100
DEFAULT_TIMEOUT = 30

AUTH_TYPE_BASIC = "basic"
AUTH_TYPE_PAT = "pat"

# How each single-entity fetch and listing behaves when Bitbucket answers 404.
# Looked up at call time by the walker and by the soft_not_found decorator.
# "raise" propagates BitbucketNotFoundError, "empty" returns the operation's
# empty value (None, an empty list, an empty string or an id-less model).
NOT_FOUND_RAISE = "raise"
NOT_FOUND_EMPTY = "empty"

NOT_FOUND_POLICY: dict[str, str] = {
    "get_repository": NOT_FOUND_RAISE,
    "list_watchers": NOT_FOUND_RAISE,
    "list_forks": NOT_FOUND_RAISE,
    "list_commits": NOT_FOUND_RAISE,
    "get_commit": NOT_FOUND_RAISE,
    "get_build_status": NOT_FOUND_RAISE,
    "list_build_statuses": NOT_FOUND_RAISE,
    "list_pull_requests": NOT_FOUND_RAISE,
    "get_pull_request": NOT_FOUND_EMPTY,
    "list_pull_request_activity": NOT_FOUND_EMPTY,
    "list_pull_request_comments": NOT_FOUND_EMPTY,
    "get_pull_request_comment": NOT_FOUND_EMPTY,
    "list_pull_request_commits": NOT_FOUND_EMPTY,
    "get_pull_request_diff": NOT_FOUND_EMPTY,
}


def is_soft_not_found(operation: str) -> bool:
    """Whether ``operation`` turns a 404 into an empty result."""
    return NOT_FOUND_POLICY.get(operation, NOT_FOUND_RAISE) == NOT_FOUND_EMPTY
