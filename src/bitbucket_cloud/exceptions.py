from typing import Any


class BitbucketCloudError(Exception):
    """Base exception for bitbucket-cloud errors."""

    pass


class BitbucketApiError(BitbucketCloudError):
    """Raised when the Bitbucket API answers with a non-2xx status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_response: Any = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_response = error_response
        self.url = url


class BitbucketAuthenticationError(BitbucketApiError):
    """Raised when Bitbucket API authentication or authorization fails (401/403)."""

    pass


class BitbucketNotFoundError(BitbucketApiError):
    """Raised when the requested Bitbucket resource does not exist (404)."""

    pass
