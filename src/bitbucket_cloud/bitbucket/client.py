"""Base client module for Bitbucket Cloud API interactions."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from requests import Response, Session

from ..exceptions import (
    BitbucketApiError,
    BitbucketAuthenticationError,
    BitbucketCloudError,
    BitbucketNotFoundError,
)
from ..models.error import BitbucketErrorResponse
from ..utils.logging import mask_sensitive
from .config import BitbucketConfig
from .pagination import PagedCollectionWalker

logger = logging.getLogger("bitbucket-cloud.client")

QueryParams = dict[str, Any] | list[tuple[str, Any]] | None

T = TypeVar("T")


class BitbucketClient:
    """Base client for Bitbucket Cloud API interactions."""

    config: BitbucketConfig
    session: Session

    def __init__(
        self,
        config: BitbucketConfig | None = None,
        session: Session | None = None,
    ) -> None:
        """Initialize the Bitbucket client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            session: Optional pre-built requests session (auth is still applied)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or BitbucketConfig.from_env()
        self.session = session or Session()
        self.session.verify = self.config.ssl_verify
        self.session.headers.update({"Accept": "application/json"})

        if self.config.auth_type == "pat":
            self.session.headers.update(
                {"Authorization": f"Bearer {self.config.personal_token}"}
            )
            logger.debug(
                f"Initialized Bitbucket client with token authentication. "
                f"URL: {self.config.url}, "
                f"Token (masked): {mask_sensitive(self.config.personal_token)}"
            )
        else:
            self.session.auth = (self.config.username, self.config.password)
            logger.debug(
                f"Initialized Bitbucket client with Basic authentication. "
                f"URL: {self.config.url}, Username: {self.config.username}"
            )

        if self.config.custom_headers:
            self.session.headers.update(self.config.custom_headers)

    def _url(self, endpoint: str) -> str:
        """Resolve an endpoint against the API root.

        Absolute URLs (such as the ``next`` link of a page) are used as is.
        """
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.config.api_url}{endpoint}"

    def _request(
        self,
        method: str,
        endpoint: str,
        params: QueryParams = None,
        json_data: dict[str, Any] | None = None,
    ) -> Response:
        """Send a request and map HTTP failures to Bitbucket exceptions.

        Transport errors (``requests.RequestException``) propagate unchanged.
        """
        url = self._url(endpoint)
        logger.debug(f"Sending {method} request to {url} params={params}")
        response = self.session.request(
            method,
            url,
            params=params,
            json=json_data,
            timeout=self.config.timeout,
        )
        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: Response) -> None:
        """Raise the Bitbucket exception matching a non-2xx response."""
        if response.ok:
            return

        status = response.status_code
        error_response = None
        message = response.reason or "HTTP error"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error_response = BitbucketErrorResponse.from_api_response(body)
            message = error_response.message or message

        error_msg = f"Bitbucket API error {status} for {response.url}: {message}"
        if status in (401, 403):
            logger.error(error_msg)
            raise BitbucketAuthenticationError(
                error_msg, status, error_response, url=response.url
            )
        if status == 404:
            logger.debug(error_msg)
            raise BitbucketNotFoundError(
                error_msg, status, error_response, url=response.url
            )
        logger.error(error_msg)
        raise BitbucketApiError(error_msg, status, error_response, url=response.url)

    @staticmethod
    def _decode(response: Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BitbucketCloudError(
                f"Invalid JSON returned by {response.url}: {e}"
            ) from e

    def _get(self, endpoint: str, params: QueryParams = None) -> Any:
        """Make a GET request to the Bitbucket API.

        Args:
            endpoint: API endpoint (relative to the API root) or absolute URL
            params: Optional query parameters, a list of pairs for repeated keys

        Returns:
            Response data (usually dict)

        Raises:
            BitbucketApiError: If the request fails
        """
        return self._decode(self._request("GET", endpoint, params=params))

    def _get_text(self, endpoint: str, params: QueryParams = None) -> str:
        """Make a GET request returning the body as text (diffs, patches)."""
        return self._request("GET", endpoint, params=params).text

    def _post(self, endpoint: str, json_data: dict[str, Any] | None = None) -> Any:
        """Make a POST request to the Bitbucket API.

        Args:
            endpoint: API endpoint (relative to the API root)
            json_data: Optional JSON data to send

        Returns:
            Response data (usually dict)
        """
        return self._decode(self._request("POST", endpoint, json_data=json_data))

    def _put(self, endpoint: str, json_data: dict[str, Any] | None = None) -> Any:
        return self._decode(self._request("PUT", endpoint, json_data=json_data))

    def _delete(self, endpoint: str) -> Any:
        """Make a DELETE request; Bitbucket usually answers 204 without a body."""
        return self._decode(self._request("DELETE", endpoint))

    def _get_paginated(
        self,
        endpoint: str,
        decoder: Callable[[dict[str, Any]], T],
        params: QueryParams = None,
        max_items: int | None = None,
        soft_not_found: bool = False,
    ) -> list[T]:
        """Collect the items of a paged collection endpoint.

        See :class:`PagedCollectionWalker` for the traversal rules.
        """
        walker = PagedCollectionWalker(
            self, decoder, max_items=max_items, soft_not_found=soft_not_found
        )
        return walker.walk(endpoint, params=params)

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self) -> "BitbucketClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["BitbucketClient", "QueryParams"]
