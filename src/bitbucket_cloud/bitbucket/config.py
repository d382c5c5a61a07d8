"""Configuration module for Bitbucket Cloud API interactions."""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal

from ..utils.env import get_custom_headers, is_env_ssl_verify
from .constants import (
    API_BASE_PATH,
    DEFAULT_BITBUCKET_URL,
    DEFAULT_PAGE_LEN,
    DEFAULT_TIMEOUT,
    MAX_PAGE_LEN,
)

logger = logging.getLogger("bitbucket-cloud.config")


@dataclass
class BitbucketConfig:
    """Configuration for Bitbucket Cloud API access.

    Supports two authentication methods:
    - Basic auth (username + app password)
    - Access token sent as a Bearer token (repository, project, workspace
      or OAuth access tokens obtained elsewhere)
    """

    auth_type: Literal["basic", "pat"]
    url: str = DEFAULT_BITBUCKET_URL
    username: str | None = None
    password: str | None = None
    personal_token: str | None = None
    ssl_verify: bool = True
    custom_headers: dict[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    page_len: int = DEFAULT_PAGE_LEN

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.url = self.url.rstrip("/")

        if self.auth_type == "basic":
            if not self.username or not self.password:
                error_msg = "Basic authentication requires both username and password"
                raise ValueError(error_msg)
        elif self.auth_type == "pat":
            if not self.personal_token:
                error_msg = "PAT authentication requires personal_token"
                raise ValueError(error_msg)
        else:
            raise ValueError(f"Unsupported auth type: {self.auth_type}")

        if not 1 <= self.page_len <= MAX_PAGE_LEN:
            error_msg = f"page_len must be between 1 and {MAX_PAGE_LEN}"
            raise ValueError(error_msg)

    @classmethod
    def from_env(cls) -> "BitbucketConfig":
        """Create configuration from environment variables.

        Environment variables:
            BITBUCKET_URL: API root (default: https://api.bitbucket.org)
            BITBUCKET_USERNAME: Username for basic auth
            BITBUCKET_APP_PASSWORD: App password for basic auth
                (BITBUCKET_PASSWORD is accepted as well)
            BITBUCKET_ACCESS_TOKEN: Access token sent as Bearer token
                (BITBUCKET_PERSONAL_TOKEN is accepted as well)
            BITBUCKET_SSL_VERIFY: SSL verification setting
            BITBUCKET_CUSTOM_HEADERS: Extra HTTP headers (key=value,key2=value2)
            BITBUCKET_TIMEOUT: Request timeout in seconds
            BITBUCKET_PAGE_LEN: Page size used when walking collections

        Returns:
            BitbucketConfig instance

        Raises:
            ValueError: If required configuration is missing or invalid
        """
        url = os.getenv("BITBUCKET_URL") or DEFAULT_BITBUCKET_URL

        personal_token = os.getenv("BITBUCKET_ACCESS_TOKEN") or os.getenv(
            "BITBUCKET_PERSONAL_TOKEN"
        )
        username = os.getenv("BITBUCKET_USERNAME")
        password = os.getenv("BITBUCKET_APP_PASSWORD") or os.getenv(
            "BITBUCKET_PASSWORD"
        )

        auth_type: Literal["basic", "pat"]
        if personal_token:
            auth_type = "pat"
        elif username and password:
            auth_type = "basic"
        else:
            error_msg = (
                "No valid authentication credentials found. "
                "Provide either BITBUCKET_ACCESS_TOKEN, or both "
                "BITBUCKET_USERNAME and BITBUCKET_APP_PASSWORD."
            )
            raise ValueError(error_msg)

        try:
            timeout = float(os.getenv("BITBUCKET_TIMEOUT", str(DEFAULT_TIMEOUT)))
            page_len = int(os.getenv("BITBUCKET_PAGE_LEN", str(DEFAULT_PAGE_LEN)))
        except ValueError as e:
            raise ValueError(f"Invalid numeric Bitbucket setting: {e}") from e

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            password=password,
            personal_token=personal_token,
            ssl_verify=is_env_ssl_verify("BITBUCKET_SSL_VERIFY"),
            custom_headers=get_custom_headers("BITBUCKET_CUSTOM_HEADERS"),
            timeout=timeout,
            page_len=page_len,
        )

    @property
    def api_url(self) -> str:
        """Root of the 2.0 API, e.g. https://api.bitbucket.org/2.0"""
        return f"{self.url}{API_BASE_PATH}"

