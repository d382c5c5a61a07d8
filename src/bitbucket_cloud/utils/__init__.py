"""Utility functions for bitbucket-cloud."""

from .decorators import soft_not_found
from .env import get_custom_headers, is_env_ssl_verify
from .logging import mask_sensitive

__all__ = [
    "get_custom_headers",
    "is_env_ssl_verify",
    "mask_sensitive",
    "soft_not_found",
]
