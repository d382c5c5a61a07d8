"""Environment variable utility functions for bitbucket-cloud."""

import logging
import os

logger = logging.getLogger("bitbucket-cloud.utils.env")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to a false value.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to 'false', '0' or 'no'
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def get_custom_headers(env_var_name: str) -> dict[str, str]:
    """Parse custom HTTP headers from an environment variable.

    The expected format is a comma separated list of ``key=value`` pairs,
    e.g. ``X-Forwarded-User=bot,X-Team=platform``. Malformed pairs are
    skipped with a warning.

    Args:
        env_var_name: Name of the environment variable to read

    Returns:
        Parsed headers, empty when the variable is unset
    """
    raw = os.getenv(env_var_name, "").strip()
    if not raw:
        return {}

    headers: dict[str, str] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            logger.warning(f"Ignoring malformed header in {env_var_name}: '{pair}'")
            continue
        headers[key] = value.strip()
    return headers
