"""Logging helpers shared by the Bitbucket modules."""


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping only a few characters at both ends.

    Args:
        value: Secret to mask
        keep_chars: Number of characters to keep at each end

    Returns:
        Masked value, e.g. ``abcd...wxyz``
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}...{value[-keep_chars:]}"
