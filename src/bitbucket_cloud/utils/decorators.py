import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from ..bitbucket.constants import is_soft_not_found
from ..exceptions import BitbucketNotFoundError

logger = logging.getLogger("bitbucket-cloud.utils.decorators")

F = TypeVar("F", bound=Callable[..., Any])


def soft_not_found(
    default: Callable[[], Any], operation: str | None = None
) -> Callable[[F], F]:
    """
    Decorator turning a Bitbucket 404 into a default value.

    The conversion only happens when ``NOT_FOUND_POLICY`` marks the operation
    as soft; otherwise the 404 is re-raised. Only ``BitbucketNotFoundError``
    is converted; authentication failures, other API errors and transport
    errors propagate unchanged.

    Args:
        default: Factory called to build the value returned on 404.
        operation: Name looked up in ``NOT_FOUND_POLICY``, defaults to the
            decorated function's name.
    """

    def decorator(func: F) -> F:
        name = operation or func.__name__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except BitbucketNotFoundError as e:
                if not is_soft_not_found(name):
                    raise
                logger.debug(
                    f"{name}: resource not found ({e.url}), returning empty result"
                )
                return default()

        return wrapper  # type: ignore

    return decorator
