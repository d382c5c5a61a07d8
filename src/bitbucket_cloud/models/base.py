"""
Base models for Bitbucket API payloads.

Every model is built from a raw JSON payload with ``from_api_response`` and
exposes a compact dictionary form with ``to_simplified_dict``.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("bitbucket-cloud.models.base")

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base class for models decoded from Bitbucket API responses."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from a Bitbucket API response.

        Args:
            data: The raw payload from the Bitbucket API

        Returns:
            A model instance
        """
        raise NotImplementedError(
            f"{cls.__name__} does not implement from_api_response"
        )

    @classmethod
    def from_api_list(
        cls: type[T], data: list[Any] | None, **kwargs: Any
    ) -> list[T]:
        """Decode a list of payloads, skipping non-dictionary entries."""
        if not isinstance(data, list):
            return []
        return [
            cls.from_api_response(item, **kwargs)
            for item in data
            if isinstance(item, dict)
        ]

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to a dictionary without empty values."""
        return self.model_dump(exclude_none=True)


def get_nested(data: dict[str, Any] | None, *keys: str) -> Any:
    """Walk nested dictionaries, returning None when a level is missing."""
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
