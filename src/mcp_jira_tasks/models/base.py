"""
Base models for Jira API data.

All models built from Jira responses derive from ApiModel so they share
the same construction entry point.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base model for data read from the Jira REST API."""

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from an API response.

        Args:
            data: The response data from the Jira API
            **kwargs: Additional context needed by specific models

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")
