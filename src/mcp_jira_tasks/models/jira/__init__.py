"""
Jira data models for the MCP Jira Tasks server.

This package provides Pydantic models for the subset of Jira API data
structures the task tools read.
"""

from .adf import adf_to_text, text_to_adf
from .issue import JiraSearchResult, JiraTask, JiraTransition

__all__ = [
    "JiraSearchResult",
    "JiraTask",
    "JiraTransition",
    "adf_to_text",
    "text_to_adf",
]
