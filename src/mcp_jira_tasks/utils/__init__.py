"""
Utility functions for the MCP Jira Tasks server.
"""

from .logging import log_config_param, mask_sensitive

__all__ = [
    "log_config_param",
    "mask_sensitive",
]
