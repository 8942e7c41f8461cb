"""Governance backend API client package."""

from gov_client.base import BaseClient, safe_request, set_api_config
from gov_client.governance import GovernanceClient

__all__ = [
    # Base
    "BaseClient",
    "safe_request",
    "set_api_config",
    # Clients
    "GovernanceClient",
]
