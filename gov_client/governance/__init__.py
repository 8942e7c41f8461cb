"""Governance API client."""

from gov_client.governance.client import GovernanceClient

__all__ = [
    "GovernanceClient",
]
