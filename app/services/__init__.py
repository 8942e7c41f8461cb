"""Services package - service class exports."""

from app.services.governance import GovernanceService

__all__ = [
    "GovernanceService",
]
