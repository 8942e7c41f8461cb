"""Models package - entities and vocabularies for all domains."""

from app.models.common import BaseEntity
from app.models.governance import (
    CcAbstainStats,
    DetailSummary,
    GovernanceAction,
    GovernanceActionDetail,
    NclDisplay,
    PowerAbstainStats,
    ProposalRef,
    ProposalStatus,
    ProposalType,
    RoleTally,
    TimelinePoint,
    VoteChoice,
    VoteRecord,
    VoterRole,
)

__all__ = [
    # Common
    "BaseEntity",
    # Governance
    "ProposalType",
    "ProposalStatus",
    "VoterRole",
    "VoteChoice",
    "RoleTally",
    "VoteRecord",
    "GovernanceAction",
    "GovernanceActionDetail",
    "ProposalRef",
    "NclDisplay",
    "TimelinePoint",
    "PowerAbstainStats",
    "CcAbstainStats",
    "DetailSummary",
]
