"""Governance domain models - vocabularies and entities."""

from app.models.governance.entities import (
    CcAbstainStats,
    DetailSummary,
    GovernanceAction,
    GovernanceActionDetail,
    NclDisplay,
    PowerAbstainStats,
    ProposalRef,
    RoleTally,
    TimelinePoint,
    VoteRecord,
)
from app.models.governance.vocabulary import (
    PROPOSAL_TYPES,
    ROLE_ORDER,
    SHOWCASE_ORDER,
    STATUS_OPTIONS,
    ProposalStatus,
    ProposalType,
    VoteChoice,
    VoterRole,
    canonical_type,
    status_label,
    type_label,
)

__all__ = [
    # Vocabulary
    "ProposalType",
    "ProposalStatus",
    "VoterRole",
    "VoteChoice",
    "PROPOSAL_TYPES",
    "SHOWCASE_ORDER",
    "STATUS_OPTIONS",
    "ROLE_ORDER",
    "canonical_type",
    "type_label",
    "status_label",
    # Entities
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
