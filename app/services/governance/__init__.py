"""Governance services - vote tally derivation and role eligibility."""

from app.services.governance import eligibility, statistics, timeline
from app.services.governance.filtering import ActionFilters, filter_actions, sort_actions
from app.services.governance.normalizer import (
    normalize_action,
    normalize_action_detail,
    normalize_ncl,
    normalize_vote_record,
)
from app.services.governance.service import GovernanceService

__all__ = [
    "eligibility",
    "statistics",
    "timeline",
    "ActionFilters",
    "filter_actions",
    "sort_actions",
    "normalize_action",
    "normalize_action_detail",
    "normalize_vote_record",
    "normalize_ncl",
    "GovernanceService",
]
