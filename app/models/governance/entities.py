"""Governance domain entities - normalized actions, votes and derived stats."""

from dataclasses import dataclass, field
from typing import Any

from app.models.common import BaseEntity


@dataclass
class RoleTally(BaseEntity):
    """Per-role tally as sent by the backend, plus derived ADA amounts.

    Every field is independently optional. ``*_ada`` are only filled for
    power-weighted roles (DRep, SPO).
    """

    yes_percent: float | None = None
    no_percent: float | None = None
    abstain_percent: float | None = None
    yes_lovelace: str | None = None
    no_lovelace: str | None = None
    abstain_lovelace: str | None = None
    yes_count: int | None = None
    no_count: int | None = None
    abstain_count: int | None = None
    yes_ada: float | None = None
    no_ada: float | None = None
    abstain_ada: float | None = None


@dataclass
class VoteRecord(BaseEntity):
    """Single DRep, SPO or CC vote."""

    voter_type: str = ""
    voter_id: str = ""
    voter_name: str | None = None
    vote: str = ""
    voting_power: str = "0"
    voting_power_ada: float = 0.0
    anchor_url: str | None = None
    anchor_hash: str | None = None
    voted_at: str | None = None
    # Deprecated aliases of voter_id / voter_name
    drep_id: str | None = None
    drep_name: str | None = None


@dataclass
class GovernanceAction(BaseEntity):
    """Display-ready governance action. Flat numeric fields are never None."""

    # txHash:index, used for voting
    hash: str = ""
    # gov_action1... bech32, used for display and routing
    proposal_id: str | None = None
    tx_hash: str | None = None
    title: str = "Untitled Proposal"
    type: str = ""
    status: str = ""
    constitutionality: str = "Unspecified"

    drep_yes_percent: float = 0.0
    drep_no_percent: float = 0.0
    drep_abstain_percent: float = 0.0
    drep_yes_ada: float = 0.0
    drep_no_ada: float = 0.0
    drep_abstain_ada: float = 0.0

    spo_yes_percent: float = 0.0
    spo_no_percent: float = 0.0
    spo_abstain_percent: float = 0.0
    spo_yes_ada: float = 0.0
    spo_no_ada: float = 0.0
    spo_abstain_ada: float = 0.0

    cc_yes_percent: float = 0.0
    cc_no_percent: float = 0.0
    cc_abstain_percent: float = 0.0
    cc_yes_count: int = 0
    cc_no_count: int = 0
    cc_abstain_count: int = 0

    total_yes: int = 0
    total_no: int = 0
    total_abstain: int = 0

    submission_epoch: int = 0
    expiry_epoch: int = 0

    threshold: Any = None
    voting_status: Any = None

    drep: RoleTally | None = None
    spo: RoleTally | None = None
    cc: RoleTally | None = None


@dataclass
class GovernanceActionDetail(GovernanceAction):
    """Action with description and individual vote records."""

    description: str | None = None
    rationale: str | None = None
    votes: list[VoteRecord] = field(default_factory=list)
    cc_votes: list[VoteRecord] = field(default_factory=list)

    @property
    def all_votes(self) -> list[VoteRecord]:
        return [*self.votes, *self.cc_votes]


@dataclass
class ProposalRef(BaseEntity):
    """Parsed txHash:certIndex."""

    tx_hash: str
    cert_index: int


@dataclass
class NclDisplay(BaseEntity):
    """Treasury Net Change Limit for a year, in ADA."""

    year: int
    current_value_ada: float
    target_value_ada: float
    percent_used: float
    epoch: int | None = None
    updated_at: str | None = None


@dataclass
class TimelinePoint(BaseEntity):
    """Cumulative vote totals after one more vote."""

    label: str
    yes_count: int = 0
    no_count: int = 0
    abstain_count: int = 0
    yes_power: float = 0.0
    no_power: float = 0.0
    abstain_power: float = 0.0


@dataclass
class PowerAbstainStats(BaseEntity):
    """Abstain share of a power-weighted role."""

    percent: float = 0.0
    power: float = 0.0


@dataclass
class CcAbstainStats(BaseEntity):
    """Committee vote counts with abstain share."""

    percent: float = 0.0
    count: int = 0
    yes_count: int = 0
    no_count: int = 0


@dataclass
class DetailSummary(BaseEntity):
    """Everything the detail view derives from one action."""

    hash: str
    visible_roles: dict[str, bool]
    eligible_roles: list[str]
    curve_role_options: list[str]
    curve_role: str
    show_power: bool
    proposal_ref: ProposalRef | None = None
    drep_abstain: PowerAbstainStats | None = None
    spo_abstain: PowerAbstainStats | None = None
    cc_abstain: CcAbstainStats | None = None
    timeline: list[TimelinePoint] = field(default_factory=list)
