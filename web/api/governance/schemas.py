"""Governance API response schemas."""

from typing import Any

from pydantic import BaseModel


class RoleTallyItem(BaseModel):
    """Backend tally for one role, with derived ADA amounts."""

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


class ActionItem(BaseModel):
    """Governance action row."""

    hash: str
    proposal_id: str | None = None
    tx_hash: str | None = None
    title: str
    type: str
    type_label: str
    status: str
    status_label: str
    constitutionality: str
    show_spo_tally: bool = False

    drep_yes_percent: float
    drep_no_percent: float
    drep_abstain_percent: float
    drep_yes_ada: float
    drep_no_ada: float
    drep_abstain_ada: float

    spo_yes_percent: float
    spo_no_percent: float
    spo_abstain_percent: float
    spo_yes_ada: float
    spo_no_ada: float
    spo_abstain_ada: float

    cc_yes_percent: float
    cc_no_percent: float
    cc_abstain_percent: float
    cc_yes_count: int
    cc_no_count: int
    cc_abstain_count: int

    total_yes: int
    total_no: int
    total_abstain: int
    submission_epoch: int
    expiry_epoch: int

    threshold: Any = None
    voting_status: Any = None

    drep: RoleTallyItem | None = None
    spo: RoleTallyItem | None = None
    cc: RoleTallyItem | None = None


class ActionsResponse(BaseModel):
    """Curated actions table."""

    items: list[ActionItem]
    total: int
    selected_types: list[str]
    selected_statuses: list[str]
    search_query: str


class VoteItem(BaseModel):
    """Individual vote."""

    voter_type: str
    voter_id: str
    voter_name: str | None
    vote: str
    voting_power: str
    voting_power_ada: float
    anchor_url: str | None
    anchor_hash: str | None
    voted_at: str | None
    drep_id: str | None
    drep_name: str | None


class TimelinePointItem(BaseModel):
    """Cumulative totals after one vote."""

    label: str
    yes_count: int
    no_count: int
    abstain_count: int
    yes_power: float
    no_power: float
    abstain_power: float


class PowerAbstainItem(BaseModel):
    percent: float
    power: float
    power_label: str


class CcAbstainItem(BaseModel):
    percent: float
    count: int
    yes_count: int
    no_count: int


class ActionDetailResponse(BaseModel):
    """Action detail with role visibility, statistics and vote curve."""

    action: ActionItem
    description: str | None
    rationale: str | None
    votes: list[VoteItem]
    cc_votes: list[VoteItem]
    cert_tx_hash: str | None
    cert_index: int | None
    visible_roles: dict[str, bool]
    eligible_roles: list[str]
    curve_role_options: list[str]
    curve_role: str
    show_power: bool
    drep_abstain: PowerAbstainItem | None
    spo_abstain: PowerAbstainItem | None
    cc_abstain: CcAbstainItem | None
    timeline: list[TimelinePointItem]


class TimelineResponse(BaseModel):
    """Vote curve for one action."""

    hash: str
    role: str
    show_power: bool
    points: list[TimelinePointItem]


class NclResponse(BaseModel):
    """Treasury Net Change Limit usage."""

    year: int
    current_value_ada: float
    target_value_ada: float
    percent_used: float
    current_label: str
    target_label: str
    epoch: int | None
    updated_at: str | None


class NclHistoryResponse(BaseModel):
    """Net Change Limit usage for every reported year."""

    items: list[NclResponse]
    total: int


class OverviewResponse(BaseModel):
    """Proposal counts by status, as reported by the backend."""

    summary: dict[str, Any]
