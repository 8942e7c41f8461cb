"""Governance API views - thin layer over services."""

from app.container import container
from app.models.governance import (
    GovernanceAction,
    NclDisplay,
    PowerAbstainStats,
    status_label,
    type_label,
)
from app.services.governance import ActionFilters, eligibility
from helpers.formulas import format_ada
from web.api.errors import (
    NotFoundError,
    validate_proposal_id,
    validate_role_filter,
    validate_statuses,
)

from .schemas import (
    ActionDetailResponse,
    ActionItem,
    ActionsResponse,
    CcAbstainItem,
    NclHistoryResponse,
    NclResponse,
    OverviewResponse,
    PowerAbstainItem,
    TimelinePointItem,
    TimelineResponse,
    VoteItem,
)


def _action_item(action: GovernanceAction) -> ActionItem:
    data = action.to_dict(exclude_none=True)
    data["type_label"] = type_label(action.type)
    data["status_label"] = status_label(action.status)
    data["show_spo_tally"] = eligibility.shows_spo_tally(action)
    return ActionItem.model_validate(data)


def _power_item(stats: PowerAbstainStats | None) -> PowerAbstainItem | None:
    if stats is None:
        return None
    return PowerAbstainItem(percent=stats.percent, power=stats.power, power_label=format_ada(stats.power))


async def get_actions(
    types: list[str] | None = None,
    statuses: list[str] | None = None,
    query: str = "",
) -> ActionsResponse:
    """Get the curated actions table."""
    filters = ActionFilters(search_query=query)
    if types is not None:
        filters.selected_types = list(dict.fromkeys(types))
    if statuses is not None:
        validate_statuses(statuses)
        filters.selected_statuses = list(dict.fromkeys(statuses))

    actions = await container.governance.list_actions()
    rows = container.governance.table(actions, filters)

    return ActionsResponse(
        items=[_action_item(a) for a in rows],
        total=len(rows),
        selected_types=filters.selected_types,
        selected_statuses=filters.selected_statuses,
        search_query=filters.search_query,
    )


async def get_action_detail(proposal_id: str, curve_role: str = "All") -> ActionDetailResponse:
    """Get one action with statistics and vote curve."""
    validate_proposal_id(proposal_id)
    validate_role_filter(curve_role)

    detail = await container.governance.get_action(proposal_id)
    if detail is None:
        raise NotFoundError(f"Governance action not found: {proposal_id}")

    summary = container.governance.summarize(detail, curve_role)
    ref = summary.proposal_ref

    return ActionDetailResponse(
        action=_action_item(detail),
        description=detail.description,
        rationale=detail.rationale,
        votes=[VoteItem(**v.to_dict()) for v in detail.votes],
        cc_votes=[VoteItem(**v.to_dict()) for v in detail.cc_votes],
        cert_tx_hash=ref.tx_hash if ref else None,
        cert_index=ref.cert_index if ref else None,
        visible_roles=summary.visible_roles,
        eligible_roles=summary.eligible_roles,
        curve_role_options=summary.curve_role_options,
        curve_role=summary.curve_role,
        show_power=summary.show_power,
        drep_abstain=_power_item(summary.drep_abstain),
        spo_abstain=_power_item(summary.spo_abstain),
        cc_abstain=CcAbstainItem(**summary.cc_abstain.to_dict()) if summary.cc_abstain else None,
        timeline=[TimelinePointItem(**p.to_dict()) for p in summary.timeline],
    )


async def get_vote_timeline(proposal_id: str, role: str = "All") -> TimelineResponse:
    """Get the cumulative vote curve for one action."""
    validate_proposal_id(proposal_id)
    validate_role_filter(role)

    detail = await container.governance.get_action(proposal_id)
    if detail is None:
        raise NotFoundError(f"Governance action not found: {proposal_id}")

    summary = container.governance.summarize(detail, role)

    return TimelineResponse(
        hash=detail.hash,
        role=summary.curve_role,
        show_power=summary.show_power,
        points=[TimelinePointItem(**p.to_dict()) for p in summary.timeline],
    )


def _ncl_item(ncl: NclDisplay) -> NclResponse:
    return NclResponse(
        year=ncl.year,
        current_value_ada=ncl.current_value_ada,
        target_value_ada=ncl.target_value_ada,
        percent_used=ncl.percent_used,
        current_label=format_ada(ncl.current_value_ada),
        target_label=format_ada(ncl.target_value_ada),
        epoch=ncl.epoch,
        updated_at=ncl.updated_at,
    )


async def get_current_ncl() -> NclResponse:
    """Get treasury Net Change Limit usage for the current year."""
    ncl = await container.governance.current_year_ncl()
    if ncl is None:
        raise NotFoundError("NCL data not found for current year")
    return _ncl_item(ncl)


async def get_ncl_history() -> NclHistoryResponse:
    """Get Net Change Limit usage for every year."""
    items = [_ncl_item(ncl) for ncl in await container.governance.list_ncl()]
    return NclHistoryResponse(items=items, total=len(items))


async def get_overview() -> OverviewResponse:
    """Get proposal counts by status."""
    return OverviewResponse(summary=await container.governance.get_overview())
