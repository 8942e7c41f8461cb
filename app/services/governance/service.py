"""Governance service - fetch, normalize and derive view data."""

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

import httpx
from loguru import logger

from app.models.governance import (
    DetailSummary,
    GovernanceAction,
    GovernanceActionDetail,
    NclDisplay,
)
from app.models.governance.vocabulary import VoterRole
from app.services.governance import eligibility, statistics
from app.services.governance.filtering import ActionFilters, filter_actions
from app.services.governance.normalizer import normalize_action, normalize_action_detail, normalize_ncl
from app.services.governance.timeline import vote_timeline
from gov_client import GovernanceClient, safe_request


class GovernanceService:
    """Governance dashboard business logic.

    Every fetch opens its own client session, so each poll is an independent
    request/response and concurrent callers never share connection state.
    """

    def __init__(self, client_factory: Callable[[], GovernanceClient] = GovernanceClient):
        self._client_factory = client_factory
        logger.debug("GovernanceService initialized")

    # ========== Fetching ==========

    async def list_actions(self) -> list[GovernanceAction]:
        """All actions, normalized. HTTP errors propagate to the caller."""
        async with self._client_factory() as client:
            data = await client.proposals()

        if not isinstance(data, list):
            logger.warning("Unexpected /proposals payload: {}", type(data).__name__)
            return []

        actions = [normalize_action(raw) for raw in data]
        logger.info("Loaded {} governance actions", len(actions))
        return actions

    async def get_action(self, proposal_id: str) -> GovernanceActionDetail | None:
        """Action detail, or None when it is missing or cannot be fetched."""
        async with self._client_factory() as client:
            data = await safe_request(client.proposal(proposal_id))

        if not isinstance(data, dict):
            logger.warning("Governance action {} not found", proposal_id)
            return None

        detail = normalize_action_detail(data)
        logger.info("Loaded action {} with {} votes", proposal_id, len(detail.all_votes))
        return detail

    async def get_overview(self) -> dict:
        """Proposal counts by status, passed through as sent."""
        async with self._client_factory() as client:
            data = await client.overview()

        if not isinstance(data, dict):
            logger.warning("Unexpected /overview payload: {}", type(data).__name__)
            return {}
        return data

    async def list_ncl(self) -> list[NclDisplay]:
        """NCL for every year the backend reports, in the order sent."""
        async with self._client_factory() as client:
            data = await client.ncl()

        if not isinstance(data, list):
            logger.warning("Unexpected /ncl payload: {}", type(data).__name__)
            return []
        return [normalize_ncl(raw) for raw in data]

    async def current_year_ncl(self, year: int | None = None) -> NclDisplay | None:
        """NCL for the given (default: current) year, None on failure."""
        year = year or datetime.now(timezone.utc).year
        async with self._client_factory() as client:
            try:
                data = await client.ncl_by_year(year)
            except (httpx.HTTPError, ValueError) as e:
                logger.error("Failed to fetch NCL data for year {}: {}", year, e)
                return None
        return normalize_ncl(data)

    # ========== Derivation ==========

    def table(self, actions: Iterable[GovernanceAction], filters: ActionFilters | None = None) -> list[GovernanceAction]:
        """Curated table rows."""
        return filter_actions(actions, filters)

    def summarize(self, detail: GovernanceActionDetail, curve_role: str = "All") -> DetailSummary:
        """Role visibility, abstain statistics and vote curve for one action."""
        visible = eligibility.visible_roles(detail)
        eligible = [str(r) for r in eligibility.get_eligible_roles(detail.type)]
        options = ["All", *eligible]

        if curve_role not in options:
            logger.debug("Curve role {} not eligible for {}, using All", curve_role, detail.type)
            curve_role = "All"

        all_votes = detail.all_votes
        return DetailSummary(
            hash=detail.hash,
            visible_roles={str(role): shown for role, shown in visible.items()},
            eligible_roles=eligible,
            curve_role_options=options,
            curve_role=curve_role,
            show_power=curve_role in (VoterRole.DREP, VoterRole.SPO),
            proposal_ref=statistics.parse_proposal_hash(detail.hash),
            drep_abstain=statistics.power_abstain_stats(all_votes, VoterRole.DREP) if visible[VoterRole.DREP] else None,
            spo_abstain=statistics.power_abstain_stats(all_votes, VoterRole.SPO) if visible[VoterRole.SPO] else None,
            cc_abstain=statistics.cc_abstain_stats(detail) if visible[VoterRole.CC] else None,
            timeline=vote_timeline(all_votes, curve_role),
        )
