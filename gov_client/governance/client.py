"""Governance API client."""

from urllib.parse import quote

from gov_client.base import BaseClient


class GovernanceClient(BaseClient):
    """Client for the governance dashboard backend endpoints."""

    async def overview(self) -> dict:
        """GET /overview - proposal counts by status."""
        return await self._get("overview")

    async def proposals(self) -> list[dict]:
        """GET /proposals - all governance actions with tallies."""
        return await self._get("proposals")

    async def proposal(self, proposal_id: str) -> dict:
        """GET /proposals/{id} - action detail with votes.

        ``proposal_id`` may be a numeric id, a tx hash, txHash:certIndex or a
        gov_action bech32 id.
        """
        return await self._get(f"proposals/{quote(proposal_id, safe=':')}")

    async def ncl(self) -> list[dict]:
        """GET /ncl - treasury Net Change Limit for every year."""
        return await self._get("ncl")

    async def ncl_by_year(self, year: int) -> dict:
        """GET /ncl/{year} - Net Change Limit for one year."""
        return await self._get(f"ncl/{year}")
