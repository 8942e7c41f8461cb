"""Tests for governance API views."""

import asyncio

import httpx
import pytest

import gov_client.base as base
from app.container import container
from gov_client import GovernanceClient
from web.api.errors import NotFoundError, ValidationError
from web.api.governance import (
    get_action_detail,
    get_actions,
    get_current_ncl,
    get_ncl_history,
    get_overview,
    get_vote_timeline,
)

TREASURY_HASH = "cc" * 32 + ":0"

PROPOSALS = [
    {"hash": TREASURY_HASH, "title": "Fund tooling", "type": "Treasury", "status": "Active", "submissionEpoch": 540},
    {"hash": "dd" * 32 + ":1", "title": "Older tooling grant", "type": "Treasury", "status": "Active", "submissionEpoch": 520},
    {
        "hash": "ee" * 32 + ":0",
        "title": "Poll",
        "type": "InfoAction",
        "status": "Expired",
        "submissionEpoch": 530,
        "threshold": {"drepThreshold": None, "spoThreshold": 0.51},
    },
]

DETAIL = {
    **PROPOSALS[0],
    "cc": {"yesPercent": 50, "noPercent": 25, "abstainPercent": 25, "yesCount": 2, "noCount": 1},
    "votes": [
        {"voterType": "DRep", "voterId": "drep1", "vote": "Yes", "votingPowerAda": 30, "votedAt": "2025-03-04T09:15:00Z"},
        {"voterType": "DRep", "voterId": "drep2", "vote": "Abstain", "votingPowerAda": 10, "votedAt": "2025-03-05T10:00:00Z"},
        {"voterType": "SPO", "voterId": "pool1", "vote": "No", "votingPowerAda": 99},
    ],
    "ccVotes": [
        {"voterType": "CC", "voterId": "cc1", "vote": "Yes"},
        {"voterType": "CC", "voterId": "cc2", "vote": "Abstain"},
    ],
}


NCL_HISTORY = [
    {"year": 2025, "currentValue": "50000000000000", "targetValue": "200000000000000", "epoch": 560},
    {"year": 2026, "currentValue": "2500000000", "targetValue": "0"},
]


def handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/api/proposals":
        return httpx.Response(200, json=PROPOSALS)
    if path == f"/api/proposals/{TREASURY_HASH}":
        return httpx.Response(200, json=DETAIL)
    if path == "/api/ncl":
        return httpx.Response(200, json=NCL_HISTORY)
    if path == "/api/overview":
        return httpx.Response(200, json={"active": 2, "expired": 1})
    return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture(autouse=True)
def wired_container(monkeypatch):
    monkeypatch.setattr(base, "API_BASE_URL", "http://gov.test/api")
    monkeypatch.setattr(base, "API_KEY", None)
    transport = httpx.MockTransport(handler)
    container.init(client_factory=lambda: GovernanceClient(transport=transport), force=True)


class TestGetActions:
    def test_curated_table(self):
        response = asyncio.run(get_actions())
        assert [i.hash for i in response.items] == [TREASURY_HASH, "ee" * 32 + ":0"]
        assert response.total == 2
        assert response.items[0].type_label == "Treasury Withdrawal"

    def test_spo_tally_follows_threshold(self):
        response = asyncio.run(get_actions())
        shown = {i.title: i.show_spo_tally for i in response.items}
        assert shown == {"Fund tooling": False, "Poll": True}

    def test_status_filter_and_labels(self):
        response = asyncio.run(get_actions(statuses=["Expired"]))
        assert [i.title for i in response.items] == ["Poll"]
        assert response.items[0].status_label == "Expired"

    def test_search(self):
        response = asyncio.run(get_actions(query="POLL"))
        assert [i.title for i in response.items] == ["Poll"]

    def test_invalid_status(self):
        with pytest.raises(ValidationError):
            asyncio.run(get_actions(statuses=["Pending"]))


class TestGetActionDetail:
    def test_detail(self):
        response = asyncio.run(get_action_detail(TREASURY_HASH))
        assert response.action.hash == TREASURY_HASH
        assert response.visible_roles == {"DRep": True, "SPO": False, "CC": True}
        assert response.eligible_roles == ["DRep", "CC"]
        assert response.curve_role_options == ["All", "DRep", "CC"]
        assert response.cert_tx_hash == "cc" * 32
        assert response.cert_index == 0
        assert response.spo_abstain is None
        assert response.drep_abstain.power == 10
        assert response.drep_abstain.percent == pytest.approx(25)
        assert response.cc_abstain.count == 1
        assert len(response.timeline) == 5

    def test_ineligible_curve_role_falls_back(self):
        response = asyncio.run(get_action_detail(TREASURY_HASH, curve_role="SPO"))
        assert response.curve_role == "All"
        assert response.show_power is False

    def test_missing(self):
        with pytest.raises(NotFoundError):
            asyncio.run(get_action_detail("missing"))

    def test_invalid_role(self):
        with pytest.raises(ValidationError):
            asyncio.run(get_action_detail(TREASURY_HASH, curve_role="Delegator"))

    def test_blank_id(self):
        with pytest.raises(ValidationError):
            asyncio.run(get_action_detail("  "))


class TestGetVoteTimeline:
    def test_drep_curve(self):
        response = asyncio.run(get_vote_timeline(TREASURY_HASH, role="DRep"))
        assert response.role == "DRep"
        assert response.show_power is True
        assert [p.label for p in response.points] == ["Mar 4, 09:15", "Mar 5, 10:00"]
        assert response.points[-1].yes_power == 30
        assert response.points[-1].abstain_power == 10


class TestGetCurrentNcl:
    def test_missing(self):
        with pytest.raises(NotFoundError):
            asyncio.run(get_current_ncl())


class TestGetNclHistory:
    def test_history(self):
        response = asyncio.run(get_ncl_history())
        assert response.total == 2
        first, second = response.items
        assert first.percent_used == 25
        assert first.current_label == "50.0M ₳"
        assert second.percent_used == 0
        assert second.current_label == "2.5k ₳"


class TestGetOverview:
    def test_counts_passed_through(self):
        assert asyncio.run(get_overview()).summary == {"active": 2, "expired": 1}
