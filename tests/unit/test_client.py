"""Tests for the governance API client and service fetching."""

import asyncio

import httpx
import pytest

import gov_client.base as base
from app.services.governance import GovernanceService
from gov_client import GovernanceClient

PROPOSALS = [
    {
        "hash": "aa" * 32 + ":0",
        "title": "Fund tooling",
        "type": "Treasury",
        "status": "Active",
        "drep": {"yesPercent": 80, "noPercent": 20, "yesLovelace": "8000000", "noLovelace": "2000000"},
        "submissionEpoch": 540,
    },
    {"hash": "bb" * 32 + ":1", "title": "Poll", "type": "InfoAction", "status": "Expired", "submissionEpoch": 530},
]


@pytest.fixture(autouse=True)
def api_config(monkeypatch):
    monkeypatch.setattr(base, "API_BASE_URL", "http://gov.test/api")
    monkeypatch.setattr(base, "API_KEY", None)


def _service(handler) -> GovernanceService:
    transport = httpx.MockTransport(handler)
    return GovernanceService(client_factory=lambda: GovernanceClient(transport=transport))


class TestGovernanceClient:
    def test_proposals_path(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json=PROPOSALS)

        async def run():
            async with GovernanceClient(transport=httpx.MockTransport(handler)) as client:
                return await client.proposals()

        assert asyncio.run(run()) == PROPOSALS
        assert seen == ["/api/proposals"]

    def test_api_key_header(self, monkeypatch):
        monkeypatch.setattr(base, "API_KEY", "secret")
        headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers.get("X-API-Key"))
            return httpx.Response(200, json={})

        async def run():
            async with GovernanceClient(transport=httpx.MockTransport(handler)) as client:
                await client.overview()

        asyncio.run(run())
        assert headers == ["secret"]

    def test_no_api_key_header_when_unset(self):
        headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers.get("X-API-Key"))
            return httpx.Response(200, json={})

        async def run():
            async with GovernanceClient(transport=httpx.MockTransport(handler)) as client:
                await client.overview()

        asyncio.run(run())
        assert headers == [None]

    def test_proposal_id_in_path(self):
        paths = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(200, json={})

        async def run():
            async with GovernanceClient(transport=httpx.MockTransport(handler)) as client:
                await client.proposal("abcd:2")
                await client.ncl_by_year(2025)

        asyncio.run(run())
        assert paths == ["/api/proposals/abcd:2", "/api/ncl/2025"]

    def test_client_error_not_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(404, json={"error": "Not found"})

        async def run():
            async with GovernanceClient(transport=httpx.MockTransport(handler)) as client:
                await client.proposal("missing")

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(run())
        assert len(calls) == 1

    def test_outside_context_manager(self):
        with pytest.raises(RuntimeError):
            asyncio.run(GovernanceClient().proposals())


class TestGovernanceService:
    def test_list_actions_normalized(self):
        service = _service(lambda request: httpx.Response(200, json=PROPOSALS))
        actions = asyncio.run(service.list_actions())
        assert [a.title for a in actions] == ["Fund tooling", "Poll"]
        assert actions[0].drep_yes_ada == 8
        assert actions[1].drep_yes_ada == 0

    def test_list_actions_unexpected_payload(self):
        service = _service(lambda request: httpx.Response(200, json={"error": "nope"}))
        assert asyncio.run(service.list_actions()) == []

    def test_list_actions_propagates_client_errors(self):
        service = _service(lambda request: httpx.Response(403, json={"error": "forbidden"}))
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(service.list_actions())

    def test_get_action_missing(self):
        service = _service(lambda request: httpx.Response(404, json={"error": "Not found"}))
        assert asyncio.run(service.get_action("missing")) is None

    def test_get_action_detail(self):
        payload = {
            **PROPOSALS[0],
            "votes": [{"voterType": "DRep", "voterId": "drep1", "vote": "Yes", "votingPowerAda": 8}],
        }
        service = _service(lambda request: httpx.Response(200, json=payload))
        detail = asyncio.run(service.get_action(payload["hash"]))
        assert detail.hash == payload["hash"]
        assert detail.votes[0].drep_id == "drep1"

    def test_current_year_ncl(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/ncl/2025"
            return httpx.Response(200, json={"year": 2025, "currentValue": "1000000000", "targetValue": "4000000000"})

        ncl = asyncio.run(_service(handler).current_year_ncl(2025))
        assert ncl.percent_used == 25
        assert ncl.current_value_ada == 1000

    def test_current_year_ncl_failure(self):
        service = _service(lambda request: httpx.Response(404, json={"error": "Not found"}))
        assert asyncio.run(service.current_year_ncl(2025)) is None

    def test_list_ncl(self):
        payload = [
            {"year": 2025, "currentValue": "1000000000", "targetValue": "4000000000"},
            {"year": 2026, "currentValue": "0", "targetValue": "5000000000"},
        ]
        service = _service(lambda request: httpx.Response(200, json=payload))
        history = asyncio.run(service.list_ncl())
        assert [n.year for n in history] == [2025, 2026]
        assert history[0].percent_used == 25

    def test_list_ncl_object_payload(self):
        payload = {"year": 2025, "currentValue": "1", "targetValue": "2"}
        service = _service(lambda request: httpx.Response(200, json=payload))
        assert asyncio.run(service.list_ncl()) == []

    def test_overview_passthrough(self):
        service = _service(lambda request: httpx.Response(200, json={"active": 3, "ratified": 1}))
        assert asyncio.run(service.get_overview()) == {"active": 3, "ratified": 1}

    def test_overview_unexpected_payload(self):
        service = _service(lambda request: httpx.Response(200, json=[1, 2]))
        assert asyncio.run(service.get_overview()) == {}


class TestApiConfig:
    def test_set_api_config(self, monkeypatch):
        monkeypatch.setattr(base, "API_TIMEOUT", base.API_TIMEOUT)
        base.set_api_config("http://other.test/v2/", 5, "k3y")
        assert base.API_BASE_URL == "http://other.test/v2"
        assert base.API_TIMEOUT == 5

        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((str(request.url), request.headers.get("X-API-Key")))
            return httpx.Response(200, json={})

        async def run():
            async with GovernanceClient(transport=httpx.MockTransport(handler)) as client:
                await client.overview()

        asyncio.run(run())
        assert seen == [("http://other.test/v2/overview", "k3y")]
