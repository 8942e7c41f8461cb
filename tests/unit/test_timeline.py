"""Tests for cumulative vote timelines."""

from app.models.governance import VoteRecord
from app.services.governance.timeline import (
    iter_vote_timeline,
    parse_timestamp,
    timeline_label,
    vote_timeline,
)


def _vote(vote, power=0.0, voted_at=None, voter_type="DRep", voter_id="") -> VoteRecord:
    return VoteRecord(voter_type=voter_type, voter_id=voter_id, vote=vote, voting_power_ada=power, voted_at=voted_at)


FIELDS = ("yes_count", "no_count", "abstain_count", "yes_power", "no_power", "abstain_power")


class TestCumulative:
    def test_final_totals(self):
        votes = [
            _vote("No", 5, "2025-02-03T12:00:00Z"),
            _vote("Abstain", 2, "2025-02-01T08:30:00Z"),
            _vote("Yes", 10, "2025-02-02T17:45:00Z"),
        ]
        points = vote_timeline(votes)
        final = points[-1]
        assert (final.yes_power, final.no_power, final.abstain_power) == (10, 5, 2)
        assert (final.yes_count, final.no_count, final.abstain_count) == (1, 1, 1)

    def test_monotonic(self):
        votes = [
            _vote("No", 5, "2025-02-03T12:00:00Z"),
            _vote("Abstain", 2, "2025-02-01T08:30:00Z"),
            _vote("Yes", 10, "2025-02-02T17:45:00Z"),
            _vote("Yes", 4),
        ]
        points = vote_timeline(votes)
        for prev, cur in zip(points, points[1:]):
            for f in FIELDS:
                assert getattr(prev, f) <= getattr(cur, f)
        for p in points:
            for f in FIELDS:
                assert getattr(p, f) <= getattr(points[-1], f)

    def test_unknown_vote_is_abstain(self):
        final = vote_timeline([_vote("yes", 3), _vote("Maybe", 1)])[-1]
        assert final.abstain_count == 2
        assert final.abstain_power == 4
        assert final.yes_count == 0

    def test_empty(self):
        assert vote_timeline([]) == []


class TestOrdering:
    def test_chronological(self):
        votes = [
            _vote("No", 1, "2025-02-03T12:00:00Z", voter_id="late"),
            _vote("Yes", 1, "2025-02-01T12:00:00Z", voter_id="early"),
        ]
        points = vote_timeline(votes)
        assert points[0].yes_count == 1 and points[0].no_count == 0

    def test_undated_first_in_original_order(self):
        votes = [
            _vote("Yes", 1, "2025-02-01T12:00:00Z"),
            _vote("No", 1),
            _vote("Abstain", 1),
        ]
        points = vote_timeline(votes)
        assert [p.label for p in points[:2]] == ["Vote 1", "Vote 2"]
        assert points[0].no_count == 1
        assert points[1].abstain_count == 1
        assert points[2].yes_count == 1

    def test_invalid_timestamp_treated_as_missing(self):
        points = vote_timeline([_vote("Yes", 1, "2025-02-01T12:00:00Z"), _vote("No", 1, "yesterday")])
        assert points[0].label == "Vote 1"
        assert points[0].no_count == 1


class TestRoleFilter:
    def test_single_role(self):
        votes = [_vote("Yes", 10, voter_type="DRep"), _vote("No", 3, voter_type="SPO"), _vote("No", 0, voter_type="CC")]
        assert len(vote_timeline(votes, "SPO")) == 1
        assert vote_timeline(votes, "SPO")[-1].no_power == 3

    def test_all(self):
        votes = [_vote("Yes", 10, voter_type="DRep"), _vote("No", 3, voter_type="SPO")]
        assert len(vote_timeline(votes, "All")) == 2
        assert len(vote_timeline(votes)) == 2


class TestLabels:
    def test_dated_label(self):
        moment = parse_timestamp("2025-03-04T09:15:00Z")
        assert timeline_label(moment, 1) == "Mar 4, 09:15"

    def test_undated_label(self):
        assert timeline_label(None, 3) == "Vote 3"

    def test_offset_converted_to_utc(self):
        moment = parse_timestamp("2025-03-04T11:15:00+02:00")
        assert timeline_label(moment, 1) == "Mar 4, 09:15"

    def test_parse_invalid(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None
        assert parse_timestamp("not a date") is None


class TestLaziness:
    def test_iterator_restartable(self):
        votes = [_vote("Yes", 1), _vote("No", 2)]
        first = list(iter_vote_timeline(votes))
        second = list(iter_vote_timeline(votes))
        assert first == second
