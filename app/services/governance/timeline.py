"""Cumulative vote curves over time."""

from collections.abc import Iterable, Iterator
from datetime import datetime, timezone

from app.models.governance import TimelinePoint, VoteRecord
from app.models.governance.vocabulary import VoteChoice


def parse_timestamp(value) -> datetime | None:
    """ISO-8601 timestamp to an aware UTC datetime; None if absent or invalid."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def timeline_label(moment: datetime | None, position: int) -> str:
    """'Mar 4, 09:15' for dated votes, 'Vote 3' otherwise (1-based)."""
    if moment is None:
        return f"Vote {position}"
    return f"{moment:%b} {moment.day}, {moment:%H:%M}"


def _chronological(votes: list[VoteRecord]) -> list[tuple[datetime | None, VoteRecord]]:
    dated = [(parse_timestamp(v.voted_at), i, v) for i, v in enumerate(votes)]
    # undated first in original order, then by time; index keeps ties stable
    dated.sort(key=lambda t: (t[0] is not None, t[0] or datetime.min.replace(tzinfo=timezone.utc), t[1]))
    return [(moment, vote) for moment, _, vote in dated]


def iter_vote_timeline(votes: Iterable[VoteRecord], role: str | None = None) -> Iterator[TimelinePoint]:
    """Yield one cumulative snapshot per vote, oldest first.

    ``role`` limits the curve to one voter type; None or "All" keeps every
    vote. Anything other than an exact "Yes" or "No" counts as abstain.
    """
    selected = [v for v in votes if role in (None, "All") or v.voter_type == role]

    yes_count = no_count = abstain_count = 0
    yes_power = no_power = abstain_power = 0.0

    for position, (moment, vote) in enumerate(_chronological(selected), start=1):
        power = max(0.0, vote.voting_power_ada or 0.0)
        if vote.vote == VoteChoice.YES:
            yes_count += 1
            yes_power += power
        elif vote.vote == VoteChoice.NO:
            no_count += 1
            no_power += power
        else:
            abstain_count += 1
            abstain_power += power

        yield TimelinePoint(
            label=timeline_label(moment, position),
            yes_count=yes_count,
            no_count=no_count,
            abstain_count=abstain_count,
            yes_power=yes_power,
            no_power=no_power,
            abstain_power=abstain_power,
        )


def vote_timeline(votes: Iterable[VoteRecord], role: str | None = None) -> list[TimelinePoint]:
    return list(iter_vote_timeline(votes, role))
