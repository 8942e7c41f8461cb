"""Per-role vote statistics for the action detail view."""

from collections.abc import Iterable

from app.models.governance import (
    CcAbstainStats,
    GovernanceActionDetail,
    PowerAbstainStats,
    ProposalRef,
    VoteRecord,
)
from app.models.governance.vocabulary import VoteChoice, VoterRole
from helpers import formulas


def power_abstain_stats(votes: Iterable[VoteRecord], role: str) -> PowerAbstainStats:
    """Abstain power of one power-weighted role and its share of the total."""
    role_votes = [v for v in votes if v.voter_type == role]
    total = sum(max(0.0, v.voting_power_ada) for v in role_votes)
    if total <= 0:
        return PowerAbstainStats()

    abstain = sum(max(0.0, v.voting_power_ada) for v in role_votes if v.vote == VoteChoice.ABSTAIN)
    return PowerAbstainStats(percent=formulas.share_percent(abstain, total), power=abstain)


def cc_abstain_stats(detail: GovernanceActionDetail) -> CcAbstainStats:
    """Committee counts from CC vote records, else from the CC tally."""
    cc_votes = [v for v in detail.all_votes if v.voter_type == VoterRole.CC]

    if not cc_votes:
        return CcAbstainStats(
            percent=detail.cc_abstain_percent,
            count=detail.cc_abstain_count,
            yes_count=detail.cc_yes_count,
            no_count=detail.cc_no_count,
        )

    yes = sum(1 for v in cc_votes if v.vote == VoteChoice.YES)
    no = sum(1 for v in cc_votes if v.vote == VoteChoice.NO)
    abstain = sum(1 for v in cc_votes if v.vote == VoteChoice.ABSTAIN)
    return CcAbstainStats(
        percent=formulas.share_percent(abstain, len(cc_votes)),
        count=abstain,
        yes_count=yes,
        no_count=no,
    )


def parse_proposal_hash(value: str | None) -> ProposalRef | None:
    """Split 'txHash:certIndex' (or 'txHash#certIndex') into its parts."""
    if not value:
        return None

    for separator in (":", "#"):
        if separator not in value:
            continue
        tx_hash, _, index = value.partition(separator)
        index = index.split(separator)[0].strip()
        if tx_hash and index.isascii() and index.isdigit():
            return ProposalRef(tx_hash=tx_hash, cert_index=int(index))

    return None
