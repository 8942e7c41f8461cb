"""Raw API payload -> display entities.

All defaulting and derivation rules live here so that nothing downstream has
to re-implement fallbacks. Normalization must run exactly once per raw
payload: normalized entities are not valid raw input, and feeding ADA
amounts back in as lovelace would scale them down a second time.
"""

import math
from collections.abc import Mapping

from loguru import logger

from app.models.governance import (
    GovernanceAction,
    GovernanceActionDetail,
    NclDisplay,
    RoleTally,
    VoteRecord,
)
from helpers import formulas


def _as_mapping(value) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _text(value, default: str | None = None) -> str | None:
    if value is None:
        return default
    text = str(value)
    return text if text else default


def _optional_number(value) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _optional_count(value) -> int | None:
    number = _optional_number(value)
    return None if number is None else int(number)


def _count(value) -> int:
    return int(formulas.parse_numeric(value))


def _tally(raw: Mapping, with_ada: bool) -> RoleTally:
    tally = RoleTally(
        yes_percent=_optional_number(raw.get("yesPercent")),
        no_percent=_optional_number(raw.get("noPercent")),
        abstain_percent=_optional_number(raw.get("abstainPercent")),
        yes_lovelace=_text(raw.get("yesLovelace")),
        no_lovelace=_text(raw.get("noLovelace")),
        abstain_lovelace=_text(raw.get("abstainLovelace")),
        yes_count=_optional_count(raw.get("yesCount")),
        no_count=_optional_count(raw.get("noCount")),
        abstain_count=_optional_count(raw.get("abstainCount")),
    )
    if not with_ada:
        return tally

    tally.yes_ada = formulas.to_display_amount(tally.yes_lovelace)
    tally.no_ada = formulas.to_display_amount(tally.no_lovelace)
    if tally.abstain_lovelace is not None:
        tally.abstain_ada = formulas.to_display_amount(tally.abstain_lovelace)
    else:
        tally.abstain_ada = formulas.derive_abstain_value(
            tally.yes_ada,
            tally.yes_percent,
            tally.no_ada,
            tally.no_percent,
            tally.abstain_percent,
        )
    return tally


def _cc_abstain_count(cc: RoleTally) -> int:
    if cc.abstain_count is not None:
        return max(0, cc.abstain_count)
    return formulas.derive_cc_abstain_count(
        cc.yes_count,
        cc.no_count,
        cc.yes_percent,
        cc.no_percent,
        cc.abstain_percent,
    )


def _action_fields(raw: Mapping) -> dict:
    raw_drep = raw.get("drep")
    raw_spo = raw.get("spo")
    raw_cc = raw.get("cc")

    # DRep ADA fields are always present; an absent tally reads as zeros
    drep_view = _tally(_as_mapping(raw_drep), with_ada=True)
    drep = drep_view if isinstance(raw_drep, Mapping) else None
    spo = _tally(raw_spo, with_ada=True) if isinstance(raw_spo, Mapping) else None
    cc = _tally(raw_cc, with_ada=False) if isinstance(raw_cc, Mapping) else None

    fields = {
        "hash": _text(raw.get("hash"), ""),
        "proposal_id": _text(raw.get("proposalId")),
        "tx_hash": _text(raw.get("txHash")),
        "title": _text(raw.get("title"), "Untitled Proposal"),
        "type": _text(raw.get("type"), ""),
        "status": _text(raw.get("status"), ""),
        "constitutionality": _text(raw.get("constitutionality"), "Unspecified"),
        "drep_yes_percent": drep_view.yes_percent or 0.0,
        "drep_no_percent": drep_view.no_percent or 0.0,
        "drep_abstain_percent": drep_view.abstain_percent or 0.0,
        "drep_yes_ada": drep_view.yes_ada,
        "drep_no_ada": drep_view.no_ada,
        "drep_abstain_ada": drep_view.abstain_ada,
        "total_yes": _count(raw.get("totalYes")),
        "total_no": _count(raw.get("totalNo")),
        "total_abstain": _count(raw.get("totalAbstain")),
        "submission_epoch": _count(raw.get("submissionEpoch")),
        "expiry_epoch": _count(raw.get("expiryEpoch")),
        "threshold": raw.get("threshold"),
        "voting_status": raw.get("votingStatus"),
        "drep": drep,
        "spo": spo,
        "cc": cc,
    }

    if spo is not None:
        fields.update(
            spo_yes_percent=spo.yes_percent or 0.0,
            spo_no_percent=spo.no_percent or 0.0,
            spo_abstain_percent=spo.abstain_percent or 0.0,
            spo_yes_ada=spo.yes_ada,
            spo_no_ada=spo.no_ada,
            spo_abstain_ada=spo.abstain_ada,
        )

    if cc is not None:
        fields.update(
            cc_yes_percent=cc.yes_percent or 0.0,
            cc_no_percent=cc.no_percent or 0.0,
            cc_abstain_percent=cc.abstain_percent or 0.0,
            cc_yes_count=max(0, cc.yes_count or 0),
            cc_no_count=max(0, cc.no_count or 0),
            cc_abstain_count=_cc_abstain_count(cc),
        )

    return fields


def normalize_action(raw) -> GovernanceAction:
    """Map a raw proposal record to a fully populated GovernanceAction."""
    raw = _as_mapping(raw)
    action = GovernanceAction(**_action_fields(raw))
    logger.debug("Normalized action {} ({})", action.hash or "<no hash>", action.type)
    return action


def normalize_vote_record(raw) -> VoteRecord:
    """Map a raw vote entry; drep_id/drep_name mirror voter_id/voter_name."""
    raw = _as_mapping(raw)
    voter_id = _text(raw.get("voterId"), "")
    voter_name = _text(raw.get("voterName"))
    voting_power_ada = raw.get("votingPowerAda")

    return VoteRecord(
        voter_type=_text(raw.get("voterType"), ""),
        voter_id=voter_id,
        voter_name=voter_name,
        drep_id=voter_id or _text(raw.get("drepId")),
        drep_name=voter_name or voter_id or _text(raw.get("drepName")),
        vote=_text(raw.get("vote"), ""),
        voting_power=_text(raw.get("votingPower"), "0"),
        voting_power_ada=0.0 if voting_power_ada is None else formulas.parse_numeric(voting_power_ada),
        anchor_url=_text(raw.get("anchorUrl")),
        anchor_hash=_text(raw.get("anchorHash")),
        voted_at=_text(raw.get("votedAt")),
    )


def _vote_list(value) -> list[VoteRecord]:
    if not isinstance(value, (list, tuple)):
        return []
    return [normalize_vote_record(v) for v in value]


def normalize_action_detail(raw) -> GovernanceActionDetail:
    """normalize_action plus description, rationale and vote records."""
    raw = _as_mapping(raw)
    detail = GovernanceActionDetail(
        **_action_fields(raw),
        description=_text(raw.get("description")),
        rationale=_text(raw.get("rationale")),
        votes=_vote_list(raw.get("votes")),
        cc_votes=_vote_list(raw.get("ccVotes")),
    )
    logger.debug(
        "Normalized detail {}: {} votes, {} CC votes",
        detail.hash or "<no hash>",
        len(detail.votes),
        len(detail.cc_votes),
    )
    return detail


def normalize_ncl(raw) -> NclDisplay:
    """NCL year record (lovelace) -> ADA with usage percent."""
    raw = _as_mapping(raw)
    current = formulas.to_display_amount(raw.get("currentValue"))
    target = formulas.to_display_amount(raw.get("targetValue"))

    return NclDisplay(
        year=_count(raw.get("year")),
        current_value_ada=current,
        target_value_ada=target,
        percent_used=formulas.share_percent(current, target),
        epoch=_optional_count(raw.get("epoch")),
        updated_at=_text(raw.get("updatedAt")),
    )
