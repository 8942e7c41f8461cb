"""Which voter roles take part in which governance actions.

Two layers decide whether a role's statistics are shown:

1. the capability table, keyed by proposal type;
2. overrides for a handful of early actions whose recorded votes contradict
   the table, matched by action id.
"""

from types import MappingProxyType

from loguru import logger

from app.models.governance.vocabulary import (
    ROLE_ORDER,
    ProposalType,
    VoterRole,
    canonical_type,
    is_type_key,
)

D, S, C = VoterRole.DREP, VoterRole.SPO, VoterRole.CC

VOTING_ROLES = MappingProxyType(
    {
        ProposalType.NO_CONFIDENCE: frozenset({D, S}),
        ProposalType.UPDATE_COMMITTEE: frozenset({D, S}),
        ProposalType.NEW_CONSTITUTION: frozenset({D, C}),
        ProposalType.HARD_FORK_INITIATION: frozenset({D, S, C}),
        ProposalType.PARAMETER_CHANGE: frozenset({D, C}),
        ProposalType.TREASURY: frozenset({D, C}),
        ProposalType.INFO_ACTION: frozenset({D, S, C}),
    }
)

LEGACY_NON_APPLICABLE_DREP_ACTIONS: tuple[str, ...] = (
    "gov_action1k2jertppnnndejjcglszfqq4yzw8evzrd2nt66rr6rqlz54xp0zsq05ecsn",
    "gov_action1286ft23r7jem825s4l0y5rn8sgam0tz2ce04l7a38qmnhp3l9a6qqn850dw",
    "gov_action1pvv5wmjqhwa4u85vu9f4ydmzu2mgt8n7et967ph2urhx53r70xusqnmm525",
)

LEGACY_NON_APPLICABLE_SPO_ACTIONS: tuple[str, ...] = (
    "gov_action1k2jertppnnndejjcglszfqq4yzw8evzrd2nt66rr6rqlz54xp0zsq05ecsn",
    "gov_action1286ft23r7jem825s4l0y5rn8sgam0tz2ce04l7a38qmnhp3l9a6qqn850dw",
)

LEGACY_NON_APPLICABLE_CC_ACTIONS: tuple[str, ...] = ()

LEGACY_ACTIONS = frozenset(
    LEGACY_NON_APPLICABLE_DREP_ACTIONS + LEGACY_NON_APPLICABLE_SPO_ACTIONS + LEGACY_NON_APPLICABLE_CC_ACTIONS
)

# Types with no CC / SPO threshold
CC_NOT_APPLICABLE_TYPES = frozenset({ProposalType.NO_CONFIDENCE, ProposalType.UPDATE_COMMITTEE})
SPO_NOT_APPLICABLE_TYPES = frozenset(
    {ProposalType.NEW_CONSTITUTION, ProposalType.PARAMETER_CHANGE, ProposalType.TREASURY}
)


def _resolve_type(proposal_type) -> ProposalType | None:
    resolved = canonical_type(proposal_type)
    if resolved is None:
        logger.debug("Unknown proposal type {!r}", proposal_type)
    elif not is_type_key(proposal_type) and not isinstance(proposal_type, ProposalType):
        logger.debug("Proposal type given as label {!r}, resolved to {}", proposal_type, resolved)
    return resolved


def can_role_vote_on_action(proposal_type, role) -> bool:
    """Capability table lookup. Unknown types allow every known role."""
    try:
        role = VoterRole(role)
    except ValueError:
        return False
    resolved = _resolve_type(proposal_type)
    if resolved is None:
        return True
    return role in VOTING_ROLES[resolved]


def get_eligible_roles(proposal_type) -> list[VoterRole]:
    """Roles allowed to vote on the type, in DRep, SPO, CC order."""
    return [role for role in ROLE_ORDER if can_role_vote_on_action(proposal_type, role)]


def _action_ids(action) -> list[str]:
    ids = [getattr(action, "hash", None), getattr(action, "proposal_id", None)]
    return [i for i in ids if i]


def _on_list(action, legacy_ids) -> bool:
    for action_id in _action_ids(action):
        if any(action_id == legacy or legacy in action_id for legacy in legacy_ids):
            return True
    return False


def is_legacy_action(action) -> bool:
    return _on_list(action, LEGACY_ACTIONS)


def is_drep_not_applicable(action) -> bool:
    """DRep stats are hidden only for the legacy DRep list."""
    return _on_list(action, LEGACY_NON_APPLICABLE_DREP_ACTIONS)


def is_spo_not_applicable(action) -> bool:
    if _on_list(action, LEGACY_NON_APPLICABLE_SPO_ACTIONS):
        return True
    if is_legacy_action(action):
        return False
    return canonical_type(getattr(action, "type", None)) in SPO_NOT_APPLICABLE_TYPES


def is_cc_not_applicable(action) -> bool:
    if _on_list(action, LEGACY_NON_APPLICABLE_CC_ACTIONS):
        return True
    if is_legacy_action(action):
        return False
    return canonical_type(getattr(action, "type", None)) in CC_NOT_APPLICABLE_TYPES


_NOT_APPLICABLE = MappingProxyType(
    {
        VoterRole.DREP: is_drep_not_applicable,
        VoterRole.SPO: is_spo_not_applicable,
        VoterRole.CC: is_cc_not_applicable,
    }
)


def visible_roles(action) -> dict[VoterRole, bool]:
    """Per role: allowed by type and not overridden for this action."""
    proposal_type = getattr(action, "type", None)
    return {
        role: can_role_vote_on_action(proposal_type, role) and not _NOT_APPLICABLE[role](action)
        for role in ROLE_ORDER
    }


def shows_spo_tally(action) -> bool:
    """Table rows show SPO figures only when the action has an SPO threshold."""
    threshold = getattr(action, "threshold", None)
    if not isinstance(threshold, dict):
        return False
    return threshold.get("spoThreshold") is not None
