"""Fixed governance vocabularies - proposal types, statuses, roles, votes.

Two spellings exist for proposal types: the short enum key sent in the
``type`` field (``ParameterChange``) and human labels (``"Protocol Parameter
Change"``). Both map to one canonical ``ProposalType`` through
``canonical_type``; tables elsewhere are keyed by the enum only.
"""

from enum import StrEnum
from types import MappingProxyType


class ProposalType(StrEnum):
    """Governance action types, in showcase order."""

    NO_CONFIDENCE = "NoConfidence"
    UPDATE_COMMITTEE = "UpdateCommittee"
    NEW_CONSTITUTION = "NewConstitution"
    HARD_FORK_INITIATION = "HardForkInitiation"
    PARAMETER_CHANGE = "ParameterChange"
    TREASURY = "Treasury"
    INFO_ACTION = "InfoAction"


class ProposalStatus(StrEnum):
    ACTIVE = "Active"
    RATIFIED = "Ratified"
    EXPIRED = "Expired"
    APPROVED = "Approved"
    NOT_APPROVED = "Not approved"


class VoterRole(StrEnum):
    """Voter roles, in display order."""

    DREP = "DRep"
    SPO = "SPO"
    CC = "CC"


class VoteChoice(StrEnum):
    YES = "Yes"
    NO = "No"
    ABSTAIN = "Abstain"


PROPOSAL_TYPES: tuple[ProposalType, ...] = tuple(ProposalType)
SHOWCASE_ORDER: tuple[ProposalType, ...] = PROPOSAL_TYPES
STATUS_OPTIONS: tuple[ProposalStatus, ...] = tuple(ProposalStatus)
ROLE_ORDER: tuple[VoterRole, ...] = tuple(VoterRole)

# Table labels
TYPE_LABELS = MappingProxyType(
    {
        ProposalType.NO_CONFIDENCE: "Motion of No-Confidence",
        ProposalType.UPDATE_COMMITTEE: "Update Committee / Terms",
        ProposalType.NEW_CONSTITUTION: "Constitution Update",
        ProposalType.HARD_FORK_INITIATION: "Hard Fork Initiation",
        ProposalType.PARAMETER_CHANGE: "Protocol Parameter Change",
        ProposalType.TREASURY: "Treasury Withdrawal",
        ProposalType.INFO_ACTION: "Info Action",
    }
)

# Ledger-style labels, as some backend payloads spell the type
LEDGER_TYPE_LABELS = MappingProxyType(
    {
        ProposalType.NO_CONFIDENCE: "No Confidence",
        ProposalType.UPDATE_COMMITTEE: "Update Committee",
        ProposalType.NEW_CONSTITUTION: "New Constitution",
        ProposalType.HARD_FORK_INITIATION: "Hard Fork Initiation",
        ProposalType.PARAMETER_CHANGE: "Protocol Parameter Change",
        ProposalType.TREASURY: "Treasury Withdrawals",
        ProposalType.INFO_ACTION: "Info Action",
    }
)

STATUS_LABELS = MappingProxyType(
    {
        ProposalStatus.ACTIVE: "Active",
        ProposalStatus.RATIFIED: "Ratified",
        ProposalStatus.EXPIRED: "Expired",
        ProposalStatus.APPROVED: "Approved",
        ProposalStatus.NOT_APPROVED: "Rejected",
    }
)


def _alias_key(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


_TYPE_ALIASES = MappingProxyType(
    {
        _alias_key(alias): t
        for t in ProposalType
        for alias in (t.value, TYPE_LABELS[t], LEDGER_TYPE_LABELS[t])
    }
)


def canonical_type(value) -> ProposalType | None:
    """Map an enum key or any known label to its ProposalType, else None."""
    if isinstance(value, ProposalType):
        return value
    if not isinstance(value, str) or not value:
        return None
    return _TYPE_ALIASES.get(_alias_key(value))


_TYPE_KEYS = frozenset(t.value for t in ProposalType)


def is_type_key(value) -> bool:
    """True when value is spelled exactly as an enum key."""
    return value in _TYPE_KEYS


def type_label(value) -> str:
    """Table label for a type; unknown types pass through unchanged."""
    proposal_type = canonical_type(value)
    if proposal_type is None:
        return str(value or "")
    return TYPE_LABELS[proposal_type]


def status_label(value) -> str:
    try:
        return STATUS_LABELS[ProposalStatus(value)]
    except ValueError:
        return str(value or "")
