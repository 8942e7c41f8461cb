"""API errors and validation helpers."""

from collections.abc import Iterable

from app.models.governance.vocabulary import ROLE_ORDER, STATUS_OPTIONS


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


ROLE_FILTERS = ("All", *(str(r) for r in ROLE_ORDER))


def validate_role_filter(role: str) -> None:
    """Validate a vote-curve role filter."""
    if role not in ROLE_FILTERS:
        raise ValidationError(f"Invalid role: {role!r}. Must be one of {', '.join(ROLE_FILTERS)}")


def validate_statuses(statuses: Iterable[str]) -> None:
    """Validate selected statuses against the known status options."""
    unknown = [s for s in statuses if s not in STATUS_OPTIONS]
    if unknown:
        raise ValidationError(f"Unknown status(es): {', '.join(map(repr, unknown))}")


def validate_proposal_id(proposal_id: str) -> None:
    if not proposal_id or not proposal_id.strip():
        raise ValidationError("Proposal id must not be empty")
