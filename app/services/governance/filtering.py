"""Table curation - sort, filter, showcase prioritization and search."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from loguru import logger

from app.models.governance import GovernanceAction
from app.models.governance.vocabulary import PROPOSAL_TYPES, SHOWCASE_ORDER, STATUS_OPTIONS


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


@dataclass
class ActionFilters:
    """User selections for the actions table."""

    selected_types: list[str] = field(default_factory=lambda: [str(t) for t in PROPOSAL_TYPES])
    selected_statuses: list[str] = field(default_factory=lambda: [str(s) for s in STATUS_OPTIONS])
    search_query: str = ""

    def __post_init__(self):
        self.selected_types = _unique(self.selected_types)
        self.selected_statuses = _unique(self.selected_statuses)

    @property
    def all_types_selected(self) -> bool:
        return set(PROPOSAL_TYPES).issubset(self.selected_types)

    def reset(self) -> None:
        defaults = ActionFilters()
        self.selected_types = defaults.selected_types
        self.selected_statuses = defaults.selected_statuses
        self.search_query = defaults.search_query


def sort_actions(actions: Iterable[GovernanceAction]) -> list[GovernanceAction]:
    """Newest submission first, then latest expiry. Stable for equal keys."""
    return sorted(actions, key=lambda a: (-a.submission_epoch, -a.expiry_epoch))


def search_actions(actions: Sequence[GovernanceAction], query: str) -> list[GovernanceAction]:
    """Case-insensitive title substring match; blank query keeps everything."""
    if not query or not query.strip():
        return list(actions)
    needle = query.lower()
    return [a for a in actions if needle in a.title.lower()]


def _dedupe(actions: Iterable[GovernanceAction]) -> list[GovernanceAction]:
    seen: set[str] = set()
    result = []
    for action in actions:
        if action.hash:
            if action.hash in seen:
                continue
            seen.add(action.hash)
        result.append(action)
    return result


def filter_actions(
    actions: Iterable[GovernanceAction],
    filters: ActionFilters | None = None,
) -> list[GovernanceAction]:
    """Ordered, deduplicated list for the actions table.

    With at least one selected showcase type present, the first action of
    each selected type (in showcase order) is surfaced instead of the plain
    epoch order; when every type is selected, actions of non-showcase types
    follow in epoch order. Otherwise the list falls back to a membership
    filter. Search runs last on whichever list was produced.
    """
    filters = filters or ActionFilters()
    ordered = sort_actions(actions)
    if not ordered:
        return []

    selection = set(filters.selected_types)
    statuses = set(filters.selected_statuses)
    all_types = filters.all_types_selected

    by_status = [a for a in ordered if a.status in statuses]

    prioritized = []
    for proposal_type in SHOWCASE_ORDER:
        if proposal_type not in selection:
            continue
        match = next((a for a in by_status if a.type == proposal_type), None)
        if match is not None:
            prioritized.append(match)

    if prioritized:
        if all_types:
            extras = [a for a in by_status if a.type not in SHOWCASE_ORDER]
            candidates = prioritized + extras
        else:
            candidates = prioritized
    else:
        candidates = [
            a for a in by_status if (a.type in selection if a.type in SHOWCASE_ORDER else all_types)
        ]

    result = search_actions(_dedupe(candidates), filters.search_query)
    logger.debug(
        "Filtered {} actions -> {} (prioritized={}, query={!r})",
        len(ordered),
        len(result),
        len(prioritized),
        filters.search_query,
    )
    return result
