"""Governance API."""

from web.api.governance.views import (
    get_action_detail,
    get_actions,
    get_current_ncl,
    get_ncl_history,
    get_overview,
    get_vote_timeline,
)

__all__ = [
    "get_actions",
    "get_action_detail",
    "get_vote_timeline",
    "get_current_ncl",
    "get_ncl_history",
    "get_overview",
]
