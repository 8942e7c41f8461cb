#!/usr/bin/env python3
"""
Print governance dashboard data from the backend API.

Usage:
    python report.py                          # Curated actions table
    python report.py --status Active          # Only active actions
    python report.py --type Treasury          # Only treasury withdrawals
    python report.py --search constitution    # Title search
    python report.py <proposal-id>            # Detail for one action
    python report.py <proposal-id> --role SPO # Detail with SPO vote curve
    python report.py --ncl                    # Treasury Net Change Limit
    python report.py --ncl-history            # Net Change Limit for every year
    python report.py --overview               # Proposal counts by status
    python report.py --api-url URL ...        # Use another backend
"""

import asyncio
import sys

import settings
from app.container import container
from app.models.governance import status_label, type_label
from app.services.governance import ActionFilters, eligibility
from gov_client import set_api_config
from helpers.formulas import format_ada
from settings.logging import setup_logging

logger = setup_logging(to_file=False)


def _pop_values(args: list[str], flag: str) -> list[str]:
    """Remove every `flag value` pair from args, returning the values."""
    values = []
    while flag in args:
        i = args.index(flag)
        if i + 1 >= len(args):
            print(__doc__)
            sys.exit(1)
        values.append(args[i + 1])
        del args[i : i + 2]
    return values


async def print_table(filters: ActionFilters) -> None:
    actions = await container.governance.list_actions()
    rows = container.governance.table(actions, filters)

    print("\n" + "=" * 78)
    print("GOVERNANCE ACTIONS")
    print("=" * 78)
    for a in rows:
        print(f"\n{a.title}")
        print(f"  {type_label(a.type)} | {status_label(a.status)} | epochs {a.submission_epoch}-{a.expiry_epoch}")
        print(
            f"  DRep yes {a.drep_yes_percent:.1f}% ({format_ada(a.drep_yes_ada)})"
            f" / no {a.drep_no_percent:.1f}% ({format_ada(a.drep_no_ada)})"
            f" / abstain {format_ada(a.drep_abstain_ada)}"
        )
        if eligibility.shows_spo_tally(a):
            print(f"  SPO yes {a.spo_yes_percent:.1f}% / no {a.spo_no_percent:.1f}% / abstain {format_ada(a.spo_abstain_ada)}")
        print(f"  id: {a.proposal_id or a.hash}")
    print("\n" + "=" * 78)
    print(f"{len(rows)} of {len(actions)} actions shown")
    print("=" * 78 + "\n")


async def print_detail(proposal_id: str, role: str) -> bool:
    detail = await container.governance.get_action(proposal_id)
    if detail is None:
        print(f"\n⚠️  Governance action not found: {proposal_id}\n")
        return False

    summary = container.governance.summarize(detail, role)

    print("\n" + "=" * 78)
    print(detail.title)
    print("=" * 78)
    print(f"Type: {type_label(detail.type)}   Status: {status_label(detail.status)}")
    print(f"Submission: Epoch {detail.submission_epoch}   Expiry: Epoch {detail.expiry_epoch}")
    if summary.proposal_ref:
        print(f"Certificate: {summary.proposal_ref.tx_hash}#{summary.proposal_ref.cert_index}")

    for name, shown in summary.visible_roles.items():
        print(f"\n{name}: {'eligible' if shown else 'not applicable'}")
    if summary.drep_abstain:
        print(f"  DRep abstain {summary.drep_abstain.percent:.1f}% ({format_ada(summary.drep_abstain.power)})")
    if summary.spo_abstain:
        print(f"  SPO abstain {summary.spo_abstain.percent:.1f}% ({format_ada(summary.spo_abstain.power)})")
    if summary.cc_abstain:
        cc = summary.cc_abstain
        print(f"  CC yes {cc.yes_count} / no {cc.no_count} / abstain {cc.count}")

    print(f"\nVote curve ({summary.curve_role}), {len(summary.timeline)} points")
    if summary.timeline:
        last = summary.timeline[-1]
        if summary.show_power:
            print(f"  Final: yes {format_ada(last.yes_power)} / no {format_ada(last.no_power)} / abstain {format_ada(last.abstain_power)}")
        else:
            print(f"  Final: yes {last.yes_count:,} / no {last.no_count:,} / abstain {last.abstain_count:,}")
    print()
    return True


async def print_ncl_history() -> None:
    history = await container.governance.list_ncl()
    if not history:
        print("\n⚠️  No NCL data\n")
        return
    print()
    for ncl in history:
        print(f"NCL {ncl.year}: {format_ada(ncl.current_value_ada)} of {format_ada(ncl.target_value_ada)} ({ncl.percent_used:.1f}% used)")
    print()


async def print_overview() -> None:
    summary = await container.governance.get_overview()
    print()
    for status, count in summary.items():
        print(f"{status}: {count}")
    print()


async def print_ncl() -> None:
    ncl = await container.governance.current_year_ncl()
    if ncl is None:
        print("\n⚠️  NCL data not found for current year\n")
        return
    print(
        f"\nNCL {ncl.year}: {format_ada(ncl.current_value_ada)} of {format_ada(ncl.target_value_ada)}"
        f" ({ncl.percent_used:.1f}% used)\n"
    )


def main():
    args = sys.argv[1:]

    api_urls = _pop_values(args, "--api-url")
    if api_urls:
        set_api_config(api_urls[-1], settings.API_TIMEOUT, settings.API_KEY)
        logger.info("API: {}", api_urls[-1])

    container.init()

    if "--ncl" in args:
        asyncio.run(print_ncl())
        return
    if "--ncl-history" in args:
        asyncio.run(print_ncl_history())
        return
    if "--overview" in args:
        asyncio.run(print_overview())
        return

    statuses = _pop_values(args, "--status")
    types = _pop_values(args, "--type")
    searches = _pop_values(args, "--search")
    roles = _pop_values(args, "--role")

    if any(a.startswith("--") for a in args) or len(args) > 1:
        print(__doc__)
        sys.exit(1)

    if args:
        found = asyncio.run(print_detail(args[0], roles[-1] if roles else "All"))
        sys.exit(0 if found else 1)

    filters = ActionFilters(search_query=" ".join(searches))
    if statuses:
        filters.selected_statuses = statuses
    if types:
        filters.selected_types = types
    logger.info("Types: {} | Statuses: {}", filters.selected_types, filters.selected_statuses)

    asyncio.run(print_table(filters))


if __name__ == "__main__":
    main()
