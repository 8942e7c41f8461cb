"""Pure vote math - no dependencies, easily testable.

Every function here is total: missing, empty or malformed input yields 0
instead of raising, and results are always finite.
"""
import math

LOVELACE_PER_ADA = 1_000_000


def parse_numeric(value) -> float:
    """Safe float parse. 0 for None, bools, garbage, NaN and infinities."""
    if value is None or isinstance(value, bool):
        return 0.0
    # no digit separators
    if isinstance(value, str) and "_" in value:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_display_amount(subunits) -> float:
    """Lovelace (integer string) to ADA."""
    if subunits is None or subunits == "":
        return 0.0
    if isinstance(subunits, str):
        if "_" in subunits:
            return 0.0
        # exact integer division keeps precision for large lovelace values
        try:
            return int(subunits.strip()) / LOVELACE_PER_ADA
        except ValueError:
            pass
    elif isinstance(subunits, int) and not isinstance(subunits, bool):
        return subunits / LOVELACE_PER_ADA
    return parse_numeric(subunits) / LOVELACE_PER_ADA


def _implied_abstain(yes, yes_pct, no, no_pct, abstain_pct) -> float:
    pct_sum = parse_numeric(yes_pct) + parse_numeric(no_pct)
    if pct_sum <= 0:
        return 0.0

    total = (parse_numeric(yes) + parse_numeric(no)) / pct_sum * 100
    if abstain_pct is None:
        share = 100 - pct_sum
    else:
        share = parse_numeric(abstain_pct)

    result = total * share / 100
    if not math.isfinite(result) or result < 0:
        return 0.0
    return result


def derive_abstain_value(
    yes_value,
    yes_percent,
    no_value,
    no_percent,
    abstain_percent=None,
) -> float:
    """Abstain amount implied by yes/no amounts and their percentages.

    total = (yes + no) / (yes% + no%) * 100, abstain = total * abstain% / 100.
    Without an explicit abstain% the complement 100 - yes% - no% is used.
    """
    return _implied_abstain(yes_value, yes_percent, no_value, no_percent, abstain_percent)


def derive_cc_abstain_count(
    yes_count,
    no_count,
    yes_percent=None,
    no_percent=None,
    abstain_percent=None,
) -> int:
    """Same as derive_abstain_value, for committee member counts.

    Halves round up (2.5 -> 3), not to even.
    """
    implied = _implied_abstain(yes_count, yes_percent, no_count, no_percent, abstain_percent)
    return math.floor(implied + 0.5)


def share_percent(part: float, total: float) -> float:
    """part / total * 100, 0 when total is not positive."""
    return part / total * 100 if total > 0 else 0.0


def format_ada(value) -> str:
    """Compact ADA label: 1.2M ₳, 3.4k ₳, 512 ₳."""
    value = parse_numeric(value)
    if not value:
        return "0 ₳"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M ₳"
    if value >= 1_000:
        return f"{value / 1_000:.1f}k ₳"
    return f"{value:,.3f}".rstrip("0").rstrip(".") + " ₳"
