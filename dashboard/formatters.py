"""
Formatting helpers shared by the dashboard controller and the console projection.
"""

import math

from models.enums import Tone
from models.state import CommitOutcome, InsufficientStock, JobOrderReceipt, NoItemsSelected
from models.views import OutcomeMessage


def format_number(value: int | float | None) -> str:
    """Format a count with thousand separators, rounding half up."""
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        return "N/A"
    rounded = math.floor(value + 0.5) if value >= 0 else -math.floor(-value + 0.5)
    return f"{int(rounded):,}"


def format_percent(value: int) -> str:
    return f"{value}%"


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    if count == 1:
        return singular
    return plural if plural is not None else f"{singular}s"


def describe_outcome(outcome: CommitOutcome, unit_label: str = "pcs") -> OutcomeMessage:
    """Turn a commit outcome into the message shown under the job-order form."""
    if isinstance(outcome, JobOrderReceipt):
        return OutcomeMessage(
            text=(
                f"{outcome.reference} staged with {outcome.line_count} "
                f"{pluralize(outcome.line_count, 'line item')} ({outcome.total_units} {unit_label})."
            ),
            tone=Tone.SUCCESS,
        )
    if isinstance(outcome, InsufficientStock):
        return OutcomeMessage(
            text=f"Only {outcome.available_qty} {unit_label} available for {outcome.item_name}.",
            tone=Tone.ERROR,
        )
    if isinstance(outcome, NoItemsSelected):
        return OutcomeMessage(text="Select at least one consumable to reserve.", tone=Tone.ERROR)
    raise TypeError(f"Unsupported commit outcome: {type(outcome).__name__}")
