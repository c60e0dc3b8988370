"""
Data models for job-order state: counters and commit outcomes.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .enums import RejectionReason


class JobOrderCounters(BaseModel):
    """Monotonic job-order counters owned by one reservation engine."""

    open_job_orders: int = Field(default=0, ge=0)
    sequence: int = Field(default=0, ge=0)

    def advance(self) -> int:
        """Record one more open job order and return the new sequence number."""
        self.open_job_orders += 1
        self.sequence += 1
        return self.sequence


class JobOrderReceipt(BaseModel):
    """Returned when a job order commits."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    reference: str
    sequence: int
    line_count: int
    total_units: int


class NoItemsSelected(BaseModel):
    """Commit attempted with an empty draft."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    reason: Literal[RejectionReason.NO_ITEMS_SELECTED] = RejectionReason.NO_ITEMS_SELECTED


class InsufficientStock(BaseModel):
    """A draft line asks for more than the item currently has available."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    reason: Literal[RejectionReason.INSUFFICIENT_STOCK] = RejectionReason.INSUFFICIENT_STOCK
    item_id: str
    item_name: str
    available_qty: int


CommitOutcome = JobOrderReceipt | NoItemsSelected | InsufficientStock
