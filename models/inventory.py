"""
Inventory-related data models for the operations dashboard.
Includes StockItem plus the JobOrderLine and JobOrderDraft staging types.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class StockItem(BaseModel):
    """
    Consumable stock kept for field jobs.
    Only ``reserved`` changes during a session, and only through job-order commits.
    """

    model_config = ConfigDict(validate_assignment=True)

    item_id: str
    name: str
    category: str
    on_hand: int = Field(ge=0)
    reserved: int = Field(default=0, ge=0)
    reorder_threshold: int = Field(default=0, ge=0)

    @field_validator("reserved")
    @classmethod
    def validate_reserved(cls, v: int, info: ValidationInfo) -> int:
        """Checked on load and on every assignment: reserved never exceeds on_hand."""
        on_hand = info.data.get("on_hand")
        if on_hand is not None and v > on_hand:
            raise ValueError(f"reserved ({v}) must not exceed on_hand ({on_hand})")
        return v

    @property
    def available_qty(self) -> int:
        return max(self.on_hand - self.reserved, 0)

    @property
    def needs_reorder(self) -> bool:
        return self.available_qty <= self.reorder_threshold


@dataclass(frozen=True)
class JobOrderLine:
    """A single (item, quantity) line of a job order."""

    item: StockItem
    quantity: int


@dataclass
class JobOrderDraft:
    """
    Lines staged for a job order, in catalog order.
    Rebuilt from the staged quantities every time it is needed.
    """

    lines: list[JobOrderLine] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.lines

    def total_units(self) -> int:
        return sum(line.quantity for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)
