"""
Inventory reservation engine for the operations dashboard.
Defines ReservationEngine, which stages job-order quantities against the stock
catalog and commits a whole job order or nothing.
"""

import logging
import math
from collections.abc import Iterable

from config.config import ReservationConfig
from models.enums import JobOrderPhase
from models.inventory import JobOrderDraft, JobOrderLine, StockItem
from models.state import (
    CommitOutcome,
    InsufficientStock,
    JobOrderCounters,
    JobOrderReceipt,
    NoItemsSelected,
)
from models.views import (
    InventoryAggregates,
    InventoryView,
    JobOrderFormView,
    JobOrderInput,
    JobOrderSummary,
    StockRow,
)

logger = logging.getLogger(__name__)


class ReservationEngine:
    """
    Stages quantities per stock item and commits them as job orders.

    Phases per attempt: idle -> staging -> validating -> committed | rejected -> idle.
    ``StockItem.reserved`` is changed here and nowhere else, and only after every
    line of a draft has passed the live availability check.
    """

    def __init__(
        self,
        stock: Iterable[StockItem],
        counters: JobOrderCounters | None = None,
        config: ReservationConfig | None = None,
    ):
        self.config = config or ReservationConfig()
        self._items: list[StockItem] = list(stock)
        self._by_id: dict[str, StockItem] = {item.item_id: item for item in self._items}
        self.counters = counters or JobOrderCounters(
            open_job_orders=self.config.seed_open_job_orders,
            sequence=self.config.seed_sequence,
        )
        self._desired: dict[str, int] = {item.item_id: 0 for item in self._items}
        self.phase = JobOrderPhase.IDLE
        self.last_outcome: JobOrderPhase | None = None

    @property
    def items(self) -> list[StockItem]:
        return list(self._items)

    def get(self, item_id: str) -> StockItem | None:
        return self._by_id.get(item_id)

    def desired_quantity(self, item_id: str) -> int:
        return self._desired.get(item_id, 0)

    # --- Staging --- #

    def set_desired_quantity(self, item_id: str, qty: int | float) -> int:
        """
        Clamp ``qty`` into ``[0, available_qty]`` and stage it. Returns the staged value.

        NaN stages 0 and infinities clamp like any other out-of-range value.
        The clamp only keeps the form tidy; ``commit`` re-checks live stock.
        """
        item = self._by_id.get(item_id)
        if item is None:
            logger.warning(f"Ignoring quantity for unknown stock item '{item_id}'")
            return 0
        if isinstance(qty, float) and not math.isfinite(qty):
            requested = item.available_qty if qty > 0 else 0
        else:
            requested = int(qty)
        clamped = min(max(requested, 0), item.available_qty)
        if clamped != qty:
            logger.debug(f"Clamped quantity for {item_id} from {qty} to {clamped}")
        self._desired[item_id] = clamped
        self._update_staging_phase()
        return clamped

    def reset_quantities(self) -> None:
        for item_id in self._desired:
            self._desired[item_id] = 0
        self.phase = JobOrderPhase.IDLE

    def _update_staging_phase(self) -> None:
        staged = any(qty > 0 for qty in self._desired.values())
        self.phase = JobOrderPhase.STAGING if staged else JobOrderPhase.IDLE

    def build_draft(self) -> JobOrderDraft:
        return JobOrderDraft(
            lines=[
                JobOrderLine(item=item, quantity=self._desired[item.item_id])
                for item in self._items
                if self._desired.get(item.item_id, 0) > 0
            ]
        )

    # --- Commit --- #

    def commit(self, draft: JobOrderDraft | None = None) -> CommitOutcome:
        """
        Reserve every line of ``draft`` (the staged draft by default) or none of them.

        Returns a JobOrderReceipt, NoItemsSelected or InsufficientStock; never raises
        for business failures.
        """
        if draft is None:
            draft = self.build_draft()

        self.phase = JobOrderPhase.VALIDATING
        if draft.is_empty():
            logger.info("Job order rejected: no items selected")
            self._finish(JobOrderPhase.REJECTED)
            return NoItemsSelected()

        shortfall = self._find_shortfall(draft)
        if shortfall is not None:
            logger.warning(
                f"Job order rejected: {shortfall.item_id} has {shortfall.available_qty} available"
            )
            self.reset_quantities()
            self._finish(JobOrderPhase.REJECTED)
            return shortfall

        for line in draft:
            self._resolve(line).reserved += line.quantity

        sequence = self.counters.advance()
        receipt = JobOrderReceipt(
            reference=self.format_reference(sequence),
            sequence=sequence,
            line_count=len(draft),
            total_units=draft.total_units(),
        )
        logger.info(
            f"Job order {receipt.reference} committed: "
            f"{receipt.line_count} lines, {receipt.total_units} units"
        )
        self.reset_quantities()
        self._finish(JobOrderPhase.COMMITTED)
        return receipt

    def _finish(self, outcome: JobOrderPhase) -> None:
        self.last_outcome = outcome
        self.phase = JobOrderPhase.IDLE

    def _resolve(self, line: JobOrderLine) -> StockItem:
        # Drafts may hold stale references; always act on the catalog's live item
        return self._by_id[line.item.item_id]

    def _find_shortfall(self, draft: JobOrderDraft) -> InsufficientStock | None:
        requested: dict[str, int] = {}
        for line in draft:
            item = self._by_id.get(line.item.item_id)
            if item is None:
                logger.warning(f"Draft line names stock item '{line.item.item_id}' outside the catalog")
                return InsufficientStock(item_id=line.item.item_id, item_name=line.item.name, available_qty=0)
            # Repeated lines for one item draw on the same availability
            requested[item.item_id] = requested.get(item.item_id, 0) + line.quantity
            if requested[item.item_id] > item.available_qty:
                return InsufficientStock(
                    item_id=item.item_id, item_name=item.name, available_qty=item.available_qty
                )
        return None

    def format_reference(self, sequence: int) -> str:
        return f"{self.config.reference_prefix}{str(sequence).zfill(self.config.reference_width)}"

    # --- View models --- #

    def compute_aggregates(self) -> InventoryAggregates:
        return InventoryAggregates(
            total_available=sum(item.available_qty for item in self._items),
            reorder_count=sum(1 for item in self._items if item.needs_reorder),
            open_job_orders=self.counters.open_job_orders,
        )

    def build_inventory_view(self) -> InventoryView:
        rows = [
            StockRow(
                item_id=item.item_id,
                name=item.name,
                category=item.category,
                on_hand=item.on_hand,
                reserved=item.reserved,
                available_qty=item.available_qty,
                needs_reorder=item.needs_reorder,
                status_label="Reorder" if item.needs_reorder else "Healthy",
            )
            for item in self._items
        ]
        return InventoryView(rows=rows, aggregates=self.compute_aggregates())

    def build_form_view(self) -> JobOrderFormView:
        return JobOrderFormView(
            inputs=[
                JobOrderInput(
                    item_id=item.item_id,
                    name=item.name,
                    category=item.category,
                    available_qty=item.available_qty,
                    quantity=self._desired[item.item_id],
                    disabled=item.available_qty == 0,
                )
                for item in self._items
            ]
        )

    def summarize(self, draft: JobOrderDraft | None = None) -> JobOrderSummary:
        if draft is None:
            draft = self.build_draft()
        if draft.is_empty():
            return JobOrderSummary(headline="No items selected yet.")
        total_units = draft.total_units()
        return JobOrderSummary(
            headline=f"{total_units} unit{'' if total_units == 1 else 's'} reserved",
            lines=[f"{line.quantity} × {line.item.name}" for line in draft],
            total_units=total_units,
        )
