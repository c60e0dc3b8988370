"""
Operations dashboard controller.
Routes UI events to the NAP directory and reservation engines and publishes the
resulting view models on the event bus for the projection layer.
"""

import logging
import math

from config.config import DashboardConfig
from connectors.static_catalog import StaticCatalog
from dashboard.formatters import describe_outcome
from engines.directory import NapDirectory
from engines.reservation import ReservationEngine
from models.enums import DashboardEventType
from models.events import (
    FilterChanged,
    JobOrderSubmitted,
    ProjectionEvent,
    QuantityChanged,
    RowActivated,
    UIEvent,
)
from models.state import CommitOutcome, NoItemsSelected
from models.views import OutcomeMessage
from utils.event_bus import EventBus

logger = logging.getLogger(__name__)


def parse_quantity(raw_value: str | int | float | None) -> int:
    """
    Parse a quantity input the way the form reads it.
    Blank, non-numeric and negative input read as 0; fractions truncate toward zero.
    """
    if raw_value is None:
        return 0
    if isinstance(raw_value, str):
        raw_value = raw_value.strip()
        if not raw_value:
            return 0
        try:
            value = float(raw_value)
        except ValueError:
            return 0
    else:
        value = float(raw_value)
    if not math.isfinite(value) or value < 0:
        return 0
    return int(value)


class OperationsDashboard:
    """Single-threaded dispatcher between the UI event source and the engines."""

    def __init__(
        self,
        directory: NapDirectory,
        reservations: ReservationEngine,
        bus: EventBus | None = None,
    ):
        self.directory = directory
        self.reservations = reservations
        self.bus = bus or EventBus()
        self.outcome = OutcomeMessage()

    @classmethod
    def from_catalog(
        cls,
        catalog: StaticCatalog | None = None,
        config: DashboardConfig | None = None,
        bus: EventBus | None = None,
    ) -> "OperationsDashboard":
        catalog = catalog or StaticCatalog()
        config = config or DashboardConfig()
        return cls(
            directory=NapDirectory(catalog.load_access_points(), config=config.directory),
            reservations=ReservationEngine(catalog.load_stock_items(), config=config.reservation),
            bus=bus,
        )

    # --- Event dispatch --- #

    def handle(self, event: UIEvent) -> None:
        if isinstance(event, FilterChanged):
            self.on_filter_changed(event.field, event.value)
        elif isinstance(event, QuantityChanged):
            self.on_quantity_changed(event.item_id, event.raw_value)
        elif isinstance(event, RowActivated):
            self.on_row_activated(event.nap_id)
        elif isinstance(event, JobOrderSubmitted):
            self.on_job_order_submitted()
        else:
            logger.warning(f"Unhandled UI event type: {type(event).__name__}")

    def on_filter_changed(self, field: str, value: str) -> None:
        self.directory.set_filter({field: value})
        self.publish_directory()

    def on_row_activated(self, nap_id: str) -> None:
        if self.directory.select(nap_id):
            self.publish_directory()

    def on_quantity_changed(self, item_id: str, raw_value: str) -> int:
        staged = self.reservations.set_desired_quantity(item_id, parse_quantity(raw_value))
        self.publish_job_order_form()
        self.publish_job_order_summary()
        return staged

    def on_job_order_submitted(self) -> CommitOutcome:
        outcome = self.reservations.commit()
        self.outcome = describe_outcome(outcome, unit_label=self.reservations.config.unit_label)
        if not isinstance(outcome, NoItemsSelected):
            # Stock or staged quantities changed; redraw everything that depends on them
            self.publish_inventory()
            self.publish_job_order_form()
            self.publish_job_order_summary()
        self._publish(DashboardEventType.JOB_ORDER_OUTCOME, self.outcome)
        return outcome

    # --- Publishing --- #

    def refresh(self) -> None:
        """Publish every view, e.g. right after load."""
        self.publish_directory()
        self.publish_inventory()
        self.publish_job_order_form()
        self.publish_job_order_summary()
        self._publish(DashboardEventType.JOB_ORDER_OUTCOME, self.outcome)

    def publish_directory(self) -> None:
        self._publish(DashboardEventType.DIRECTORY_VIEW, self.directory.build_view())

    def publish_inventory(self) -> None:
        self._publish(DashboardEventType.INVENTORY_VIEW, self.reservations.build_inventory_view())

    def publish_job_order_form(self) -> None:
        self._publish(DashboardEventType.JOB_ORDER_FORM, self.reservations.build_form_view())

    def publish_job_order_summary(self) -> None:
        self._publish(DashboardEventType.JOB_ORDER_SUMMARY, self.reservations.summarize())

    def _publish(self, event_type: DashboardEventType, view) -> None:
        self.bus.publish(ProjectionEvent(event_type=event_type, view=view))
