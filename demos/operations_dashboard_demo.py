"""
Demonstration of the operations dashboard core: NAP directory filtering and
job-order staging against the static catalog, painted to the console.

Run with: python -m demos.operations_dashboard_demo
"""

import logging
import sys

from config.config import DashboardConfig
from dashboard.console import ConsoleProjection
from dashboard.controller import OperationsDashboard
from models.events import (
    FilterChanged,
    JobOrderSubmitted,
    QuantityChanged,
    RowActivated,
    UIEvent,
)
from utils import load_project_dotenv
from utils.logger import configure_logging

logger = logging.getLogger(__name__)

SCRIPTED_EVENTS: list[UIEvent] = [
    FilterChanged(field="municipality", value="San Andres"),
    RowActivated(nap_id="NAP-SAN-02"),
    FilterChanged(field="state", value="full"),
    FilterChanged(field="municipality", value="all"),
    FilterChanged(field="search", value="  lcp-odg "),
    JobOrderSubmitted(),
    QuantityChanged(item_id="onu-huawei", raw_value="5"),
    QuantityChanged(item_id="drop-cable", raw_value="40"),
    QuantityChanged(item_id="patch-cord", raw_value="3"),
    JobOrderSubmitted(),
]


def run_demo(stream=None, config: DashboardConfig | None = None) -> OperationsDashboard:
    stream = stream or sys.stdout
    load_project_dotenv()
    config = config or DashboardConfig.from_env()
    configure_logging(config.log_level)

    dashboard = OperationsDashboard.from_catalog(config=config)
    ConsoleProjection(stream).attach(dashboard.bus)

    logger.info("Rendering initial dashboard state")
    dashboard.refresh()
    for event in SCRIPTED_EVENTS:
        logger.info(f"UI event: {type(event).__name__} {event.model_dump(exclude={'event_id', 'timestamp'})}")
        dashboard.handle(event)
    return dashboard


if __name__ == "__main__":
    run_demo()
