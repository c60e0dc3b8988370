"""
NAP directory engine for the operations dashboard.
Defines NapDirectory, which filters the NAP catalog, keeps a single active
selection consistent with the filtered rows and computes port aggregates.
"""

import logging
import math
from collections.abc import Iterable, Mapping

from config.config import DirectoryConfig
from models.enums import FilterField
from models.network import ALL, ActiveDetail, FilterCriteria, NetworkAccessPoint
from models.views import NAP_STATE_LABELS, DirectoryAggregates, DirectoryView, NapRow

logger = logging.getLogger(__name__)

FULLY_UTILISED = "Fully utilised"
NEXT_INSTALL_SLOT = "Next install slot"
ALL_PORTS_RESERVED = "All ports reserved"


def round_half_up(value: float) -> int:
    """Round non-negative values the way dashboards show percentages (0.5 rounds up)."""
    return int(math.floor(value + 0.5))


def utilisation_percent(active_ports: int, total_ports: int) -> int:
    if total_ports <= 0:
        return 0
    return round_half_up(100 * active_ports / total_ports)


class NapDirectory:
    """
    Filter and selection engine over a fixed NAP catalog.

    The catalog is never mutated. ``criteria`` and ``active_nap_id`` are the only
    mutable state, and the selection is repaired after every filter change so the
    projection never sees an active NAP that is not among the visible rows.
    """

    def __init__(self, catalog: Iterable[NetworkAccessPoint], config: DirectoryConfig | None = None):
        self.config = config or DirectoryConfig()
        self._catalog: list[NetworkAccessPoint] = list(catalog)
        self._by_id: dict[str, NetworkAccessPoint] = {nap.nap_id: nap for nap in self._catalog}
        self.criteria = FilterCriteria()
        self.active_nap_id: str | None = None
        if self.config.select_first_on_load and self._catalog:
            self.active_nap_id = self._catalog[0].nap_id
        logger.info(f"NAP directory loaded with {len(self._catalog)} access points")

    @property
    def catalog(self) -> list[NetworkAccessPoint]:
        return list(self._catalog)

    def get(self, nap_id: str | None) -> NetworkAccessPoint | None:
        if nap_id is None:
            return None
        return self._by_id.get(nap_id)

    def municipalities(self) -> list[str]:
        """Sorted unique municipalities for the filter control."""
        return sorted({nap.municipality for nap in self._catalog})

    # --- Filtering --- #

    def set_filter(self, changes: Mapping[str, str] | None = None, **kwargs: str) -> list[NetworkAccessPoint]:
        """
        Merge a partial set of criteria, repair the selection and return the new visible set.

        Unknown selector values are stored as given and simply match nothing.
        Unknown field names are ignored.
        """
        updates = dict(changes or {})
        updates.update(kwargs)
        for field_name, value in updates.items():
            try:
                field = FilterField(field_name)
            except ValueError:
                logger.warning(f"Ignoring unknown directory filter field '{field_name}'")
                continue
            value = "" if value is None else str(getattr(value, "value", value))
            if field == FilterField.SEARCH:
                self.criteria.search = value.strip()
            elif field == FilterField.MUNICIPALITY:
                self.criteria.municipality = value or ALL
            else:
                self.criteria.state = value or ALL
        logger.debug(f"Directory filter now {self.criteria.model_dump()}")
        visible = self.compute_visible_set()
        self._repair_selection(visible)
        return visible

    def reset_filter(self) -> list[NetworkAccessPoint]:
        self.criteria = FilterCriteria()
        visible = self.compute_visible_set()
        self._repair_selection(visible)
        return visible

    def compute_visible_set(self) -> list[NetworkAccessPoint]:
        """Apply municipality, derived state and search in turn, keeping catalog order."""
        visible = self._catalog
        criteria = self.criteria

        if criteria.municipality != ALL:
            visible = [nap for nap in visible if nap.municipality == criteria.municipality]

        if criteria.state != ALL:
            visible = [nap for nap in visible if nap.state.value == criteria.state]

        if criteria.search:
            term = criteria.search.lower()
            visible = [
                nap for nap in visible if any(term in value.lower() for value in nap.searchable_values())
            ]

        return list(visible)

    def compute_aggregates(self, visible: Iterable[NetworkAccessPoint]) -> DirectoryAggregates:
        count = total_ports = active_ports = available_ports = 0
        for nap in visible:
            count += 1
            total_ports += nap.total_ports
            active_ports += nap.active_ports
            available_ports += nap.available_ports
        return DirectoryAggregates(
            count=count,
            total_ports=total_ports,
            active_ports=active_ports,
            total_available_ports=available_ports,
            utilisation_percent=utilisation_percent(active_ports, total_ports),
        )

    # --- Selection --- #

    def select(self, nap_id: str) -> bool:
        """
        Make ``nap_id`` the active NAP.

        Ids outside the catalog, or hidden by the current filter, leave the
        selection unchanged. Returns True when the selection was applied.
        """
        if nap_id not in self._by_id:
            logger.debug(f"Ignoring selection of unknown NAP '{nap_id}'")
            return False
        if not any(nap.nap_id == nap_id for nap in self.compute_visible_set()):
            logger.debug(f"Ignoring selection of NAP '{nap_id}' hidden by the current filter")
            return False
        self.active_nap_id = nap_id
        return True

    def _repair_selection(self, visible: list[NetworkAccessPoint]) -> None:
        if any(nap.nap_id == self.active_nap_id for nap in visible):
            return
        previous = self.active_nap_id
        self.active_nap_id = visible[0].nap_id if visible else None
        if previous != self.active_nap_id:
            logger.debug(f"Active NAP moved from {previous} to {self.active_nap_id}")

    def resolve_active_detail(self) -> ActiveDetail:
        nap = self.get(self.active_nap_id)
        if nap is None:
            return ActiveDetail.no_selection()
        if nap.focus_customer is not None:
            return ActiveDetail.from_focus_customer(nap.focus_customer)

        if nap.available_ports > 0:
            next_port = nap.next_port if nap.next_port is not None else nap.active_ports + 1
            name, port = NEXT_INSTALL_SLOT, str(next_port).zfill(2)
        else:
            name, port = FULLY_UTILISED, ALL_PORTS_RESERVED
        return ActiveDetail(
            name=name,
            circuit_id=nap.circuit_id,
            concentrator_id=nap.concentrator_id,
            nap_id=nap.nap_id,
            port=port,
        )

    # --- View model --- #

    def build_view(self) -> DirectoryView:
        visible = self.compute_visible_set()
        self._repair_selection(visible)
        rows = [
            NapRow(
                nap_id=nap.nap_id,
                municipality=nap.municipality,
                barangay=nap.barangay,
                circuit_id=nap.circuit_id,
                concentrator_id=nap.concentrator_id,
                total_ports=nap.total_ports,
                available_ports=nap.available_ports,
                state=nap.state,
                status_label=NAP_STATE_LABELS[nap.state],
                is_active=nap.nap_id == self.active_nap_id,
            )
            for nap in visible
        ]
        return DirectoryView(
            rows=rows,
            aggregates=self.compute_aggregates(visible),
            active_detail=self.resolve_active_detail(),
            municipalities=self.municipalities(),
            active_nap_id=self.active_nap_id,
        )
