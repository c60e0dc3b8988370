"""
Module: connectors.static_catalog

Provides the static NAP and stock catalogs the operations dashboard loads once at start.
"""

import logging
from collections.abc import Sequence
from typing import Any

from models.inventory import StockItem
from models.network import NetworkAccessPoint

logger = logging.getLogger(__name__)


class StaticCatalog:
    """
    Read-only catalog loader.

    Every ``load_*`` call validates the raw records and returns fresh model
    instances, so engines built from separate loads never share stock state.
    """

    _access_points: list[dict[str, Any]] = [
        {
            "nap_id": "NAP-ODG-01",
            "municipality": "Odiongan",
            "barangay": "Tabing Dagat",
            "circuit_id": "PON-ODG-12",
            "concentrator_id": "LCP-ODG-01",
            "total_ports": 16,
            "active_ports": 11,
            "status": "operational",
            "next_port": 12,
            "focus_customer": {
                "name": "Juan Dela Cruz",
                "circuit_id": "PON-ODG-12",
                "concentrator_id": "LCP-ODG-01",
                "nap_id": "NAP-ODG-01",
                "port": "12",
            },
        },
        {
            "nap_id": "NAP-ODG-02",
            "municipality": "Odiongan",
            "barangay": "Libertad",
            "circuit_id": "PON-ODG-08",
            "concentrator_id": "LCP-ODG-02",
            "total_ports": 24,
            "active_ports": 24,
            "status": "operational",
            "focus_customer": {
                "name": "Fully Utilised",
                "circuit_id": "PON-ODG-08",
                "concentrator_id": "LCP-ODG-02",
                "nap_id": "NAP-ODG-02",
                "port": "All ports active",
            },
        },
        {
            "nap_id": "NAP-SAN-01",
            "municipality": "San Andres",
            "barangay": "Poblacion",
            "circuit_id": "PON-SAN-05",
            "concentrator_id": "LCP-SAN-01",
            "total_ports": 32,
            "active_ports": 26,
            "status": "operational",
            "next_port": 27,
            "focus_customer": {
                "name": "Maria Santos",
                "circuit_id": "PON-SAN-05",
                "concentrator_id": "LCP-SAN-01",
                "nap_id": "NAP-SAN-01",
                "port": "27",
            },
        },
        {
            "nap_id": "NAP-SAN-02",
            "municipality": "San Andres",
            "barangay": "Calunacon",
            "circuit_id": "PON-SAN-03",
            "concentrator_id": "LCP-SAN-02",
            "total_ports": 16,
            "active_ports": 8,
            "status": "operational",
            "next_port": 9,
        },
        {
            "nap_id": "NAP-CAL-01",
            "municipality": "Calatrava",
            "barangay": "Poblacion",
            "circuit_id": "PON-CAL-01",
            "concentrator_id": "LCP-CAL-01",
            "total_ports": 16,
            "active_ports": 6,
            "status": "operational",
            "next_port": 7,
            "focus_customer": {
                "name": "Cable pull scheduled",
                "circuit_id": "PON-CAL-01",
                "concentrator_id": "LCP-CAL-01",
                "nap_id": "NAP-CAL-01",
                "port": "07",
            },
        },
        {
            "nap_id": "NAP-SAG-01",
            "municipality": "San Agustin",
            "barangay": "Dapdapan",
            "circuit_id": "PON-SAG-02",
            "concentrator_id": "LCP-SAG-01",
            "total_ports": 12,
            "active_ports": 12,
            "status": "maintenance",
            "focus_customer": {
                "name": "Maintenance window",
                "circuit_id": "PON-SAG-02",
                "concentrator_id": "LCP-SAG-01",
                "nap_id": "NAP-SAG-01",
                "port": "Temporarily offline",
            },
        },
    ]
    _stock_items: list[dict[str, Any]] = [
        {"item_id": "onu-huawei", "name": "Huawei HG8145V5 ONU", "category": "ONU", "on_hand": 68, "reserved": 12, "reorder_threshold": 10},
        {"item_id": "onu-zte", "name": "ZTE F670L ONU", "category": "ONU", "on_hand": 42, "reserved": 18, "reorder_threshold": 8},
        {"item_id": "drop-cable", "name": "1-Core Drop Cable (1km)", "category": "Fiber & cables", "on_hand": 15, "reserved": 6, "reorder_threshold": 5},
        {"item_id": "patch-cord", "name": "SC/APC Patch Cord", "category": "Accessories", "on_hand": 190, "reserved": 40, "reorder_threshold": 30},
        {"item_id": "splice-protectors", "name": "Splice Protectors", "category": "Consumables", "on_hand": 380, "reserved": 120, "reorder_threshold": 80},
        {"item_id": "pole-hardware", "name": "Pole hardware kit", "category": "Hardware", "on_hand": 25, "reserved": 10, "reorder_threshold": 6},
    ]

    def __init__(
        self,
        access_points: Sequence[dict[str, Any]] | None = None,
        stock_items: Sequence[dict[str, Any]] | None = None,
    ):
        if access_points is not None:
            self._access_points = list(access_points)
        if stock_items is not None:
            self._stock_items = list(stock_items)

    def load_access_points(self) -> list[NetworkAccessPoint]:
        """Validate and return the NAP catalog in its source order."""
        naps = [NetworkAccessPoint.model_validate(record) for record in self._access_points]
        logger.debug(f"Loaded {len(naps)} NAP records")
        return naps

    def load_stock_items(self) -> list[StockItem]:
        """Validate and return fresh stock items in their source order."""
        items = [StockItem.model_validate(record) for record in self._stock_items]
        logger.debug(f"Loaded {len(items)} stock items")
        return items
