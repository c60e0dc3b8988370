"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class NapStatus(str, Enum):
    """Operational status recorded for a NAP cabinet"""

    OPERATIONAL = "operational"
    MAINTENANCE = "maintenance"


class NapState(str, Enum):
    """Derived port state used for filtering and display"""

    AVAILABLE = "available"
    FULL = "full"
    MAINTENANCE = "maintenance"


class JobOrderPhase(str, Enum):
    """Phases a job-order attempt moves through"""

    IDLE = "idle"
    STAGING = "staging"
    VALIDATING = "validating"
    COMMITTED = "committed"
    REJECTED = "rejected"


class RejectionReason(str, Enum):
    """Why a job-order commit was refused"""

    NO_ITEMS_SELECTED = "no_items_selected"
    INSUFFICIENT_STOCK = "insufficient_stock"


class Tone(str, Enum):
    """Tone tag attached to outcome messages (mapped to styling by the projection)"""

    NEUTRAL = "neutral"
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class FilterField(str, Enum):
    """Directory filter fields the UI can change"""

    MUNICIPALITY = "municipality"
    STATE = "state"
    SEARCH = "search"


class DashboardEventType(str, Enum):
    """Event types published to the projection layer"""

    DIRECTORY_VIEW = "directory_view"
    INVENTORY_VIEW = "inventory_view"
    JOB_ORDER_FORM = "job_order_form"
    JOB_ORDER_SUMMARY = "job_order_summary"
    JOB_ORDER_OUTCOME = "job_order_outcome"
