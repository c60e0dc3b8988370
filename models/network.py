"""
Network access point (NAP) directory models.
Includes NetworkAccessPoint, FocusCustomer, FilterCriteria and ActiveDetail.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import NapState, NapStatus

# Selector value meaning "do not filter on this field"
ALL = "all"

PLACEHOLDER_VALUE = "—"


class FocusCustomer(BaseModel):
    """Denormalized customer record shown when its NAP is the active selection."""

    model_config = ConfigDict(frozen=True)

    name: str
    circuit_id: str
    concentrator_id: str
    nap_id: str
    port: str


class NetworkAccessPoint(BaseModel):
    """
    Catalog entry for a field cabinet terminating subscriber-facing fiber ports.
    Immutable for the lifetime of a dashboard session.
    """

    model_config = ConfigDict(frozen=True)

    nap_id: str
    municipality: str
    barangay: str
    circuit_id: str  # upstream PON
    concentrator_id: str  # last-mile LCP
    total_ports: int = Field(ge=0)
    active_ports: int = Field(ge=0)
    status: NapStatus = NapStatus.OPERATIONAL
    next_port: int | None = None
    focus_customer: FocusCustomer | None = None

    @property
    def available_ports(self) -> int:
        return max(self.total_ports - self.active_ports, 0)

    @property
    def state(self) -> NapState:
        """Derived port state; maintenance wins over capacity."""
        if self.status == NapStatus.MAINTENANCE:
            return NapState.MAINTENANCE
        if self.available_ports == 0:
            return NapState.FULL
        return NapState.AVAILABLE

    def searchable_values(self) -> tuple[str, ...]:
        return (self.nap_id, self.barangay, self.circuit_id, self.concentrator_id)


class FilterCriteria(BaseModel):
    """Current directory filter. ``"all"`` disables a selector, empty search disables search."""

    municipality: str = ALL
    state: str = ALL
    search: str = ""

    def is_unfiltered(self) -> bool:
        return self.municipality == ALL and self.state == ALL and not self.search


class ActiveDetail(BaseModel):
    """Display record for the active NAP (or the "no selection" placeholder)."""

    model_config = ConfigDict(frozen=True)

    name: str
    circuit_id: str
    concentrator_id: str
    nap_id: str
    port: str
    placeholder: bool = False

    @classmethod
    def no_selection(cls) -> "ActiveDetail":
        return cls(
            name="No NAP selected",
            circuit_id=PLACEHOLDER_VALUE,
            concentrator_id=PLACEHOLDER_VALUE,
            nap_id=PLACEHOLDER_VALUE,
            port=PLACEHOLDER_VALUE,
            placeholder=True,
        )

    @classmethod
    def from_focus_customer(cls, customer: FocusCustomer) -> "ActiveDetail":
        return cls(**customer.model_dump())
