"""
View models handed to the projection layer.
The projection only paints these; it holds no business logic.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import NapState, Tone
from .network import ActiveDetail

NAP_STATE_LABELS = {
    NapState.AVAILABLE: "Ports available",
    NapState.FULL: "Fully utilised",
    NapState.MAINTENANCE: "Under maintenance",
}


class DirectoryAggregates(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    total_ports: int = 0
    active_ports: int = 0
    total_available_ports: int = 0
    utilisation_percent: int = 0


class NapRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    nap_id: str
    municipality: str
    barangay: str
    circuit_id: str
    concentrator_id: str
    total_ports: int
    available_ports: int
    state: NapState
    status_label: str
    is_active: bool = False


class DirectoryView(BaseModel):
    """Filtered NAP rows, their aggregates and the active detail record."""

    model_config = ConfigDict(frozen=True)

    rows: list[NapRow] = Field(default_factory=list)
    aggregates: DirectoryAggregates = Field(default_factory=DirectoryAggregates)
    active_detail: ActiveDetail = Field(default_factory=ActiveDetail.no_selection)
    municipalities: list[str] = Field(default_factory=list)
    active_nap_id: str | None = None


class StockRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_id: str
    name: str
    category: str
    on_hand: int
    reserved: int
    available_qty: int
    needs_reorder: bool
    status_label: str


class InventoryAggregates(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_available: int = 0
    reorder_count: int = 0
    open_job_orders: int = 0


class InventoryView(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: list[StockRow] = Field(default_factory=list)
    aggregates: InventoryAggregates = Field(default_factory=InventoryAggregates)


class JobOrderInput(BaseModel):
    """One quantity input on the job-order form."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    name: str
    category: str
    available_qty: int
    quantity: int = 0
    disabled: bool = False


class JobOrderFormView(BaseModel):
    model_config = ConfigDict(frozen=True)

    inputs: list[JobOrderInput] = Field(default_factory=list)


class JobOrderSummary(BaseModel):
    """Either "no items selected" or a pluralized unit count with its lines."""

    model_config = ConfigDict(frozen=True)

    headline: str
    lines: list[str] = Field(default_factory=list)
    total_units: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_units == 0


class OutcomeMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    tone: Tone = Tone.NEUTRAL
