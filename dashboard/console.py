"""
Plain-text projection of the dashboard view models.
Used by the demo script; it only paints what it is given.
"""

from __future__ import annotations

import io
from typing import List, Sequence, TextIO

from dashboard.formatters import format_number, format_percent
from models.enums import DashboardEventType
from models.events import ProjectionEvent
from models.views import (
    DirectoryView,
    InventoryView,
    JobOrderFormView,
    JobOrderSummary,
    OutcomeMessage,
)
from utils.event_bus import EventBus


def _format_table(rows: Sequence[Sequence[object]], headers: List[str]) -> str:
    output = io.StringIO()

    widths = [len(h) for h in headers]
    for row in rows:
        for i, v in enumerate(row):
            widths[i] = max(widths[i], len(str(v)))

    def fmt(r):
        return " ".join(str(r[i]).ljust(widths[i]) for i in range(len(headers)))

    print(fmt(headers), file=output)
    print(" ".join("-" * w for w in widths), file=output)
    for row in rows:
        print(fmt(row), file=output)
    if not rows:
        print("(no matching rows)", file=output)

    return output.getvalue()


def render_directory(view: DirectoryView) -> str:
    out = io.StringIO()
    agg = view.aggregates
    print("== NAP Directory ==", file=out)
    print(
        f"NAPs: {format_number(agg.count)}   "
        f"Available ports: {format_number(agg.total_available_ports)}   "
        f"Utilisation: {format_percent(agg.utilisation_percent)}",
        file=out,
    )
    rows = [
        (
            ">" if r.is_active else " ",
            r.nap_id,
            r.municipality,
            r.barangay,
            r.circuit_id,
            r.concentrator_id,
            format_number(r.total_ports),
            format_number(r.available_ports),
            r.status_label,
        )
        for r in view.rows
    ]
    print(
        _format_table(rows, [" ", "NAP", "Municipality", "Barangay", "PON", "LCP", "Ports", "Free", "Status"]),
        file=out,
        end="",
    )
    d = view.active_detail
    print(f"Customer: {d.name} | PON {d.circuit_id} | LCP {d.concentrator_id} | {d.nap_id} | Port {d.port}", file=out)
    return out.getvalue()


def render_inventory(view: InventoryView) -> str:
    out = io.StringIO()
    agg = view.aggregates
    print("== Inventory ==", file=out)
    print(
        f"Available stock: {format_number(agg.total_available)}   "
        f"Reorder items: {agg.reorder_count}   "
        f"Open job orders: {agg.open_job_orders}",
        file=out,
    )
    rows = [
        (
            r.name,
            r.category,
            format_number(r.on_hand),
            format_number(r.reserved),
            format_number(r.available_qty),
            r.status_label,
        )
        for r in view.rows
    ]
    print(
        _format_table(rows, ["Item", "Category", "In stock", "Reserved", "Available", "Status"]),
        file=out,
        end="",
    )
    return out.getvalue()


def render_job_order_form(view: JobOrderFormView) -> str:
    lines = ["== Job order =="]
    for i in view.inputs:
        suffix = " (disabled)" if i.disabled else ""
        lines.append(f"  [{i.quantity:>3}] {i.name} - {i.category} • Available: {format_number(i.available_qty)}{suffix}")
    return "\n".join(lines) + "\n"


def render_summary(view: JobOrderSummary) -> str:
    lines = [view.headline]
    lines.extend(f"  - {line}" for line in view.lines)
    return "\n".join(lines) + "\n"


def render_outcome(view: OutcomeMessage) -> str:
    if not view.text:
        return ""
    return f"[{view.tone.value.upper()}] {view.text}\n"


_RENDERERS = {
    DashboardEventType.DIRECTORY_VIEW: render_directory,
    DashboardEventType.INVENTORY_VIEW: render_inventory,
    DashboardEventType.JOB_ORDER_FORM: render_job_order_form,
    DashboardEventType.JOB_ORDER_SUMMARY: render_summary,
    DashboardEventType.JOB_ORDER_OUTCOME: render_outcome,
}


class ConsoleProjection:
    """Subscribes to every dashboard event type and writes the rendered text to ``stream``."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def attach(self, bus: EventBus) -> None:
        for event_type in _RENDERERS:
            bus.subscribe(event_type, self.on_event)

    def on_event(self, event: ProjectionEvent) -> None:
        text = _RENDERERS[event.event_type](event.view)
        if text:
            print(text, file=self.stream)
