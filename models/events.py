"""
Data models for events flowing through the dashboard.
UI events come in from the event source; projection events go out to the renderer.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from .enums import DashboardEventType


# Inbound UI events
class UIEvent(BaseModel):
    """Base model for discrete UI events"""

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)


class FilterChanged(UIEvent):
    """A directory filter control changed"""

    field: str
    value: str


class QuantityChanged(UIEvent):
    """A job-order quantity input changed; ``raw_value`` is the unparsed text"""

    item_id: str
    raw_value: str


class RowActivated(UIEvent):
    """A NAP row was clicked or activated from the keyboard"""

    nap_id: str


class JobOrderSubmitted(UIEvent):
    """The job-order form was submitted; the engine reads its own staged quantities"""


# Outbound projection event
class ProjectionEvent(BaseModel):
    """A view model published to the projection layer."""

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    event_type: DashboardEventType
    view: Any
    timestamp: datetime = Field(default_factory=datetime.now)
