import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import engines`, `import models`, etc.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from connectors.static_catalog import StaticCatalog  # noqa: E402
from engines.directory import NapDirectory  # noqa: E402
from engines.reservation import ReservationEngine  # noqa: E402


@pytest.fixture
def catalog() -> StaticCatalog:
    return StaticCatalog()


@pytest.fixture
def directory(catalog) -> NapDirectory:
    """A directory engine over the seeded NAP catalog."""
    return NapDirectory(catalog.load_access_points())


@pytest.fixture
def engine(catalog) -> ReservationEngine:
    """A reservation engine over a fresh copy of the seeded stock."""
    return ReservationEngine(catalog.load_stock_items())
