"""
Environment helpers.

Dashboard settings such as ``OPS_JOB_ORDER_PREFIX`` or ``OPS_LOG_LEVEL`` may be
kept in a ``.env`` file next to ``pyproject.toml``. ``load_project_dotenv``
copies them into ``os.environ`` (without overriding values already set) so that
``DashboardConfig.from_env`` picks them up.
"""

from pathlib import Path

from dotenv import load_dotenv

__all__ = ["find_project_root", "load_project_dotenv"]

_MAX_DEPTH = 10


def find_project_root(start: Path | None = None) -> Path:
    """Nearest directory at or above ``start`` holding a ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    current = start or here
    for candidate in [current, *current.parents][:_MAX_DEPTH]:
        if (candidate / "pyproject.toml").exists():
            return candidate
    return here


def load_project_dotenv(start: Path | None = None) -> bool:
    """Load the project ``.env``. Returns False when there is none."""
    dotenv_path = find_project_root(start) / ".env"
    if not dotenv_path.exists():
        return False
    return load_dotenv(dotenv_path=dotenv_path, override=False)
