"""
Configuration classes for the operations dashboard.
Defines seeds and display settings for the engines in a type-safe, extensible way.
"""

import os
from dataclasses import dataclass, field


@dataclass
class DirectoryConfig:
    select_first_on_load: bool = True


@dataclass
class ReservationConfig:
    reference_prefix: str = "JO-2025-"
    reference_width: int = 4  # Zero padding for the sequence part of the reference
    seed_open_job_orders: int = 3
    seed_sequence: int = 1287
    unit_label: str = "pcs"


@dataclass
class DashboardConfig:
    directory: DirectoryConfig = field(default_factory=DirectoryConfig)
    reservation: ReservationConfig = field(default_factory=ReservationConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "DashboardConfig":
        """Build a config, overriding defaults with ``OPS_*`` environment variables."""
        env = os.environ if environ is None else environ
        reservation = ReservationConfig()
        if "OPS_JOB_ORDER_PREFIX" in env:
            reservation.reference_prefix = env["OPS_JOB_ORDER_PREFIX"]
        if "OPS_JOB_ORDER_SEQUENCE" in env:
            reservation.seed_sequence = int(env["OPS_JOB_ORDER_SEQUENCE"])
        if "OPS_OPEN_JOB_ORDERS" in env:
            reservation.seed_open_job_orders = int(env["OPS_OPEN_JOB_ORDERS"])
        return cls(
            reservation=reservation,
            log_level=env.get("OPS_LOG_LEVEL", "INFO").upper(),
        )


# Example usage:
# config = DashboardConfig.from_env()
# engine = ReservationEngine(stock, config=config.reservation)
