"""Compensation split configuration.

The pool rate is the share of a gross earning kept for shared team
development when an earning record does not state its pool cut explicitly.
"""

import os
from dataclasses import dataclass

from src.config import settings


@dataclass
class EarningsConfig:
    # Fallback pool cut as a fraction of the gross amount
    pool_rate: float = settings.pool_rate

    # How many top participants each category rollup exposes
    top_participants: int = 2

    def __post_init__(self) -> None:
        if not 0.0 <= self.pool_rate <= 1.0:
            raise ValueError(f"pool_rate must be within [0, 1], got {self.pool_rate}")
        if self.top_participants < 0:
            raise ValueError(
                f"top_participants must be non-negative, got {self.top_participants}"
            )

    @classmethod
    def from_env(cls) -> "EarningsConfig":
        """Load config with environment variable overrides (EARNINGS_ prefix)."""
        config = cls()

        if v := os.getenv("EARNINGS_POOL_RATE"):
            config.pool_rate = float(v)
        if v := os.getenv("EARNINGS_TOP_PARTICIPANTS"):
            config.top_participants = int(v)

        # Re-validate after overrides
        config.__post_init__()
        return config


default_config = EarningsConfig()
