"""Formatting and logging configuration.

Defaults can be overridden through environment variables:
- V3ROUTE_SIGNIFICANT_DIGITS: digits for to_significant (default: 6)
- V3ROUTE_DECIMAL_PLACES: places for to_fixed (default: 4)
- V3ROUTE_ROUNDING: ROUND_DOWN, ROUND_HALF_UP or ROUND_UP (default: ROUND_HALF_UP)
- V3ROUTE_LOG_LEVEL: structlog filtering level (default: INFO)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from v3route.constants import Rounding


@dataclass(frozen=True)
class FormatConfig:
    """Default precision and rounding used when rendering prices.

    Attributes:
        significant_digits: Digits kept by to_significant (default: 6)
        decimal_places: Digits after the point kept by to_fixed (default: 4)
        rounding: Rounding mode applied by both (default: ROUND_HALF_UP)
    """

    significant_digits: int = 6
    decimal_places: int = 4
    rounding: Rounding = Rounding.ROUND_HALF_UP

    def __post_init__(self) -> None:
        if self.significant_digits < 1:
            raise ValueError(f"significant_digits must be positive: {self.significant_digits}")
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places cannot be negative: {self.decimal_places}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FormatConfig:
        """Build a config from V3ROUTE_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            significant_digits=int(env.get("V3ROUTE_SIGNIFICANT_DIGITS", "6")),
            decimal_places=int(env.get("V3ROUTE_DECIMAL_PLACES", "4")),
            rounding=Rounding(env.get("V3ROUTE_ROUNDING", Rounding.ROUND_HALF_UP.value).upper()),
        )


# Default configuration instance
DEFAULT_FORMAT_CONFIG = FormatConfig.from_env()


def configure_logging(level: int | str | None = None) -> None:
    """Configure structlog console output.

    Args:
        level: Logging level (name or number). Falls back to V3ROUTE_LOG_LEVEL,
               then INFO.
    """
    if level is None:
        level = os.environ.get("V3ROUTE_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


__all__ = ["FormatConfig", "DEFAULT_FORMAT_CONFIG", "configure_logging"]
