"""
Bench Calculator Station - Battery Life Estimate

    hours = capacity (mAh) × efficiency / load current (mA)

The efficiency (derating) factor allows for self-discharge, cut-off voltage
and ageing; 0.85 is a common rule of thumb.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import config
from unit_format import parse_field

log = logging.getLogger(__name__)


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


@dataclass
class BatteryLifeResult:
    hours: float
    days: int
    remaining_hours: int
    minutes: int

    @property
    def total_hours(self) -> str:
        """Runtime as decimal hours, one decimal place ('17.0')."""
        return f"{self.hours:.1f}"

    def describe(self) -> str:
        """e.g. '1 day 2 hours 30 minutes (26.5 hours)'; zero days/hours are omitted."""
        parts = []
        if self.days > 0:
            parts.append(_count(self.days, "day"))
        if self.remaining_hours > 0:
            parts.append(_count(self.remaining_hours, "hour"))
        parts.append(_count(self.minutes, "minute"))
        return f"{' '.join(parts)} ({self.total_hours} hours)"


def clamp_efficiency(efficiency: float) -> float:
    return max(config.EFFICIENCY_MIN, min(config.EFFICIENCY_MAX, efficiency))


def estimate_battery_life(
    capacity_mah,
    current_ma,
    efficiency: float = config.DEFAULT_EFFICIENCY,
) -> BatteryLifeResult | None:
    """Estimate runtime, or return None when it cannot be computed.

    *capacity_mah* and *current_ma* may be numbers or raw field text; blank
    or non-numeric input, or a zero load current, yields None.
    """
    capacity = parse_field(capacity_mah)
    current = parse_field(current_ma)
    if capacity is None or current is None or current == 0:
        log.debug("Battery life not computable: capacity=%r current=%r", capacity_mah, current_ma)
        return None

    hours = capacity * clamp_efficiency(efficiency) / current
    # Split the rounded total so minutes never reach 60
    days, rest = divmod(round(hours * 60), 24 * 60)
    remaining_hours, minutes = divmod(rest, 60)
    result = BatteryLifeResult(
        hours=hours,
        days=days,
        remaining_hours=remaining_hours,
        minutes=minutes,
    )
    log.debug("Battery %gmAh @ %gmA -> %.3f h", capacity, current, hours)
    return result
