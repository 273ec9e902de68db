"""
Bench Calculator Station - Ohm's Law + Power Solver

Given any two of voltage V, current I, resistance R and power P, derive the
other two:

    V & I  →  R = V/I        P = V·I
    V & R  →  I = V/R        P = V²/R
    V & P  →  I = P/V        R = V²/P
    I & R  →  V = I·R        P = I²·R
    I & P  →  V = P/I        R = P/I²
    R & P  →  V = √(P·R)     I = √(P/R)

All four values come back rounded to OHMS_LAW_DECIMALS places so a form
that writes them back shows exactly what the next solve will read.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import config
from solver_errors import DivisionByZero, InsufficientInputs, InvalidConfiguration

log = logging.getLogger(__name__)

QUANTITIES = ("V", "I", "R", "P")

UNIT_MAP   = {"V": "V", "I": "A", "R": "Ω", "P": "W"}
FULL_NAMES = {"V": "Voltage", "I": "Current", "R": "Resistance", "P": "Power"}


@dataclass
class OhmsLawResult:
    voltage: float
    current: float
    resistance: float
    power: float
    derived: tuple[str, str]   # the two quantities that were solved for

    def as_dict(self) -> dict[str, float]:
        return {"V": self.voltage, "I": self.current, "R": self.resistance, "P": self.power}


def _divide(numerator: float, denominator: float, what: str) -> float:
    if denominator == 0:
        raise DivisionByZero(f"Cannot solve {what}: division by zero")
    return numerator / denominator


def _sqrt(value: float, what: str) -> float:
    if value < 0:
        raise InvalidConfiguration(f"Cannot solve {what}: R and P must have the same sign")
    return math.sqrt(value)


def solve_ohms_law(
    voltage: float | None = None,
    current: float | None = None,
    resistance: float | None = None,
    power: float | None = None,
) -> OhmsLawResult:
    """Solve the two unknown quantities from the two known ones.

    Raises:
        InsufficientInputs:   Not exactly two values given.
        DivisionByZero:       A known value used as a divisor is zero.
        InvalidConfiguration: R and P of opposite sign (no real root).
    """
    v, i, r, p = voltage, current, resistance, power
    known = sum(x is not None for x in (v, i, r, p))
    if known != 2:
        raise InsufficientInputs("Need exactly 2 of V, I, R, P")

    if v is not None and i is not None:
        r = _divide(v, i, "R")
        p = v * i
        derived = ("R", "P")
    elif v is not None and r is not None:
        i = _divide(v, r, "I")
        p = _divide(v * v, r, "P")
        derived = ("I", "P")
    elif v is not None and p is not None:
        i = _divide(p, v, "I")
        r = _divide(v * v, p, "R")
        derived = ("I", "R")
    elif i is not None and r is not None:
        v = i * r
        p = i * i * r
        derived = ("V", "P")
    elif i is not None and p is not None:
        v = _divide(p, i, "V")
        r = _divide(p, i * i, "R")
        derived = ("V", "R")
    else:
        v = _sqrt(p * r, "V")
        i = _sqrt(_divide(p, r, "I"), "I")
        derived = ("V", "I")

    digits = config.OHMS_LAW_DECIMALS
    result = OhmsLawResult(
        voltage=round(v, digits),
        current=round(i, digits),
        resistance=round(r, digits),
        power=round(p, digits),
        derived=derived,
    )
    log.debug("Ohm's law solved %s: %r", "/".join(derived), result.as_dict())
    return result
