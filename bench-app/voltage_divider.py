"""
Bench Calculator Station - Voltage Divider Solver

    Vin ── Ra ──┬── Vout
                Rb
                │
               GND          Vout = Vin · Rb / (Ra + Rb)

Exactly three of {vin, ra, rb, vout} must be known; the fourth is derived.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import config
from solver_errors import DivisionByZero, InsufficientInputs, NegativeResult

log = logging.getLogger(__name__)

DIVIDER_FIELDS = ("vin", "ra", "rb", "vout")


@dataclass
class DividerResult:
    vin: float
    ra: float
    rb: float
    vout: float
    derived: str     # name of the field that was solved for

    @property
    def value(self) -> float:
        return getattr(self, self.derived)


def solve_divider(
    vin: float | None = None,
    ra: float | None = None,
    rb: float | None = None,
    vout: float | None = None,
) -> DividerResult:
    """Solve for the single missing quantity.

    Raises:
        InsufficientInputs: Not exactly three values given.
        DivisionByZero:     Ra+Rb = 0, Vout = 0, Vin = Vout, or Rb = 0.
        NegativeResult:     The derived Ra or Rb is negative.
    """
    known = {"vin": vin, "ra": ra, "rb": rb, "vout": vout}
    missing = [name for name, value in known.items() if value is None]
    if len(missing) != 1:
        raise InsufficientInputs("Enter exactly 3 of Vin, Ra, Rb, Vout")

    if vout is None:
        if ra + rb == 0:
            raise DivisionByZero("Ra + Rb cannot be 0")
        vout = vin * (rb / (ra + rb))
    elif ra is None:
        if vout == 0:
            raise DivisionByZero("Vout cannot be 0 when solving for Ra")
        if abs(vin - vout) < config.EQUALITY_EPSILON:
            raise DivisionByZero("Vin cannot equal Vout")
        ra = rb * (vin / vout - 1)
        if ra < 0:
            raise NegativeResult("Ra would be negative: Vin must exceed Vout")
    elif rb is None:
        if vin == vout:
            raise DivisionByZero("Vin cannot equal Vout")
        rb = (vout * ra) / (vin - vout)
        if rb < 0:
            raise NegativeResult("Rb would be negative: Vin must exceed Vout")
    else:
        if rb == 0:
            raise DivisionByZero("Rb cannot be 0 when solving for Vin")
        vin = vout * (ra + rb) / rb

    result = DividerResult(vin=vin, ra=ra, rb=rb, vout=vout, derived=missing[0])
    log.debug("Divider solved %s = %g", result.derived, result.value)
    return result
