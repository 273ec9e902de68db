from __future__ import annotations

"""
Bench Calculator Station - RC Filter and RC Charging

Filter mode: any two of R, C and the cutoff frequency f give the third.

    τ  = R·C
    fc = 1 / (2π·R·C)

Delay mode: a capacitor charging through R from a supply Vin.

    Vc(t) = Vin · (1 - e^(-t/τ))
    t     = -τ · ln(1 - Vtarget/Vin)

All quantities are in SI base units (Ω, F, Hz, s, V).  The UNITS tables and
best_unit() exist so a form can write a derived value back with a sensible
unit selection.

Exports:
    solve_rc_filter     – two of R/C/f → RCFilterResult
    solve_rc_delay      – R, C, Vin + target or time → RCDelayResult
    sample_charge_curve – 31 (time, voltage) points over 0..5τ
    best_unit           – pick the display unit for a derived value
    format_time         – seconds → '1.00 ms'
"""

import logging
import math
from dataclasses import dataclass, field

import config
from solver_errors import DivisionByZero, InsufficientInputs, InvalidConfiguration

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Unit selections per quantity: (label, multiplier), smallest first
# ---------------------------------------------------------------------------

UNITS: dict[str, list[tuple[str, float]]] = {
    "R": [("Ω", 1.0), ("kΩ", 1e3), ("MΩ", 1e6)],
    "C": [("pF", 1e-12), ("nF", 1e-9), ("µF", 1e-6), ("mF", 1e-3)],
    "F": [("Hz", 1.0), ("kHz", 1e3), ("MHz", 1e6)],
    "T": [("µs", 1e-6), ("ms", 1e-3), ("s", 1.0)],
}


def best_unit(value: float, quantity: str) -> tuple[str, float]:
    """Return the largest unit of *quantity* that does not exceed *value*.

    Values below the smallest unit get the smallest unit.

    Raises:
        KeyError: Unknown quantity (expected 'R', 'C', 'F' or 'T').
    """
    units = UNITS[quantity]
    chosen = units[0]
    for label, multiplier in units:
        if value >= multiplier:
            chosen = (label, multiplier)
    return chosen


def format_time(seconds: float) -> str:
    """Format a duration for chart labels: ns / µs / ms below 1 s, else s."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.2f} ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f} µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f} ms"
    return f"{seconds:.3f} s"


# ---------------------------------------------------------------------------
# Filter mode
# ---------------------------------------------------------------------------

@dataclass
class RCFilterResult:
    resistance: float
    capacitance: float
    frequency: float
    tau: float
    derived: str        # 'R', 'C' or 'F'

    @property
    def value(self) -> float:
        return {"R": self.resistance, "C": self.capacitance, "F": self.frequency}[self.derived]


def solve_rc_filter(
    resistance: float | None = None,
    capacitance: float | None = None,
    frequency: float | None = None,
) -> RCFilterResult:
    """Derive the missing one of R, C and cutoff frequency.

    Raises:
        InsufficientInputs: Not exactly two values given.
        DivisionByZero:     R·C = 0, f = 0, or C = 0 in the relevant pairing.
    """
    r, c, f = resistance, capacitance, frequency
    if sum(x is not None for x in (r, c, f)) != 2:
        raise InsufficientInputs("Enter any 2 of R, C, f")

    if r is not None and c is not None:
        if r * c == 0:
            raise DivisionByZero("R and C must be non-zero to compute the cutoff frequency")
        f = 1 / (2 * math.pi * r * c)
        derived = "F"
    elif r is not None:
        if f == 0:
            raise DivisionByZero("Frequency cannot be 0")
        if r == 0:
            raise DivisionByZero("Resistance cannot be 0")
        c = 1 / (2 * math.pi * r * f)
        derived = "C"
    else:
        if f == 0:
            raise DivisionByZero("Frequency cannot be 0")
        if c == 0:
            raise DivisionByZero("Capacitance cannot be 0")
        r = 1 / (2 * math.pi * c * f)
        derived = "R"

    result = RCFilterResult(resistance=r, capacitance=c, frequency=f, tau=r * c, derived=derived)
    log.debug("RC filter solved %s: tau=%g fc=%g", derived, result.tau, result.frequency)
    return result


# ---------------------------------------------------------------------------
# Delay / charging mode
# ---------------------------------------------------------------------------

@dataclass
class ChargeSample:
    time: float
    voltage: float
    label: str


@dataclass
class RCDelayResult:
    tau: float
    time: float | None = None      # elapsed time (solved or given)
    voltage: float | None = None   # capacitor voltage at *time*
    derived: str | None = None     # 'time', 'voltage', or None (τ only)
    samples: list[ChargeSample] = field(default_factory=list)


def charge_voltage(v_in: float, tau: float, t: float) -> float:
    """Capacitor voltage after charging for *t* seconds."""
    return v_in * (1 - math.exp(-t / tau))


def sample_charge_curve(
    tau: float,
    v_in: float,
    steps: int = config.CHARGE_CURVE_STEPS,
    span: float = config.CHARGE_CURVE_SPAN,
) -> list[ChargeSample]:
    """Return ``steps + 1`` evenly spaced samples over ``[0, span·τ]``."""
    max_time = tau * span
    samples = []
    for k in range(steps + 1):
        t = max_time / steps * k
        samples.append(ChargeSample(time=t, voltage=charge_voltage(v_in, tau, t), label=format_time(t)))
    return samples


def solve_rc_delay(
    v_in: float | None,
    resistance: float | None,
    capacitance: float | None,
    v_target: float | None = None,
    elapsed: float | None = None,
) -> RCDelayResult:
    """Solve the charging exponential.

    - target given, time not: solve the time to reach the target.
    - time given (target ignored): solve the voltage at that time.
    - neither: report τ only.

    Only a positive *elapsed* counts as given.  The result always carries
    the sampled charge curve.

    Raises:
        InsufficientInputs:   Vin missing, or R / C missing or not positive.
        InvalidConfiguration: Target not strictly between 0 and Vin.
    """
    if v_in is None:
        raise InsufficientInputs("Enter the supply voltage (Vin)")
    if resistance is None or capacitance is None or resistance <= 0 or capacitance <= 0:
        raise InsufficientInputs("Enter positive resistance and capacitance values")

    tau = resistance * capacitance
    has_time = elapsed is not None and elapsed > 0

    if v_target is not None and not has_time:
        if v_target >= v_in:
            raise InvalidConfiguration("Target voltage must be below the supply voltage")
        if v_target <= 0:
            raise InvalidConfiguration("Target voltage must be positive")
        t = -tau * math.log(1 - v_target / v_in)
        result = RCDelayResult(tau=tau, time=t, voltage=v_target, derived="time")
    elif has_time:
        result = RCDelayResult(
            tau=tau, time=elapsed, voltage=charge_voltage(v_in, tau, elapsed), derived="voltage"
        )
    else:
        result = RCDelayResult(tau=tau)

    result.samples = sample_charge_curve(tau, v_in)
    log.debug("RC delay tau=%g derived=%s t=%s v=%s", tau, result.derived, result.time, result.voltage)
    return result
