"""
Bench Calculator Station - Series / Parallel Resistor Network

Given a source (a voltage or a current) and a list of resistors, compute the
network totals and the voltage drop, current, power and share of every
element.

    Series:    Rtotal = ΣRi                 I is shared, Vi = I·Ri
    Parallel:  G = Σ(1/Ri) for Ri > 0       V is shared, Ii = V/Ri

Degenerate inputs (zero resistance, zero source) collapse to 0 instead of
raising; this solver has no error path.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from enum import IntEnum

import config

log = logging.getLogger(__name__)

SERIES   = "series"
PARALLEL = "parallel"

SOURCE_VOLTAGE = "voltage"
SOURCE_CURRENT = "current"

# Source kind each topology starts with
DEFAULT_SOURCE_KIND = {
    SERIES:   SOURCE_VOLTAGE,
    PARALLEL: SOURCE_CURRENT,
}


class UnitMultiplier(IntEnum):
    OHM  = 1
    KOHM = 1_000
    MOHM = 1_000_000


def _new_id() -> str:
    return uuid.uuid4().hex[:9]


@dataclass
class Resistor:
    """One row of the resistor list.  ``id`` only identifies the row."""
    value: float = config.DEFAULT_RESISTOR_VALUE
    multiplier: UnitMultiplier = UnitMultiplier.OHM
    id: str = field(default_factory=_new_id)

    @property
    def actual_resistance(self) -> float:
        return self.value * self.multiplier


@dataclass
class CalculatedResistor:
    """A resistor plus everything derived for it in one solve."""
    resistor: Resistor
    actual_resistance: float
    voltage_drop: float
    current_flow: float
    power: float
    share_percentage: float

    @property
    def id(self) -> str:
        return self.resistor.id


@dataclass
class NetworkResult:
    calculated_resistors: list[CalculatedResistor]
    total_resistance: float
    total_current: float
    total_voltage: float
    total_power: float


# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------

def _solve_series(source_value, source_kind, resistors):
    total_resistance = sum(r.actual_resistance for r in resistors)

    if source_kind == SOURCE_VOLTAGE:
        total_voltage = source_value
        total_current = total_voltage / total_resistance if total_resistance > 0 else 0.0
    else:
        total_current = source_value
        total_voltage = total_current * total_resistance

    calculated = []
    for r in resistors:
        ohms = r.actual_resistance
        drop = total_current * ohms
        calculated.append(CalculatedResistor(
            resistor=replace(r),
            actual_resistance=ohms,
            voltage_drop=drop,
            current_flow=total_current,
            power=total_current * total_current * ohms,
            share_percentage=drop / total_voltage * 100 if total_voltage > 0 else 0.0,
        ))
    return calculated, total_resistance, total_current, total_voltage


def _solve_parallel(source_value, source_kind, resistors):
    # Zero-ohm rows contribute no conductance; they are skipped, not shorted.
    conductance = sum(1 / r.actual_resistance for r in resistors if r.actual_resistance > 0)
    total_resistance = 1 / conductance if conductance > 0 else 0.0

    if source_kind == SOURCE_VOLTAGE:
        total_voltage = source_value
        total_current = total_voltage * conductance
    else:
        total_current = source_value
        total_voltage = total_current * total_resistance

    calculated = []
    for r in resistors:
        ohms = r.actual_resistance
        current = total_voltage / ohms if ohms > 0 else 0.0
        calculated.append(CalculatedResistor(
            resistor=replace(r),
            actual_resistance=ohms,
            voltage_drop=total_voltage,
            current_flow=current,
            power=total_voltage * current,
            share_percentage=current / total_current * 100 if total_current > 0 else 0.0,
        ))
    return calculated, total_resistance, total_current, total_voltage


def solve_network(
    mode: str,
    source_value: float,
    source_kind: str,
    resistors: list[Resistor],
) -> NetworkResult:
    """Solve a series or parallel network.

    Args:
        mode:         ``'series'`` or ``'parallel'``.
        source_value: Volts when *source_kind* is ``'voltage'``, amps when
                      it is ``'current'``.
        source_kind:  ``'voltage'`` or ``'current'``.
        resistors:    Elements of the network, in display order.

    Raises:
        ValueError: Unknown *mode* or *source_kind*.
    """
    if source_kind not in (SOURCE_VOLTAGE, SOURCE_CURRENT):
        raise ValueError(f"Unknown source kind: {source_kind!r}. Expected 'voltage' or 'current'.")

    if mode == SERIES:
        solved = _solve_series(source_value, source_kind, resistors)
    elif mode == PARALLEL:
        solved = _solve_parallel(source_value, source_kind, resistors)
    else:
        raise ValueError(f"Unknown network mode: {mode!r}. Expected 'series' or 'parallel'.")

    calculated, total_resistance, total_current, total_voltage = solved
    result = NetworkResult(
        calculated_resistors=calculated,
        total_resistance=total_resistance,
        total_current=total_current,
        total_voltage=total_voltage,
        total_power=total_voltage * total_current,
    )
    log.debug(
        "%s network of %d: R=%g I=%g V=%g",
        mode, len(resistors), total_resistance, total_current, total_voltage,
    )
    return result


# ---------------------------------------------------------------------------
# ResistorNetwork - list editing + memoized solve
# ---------------------------------------------------------------------------

class ResistorNetwork:
    """Input state of the series/parallel calculator.

    Owns the resistor list (never empty), the topology, and the source.
    ``result`` is recomputed from scratch whenever any input differs from
    the last solve, and reused otherwise.
    """

    def __init__(self, mode: str = SERIES, source_value: float = config.DEFAULT_SOURCE_VALUE) -> None:
        self.mode = mode
        self.source_value = source_value
        self.source_kind = DEFAULT_SOURCE_KIND.get(mode, SOURCE_VOLTAGE)
        self.resistors: list[Resistor] = [Resistor(100.0), Resistor(200.0)]

        self._cache_key: tuple | None = None
        self._cache_result: NetworkResult | None = None

    # ------------------------------------------------------------------
    # List editing
    # ------------------------------------------------------------------

    def add_resistor(self) -> Resistor:
        resistor = Resistor()
        self.resistors.append(resistor)
        return resistor

    def remove_resistor(self, resistor_id: str) -> bool:
        """Remove a row.  Refused (returns False) for the last remaining row."""
        if len(self.resistors) <= 1:
            log.debug("Refusing to remove the last resistor")
            return False
        before = len(self.resistors)
        self.resistors = [r for r in self.resistors if r.id != resistor_id]
        return len(self.resistors) < before

    def can_remove(self) -> bool:
        return len(self.resistors) > 1

    def update_resistor(self, resistor_id: str, value: float | None = None,
                        multiplier: UnitMultiplier | None = None) -> None:
        """Edit a row in place.

        Raises:
            KeyError: No resistor with *resistor_id*.
        """
        for r in self.resistors:
            if r.id == resistor_id:
                if value is not None:
                    r.value = value
                if multiplier is not None:
                    r.multiplier = UnitMultiplier(multiplier)
                return
        raise KeyError(resistor_id)

    # ------------------------------------------------------------------
    # Mode / source
    # ------------------------------------------------------------------

    def set_mode(self, mode: str) -> None:
        """Switch topology; resets the source kind to that topology's default."""
        if mode not in DEFAULT_SOURCE_KIND:
            raise ValueError(f"Unknown network mode: {mode!r}. Expected 'series' or 'parallel'.")
        self.mode = mode
        self.source_kind = DEFAULT_SOURCE_KIND[mode]

    def set_source(self, value: float | None = None, kind: str | None = None) -> None:
        if value is not None:
            self.source_value = value
        if kind is not None:
            if kind not in (SOURCE_VOLTAGE, SOURCE_CURRENT):
                raise ValueError(f"Unknown source kind: {kind!r}. Expected 'voltage' or 'current'.")
            self.source_kind = kind

    # ------------------------------------------------------------------
    # Mode lifecycle hooks
    # ------------------------------------------------------------------

    def on_enter(self) -> None:
        pass

    def on_exit(self) -> None:
        pass

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def _input_key(self) -> tuple:
        return (
            self.mode,
            self.source_value,
            self.source_kind,
            tuple((r.id, r.value, int(r.multiplier)) for r in self.resistors),
        )

    @property
    def result(self) -> NetworkResult:
        key = self._input_key()
        if key != self._cache_key:
            self._cache_result = solve_network(
                self.mode, self.source_value, self.source_kind, list(self.resistors)
            )
            self._cache_key = key
        return self._cache_result
