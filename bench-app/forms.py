from __future__ import annotations

"""
Bench Calculator Station - Calculator Form State

Each calculator keeps the raw text of its input fields and moves between
two states:

    EDITING              – the user is typing; no result is shown
    SOLVED(derived set)  – calculate() succeeded; the fields it filled in
                           are listed in ``derived`` (shown read-only)

Any edit() returns the form to EDITING.  A failed calculate() stores the
error message and leaves every field exactly as it was.

Forms do no drawing; charts.py renders their results.
"""

import logging

import config
from battery_life import clamp_efficiency, estimate_battery_life
from color_code import decode_bands, default_bands, is_valid_color
from led_resistor import LED_PRESETS, solve_led
from ohms_law import solve_ohms_law
from rc_circuit import best_unit, solve_rc_delay, solve_rc_filter
from solver_errors import SolverError
from unit_format import format_fixed, format_rounded, parse_field
from voltage_divider import solve_divider

log = logging.getLogger(__name__)

EDITING = "editing"
SOLVED  = "solved"


# ---------------------------------------------------------------------------
# Base form
# ---------------------------------------------------------------------------

class SolverForm:
    """Text fields + Editing/Solved state around one solver function.

    Subclasses define FIELDS / DEFAULTS and implement ``_solve`` (parsed
    values → result, may raise SolverError) and ``_write_back`` (result →
    names of the fields it filled in).
    """

    FIELDS: tuple[str, ...] = ()
    DEFAULTS: dict[str, str] = {}

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.result = None
        self.derived: frozenset[str] = frozenset()
        self.error: str | None = None
        self.clear()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> str:
        return SOLVED if self.result is not None else EDITING

    def is_read_only(self, name: str) -> bool:
        return name in self.derived

    def parsed(self) -> dict[str, float | None]:
        return {name: parse_field(self.values[name]) for name in self.FIELDS}

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def edit(self, name: str, text: str) -> None:
        """Set one field's text and return to EDITING.

        Raises:
            KeyError: Unknown field name.
        """
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = text
        self._reset_state()

    def calculate(self):
        """Run the solver.  Returns the result, or None on failure."""
        self.error = None
        try:
            result = self._solve(self.parsed())
        except SolverError as exc:
            self.error = str(exc)
            log.debug("%s rejected input: %s", type(self).__name__, exc)
            return None
        self.result = result
        self.derived = frozenset(self._write_back(result)) if result is not None else frozenset()
        return result

    def clear(self) -> None:
        self.values = {name: self.DEFAULTS.get(name, "") for name in self.FIELDS}
        self._reset_state()

    def _reset_state(self) -> None:
        self.result = None
        self.derived = frozenset()
        self.error = None

    # ------------------------------------------------------------------
    # Mode lifecycle hooks
    # ------------------------------------------------------------------

    def on_enter(self) -> None:
        """Called when this calculator becomes the active mode."""
        pass

    def on_exit(self) -> None:
        """Drop the displayed result and message; inputs are kept."""
        self.result = None
        self.derived = frozenset()
        self.error = None

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    def _solve(self, values):
        raise NotImplementedError

    def _write_back(self, result) -> set[str]:
        return set()


# ---------------------------------------------------------------------------
# Voltage divider / Ohm's law / LED
# ---------------------------------------------------------------------------

class VoltageDividerForm(SolverForm):
    FIELDS = ("vin", "ra", "rb", "vout")

    def _solve(self, values):
        return solve_divider(**values)

    def _write_back(self, result):
        self.values[result.derived] = format_fixed(result.value, config.DIVIDER_DECIMALS)
        return {result.derived}


class OhmsLawForm(SolverForm):
    FIELDS = ("V", "I", "R", "P")

    def _solve(self, values):
        return solve_ohms_law(values["V"], values["I"], values["R"], values["P"])

    def _write_back(self, result):
        # Every field is rewritten rounded so the next solve reads the same numbers.
        for name, value in result.as_dict().items():
            self.values[name] = format_rounded(value, config.OHMS_LAW_DECIMALS)
        return set(result.derived)


class LedForm(SolverForm):
    FIELDS = ("supply_voltage", "forward_voltage", "current_ma")
    DEFAULTS = {"supply_voltage": "5", "forward_voltage": "2.0", "current_ma": "20"}

    def _solve(self, values):
        return solve_led(values["supply_voltage"], values["forward_voltage"], values["current_ma"])

    def apply_preset(self, color: str):
        """Load a preset forward voltage; recalculates when the other fields are filled.

        Raises:
            KeyError: Unknown preset color.
        """
        self.edit("forward_voltage", format_rounded(LED_PRESETS[color], 2))
        if self.values["supply_voltage"] and self.values["current_ma"]:
            return self.calculate()
        return None


# ---------------------------------------------------------------------------
# RC forms: fields carry an independent unit multiplier each
# ---------------------------------------------------------------------------

class _UnitForm(SolverForm):
    UNIT_DEFAULTS: dict[str, float] = {}

    def __init__(self) -> None:
        self.units: dict[str, float] = {}
        super().__init__()

    def clear(self) -> None:
        self.units = dict(self.UNIT_DEFAULTS)
        super().clear()

    def set_unit(self, name: str, multiplier: float) -> None:
        if name not in self.units:
            raise KeyError(name)
        self.units[name] = multiplier
        self._reset_state()

    def scaled(self, values: dict[str, float | None]) -> dict[str, float | None]:
        """Apply each field's unit multiplier; absent values stay None."""
        out = dict(values)
        for name, multiplier in self.units.items():
            if out[name] is not None:
                out[name] = out[name] * multiplier
        return out

    def _write_scaled(self, name: str, value: float, decimals: int) -> None:
        _label, multiplier = best_unit(value, name)
        self.values[name] = format_fixed(value / multiplier, decimals)
        self.units[name] = multiplier


class RCFilterForm(_UnitForm):
    FIELDS = ("R", "C", "F")
    UNIT_DEFAULTS = {"R": 1e3, "C": 1e-6, "F": 1.0}

    def _solve(self, values):
        v = self.scaled(values)
        return solve_rc_filter(v["R"], v["C"], v["F"])

    def _write_back(self, result):
        self._write_scaled(result.derived, result.value, config.RC_FIELD_DECIMALS)
        return {result.derived}


class RCDelayForm(_UnitForm):
    FIELDS = ("vin", "vtarget", "R", "C", "T")
    DEFAULTS = {"vin": "5", "vtarget": "3.16", "R": "10", "C": "100"}
    UNIT_DEFAULTS = {"R": 1e3, "C": 1e-6, "T": 1.0}

    def _solve(self, values):
        v = self.scaled(values)
        return solve_rc_delay(v["vin"], v["R"], v["C"], v_target=v["vtarget"], elapsed=v["T"])

    def _write_back(self, result):
        if result.derived == "time":
            self._write_scaled("T", result.time, config.RC_TIME_DECIMALS)
            return {"T"}
        if result.derived == "voltage":
            self.values["vtarget"] = format_fixed(result.voltage, config.RC_TARGET_DECIMALS)
            return {"vtarget"}
        return set()

    @property
    def samples(self):
        return self.result.samples if self.result is not None else []


# ---------------------------------------------------------------------------
# Battery life
# ---------------------------------------------------------------------------

class BatteryLifeForm(SolverForm):
    FIELDS = ("capacity_mah", "current_ma")
    DEFAULTS = {
        "capacity_mah": format_rounded(config.DEFAULT_CAPACITY_MAH, 1),
        "current_ma":   format_rounded(config.DEFAULT_LOAD_MA, 1),
    }

    def __init__(self) -> None:
        self.efficiency = config.DEFAULT_EFFICIENCY
        super().__init__()

    def set_efficiency(self, efficiency: float) -> None:
        self.efficiency = clamp_efficiency(efficiency)
        self._reset_state()

    def _solve(self, values):
        return estimate_battery_life(values["capacity_mah"], values["current_ma"], self.efficiency)


# ---------------------------------------------------------------------------
# Color code
# ---------------------------------------------------------------------------

class ColorCodeForm:
    """Band selection; the decoded value is always defined."""

    def __init__(self, band_count: int = 4) -> None:
        self.band_count = band_count
        self.colors = default_bands(band_count)

    def set_band_count(self, band_count: int) -> None:
        """Switch between 4 and 5 bands, resetting to that count's defaults."""
        self.colors = default_bands(band_count)
        self.band_count = band_count

    def select(self, position: int, color: str) -> bool:
        """Pick *color* for band *position*; refused when the color has no
        value for that band's role."""
        if not is_valid_color(color, position, self.band_count):
            return False
        self.colors[position] = color
        return True

    @property
    def result(self):
        return decode_bands(self.colors, self.band_count)

    def on_enter(self) -> None:
        pass

    def on_exit(self) -> None:
        pass
