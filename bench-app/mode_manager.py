from __future__ import annotations

"""
Bench Calculator Station - Calculation Mode Manager

Keeps one input-state object per calculation mode and tracks which mode is
active.  Series and parallel share a single ResistorNetwork; every other
mode has its own form from forms.py.

Switching modes:
  1. the outgoing mode's on_exit() drops its displayed result (inputs stay),
  2. on_mode_change(old, new) lists the side effects of the switch,
  3. the side effects are applied to the network,
  4. the incoming mode's on_enter() is called.
"""

import logging
from enum import Enum

from forms import (
    BatteryLifeForm,
    ColorCodeForm,
    LedForm,
    OhmsLawForm,
    RCDelayForm,
    RCFilterForm,
    VoltageDividerForm,
)
from resistor_network import DEFAULT_SOURCE_KIND, ResistorNetwork

log = logging.getLogger(__name__)


class CalculationMode(str, Enum):
    SERIES          = "series"
    PARALLEL        = "parallel"
    VOLTAGE_DIVIDER = "voltage-divider"
    LED             = "led"
    OHMS_LAW        = "ohms-law"
    RC_TIME         = "rc-time"
    BATTERY_LIFE    = "battery-life"
    COLOR_CODE      = "color-code"


NETWORK_MODES = (CalculationMode.SERIES, CalculationMode.PARALLEL)


def on_mode_change(old: CalculationMode | None, new: CalculationMode) -> dict:
    """Return the side effects of switching from *old* to *new*.

    Entering series or parallel selects that network topology and resets
    the source kind to its default (voltage for series, current for
    parallel).  Re-selecting the active mode, or entering any other mode,
    has no side effects.
    """
    if old == new or new not in NETWORK_MODES:
        return {}
    return {
        "network_mode": new.value,
        "source_kind":  DEFAULT_SOURCE_KIND[new.value],
    }


class ModeManager:
    """Registry of per-mode input state with exactly one active mode.

    Args:
        network: ResistorNetwork shared by the series and parallel modes.
        forms:   Optional mapping of mode → form for the remaining modes.
                 Defaults to a fresh form for each.
    """

    def __init__(self, network: ResistorNetwork | None = None, forms: dict | None = None) -> None:
        self.network = network if network is not None else ResistorNetwork()
        self._forms: dict[CalculationMode, object] = {}
        self._active: CalculationMode | None = None

        for mode in NETWORK_MODES:
            self.register_form(mode, self.network)

        if forms is None:
            forms = {
                CalculationMode.VOLTAGE_DIVIDER: VoltageDividerForm(),
                CalculationMode.LED:             LedForm(),
                CalculationMode.OHMS_LAW:        OhmsLawForm(),
                CalculationMode.RC_TIME:         {"filter": RCFilterForm(), "delay": RCDelayForm()},
                CalculationMode.BATTERY_LIFE:    BatteryLifeForm(),
                CalculationMode.COLOR_CODE:      ColorCodeForm(),
            }
        for mode, form in forms.items():
            self.register_form(mode, form)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register_form(self, mode, form) -> None:
        self._forms[CalculationMode(mode)] = form

    def form(self, mode=None):
        """Input state for *mode* (default: the active mode).

        Raises:
            KeyError: Nothing registered for *mode*.
        """
        mode = self._active if mode is None else CalculationMode(mode)
        return self._forms[mode]

    @property
    def current_mode(self) -> CalculationMode | None:
        return self._active

    # ------------------------------------------------------------------
    # Switching
    # ------------------------------------------------------------------

    def switch_to(self, mode) -> dict:
        """Make *mode* active and return the side effects that were applied.

        Raises:
            ValueError: *mode* is not a CalculationMode value.
            KeyError:   Nothing registered for *mode*.
        """
        new = CalculationMode(mode)
        if new not in self._forms:
            raise KeyError(f"No form registered for mode {new.value!r}")

        old = self._active
        if old is not None and old != new:
            for target in self._targets(old):
                target.on_exit()

        effects = on_mode_change(old, new)
        if "network_mode" in effects:
            self.network.set_mode(effects["network_mode"])
            self.network.set_source(kind=effects["source_kind"])

        self._active = new
        for target in self._targets(new):
            target.on_enter()

        log.debug("Mode %s -> %s, effects=%r", old and old.value, new.value, effects)
        return effects

    def _targets(self, mode: CalculationMode) -> list:
        # RC time holds two sub-mode forms
        form = self._forms[mode]
        return list(form.values()) if isinstance(form, dict) else [form]
