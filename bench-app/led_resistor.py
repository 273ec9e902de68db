"""
Bench Calculator Station - LED Series Resistor

    R      = (Vs - Vf) / If
    P_res  = (Vs - Vf) · If
    P_led  = Vf · If

Target current is entered in mA.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solver_errors import DivisionByZero, InsufficientInputs, InvalidConfiguration

log = logging.getLogger(__name__)

# Typical forward voltages (V) by LED color
LED_PRESETS = {
    "red":    2.0,
    "green":  2.1,
    "blue":   3.2,
    "white":  3.2,
    "yellow": 2.1,
}


@dataclass
class LedResult:
    resistance: float       # Ω
    resistor_power: float   # W
    led_power: float        # W


def solve_led(
    supply_voltage: float | None,
    forward_voltage: float | None,
    current_ma: float | None,
) -> LedResult:
    """Size the series resistor for an LED.

    Raises:
        InsufficientInputs:   Any of the three inputs missing.
        InvalidConfiguration: Supply voltage does not exceed the LED drop.
        DivisionByZero:       Target current is 0.
    """
    if supply_voltage is None or forward_voltage is None or current_ma is None:
        raise InsufficientInputs("Supply voltage, LED voltage and current are all required")
    if supply_voltage <= forward_voltage:
        raise InvalidConfiguration("Supply voltage must be greater than the LED forward voltage")
    if current_ma == 0:
        raise DivisionByZero("LED current cannot be 0")

    current = current_ma / 1000
    headroom = supply_voltage - forward_voltage
    result = LedResult(
        resistance=headroom / current,
        resistor_power=headroom * current,
        led_power=forward_voltage * current,
    )
    log.debug("LED Vs=%g Vf=%g If=%gmA -> %r", supply_voltage, forward_voltage, current_ma, result)
    return result
