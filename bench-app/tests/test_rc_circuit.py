"""
Tests for the RC filter and RC charging solvers.
"""

import math
import unittest

from rc_circuit import (
    best_unit,
    charge_voltage,
    format_time,
    sample_charge_curve,
    solve_rc_delay,
    solve_rc_filter,
)
from solver_errors import DivisionByZero, InsufficientInputs, InvalidConfiguration


# ---------------------------------------------------------------------------
# Filter mode
# ---------------------------------------------------------------------------

class TestRCFilter(unittest.TestCase):

    def test_r_and_c(self):
        result = solve_rc_filter(resistance=1000.0, capacitance=1e-6)
        self.assertAlmostEqual(result.tau, 0.001)
        self.assertAlmostEqual(result.frequency, 159.1549, places=3)
        self.assertEqual(result.derived, "F")

    def test_r_and_f(self):
        result = solve_rc_filter(resistance=1000.0, frequency=159.15494309189535)
        self.assertAlmostEqual(result.capacitance, 1e-6, places=12)
        self.assertAlmostEqual(result.tau, 0.001)
        self.assertEqual(result.derived, "C")

    def test_c_and_f(self):
        result = solve_rc_filter(capacitance=1e-6, frequency=159.15494309189535)
        self.assertAlmostEqual(result.resistance, 1000.0, places=6)
        self.assertEqual(result.derived, "R")
        self.assertAlmostEqual(result.value, result.resistance)

    def test_derived_frequency_feeds_back(self):
        first = solve_rc_filter(resistance=4700.0, capacitance=22e-9)
        again = solve_rc_filter(resistance=4700.0, frequency=first.frequency)
        self.assertAlmostEqual(again.capacitance / 22e-9, 1.0, places=9)

    def test_needs_exactly_two(self):
        with self.assertRaises(InsufficientInputs):
            solve_rc_filter(resistance=1000.0)
        with self.assertRaises(InsufficientInputs):
            solve_rc_filter(resistance=1.0, capacitance=1.0, frequency=1.0)

    def test_zero_frequency(self):
        with self.assertRaises(DivisionByZero):
            solve_rc_filter(resistance=1000.0, frequency=0.0)
        with self.assertRaises(DivisionByZero):
            solve_rc_filter(capacitance=1e-6, frequency=0.0)

    def test_zero_capacitance(self):
        with self.assertRaises(DivisionByZero):
            solve_rc_filter(capacitance=0.0, frequency=50.0)

    def test_zero_resistance(self):
        with self.assertRaises(DivisionByZero):
            solve_rc_filter(resistance=0.0, capacitance=1e-6)
        with self.assertRaises(DivisionByZero):
            solve_rc_filter(resistance=0.0, frequency=50.0)


# ---------------------------------------------------------------------------
# Delay / charging mode
# ---------------------------------------------------------------------------

class TestRCDelay(unittest.TestCase):

    def test_time_to_target(self):
        result = solve_rc_delay(5.0, 10e3, 100e-6, v_target=3.16)
        self.assertAlmostEqual(result.tau, 1.0)
        self.assertEqual(result.derived, "time")
        self.assertAlmostEqual(result.time, -math.log(1 - 3.16 / 5.0))
        self.assertAlmostEqual(result.time, 0.9997, places=3)

    def test_voltage_at_time(self):
        result = solve_rc_delay(5.0, 10e3, 100e-6, elapsed=1.0)
        self.assertEqual(result.derived, "voltage")
        self.assertAlmostEqual(result.voltage, 5.0 * (1 - math.exp(-1)))

    def test_time_takes_priority_over_target(self):
        result = solve_rc_delay(5.0, 1e3, 1e-3, v_target=1.0, elapsed=2.0)
        self.assertEqual(result.derived, "voltage")
        self.assertAlmostEqual(result.voltage, charge_voltage(5.0, 1.0, 2.0))

    def test_zero_time_counts_as_absent(self):
        result = solve_rc_delay(5.0, 1e3, 1e-3, v_target=2.5, elapsed=0.0)
        self.assertEqual(result.derived, "time")

    def test_tau_only(self):
        result = solve_rc_delay(5.0, 1e3, 1e-6)
        self.assertIsNone(result.derived)
        self.assertIsNone(result.time)
        self.assertAlmostEqual(result.tau, 1e-3)

    def test_round_trip(self):
        first = solve_rc_delay(12.0, 2.2e3, 47e-6, v_target=8.0)
        back = solve_rc_delay(12.0, 2.2e3, 47e-6, elapsed=first.time)
        self.assertAlmostEqual(back.voltage, 8.0)

    def test_target_must_be_below_supply(self):
        with self.assertRaises(InvalidConfiguration):
            solve_rc_delay(5.0, 1e3, 1e-6, v_target=5.0)

    def test_target_must_be_positive(self):
        with self.assertRaises(InvalidConfiguration):
            solve_rc_delay(5.0, 1e3, 1e-6, v_target=0.0)

    def test_missing_vin(self):
        with self.assertRaises(InsufficientInputs):
            solve_rc_delay(None, 1e3, 1e-6, v_target=1.0)

    def test_non_positive_r_or_c(self):
        with self.assertRaises(InsufficientInputs):
            solve_rc_delay(5.0, 0.0, 1e-6)
        with self.assertRaises(InsufficientInputs):
            solve_rc_delay(5.0, 1e3, None)

    def test_result_carries_curve(self):
        result = solve_rc_delay(5.0, 10e3, 100e-6)
        self.assertEqual(len(result.samples), 31)


class TestChargeCurve(unittest.TestCase):

    def setUp(self):
        self.samples = sample_charge_curve(tau=1.0, v_in=5.0)

    def test_point_count_and_span(self):
        self.assertEqual(len(self.samples), 31)
        self.assertEqual(self.samples[0].time, 0.0)
        self.assertAlmostEqual(self.samples[-1].time, 5.0)

    def test_starts_empty_ends_near_full(self):
        self.assertEqual(self.samples[0].voltage, 0.0)
        self.assertAlmostEqual(self.samples[-1].voltage / 5.0, 0.9933, places=4)

    def test_monotonic(self):
        volts = [s.voltage for s in self.samples]
        self.assertEqual(volts, sorted(volts))

    def test_labels(self):
        self.assertEqual(self.samples[0].label, "0.00 ns")
        self.assertEqual(self.samples[-1].label, "5.000 s")


# ---------------------------------------------------------------------------
# Units / time formatting
# ---------------------------------------------------------------------------

class TestUnits(unittest.TestCase):

    def test_best_unit_frequency(self):
        self.assertEqual(best_unit(159.15, "F"), ("Hz", 1.0))
        self.assertEqual(best_unit(2.5e3, "F"), ("kHz", 1e3))
        self.assertEqual(best_unit(3e6, "F"), ("MHz", 1e6))

    def test_best_unit_capacitance(self):
        self.assertEqual(best_unit(4.7e-10, "C")[0], "pF")
        self.assertEqual(best_unit(1e-7, "C")[0], "nF")
        self.assertEqual(best_unit(1e-6, "C")[0], "µF")
        self.assertEqual(best_unit(2e-3, "C")[0], "mF")

    def test_best_unit_below_smallest(self):
        self.assertEqual(best_unit(1e-15, "C")[0], "pF")
        self.assertEqual(best_unit(0.5, "R")[0], "Ω")

    def test_best_unit_time(self):
        self.assertEqual(best_unit(5e-4, "T")[0], "µs")
        self.assertEqual(best_unit(0.25, "T")[0], "ms")
        self.assertEqual(best_unit(3.0, "T")[0], "s")

    def test_best_unit_unknown_quantity(self):
        with self.assertRaises(KeyError):
            best_unit(1.0, "L")

    def test_format_time(self):
        self.assertEqual(format_time(5e-7), "500.00 ns")
        self.assertEqual(format_time(2.5e-5), "25.00 µs")
        self.assertEqual(format_time(0.0015), "1.50 ms")
        self.assertEqual(format_time(2.0), "2.000 s")


if __name__ == "__main__":
    unittest.main()
