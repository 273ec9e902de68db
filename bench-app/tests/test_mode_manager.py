"""
Tests for mode switching and its side effects on the shared network state.
"""

import unittest

from forms import EDITING, RCDelayForm, RCFilterForm, VoltageDividerForm
from mode_manager import CalculationMode, ModeManager, on_mode_change
from resistor_network import (
    PARALLEL,
    SERIES,
    SOURCE_CURRENT,
    SOURCE_VOLTAGE,
    ResistorNetwork,
)


class TestOnModeChange(unittest.TestCase):

    def test_enter_series(self):
        effects = on_mode_change(CalculationMode.LED, CalculationMode.SERIES)
        self.assertEqual(effects, {"network_mode": SERIES, "source_kind": SOURCE_VOLTAGE})

    def test_enter_parallel(self):
        effects = on_mode_change(CalculationMode.SERIES, CalculationMode.PARALLEL)
        self.assertEqual(effects, {"network_mode": PARALLEL, "source_kind": SOURCE_CURRENT})

    def test_first_switch_from_nothing(self):
        effects = on_mode_change(None, CalculationMode.PARALLEL)
        self.assertEqual(effects["source_kind"], SOURCE_CURRENT)

    def test_other_modes_have_no_effects(self):
        self.assertEqual(on_mode_change(CalculationMode.SERIES, CalculationMode.OHMS_LAW), {})

    def test_reselect_has_no_effects(self):
        self.assertEqual(on_mode_change(CalculationMode.SERIES, CalculationMode.SERIES), {})


class TestModeManager(unittest.TestCase):

    def setUp(self):
        self.manager = ModeManager()

    def test_no_active_mode_initially(self):
        self.assertIsNone(self.manager.current_mode)

    def test_series_and_parallel_share_network(self):
        self.assertIs(
            self.manager.form(CalculationMode.SERIES),
            self.manager.form(CalculationMode.PARALLEL),
        )

    def test_switch_resets_source_kind(self):
        network = self.manager.network
        self.manager.switch_to("series")
        network.set_source(kind=SOURCE_CURRENT)
        self.manager.switch_to("parallel")
        self.assertEqual(network.mode, PARALLEL)
        self.assertEqual(network.source_kind, SOURCE_CURRENT)

        network.set_source(kind=SOURCE_VOLTAGE)
        self.manager.switch_to("series")
        self.assertEqual(network.mode, SERIES)
        self.assertEqual(network.source_kind, SOURCE_VOLTAGE)

    def test_reselect_keeps_source_kind(self):
        network = self.manager.network
        self.manager.switch_to("series")
        network.set_source(kind=SOURCE_CURRENT)
        self.assertEqual(self.manager.switch_to("series"), {})
        self.assertEqual(network.source_kind, SOURCE_CURRENT)

    def test_switch_away_drops_result_keeps_inputs(self):
        self.manager.switch_to(CalculationMode.VOLTAGE_DIVIDER)
        form = self.manager.form()
        for name, text in (("vin", "9"), ("ra", "1000"), ("rb", "2000")):
            form.edit(name, text)
        form.calculate()
        self.assertIsNotNone(form.result)

        self.manager.switch_to(CalculationMode.LED)
        self.assertEqual(form.state, EDITING)
        self.assertEqual(form.derived, frozenset())
        self.assertEqual(form.values["vin"], "9")

    def test_rc_time_holds_both_sub_forms(self):
        forms = self.manager.form(CalculationMode.RC_TIME)
        self.assertIsInstance(forms["filter"], RCFilterForm)
        self.assertIsInstance(forms["delay"], RCDelayForm)

        self.manager.switch_to(CalculationMode.RC_TIME)
        forms["delay"].calculate()
        self.manager.switch_to(CalculationMode.COLOR_CODE)
        self.assertIsNone(forms["delay"].result)

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            self.manager.switch_to("inductor")

    def test_custom_forms(self):
        network = ResistorNetwork(mode=PARALLEL)
        divider = VoltageDividerForm()
        manager = ModeManager(network, {CalculationMode.VOLTAGE_DIVIDER: divider})
        self.assertIs(manager.form("voltage-divider"), divider)
        with self.assertRaises(KeyError):
            manager.switch_to(CalculationMode.LED)

    def test_current_mode_tracks_switch(self):
        self.manager.switch_to("battery-life")
        self.assertEqual(self.manager.current_mode, CalculationMode.BATTERY_LIFE)


if __name__ == "__main__":
    unittest.main()
