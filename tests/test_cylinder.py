import math

import pytest

from hydrocalc.core.types import RESULT_KINDS, CylinderInputs
from hydrocalc.core.units import to_canonical
from hydrocalc.physics import convert_inputs, derive, derive_canonical, normalize_inputs


class TestMetricScenario:
    def test_areas(self, metric_inputs: CylinderInputs) -> None:
        r = derive(metric_inputs, "metric")
        assert r.piston_area.value == pytest.approx(math.pi * 25.0**2 / 100.0)
        assert r.piston_area.value == pytest.approx(19.635, abs=1e-3)
        assert r.annulus_area.value == pytest.approx(14.726, abs=1e-3)
        assert r.piston_area.unit == "cm²"

    def test_forces(self, metric_inputs: CylinderInputs) -> None:
        r = derive(metric_inputs, "metric")
        assert r.extend_force.value == pytest.approx(26.51, abs=5e-3)
        assert r.retract_force.value == pytest.approx(19.88, abs=5e-3)
        assert r.extend_force.unit == "kN"

    def test_volumes(self, metric_inputs: CylinderInputs) -> None:
        r = derive(metric_inputs, "metric")
        assert r.extend_volume.value == pytest.approx(0.589, abs=1e-3)
        assert r.retract_volume.value == pytest.approx(0.4418, abs=1e-3)
        assert r.extend_volume.unit == "L"

    def test_speeds_and_times(self, metric_inputs: CylinderInputs) -> None:
        r = derive(metric_inputs, "metric")
        assert r.extend_speed.value == pytest.approx(10.19, abs=5e-3)
        assert r.retract_speed.value == pytest.approx(13.58, abs=5e-3)
        # 300 мм / 10.186 мм/с
        assert r.extend_time.value == pytest.approx(29.45, abs=1e-2)
        assert r.cycle_time.value == pytest.approx(51.54, abs=1e-2)
        assert r.cycle_time.unit == "s"


class TestImperialScenario:
    def test_bore_normalized_to_mm(self) -> None:
        canonical = normalize_inputs(CylinderInputs(bore=2.0, rod=1.0, efficiency=0.8), "imperial")
        assert canonical.bore == pytest.approx(50.8)
        assert canonical.rod == pytest.approx(25.4)
        assert canonical.efficiency == 0.8

    def test_labels(self) -> None:
        r = derive(CylinderInputs(bore=2.0, rod=1.0, stroke=10.0, pressure=2000.0, flow=5.0, efficiency=1.0), "imperial")
        assert r.system == "imperial"
        assert r.piston_area.unit == "in²"
        assert r.extend_force.unit == "lbf"
        assert r.extend_volume.unit == "gal"
        assert r.extend_speed.unit == "in/s"
        assert r.cycle_time.unit == "s"

    def test_piston_area_in_square_inches(self) -> None:
        r = derive(CylinderInputs(bore=2.0), "imperial")
        assert r.piston_area.value == pytest.approx(math.pi)


class TestInvariants:
    def test_all_zero_inputs_give_zero(self) -> None:
        for system in ("metric", "imperial"):
            r = derive(CylinderInputs(), system)
            assert all(v == 0.0 for v in r.values().values())

    @pytest.mark.parametrize("rod", [50.0, 60.0, 200.0])
    def test_annulus_never_negative(self, rod: float) -> None:
        r = derive(CylinderInputs(bore=50.0, rod=rod, stroke=100.0, pressure=100.0, flow=10.0, efficiency=1.0), "metric")
        assert r.annulus_area.value == 0.0
        assert r.retract_force.value == 0.0
        assert r.retract_volume.value == 0.0

    def test_zero_annulus_speed_is_infinite_and_time_zero(self) -> None:
        r = derive(CylinderInputs(bore=50.0, rod=50.0, stroke=100.0, flow=10.0), "metric")
        assert math.isinf(r.retract_speed.value)
        assert r.retract_time.value == 0.0
        assert r.cycle_time.value == r.extend_time.value

    @pytest.mark.parametrize("flow", [0.0, -5.0])
    def test_speeds_zero_without_flow(self, metric_inputs: CylinderInputs, flow: float) -> None:
        inputs = CylinderInputs(**{**metric_inputs.as_dict(), "flow": flow})
        r = derive(inputs, "metric")
        assert r.extend_speed.value == 0.0
        assert r.retract_speed.value == 0.0
        assert r.extend_time.value == 0.0
        assert r.retract_time.value == 0.0
        assert r.cycle_time.value == 0.0

    def test_cycle_time_is_exact_sum(self, metric_inputs: CylinderInputs) -> None:
        c = derive_canonical(metric_inputs)
        assert c.cycle_time == c.extend_time + c.retract_time

    def test_negative_pressure_propagates_sign(self, metric_inputs: CylinderInputs) -> None:
        inputs = CylinderInputs(**{**metric_inputs.as_dict(), "pressure": -150.0})
        r = derive(inputs, "metric")
        assert r.extend_force.value == pytest.approx(-26.51, abs=5e-3)

    def test_deterministic(self, metric_inputs: CylinderInputs) -> None:
        assert derive(metric_inputs, "metric") == derive(metric_inputs, "metric")


class TestUnitRoundTrip:
    def test_same_cylinder_in_both_systems(self, metric_inputs: CylinderInputs) -> None:
        metric = derive(metric_inputs, "metric")
        imperial = derive(convert_inputs(metric_inputs, "metric", "imperial"), "imperial")

        for name, kind in RESULT_KINDS.items():
            back = to_canonical(getattr(imperial, name).value, kind, "imperial")
            assert back == pytest.approx(getattr(metric, name).value, rel=1e-6)

    def test_convert_inputs_round_trip(self, metric_inputs: CylinderInputs) -> None:
        there = convert_inputs(metric_inputs, "metric", "imperial")
        back = convert_inputs(there, "imperial", "metric")
        for name, value in metric_inputs.as_dict().items():
            assert getattr(back, name) == pytest.approx(value, rel=1e-9)

    def test_switching_system_changes_every_value(self, metric_inputs: CylinderInputs) -> None:
        metric = derive(metric_inputs, "metric").values()
        imperial = derive(metric_inputs, "imperial").values()
        for name in RESULT_KINDS:
            assert metric[name] != pytest.approx(imperial[name])
