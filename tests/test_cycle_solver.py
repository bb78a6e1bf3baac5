"""Tests for the turbojet cycle solver."""

import math

import pytest

from jetcycle.cycle.solver import (
    DESIGN_POINT,
    TSFC_SENTINEL,
    CycleResult,
    EngineDesign,
    FlightInputs,
    entropy_change,
    solve,
    solve_cycle,
)


@pytest.fixture
def cruise() -> CycleResult:
    return solve(FlightInputs(altitude_ft=35000.0, mach=0.85, t4=1400.0))


@pytest.fixture
def sea_level_static() -> CycleResult:
    return solve(FlightInputs(altitude_ft=0.0, mach=0.0, t4=1200.0))


def _all_finite(result: CycleResult) -> bool:
    perf = result.performance
    values = [
        perf.thrust,
        perf.tsfc,
        perf.air_flow,
        perf.fuel_flow,
        perf.gross_thrust,
        perf.ram_drag,
        perf.exit_velocity,
    ]
    for st in result.stations:
        values.extend([st.T, st.P, st.S])
    return all(math.isfinite(v) for v in values)


class TestDesignPoint:
    def test_constants(self):
        d = DESIGN_POINT
        assert d.gamma_air == 1.4
        assert d.gamma_gas == 1.333
        assert d.cp_air == 1005.0
        assert d.cp_gas == 1148.0
        assert d.fuel_heating_value == 43.1e6
        assert d.pi_c == 12.0
        assert (d.eta_inlet, d.eta_c, d.eta_b, d.pi_b, d.eta_t, d.eta_n) == (
            0.98, 0.90, 0.99, 0.96, 0.92, 0.98,
        )

    def test_cycle_gas_constant_differs_from_isa(self):
        assert DESIGN_POINT.R == 287.0

    def test_result_carries_design(self, cruise):
        design = cruise.as_dict()["design"]
        assert design == {"pi_c": 12.0, "cp_air": 1005.0, "cp_gas": 1148.0}


class TestSeaLevelStatic:
    def test_ambient(self, sea_level_static):
        atm = sea_level_static.atmosphere
        assert atm.pressure == pytest.approx(101325.0)
        assert atm.temperature == pytest.approx(288.15)
        assert atm.density == pytest.approx(1.225, rel=1e-3)

    def test_no_ram(self, sea_level_static):
        perf = sea_level_static.performance
        assert perf.freestream_velocity == 0.0
        assert perf.ram_drag == 0.0
        assert perf.thrust == perf.gross_thrust

    def test_capture_flow_is_zero(self, sea_level_static):
        """Mass flow follows freestream velocity, so a static engine ingests nothing."""
        perf = sea_level_static.performance
        assert perf.air_flow == 0.0
        assert perf.fuel_flow == 0.0
        assert perf.thrust == 0.0
        assert perf.tsfc == TSFC_SENTINEL
        assert not sea_level_static.is_valid_operating_point

    def test_combustor_still_balances(self, sea_level_static):
        assert sea_level_static.performance.fuel_air_ratio > 0


class TestLowSpeed:
    def test_positive_thrust_and_finite_tsfc(self):
        result = solve_cycle(0.0, 0.3, 1200.0)
        perf = result.performance
        assert perf.thrust > 0
        assert perf.fuel_flow > 0
        assert perf.tsfc < TSFC_SENTINEL
        assert 10.0 < perf.tsfc < 100.0
        assert result.is_valid_operating_point

    def test_zero_mach_identity_holds_for_any_t4(self):
        for t4 in (800.0, 1300.0, 1800.0):
            perf = solve_cycle(10000.0, 0.0, t4).performance
            assert perf.ram_drag == 0.0
            assert perf.thrust == perf.gross_thrust


class TestCruise:
    def test_ram_heating(self, cruise):
        assert cruise.station("2").T > cruise.station("0").T

    def test_compressor_pressure_ratio(self, cruise):
        assert cruise.station("3").P == pytest.approx(12.0 * cruise.station("2").P)
        assert cruise.station("3").P > 10 * cruise.station("2").P

    def test_turbine_extraction(self, cruise):
        assert cruise.station("5").T < cruise.station("4").T
        assert cruise.station("4").T == 1400.0

    def test_combustor_pressure_loss(self, cruise):
        assert cruise.station("4").P == pytest.approx(0.96 * cruise.station("3").P)

    def test_tsfc_plausible(self, cruise):
        perf = cruise.performance
        assert perf.thrust > 0
        assert 10.0 < perf.tsfc < 300.0

    def test_thrust_balance(self, cruise):
        perf = cruise.performance
        assert perf.thrust == pytest.approx(perf.gross_thrust - perf.ram_drag)
        assert perf.gross_thrust == pytest.approx((perf.air_flow + perf.fuel_flow) * perf.exit_velocity)

    def test_tsfc_definition(self, cruise):
        perf = cruise.performance
        assert perf.tsfc == pytest.approx(perf.fuel_flow / (perf.thrust / 1000.0) * 1000.0)


class TestShaftBalance:
    @pytest.mark.parametrize(
        "altitude, mach, t4",
        [(0.0, 0.3, 1200.0), (20000.0, 0.6, 1500.0), (35000.0, 0.85, 1400.0), (45000.0, 2.0, 1800.0)],
    )
    def test_turbine_work_equals_compressor_work(self, altitude, mach, t4):
        result = solve_cycle(altitude, mach, t4)
        perf = result.performance
        assert perf.turbine_work == perf.compressor_work

        # Consistency with the turbine temperature drop
        mdot_hot = perf.air_flow + perf.fuel_flow
        dT = result.station("4").T - result.station("5").T
        assert mdot_hot * DESIGN_POINT.cp_gas * dT == pytest.approx(perf.turbine_work, rel=1e-9)


class TestEntropy:
    @pytest.mark.parametrize(
        "altitude, mach, t4",
        [(0.0, 0.0, 1200.0), (0.0, 0.5, 800.0), (35000.0, 0.85, 1400.0), (50000.0, 2.5, 1800.0)],
    )
    def test_station_zero_is_reference(self, altitude, mach, t4):
        assert solve_cycle(altitude, mach, t4).station("0").S == 0.0

    def test_inlet_loss_generates_entropy(self, sea_level_static):
        # Static: T02 = T0, P02 = 0.98·P0
        assert sea_level_static.station("2").S == pytest.approx(-287.0 * math.log(0.98))

    def test_cumulative(self, cruise):
        d = DESIGN_POINT
        s3, s4 = cruise.station("3"), cruise.station("4")
        expected = s3.S + entropy_change(d.cp_air, d.R, s3.T, s4.T, s3.P, s4.P)
        assert s4.S == pytest.approx(expected)

    def test_heat_addition_raises_entropy(self, cruise):
        assert cruise.station("4").S > cruise.station("3").S

    def test_log_floor(self):
        # Negative temperature ratio is floored instead of raising
        value = entropy_change(1000.0, 287.0, 100.0, -5.0, 1e5, 1e5)
        assert value == pytest.approx(1000.0 * math.log(1e-9))


class TestSentinels:
    def test_non_combustible(self):
        result = solve_cycle(0.0, 0.5, 40000.0)
        perf = result.performance
        assert perf.fuel_air_ratio == 0.0
        assert perf.fuel_flow == 0.0
        assert not result.is_valid_operating_point

    def test_no_fuel_when_t4_below_compressor_exit(self):
        perf = solve_cycle(0.0, 0.5, 500.0).performance
        assert perf.fuel_air_ratio == 0.0
        assert perf.fuel_flow == 0.0

    @pytest.mark.parametrize("t4", [200.0, 250.0, 400.0, 40000.0])
    def test_degenerate_points_stay_finite(self, t4):
        result = solve_cycle(35000.0, 0.85, t4)
        assert _all_finite(result)

    def test_nozzle_never_heats(self):
        for mach in (0.0, 0.5, 1.5, 2.5):
            result = solve_cycle(30000.0, mach, 900.0)
            assert result.performance.nozzle_exit_temperature <= result.station("5").T
            assert result.performance.exit_velocity >= 0.0

    def test_above_the_atmosphere(self):
        result = solve_cycle(1e8, 0.8, 1400.0)
        perf = result.performance
        assert result.atmosphere.pressure == 0.0
        assert perf.thrust == 0.0
        assert perf.tsfc == TSFC_SENTINEL
        assert _all_finite(result)

    @pytest.mark.parametrize("altitude_ft, mach", [(0.0, 1e45), (0.0, 1e200), (-1e70, 0.8)])
    def test_extreme_finite_inputs_return_a_result(self, altitude_ft, mach):
        result = solve_cycle(altitude_ft, mach, 1400.0)
        assert isinstance(result, CycleResult)
        assert [s.name for s in result.stations] == ["0", "2", "3", "4", "5"]

    def test_zero_t4_returns_a_result(self):
        result = solve_cycle(35000.0, 0.85, 0.0)
        assert result.performance.fuel_flow == 0.0

    def test_zero_pressure_leg_has_no_entropy_change(self):
        assert entropy_change(1005.0, 287.0, 300.0, 300.0, 0.0, 0.0) == 0.0


class TestPurity:
    def test_idempotent(self):
        inputs = FlightInputs(altitude_ft=25000.0, mach=0.7, t4=1350.0)
        a = solve(inputs)
        b = solve(inputs)
        assert a == b
        assert a.as_dict() == b.as_dict()

    def test_custom_design(self):
        low = solve(FlightInputs(0.0, 0.5, 1400.0), EngineDesign(pi_c=6.0))
        high = solve(FlightInputs(0.0, 0.5, 1400.0), EngineDesign(pi_c=20.0))
        assert low.design.pi_c == 6.0
        assert high.station("3").P > low.station("3").P

    def test_station_lookup(self, cruise):
        assert [s.name for s in cruise.stations] == ["0", "2", "3", "4", "5"]
        with pytest.raises(KeyError):
            cruise.station("8")

    def test_as_dict_shape(self, cruise):
        d = cruise.as_dict()
        assert set(d) == {"performance", "stations", "design"}
        assert set(d["stations"]) == {"s0", "s2", "s3", "s4", "s5"}
        assert set(d["performance"]) == {"thrust", "tsfc", "air_flow", "fuel_flow"}
