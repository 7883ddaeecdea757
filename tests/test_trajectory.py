import pytest

from py_driftcalc import *
from tests.fixtures_and_helpers import create_308_input, print_out_trajectory_compact

pytestmark = pytest.mark.engine


class TestTrajectory:

    def test_reference_scenario(self, calc):
        hit_result = calc.fire(create_308_input())
        print_out_trajectory_compact(hit_result, ".308 Win")

        first, last = hit_result[0], hit_result[-1]
        assert first.distance == 0
        assert first.velocity == 823
        assert last.distance == 450
        assert last.velocity < 823
        assert abs(last.drop) > 100
        assert hit_result.error is None

    def test_reference_values(self, calc):
        last = calc.fire(create_308_input())[-1]
        # Exponential velocity decay v = mv * exp(-x / (bc * 14000))
        assert last.velocity == pytest.approx(768, abs=2)
        assert last.time_of_flight == pytest.approx(0.566, abs=0.005)
        assert last.drop == pytest.approx(1115, abs=20)
        assert last.wind_drift == pytest.approx(87, abs=5)
        assert last.energy == pytest.approx(0.5 * 0.0109 * last.velocity ** 2, rel=1e-2)
        assert last.mil == pytest.approx(last.drop / last.distance, abs=0.1)
        assert last.moa == pytest.approx(last.drop / last.distance * 3.438, abs=0.1)

    def test_reference_table(self, calc):
        # With no headwind each step scales velocity by (1 - 1/6468), so rows follow
        # closed-form geometric sums of the step times
        expected = [
            (0, 823, 3691, -38, 0, 0, 0, 0),
            (50, 817, 3635, 1, 1, 0.061, 0.1, 0.0),
            (100, 810, 3579, 1, 4, 0.122, 0.0, 0.0),
            (150, 804, 3524, 40, 10, 0.184, 0.9, 0.3),
            (200, 798, 3470, 117, 17, 0.247, 2.0, 0.6),
            (250, 792, 3417, 233, 27, 0.310, 3.2, 0.9),
            (300, 786, 3364, 391, 39, 0.373, 4.5, 1.3),
            (350, 780, 3313, 589, 53, 0.437, 5.8, 1.7),
            (400, 774, 3262, 831, 69, 0.501, 7.1, 2.1),
            (450, 768, 3212, 1115, 87, 0.566, 8.5, 2.5),
        ]
        assert [tuple(p) for p in calc.fire(create_308_input())] == expected

    @pytest.mark.parametrize(
        "target_distance, expected_distances",
        [
            (457, [0, 50, 100, 150, 200, 250, 300, 350, 400, 450]),
            (274, [0, 25, 50, 75, 100, 125, 150, 175, 200, 225, 250]),
            (300, [0, 25, 50, 75, 100, 125, 150, 175, 200, 225, 250, 275, 300]),
            (301, [0, 50, 100, 150, 200, 250, 300]),
            (0, [0]),
            (24, [0]),
        ],
    )
    def test_sample_distances(self, calc, target_distance, expected_distances):
        hit_result = calc.fire(create_308_input(target_distance=target_distance))
        assert [p.distance for p in hit_result] == expected_distances

    def test_muzzle_row(self, calc):
        muzzle = calc.fire(create_308_input())[0]
        assert muzzle.drop == -38
        assert muzzle.wind_drift == 0
        assert muzzle.time_of_flight == 0
        assert muzzle.moa == 0
        assert muzzle.mil == 0
        assert muzzle.energy == round(0.5 * 0.0109 * 823 ** 2)

    def test_velocity_decays(self, calc):
        hit_result = calc.fire(create_308_input(wind_speed=0, target_distance=1000))
        velocities = [p.velocity for p in hit_result]
        assert all(a > b for a, b in zip(velocities, velocities[1:]))

    def test_time_of_flight_increases(self, calc):
        hit_result = calc.fire(create_308_input(target_distance=1000))
        times = [p.time_of_flight for p in hit_result]
        assert all(a < b for a, b in zip(times, times[1:]))

    def test_no_wind_no_drift(self, calc):
        hit_result = calc.fire(create_308_input(wind_speed=0))
        assert all(p.wind_drift == 0 for p in hit_result)

    def test_headwind_no_drift(self, calc):
        hit_result = calc.fire(create_308_input(wind_speed=10, wind_angle=0))
        assert all(p.wind_drift == 0 for p in hit_result)

    def test_crosswind_drift(self, calc):
        right = calc.fire(create_308_input(wind_speed=4.5, wind_angle=90))
        left = calc.fire(create_308_input(wind_speed=4.5, wind_angle=270))
        assert right[-1].wind_drift > 0
        assert left[-1].wind_drift == -right[-1].wind_drift
        drifts = [p.wind_drift for p in right]
        assert all(a <= b for a, b in zip(drifts, drifts[1:]))

    def test_headwind_slows_more_than_tailwind(self, calc):
        head = calc.fire(create_308_input(wind_speed=20, wind_angle=0))
        tail = calc.fire(create_308_input(wind_speed=20, wind_angle=180))
        calm = calc.fire(create_308_input(wind_speed=0))
        assert head[-1].velocity < calm[-1].velocity < tail[-1].velocity

    def test_idempotence(self, calc):
        shot = create_308_input()
        assert calc.fire(shot).to_list() == calc.fire(shot).to_list()
        assert Calculator().fire(shot).trajectory == calc.fire(shot).trajectory

    def test_drop_near_zero_at_zero_range(self, calc):
        hit_result = calc.fire(create_308_input(zero_range=100, target_distance=200))
        assert abs(hit_result.get_at_distance(100).drop) <= 5

    def test_thin_air_flattens_trajectory(self, calc):
        sea_level = calc.fire(create_308_input(target_distance=800))
        mountain = calc.fire(create_308_input(target_distance=800, altitude=2500))
        assert mountain.density_ratio < sea_level.density_ratio
        assert mountain.corrected_bc > sea_level.corrected_bc
        assert mountain[-1].velocity > sea_level[-1].velocity
        assert mountain[-1].drop < sea_level[-1].drop

    def test_no_sight_height(self, calc):
        muzzle = calc.fire(create_308_input(sight_height=0))[0]
        assert muzzle.drop == 0


class TestMinimumVelocity:

    def test_table_stops_at_floor(self, slow_floor_calc):
        hit_result = slow_floor_calc.fire(create_308_input(), raise_range_error=False)
        assert isinstance(hit_result.error, RangeError)
        assert hit_result.error.reason == RangeError.MinimumVelocityReached
        assert [p.distance for p in hit_result] == [0, 50, 100, 150]
        assert hit_result.error.last_distance == 150
        assert hit_result.error.incomplete_trajectory == hit_result.trajectory

    def test_range_error_raised(self, slow_floor_calc):
        with pytest.raises(RangeError) as exc_info:
            slow_floor_calc.fire(create_308_input())
        assert "Minimum velocity reached" in str(exc_info.value)
        assert isinstance(exc_info.value, SolverRuntimeError)

    def test_short_table_unaffected(self, slow_floor_calc):
        hit_result = slow_floor_calc.fire(create_308_input(target_distance=150))
        assert hit_result.error is None
        assert hit_result[-1].distance == 150


class TestHitResult:

    def test_to_list(self, calc):
        rows = calc.fire(create_308_input()).to_list()
        assert list(rows[0].keys()) == [
            'distance', 'velocity', 'energy', 'drop', 'windDrift', 'timeOfFlight', 'moa', 'mil'
        ]
        assert rows[-1]['distance'] == 450

    def test_get_at_distance(self, calc):
        hit_result = calc.fire(create_308_input())
        assert hit_result.get_at_distance(200).distance == 200
        with pytest.raises(KeyError):
            hit_result.get_at_distance(225)

    def test_sequence_protocol(self, calc):
        hit_result = calc.fire(create_308_input())
        assert len(hit_result) == 10
        assert list(hit_result) == hit_result.trajectory
        assert hit_result[1:3] == hit_result.trajectory[1:3]

    def test_props(self, calc):
        hit_result = calc.fire(create_308_input(wind_speed=4.5, wind_angle=90))
        assert hit_result.props.mass_kg == pytest.approx(0.0109)
        assert hit_result.props.sight_height_m == pytest.approx(0.038)
        assert hit_result.props.crosswind == pytest.approx(4.5)
        assert hit_result.props.headwind == pytest.approx(0, abs=1e-9)
        assert hit_result.density_ratio == pytest.approx(1.0)
        assert hit_result.zero_angle > 0

    def test_formatted(self, calc):
        formatted = calc.fire(create_308_input())[0].formatted()
        assert formatted == ('0 m', '823 m/s', '3691 J', '-38 mm', '0 mm', '0.000 s', '0.0 MOA', '0.0 mil')
