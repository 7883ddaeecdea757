import math

import pytest

from py_driftcalc.trajectory_data import round_fixed, round_half_up


class TestRoundHalfUp:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.5, 3),
            (2.4999, 2),
            (-2.5, -2),
            (-2.5001, -3),
            (-38.0, -38),
            (0.0, 0),
            (822.99, 823),
        ],
    )
    def test_round_half_up(self, value, expected):
        result = round_half_up(value)
        assert result == expected
        assert isinstance(result, int)


class TestRoundFixed:

    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            (1.25, 1, 1.3),
            (-1.25, 1, -1.3),
            (0.56620, 3, 0.566),
            (0.0005, 3, 0.001),
            (8.5199, 1, 8.5),
        ],
    )
    def test_round_fixed(self, value, digits, expected):
        assert round_fixed(value, digits) == expected

    def test_exact_binary_value(self):
        # 1.005 is stored as 1.00499999999999989...
        assert round_fixed(1.005, 2) == 1.0

    def test_no_negative_zero(self):
        result = round_fixed(-0.04, 1)
        assert result == 0.0
        assert math.copysign(1, result) == 1
        assert str(result) == '0.0'
