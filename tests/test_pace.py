import math

import pytest

from api.app.pace import calculate_pace


@pytest.mark.parametrize(
    "distance,duration,expected",
    [
        (5.2, 28, "5:23"),
        (3.1, 18, "5:48"),
        (5, 30, "6:00"),
        (3, 10, "3:20"),
        (10, 45, "4:30"),
    ],
)
def test_pace_format(distance, duration, expected):
    assert calculate_pace(distance, duration) == expected


def test_seconds_round_half_up():
    # 11 / 8 = 1.375 -> 22.5 seconds
    assert calculate_pace(8, 11) == "1:23"


def test_seconds_are_not_carried_into_minutes():
    assert calculate_pace(1.0, 5.995) == "5:60"


def test_matches_floor_and_rounded_remainder():
    for distance, duration in [(7.3, 41), (21.1, 115), (1.6, 9)]:
        p = duration / distance
        minutes, seconds = calculate_pace(distance, duration).split(":")
        assert int(minutes) == math.floor(p)
        assert len(seconds) == 2
        assert int(seconds) == math.floor((p - math.floor(p)) * 60 + 0.5)
