"""Tests for race math."""

import math

import pytest

from pacecalc.engine import (
    even_split_pace,
    finish_time_seconds,
    format_duration_seconds,
    negative_splits,
    required_pace_minutes,
    split_rows,
)
from pacecalc.models import RaceDistance, SpeedUnit


def test_finish_time_5k():
    """Test 8:00/mi over a 5K."""
    seconds = finish_time_seconds(8.0, 3.10686)
    assert seconds == 1491  # 24*60 + 51
    assert format_duration_seconds(seconds) == "24:51"


def test_finish_time_marathon_km():
    """Test 4:30/km over a marathon."""
    seconds = finish_time_seconds(4.5, RaceDistance.MARATHON.kilometers)
    assert format_duration_seconds(seconds) == "3:09:53"


def test_finish_time_degenerate_inputs():
    """Test that non-positive or non-finite inputs give zero."""
    assert finish_time_seconds(0, 3.1) == 0
    assert finish_time_seconds(8.0, 0) == 0
    assert finish_time_seconds(-8.0, 3.1) == 0
    assert finish_time_seconds(8.0, -3.1) == 0
    assert finish_time_seconds(math.nan, 3.1) == 0


def test_finish_time_overflow():
    """Test that a finish time too large for a float gives zero."""
    assert finish_time_seconds(8.0, 1e308) == 0
    assert finish_time_seconds(math.inf, 3.1) == 0


def test_required_pace():
    """Test 24:51 over 3.10686 miles is about 8:00/mi."""
    pace = required_pace_minutes(1491, 3.10686)
    assert abs(pace - 8.0) < 0.01


def test_required_pace_zero_distance():
    """Test that zero distance yields zero instead of dividing."""
    assert required_pace_minutes(1491, 0) == 0.0
    assert required_pace_minutes(1491, -1) == 0.0


def test_even_split_pace():
    """Test even pace and speed for a target time."""
    pace, speed = even_split_pace(1800, 3.0)
    assert pace == pytest.approx(10.0)
    assert speed == pytest.approx(6.0)


def test_even_split_pace_invalid():
    """Test that zero time or distance gives no pace."""
    assert even_split_pace(0, 3.0) is None
    assert even_split_pace(1800, 0) is None


def test_negative_splits_even_distance():
    """Test 30:00 over 3 miles with a 5s drop per split."""
    splits = negative_splits(1800, 3.0, 5.0)
    assert len(splits) == 3
    assert abs(sum(s.seconds for s in splits) - 1800) <= 1
    assert splits[1].seconds < splits[0].seconds
    assert splits[2].seconds < splits[1].seconds
    assert [s.seconds for s in splits] == [605, 600, 595]
    assert all(s.distance == 1.0 for s in splits)


def test_negative_splits_with_partial():
    """Test 25:00 over 3.1 miles ends with a 0.1 mile split."""
    splits = negative_splits(1500, 3.1, 3.0)
    assert len(splits) == 4
    assert splits[-1].distance < 1.0
    assert abs(splits[-1].distance - 0.1) < 0.01
    assert abs(sum(s.seconds for s in splits) - 1500) <= 1


def test_negative_splits_zero_drop():
    """Test that a zero drop gives even splits."""
    splits = negative_splits(1800, 3.0, 0.0)
    assert len(splits) == 3
    assert splits[0].seconds == splits[1].seconds == splits[2].seconds == 600


def test_negative_splits_invalid_input():
    """Test that zero time or distance gives an empty schedule."""
    assert negative_splits(0, 3.0, 5.0) == []
    assert negative_splits(1800, 0, 5.0) == []
    assert negative_splits(-60, 3.0, 5.0) == []
    assert negative_splits(1800, -3.0, 5.0) == []


def test_negative_splits_tiny_remainder_ignored():
    """Test that a remainder at or below 0.001 units is not its own split."""
    splits = negative_splits(1800, 3.0005, 5.0)
    assert len(splits) == 3


def test_negative_splits_under_one_unit():
    """Test a distance shorter than one unit."""
    splits = negative_splits(150, 0.5, 5.0)
    assert len(splits) == 1
    assert splits[0].distance == 0.5
    assert splits[0].seconds == 150


def test_negative_splits_clamps_to_one_second():
    """Test that a huge drop cannot produce non-positive splits."""
    splits = negative_splits(60, 3.0, 100.0)
    assert [s.seconds for s in splits] == [120, 20, 1]


def test_negative_splits_half_marathon_km():
    """Test a half marathon in km has 22 splits with a short last one."""
    distance = RaceDistance.HALF_MARATHON.in_units(SpeedUnit.KPH)
    splits = negative_splits(6300, distance, 2.0)
    assert len(splits) == 22
    assert splits[-1].distance == pytest.approx(0.0975)
    assert all(a.seconds > b.seconds for a, b in zip(splits[:-2], splits[1:-1]))


def test_split_rows_accumulate_elapsed():
    """Test split numbering and running totals."""
    rows = split_rows(negative_splits(1800, 3.0, 5.0))
    assert [r.index for r in rows] == [1, 2, 3]
    assert [r.elapsed for r in rows] == [605, 1205, 1800]
    assert rows[0].pace_minutes == pytest.approx(605 / 60)


def test_split_rows_empty():
    """Test that no splits gives no rows."""
    assert split_rows([]) == []


def test_negative_splits_marathon_sums_to_target():
    """Test a 3:30 marathon in miles adds up to exactly 3:30:00."""
    splits = negative_splits(12600, RaceDistance.MARATHON.miles, 5.0)
    assert len(splits) == 27
    assert sum(s.seconds for s in splits) == 12600
    assert all(a.seconds > b.seconds for a, b in zip(splits[:-2], splits[1:-1]))


def test_negative_splits_stay_near_exact_pace():
    """Test each split is within a second of its exact pace."""
    distance = RaceDistance.HALF_MARATHON.miles
    splits = negative_splits(6000, distance, 4.0)
    n = int(distance)
    partial = distance - n
    base = (6000 + 4.0 * (n * (n - 1) / 2 + partial * n)) / distance
    for i, split in enumerate(splits):
        exact = (base - i * 4.0) * split.distance
        assert abs(split.seconds - exact) <= 1


def test_negative_splits_non_finite_drop():
    """Test that a NaN, infinite or overflowing drop gives an empty schedule."""
    assert negative_splits(1800, 3.0, math.nan) == []
    assert negative_splits(1800, 3.0, math.inf) == []
    assert negative_splits(1800, 3.0, 1e308) == []
