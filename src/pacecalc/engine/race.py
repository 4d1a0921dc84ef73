"""Race math: finish times, required paces and split schedules."""

import logging
import math

from pacecalc.models.splits import Split, SplitRow

from .parsing import round_half_away
from .units import pace_to_speed

logger = logging.getLogger(__name__)

# Remainders at or below this are treated as no partial split
PARTIAL_THRESHOLD = 0.001


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def finish_time_seconds(pace_minutes: float, distance: float) -> int:
    """
    Finish time for running ``distance`` at ``pace_minutes``.

    Args:
        pace_minutes: Minutes per mile or kilometer
        distance: Race distance in the same unit

    Returns:
        Total seconds, rounded to the nearest second; 0 if pace or
        distance is not positive or the time overflows
    """
    if not (_positive(pace_minutes) and _positive(distance)):
        return 0
    seconds = pace_minutes * distance * 60
    if not math.isfinite(seconds):
        return 0
    return round_half_away(seconds)


def required_pace_minutes(total_seconds: int, distance: float) -> float:
    """
    Pace needed to cover ``distance`` in ``total_seconds``.

    Returns:
        Minutes per unit, or 0.0 if the distance is not positive
    """
    if not _positive(distance):
        return 0.0
    return total_seconds / 60.0 / distance


def even_split_pace(total_seconds: int, distance: float) -> tuple[float, float] | None:
    """
    Even pace and matching speed for a target finish time.

    Returns:
        (pace_minutes, speed), or None if time or distance is not positive
    """
    if total_seconds <= 0 or not _positive(distance):
        return None
    pace = required_pace_minutes(total_seconds, distance)
    return pace, pace_to_speed(pace)


def negative_splits(total_seconds: int, distance: float, drop_seconds: float) -> list[Split]:
    """
    Compute a negative split schedule.

    Each whole-unit split is ``drop_seconds`` faster than the one before.
    A fractional final unit gets its own, proportionally shorter, split.
    The base pace is solved in closed form so that the arithmetic series
    of split paces sums to ``total_seconds``:

        total = base * (n + partial) - drop * (n(n-1)/2 + partial * n)

    Each split's seconds come from rounding the running elapsed time, so
    the rounding remainder carries forward and the schedule sums to
    ``total_seconds``. Every split stays within a second of its exact
    pace times distance.

    Args:
        total_seconds: Target finish time in seconds
        distance: Total distance in miles or kilometers
        drop_seconds: Seconds faster per split (negative for positive splits)

    Returns:
        Splits in race order; empty if time or distance is not positive,
        or if the drop makes the schedule overflow
    """
    if total_seconds <= 0 or not _positive(distance) or not math.isfinite(drop_seconds):
        return []

    full_splits = int(distance)
    partial = distance - full_splits
    if partial <= PARTIAL_THRESHOLD:
        partial = 0.0

    split_count = full_splits + (1 if partial > 0 else 0)
    if split_count == 0:
        return []

    n = float(full_splits)
    effective_distance = n + partial
    drop_sum = drop_seconds * (n * (n - 1) / 2 + partial * n)
    base_pace = (total_seconds + drop_sum) / effective_distance
    if not math.isfinite(base_pace):
        logger.debug(f"Drop of {drop_seconds}s overflows the split schedule")
        return []

    splits = []
    exact_elapsed = 0.0
    rounded_elapsed = 0
    for i in range(split_count):
        split_pace = base_pace - i * drop_seconds
        is_partial = i == split_count - 1 and partial > 0
        split_distance = partial if is_partial else 1.0
        exact_elapsed += split_pace * split_distance
        if not math.isfinite(exact_elapsed):
            logger.debug(f"Drop of {drop_seconds}s overflows the split schedule")
            return []
        split_end = round_half_away(exact_elapsed)
        split_time = split_end - rounded_elapsed
        rounded_elapsed = split_end
        splits.append(Split(distance=split_distance, seconds=max(split_time, 1)))

    logger.debug(
        f"Negative splits for {total_seconds}s over {distance}: "
        f"{split_count} splits, base pace {base_pace:.1f}s"
    )
    return splits


def split_rows(splits: list[Split]) -> list[SplitRow]:
    """Number the splits and add cumulative elapsed time."""
    rows = []
    elapsed = 0
    for index, split in enumerate(splits, start=1):
        elapsed += split.seconds
        rows.append(
            SplitRow(
                index=index,
                distance=split.distance,
                seconds=split.seconds,
                elapsed=elapsed,
            )
        )
    return rows
