from datetime import timedelta
from typing import Iterable, Union
from parallelscope.models.Interval import Interval
from parallelscope.utils.TimeUtils import to_seconds


def total_task_time(intervals: Iterable[Interval]) -> timedelta:
    """Summed duration of all intervals; concurrent time is counted once per task."""
    return sum((interval.duration for interval in intervals), timedelta(0))


def compute_parallelization_metric(intervals: Iterable[Interval], build_duration: Union[timedelta, float]) -> float:
    """
    Ratio of summed task time to build wall-clock time.

    A value of 3.0 means that on average three tasks were running at once over
    the whole build.

    :param intervals: Executed task intervals.
    :param build_duration: Wall-clock duration of the build (timedelta or seconds).
    :return: Dimensionless metric, >= 0.
    :raises ValueError: If build_duration is not positive.
    """
    build_seconds = to_seconds(build_duration)
    if build_seconds <= 0:
        raise ValueError(f"build duration must be positive, got {build_seconds}s")
    return total_task_time(intervals).total_seconds() / build_seconds
